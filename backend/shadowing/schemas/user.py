"""Pydantic schemas for User model and the authenticated actor."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from shadowing.schemas.business_profile import BusinessProfileRead
from shadowing.schemas.student_profile import StudentProfileRead

Role = Literal["student", "business"]


class Actor(BaseModel):
    """Verified identity of the caller, passed into every service operation."""

    model_config = ConfigDict(frozen=True)

    user_id: UUID
    role: Role


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=8)
    display_name: str = Field(..., min_length=1, max_length=100)
    role: Role


class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class UserRead(BaseModel):
    """Public user fields."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str
    display_name: str
    role: Role
    is_active: bool
    last_login_at: datetime | None = None
    created_at: datetime


class CurrentUserRead(UserRead):
    """The logged-in user with their role-specific profile, if created."""

    profile: StudentProfileRead | BusinessProfileRead | None = None
