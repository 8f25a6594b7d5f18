"""Pydantic schemas for BusinessProfile model."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, EmailStr, Field, HttpUrl, field_validator

# Fields a business profile cannot be created (or left) without
REQUIRED_FIELDS = ("company_name", "industry", "company_size", "location", "description", "contact_email")


class BusinessProfileSave(BaseModel):
    """Partial business profile: unset fields keep their stored values."""

    model_config = ConfigDict(extra="forbid")

    company_name: str | None = Field(None, min_length=1, max_length=255)
    industry: str | None = Field(None, min_length=1, max_length=100)
    company_size: str | None = Field(None, min_length=1, max_length=20)
    location: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=10)
    website: HttpUrl | None = None
    contact_email: EmailStr | None = None
    contact_phone: str | None = Field(None, max_length=50)

    @field_validator("website", "contact_phone", mode="before")
    @classmethod
    def _blank_is_none(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v


class BusinessProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    company_name: str
    industry: str | None = None
    company_size: str | None = None
    location: str | None = None
    description: str | None = None
    website: str | None = None
    contact_email: str | None = None
    contact_phone: str | None = None
    verified: bool
    created_at: datetime
    updated_at: datetime
