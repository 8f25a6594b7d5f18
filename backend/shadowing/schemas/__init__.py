"""Pydantic schemas package."""

from shadowing.schemas.user import (
    Actor,
    CurrentUserRead,
    LoginRequest,
    RegisterRequest,
    UserRead,
)
from shadowing.schemas.student_profile import (
    StudentProfileRead,
    StudentProfileSave,
)
from shadowing.schemas.business_profile import (
    BusinessProfileRead,
    BusinessProfileSave,
)
from shadowing.schemas.opportunity import (
    OpportunityBase,
    OpportunityCreate,
    OpportunityRead,
    OpportunityUpdate,
)
from shadowing.schemas.application import (
    ApplicationCreate,
    ApplicationRead,
    ApplicationStatusUpdate,
)
from shadowing.schemas.message import (
    MarkReadResponse,
    MessageCreate,
    MessageRead,
)

__all__ = [
    # User
    "Actor",
    "CurrentUserRead",
    "LoginRequest",
    "RegisterRequest",
    "UserRead",
    # Profiles
    "StudentProfileRead",
    "StudentProfileSave",
    "BusinessProfileRead",
    "BusinessProfileSave",
    # Opportunity
    "OpportunityBase",
    "OpportunityCreate",
    "OpportunityRead",
    "OpportunityUpdate",
    # Application
    "ApplicationCreate",
    "ApplicationRead",
    "ApplicationStatusUpdate",
    # Message
    "MarkReadResponse",
    "MessageCreate",
    "MessageRead",
]
