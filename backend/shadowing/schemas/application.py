"""Pydantic schemas for Application model."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

COVER_LETTER_MIN_LENGTH = 10


class ApplicationCreate(BaseModel):
    opportunity_id: UUID
    cover_letter: str = Field(..., min_length=COVER_LETTER_MIN_LENGTH)
    notes: str | None = None


class ApplicationStatusUpdate(BaseModel):
    # Checked against the state machine in the service, not here, so unknown
    # values surface as InvalidStatus.
    status: str


class ApplicationRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    student_profile_id: UUID
    opportunity_id: UUID
    status: str
    cover_letter: str
    notes: str | None = None
    applied_at: datetime
    responded_at: datetime | None = None
