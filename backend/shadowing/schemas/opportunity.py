"""Pydantic schemas for Opportunity model."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from shadowing.models.base import ensure_utc

OpportunityStatus = Literal["active", "closed", "draft"]


class OpportunityBase(BaseModel):
    """Base fields for an opportunity."""

    title: str = Field(..., min_length=1, max_length=255)
    description: str = Field(..., min_length=1)
    industry: str = Field(..., min_length=1, max_length=100)
    duration: str | None = Field(None, max_length=50)
    requirements: str | None = None
    skills: list[str] | None = None
    location: str | None = Field(None, max_length=255)
    is_remote: bool = False
    max_applicants: int = Field(5, ge=1, le=20)
    start_date: datetime | None = None
    end_date: datetime | None = None

    @field_validator("title", "description", "industry")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("start_date", "end_date")
    @classmethod
    def _utc(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)

    @model_validator(mode="after")
    def _dates_ordered(self):
        if self.start_date and self.end_date and self.end_date < self.start_date:
            raise ValueError("end_date must not be before start_date")
        return self


class OpportunityCreate(OpportunityBase):
    """Fields for creating an opportunity.

    Status and applicant counter are server-controlled and not accepted here.
    """

    model_config = ConfigDict(extra="ignore")


class OpportunityUpdate(BaseModel):
    """Partial update by the owning business."""

    model_config = ConfigDict(extra="forbid")

    title: str | None = Field(None, min_length=1, max_length=255)
    description: str | None = Field(None, min_length=1)
    industry: str | None = Field(None, min_length=1, max_length=100)
    duration: str | None = Field(None, max_length=50)
    requirements: str | None = None
    skills: list[str] | None = None
    location: str | None = Field(None, max_length=255)
    is_remote: bool | None = None
    max_applicants: int | None = Field(None, ge=1, le=20)
    status: OpportunityStatus | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None

    @field_validator("title", "description", "industry")
    @classmethod
    def _not_blank(cls, v: str | None) -> str | None:
        if v is not None and not v.strip():
            raise ValueError("must not be blank")
        return v

    @field_validator("start_date", "end_date")
    @classmethod
    def _utc(cls, v: datetime | None) -> datetime | None:
        return ensure_utc(v)


class OpportunityRead(OpportunityBase):
    """Full opportunity output."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    business_profile_id: UUID
    current_applicants: int
    status: OpportunityStatus
    created_at: datetime
    updated_at: datetime
