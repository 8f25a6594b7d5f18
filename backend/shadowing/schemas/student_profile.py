"""Pydantic schemas for StudentProfile model."""

from datetime import datetime
from typing import Literal
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

EducationLevel = Literal["high-school", "college", "career-change", "other"]
WorkStyle = Literal["team", "independent", "mixed"]
Availability = Literal["weekdays", "weekends", "flexible"]
TravelDistance = Literal["local", "regional", "remote"]


def _clean_tags(values: list[str] | None) -> list[str] | None:
    if values is None:
        return None
    cleaned = []
    for value in values:
        value = value.strip()
        if not value:
            raise ValueError("entries must be non-empty")
        if value not in cleaned:
            cleaned.append(value)
    return cleaned


class StudentProfileSave(BaseModel):
    """Partial student profile: unset fields keep their stored values."""

    model_config = ConfigDict(extra="forbid")

    education_level: EducationLevel | None = None
    interests: list[str] | None = None
    work_style: WorkStyle | None = None
    availability: Availability | None = None
    travel_distance: TravelDistance | None = None
    location: str | None = Field(None, max_length=255)
    bio: str | None = None
    skills: list[str] | None = None
    completed_onboarding: bool | None = None

    @field_validator("interests", "skills")
    @classmethod
    def _dedupe(cls, v: list[str] | None) -> list[str] | None:
        return _clean_tags(v)


class StudentProfileRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    user_id: UUID
    education_level: str | None = None
    interests: list[str] | None = None
    work_style: str | None = None
    availability: str | None = None
    travel_distance: str | None = None
    location: str | None = None
    bio: str | None = None
    skills: list[str] | None = None
    completed_onboarding: bool
    created_at: datetime
    updated_at: datetime
