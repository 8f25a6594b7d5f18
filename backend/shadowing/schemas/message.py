"""Pydantic schemas for Message model."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class MessageCreate(BaseModel):
    content: str


class MessageRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: UUID
    application_id: UUID
    sender_id: UUID
    content: str
    sent_at: datetime
    read_at: datetime | None = None


class MarkReadResponse(BaseModel):
    marked_read: int
