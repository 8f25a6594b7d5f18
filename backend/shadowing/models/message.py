"""Message model: one entry in an application's thread."""

from sqlalchemy import Column, DateTime, Text, ForeignKey, Index, Uuid
from sqlalchemy.orm import relationship

from shadowing.models.base import Base, UUIDMixin, utcnow


class Message(UUIDMixin, Base):
    __tablename__ = "messages"

    application_id = Column(Uuid(as_uuid=True), ForeignKey("applications.id"), nullable=False)
    sender_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), nullable=False)

    content = Column(Text, nullable=False)
    sent_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    read_at = Column(DateTime(timezone=True))

    # Relationships
    application = relationship("Application", back_populates="messages")
    sender = relationship("User")

    __table_args__ = (
        Index("idx_message_application_sent", "application_id", "sent_at"),
    )
