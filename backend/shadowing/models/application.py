"""Application model: a student's request to join one opportunity."""

from sqlalchemy import Column, String, DateTime, Text, ForeignKey, Index, UniqueConstraint, CheckConstraint, Uuid
from sqlalchemy.orm import relationship

from shadowing.models.base import Base, UUIDMixin, utcnow

APPLICATION_STATUSES = ("pending", "accepted", "rejected", "completed")


class Application(UUIDMixin, Base):
    __tablename__ = "applications"

    student_profile_id = Column(Uuid(as_uuid=True), ForeignKey("student_profiles.id"), nullable=False, index=True)
    opportunity_id = Column(Uuid(as_uuid=True), ForeignKey("opportunities.id"), nullable=False, index=True)

    status = Column(String(20), default="pending", server_default="pending", nullable=False)
    cover_letter = Column(Text, nullable=False)
    notes = Column(Text)

    applied_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)
    responded_at = Column(DateTime(timezone=True))

    # Relationships
    student_profile = relationship("StudentProfile", back_populates="applications")
    opportunity = relationship("Opportunity", back_populates="applications")
    messages = relationship("Message", back_populates="application", order_by="Message.sent_at")

    __table_args__ = (
        UniqueConstraint("student_profile_id", "opportunity_id", name="uq_applications_student_opportunity"),
        CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected', 'completed')", name="ck_applications_status"
        ),
        Index("idx_application_opportunity_applied", "opportunity_id", "applied_at"),
    )
