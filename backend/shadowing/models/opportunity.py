"""Opportunity model: a business-authored shadowing posting."""

from sqlalchemy import (
    Column, String, Boolean, DateTime, Text, Integer, ForeignKey, Index, CheckConstraint, Uuid,
)
from sqlalchemy.orm import relationship

from shadowing.models.base import Base, JSONList, TimestampMixin, UUIDMixin

OPPORTUNITY_STATUSES = ("active", "closed", "draft")


class Opportunity(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "opportunities"

    business_profile_id = Column(Uuid(as_uuid=True), ForeignKey("business_profiles.id"), nullable=False, index=True)

    # Core
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=False)
    industry = Column(String(100), nullable=False)
    duration = Column(String(50))  # 1 week, 2 weeks, 3 weeks, 1 month
    requirements = Column(Text)
    skills = Column(JSONList)
    location = Column(String(255))
    is_remote = Column(Boolean, default=False, nullable=False)

    # Capacity
    max_applicants = Column(Integer, default=5, nullable=False)
    current_applicants = Column(Integer, default=0, server_default="0", nullable=False)

    # Lifecycle
    status = Column(String(20), default="active", server_default="active", nullable=False)
    start_date = Column(DateTime(timezone=True))
    end_date = Column(DateTime(timezone=True))

    # Relationships
    business_profile = relationship("BusinessProfile", back_populates="opportunities")
    applications = relationship("Application", back_populates="opportunity")

    __table_args__ = (
        CheckConstraint("max_applicants BETWEEN 1 AND 20", name="ck_opportunities_max_applicants"),
        CheckConstraint("current_applicants >= 0", name="ck_opportunities_current_applicants"),
        CheckConstraint("status IN ('active', 'closed', 'draft')", name="ck_opportunities_status"),
        Index("idx_opportunity_status_created", "status", "created_at"),
        Index("idx_opportunity_industry_location", "industry", "location"),
    )
