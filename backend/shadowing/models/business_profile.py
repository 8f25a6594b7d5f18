"""Business profile model: company details shown on postings."""

from sqlalchemy import Column, String, Boolean, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from shadowing.models.base import Base, TimestampMixin, UUIDMixin


class BusinessProfile(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "business_profiles"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), unique=True, nullable=False)

    company_name = Column(String(255), nullable=False)
    industry = Column(String(100))
    company_size = Column(String(20))  # 1-10, 11-50, ..., 1000+
    location = Column(String(255))
    description = Column(Text)
    website = Column(String(500))
    contact_email = Column(String(255))
    contact_phone = Column(String(50))
    verified = Column(Boolean, default=False, nullable=False)

    # Relationships
    user = relationship("User", back_populates="business_profile")
    opportunities = relationship("Opportunity", back_populates="business_profile")
