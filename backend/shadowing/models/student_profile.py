"""Student profile model: onboarding answers and preferences."""

from sqlalchemy import Column, String, Boolean, Text, ForeignKey, Uuid
from sqlalchemy.orm import relationship

from shadowing.models.base import Base, JSONList, TimestampMixin, UUIDMixin


class StudentProfile(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "student_profiles"

    user_id = Column(Uuid(as_uuid=True), ForeignKey("users.id"), unique=True, nullable=False)

    education_level = Column(String(50))  # high-school, college, career-change, other
    interests = Column(JSONList)  # list of interest categories
    work_style = Column(String(20))  # team, independent, mixed
    availability = Column(String(20))  # weekdays, weekends, flexible
    travel_distance = Column(String(20))  # local, regional, remote
    location = Column(String(255))
    bio = Column(Text)
    skills = Column(JSONList)
    completed_onboarding = Column(Boolean, default=False, nullable=False)

    # Relationships
    user = relationship("User", back_populates="student_profile")
    applications = relationship("Application", back_populates="student_profile")
