"""User model: login identity with a fixed role."""

from sqlalchemy import Column, String, Boolean, DateTime, CheckConstraint
from sqlalchemy.orm import relationship

from shadowing.models.base import Base, TimestampMixin, UUIDMixin

USER_ROLES = ("student", "business")


class User(UUIDMixin, TimestampMixin, Base):
    __tablename__ = "users"

    email = Column(String(255), unique=True, nullable=False, index=True)
    display_name = Column(String(100), nullable=False)
    hashed_password = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False)  # student, business
    is_active = Column(Boolean, default=True, nullable=False)
    last_login_at = Column(DateTime(timezone=True))

    # Relationships
    student_profile = relationship("StudentProfile", back_populates="user", uselist=False)
    business_profile = relationship("BusinessProfile", back_populates="user", uselist=False)

    __table_args__ = (
        CheckConstraint("role IN ('student', 'business')", name="ck_users_role"),
    )
