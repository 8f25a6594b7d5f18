"""Initial schema: users, profiles, opportunities, applications, messages.

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects.postgresql import UUID, JSONB

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
    ]


def upgrade() -> None:
    # 1. users
    op.create_table(
        "users",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(255), nullable=False),
        sa.Column("display_name", sa.String(100), nullable=False),
        sa.Column("hashed_password", sa.String(255), nullable=False),
        sa.Column("role", sa.String(20), nullable=False),
        sa.Column("is_active", sa.Boolean, server_default=sa.text("true"), nullable=False),
        sa.Column("last_login_at", sa.DateTime(timezone=True)),
        *_timestamps(),
        sa.CheckConstraint("role IN ('student', 'business')", name="ck_users_role"),
    )
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # 2. student_profiles
    op.create_table(
        "student_profiles",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id"), unique=True, nullable=False),
        sa.Column("education_level", sa.String(50)),
        sa.Column("interests", JSONB),
        sa.Column("work_style", sa.String(20)),
        sa.Column("availability", sa.String(20)),
        sa.Column("travel_distance", sa.String(20)),
        sa.Column("location", sa.String(255)),
        sa.Column("bio", sa.Text),
        sa.Column("skills", JSONB),
        sa.Column("completed_onboarding", sa.Boolean, server_default=sa.text("false"), nullable=False),
        *_timestamps(),
    )

    # 3. business_profiles
    op.create_table(
        "business_profiles",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("user_id", UUID(as_uuid=True), sa.ForeignKey("users.id"), unique=True, nullable=False),
        sa.Column("company_name", sa.String(255), nullable=False),
        sa.Column("industry", sa.String(100)),
        sa.Column("company_size", sa.String(20)),
        sa.Column("location", sa.String(255)),
        sa.Column("description", sa.Text),
        sa.Column("website", sa.String(500)),
        sa.Column("contact_email", sa.String(255)),
        sa.Column("contact_phone", sa.String(50)),
        sa.Column("verified", sa.Boolean, server_default=sa.text("false"), nullable=False),
        *_timestamps(),
    )

    # 4. opportunities
    op.create_table(
        "opportunities",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("business_profile_id", UUID(as_uuid=True), sa.ForeignKey("business_profiles.id"), nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=False),
        sa.Column("industry", sa.String(100), nullable=False),
        sa.Column("duration", sa.String(50)),
        sa.Column("requirements", sa.Text),
        sa.Column("skills", JSONB),
        sa.Column("location", sa.String(255)),
        sa.Column("is_remote", sa.Boolean, server_default=sa.text("false"), nullable=False),
        sa.Column("max_applicants", sa.Integer, server_default=sa.text("5"), nullable=False),
        sa.Column("current_applicants", sa.Integer, server_default=sa.text("0"), nullable=False),
        sa.Column("status", sa.String(20), server_default="active", nullable=False),
        sa.Column("start_date", sa.DateTime(timezone=True)),
        sa.Column("end_date", sa.DateTime(timezone=True)),
        *_timestamps(),
        sa.CheckConstraint("max_applicants BETWEEN 1 AND 20", name="ck_opportunities_max_applicants"),
        sa.CheckConstraint("current_applicants >= 0", name="ck_opportunities_current_applicants"),
        sa.CheckConstraint("status IN ('active', 'closed', 'draft')", name="ck_opportunities_status"),
    )
    op.create_index("ix_opportunities_business_profile_id", "opportunities", ["business_profile_id"])
    op.create_index("idx_opportunity_status_created", "opportunities", ["status", "created_at"])
    op.create_index("idx_opportunity_industry_location", "opportunities", ["industry", "location"])

    # 5. applications
    op.create_table(
        "applications",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("student_profile_id", UUID(as_uuid=True), sa.ForeignKey("student_profiles.id"), nullable=False),
        sa.Column("opportunity_id", UUID(as_uuid=True), sa.ForeignKey("opportunities.id"), nullable=False),
        sa.Column("status", sa.String(20), server_default="pending", nullable=False),
        sa.Column("cover_letter", sa.Text, nullable=False),
        sa.Column("notes", sa.Text),
        sa.Column("applied_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("responded_at", sa.DateTime(timezone=True)),
        sa.UniqueConstraint("student_profile_id", "opportunity_id", name="uq_applications_student_opportunity"),
        sa.CheckConstraint(
            "status IN ('pending', 'accepted', 'rejected', 'completed')", name="ck_applications_status"
        ),
    )
    op.create_index("ix_applications_student_profile_id", "applications", ["student_profile_id"])
    op.create_index("ix_applications_opportunity_id", "applications", ["opportunity_id"])
    op.create_index("idx_application_opportunity_applied", "applications", ["opportunity_id", "applied_at"])

    # 6. messages
    op.create_table(
        "messages",
        sa.Column("id", UUID(as_uuid=True), primary_key=True),
        sa.Column("application_id", UUID(as_uuid=True), sa.ForeignKey("applications.id"), nullable=False),
        sa.Column("sender_id", UUID(as_uuid=True), sa.ForeignKey("users.id"), nullable=False),
        sa.Column("content", sa.Text, nullable=False),
        sa.Column("sent_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("read_at", sa.DateTime(timezone=True)),
    )
    op.create_index("idx_message_application_sent", "messages", ["application_id", "sent_at"])


def downgrade() -> None:
    op.drop_table("messages")
    op.drop_table("applications")
    op.drop_table("opportunities")
    op.drop_table("business_profiles")
    op.drop_table("student_profiles")
    op.drop_table("users")
