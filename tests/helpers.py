# tests/helpers.py
import os
import sys
import unittest
from datetime import datetime, timezone

# Add backend directory to path to import the package without installing it
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..', 'backend')))

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from shadowing.models.base import Base
from shadowing.models.user import User
from shadowing.models.student_profile import StudentProfile
from shadowing.models.business_profile import BusinessProfile
from shadowing.models.opportunity import Opportunity
from shadowing.models.application import Application  # noqa: F401
from shadowing.models.message import Message  # noqa: F401
from shadowing.schemas.user import Actor

TEST_DATABASE_URL = "sqlite+aiosqlite://"


def as_utc(value: datetime) -> datetime:
    """SQLite hands back naive datetimes; treat them as UTC so they compare with aware ones."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def make_engine():
    return create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )


class DatabaseTestCase(unittest.IsolatedAsyncioTestCase):
    """Fresh in-memory database per test, with factories for the common fixtures."""

    async def asyncSetUp(self):
        self.engine = make_engine()
        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        self.sessionmaker = async_sessionmaker(self.engine, class_=AsyncSession, expire_on_commit=False)
        self.db = self.sessionmaker()
        self._counter = 0

    async def asyncTearDown(self):
        await self.db.close()
        await self.engine.dispose()

    async def make_user(self, role: str) -> Actor:
        self._counter += 1
        user = User(
            email=f"{role}{self._counter}@example.com",
            display_name=f"{role.title()} {self._counter}",
            hashed_password="not-a-real-hash",
            role=role,
        )
        self.db.add(user)
        await self.db.flush()
        return Actor(user_id=user.id, role=role)

    async def make_student(self, **fields) -> tuple[Actor, StudentProfile]:
        actor = await self.make_user("student")
        profile = StudentProfile(
            user_id=actor.user_id,
            education_level=fields.pop("education_level", "college"),
            interests=fields.pop("interests", ["Technology"]),
            completed_onboarding=fields.pop("completed_onboarding", True),
            **fields,
        )
        self.db.add(profile)
        await self.db.flush()
        return actor, profile

    async def make_business(self, **fields) -> tuple[Actor, BusinessProfile]:
        actor = await self.make_user("business")
        profile = BusinessProfile(
            user_id=actor.user_id,
            company_name=fields.pop("company_name", f"Company {self._counter}"),
            industry=fields.pop("industry", "technology"),
            company_size=fields.pop("company_size", "11-50"),
            location=fields.pop("location", "Austin"),
            description=fields.pop("description", "We build lab equipment."),
            contact_email=fields.pop("contact_email", f"hr{self._counter}@example.com"),
            **fields,
        )
        self.db.add(profile)
        await self.db.flush()
        return actor, profile

    async def make_opportunity(self, business: BusinessProfile, **fields) -> Opportunity:
        opportunity = Opportunity(
            business_profile_id=business.id,
            title=fields.pop("title", "Lab Assistant"),
            description=fields.pop("description", "Shadow our lab team for a week."),
            industry=fields.pop("industry", "technology"),
            location=fields.pop("location", "Austin"),
            max_applicants=fields.pop("max_applicants", 5),
            **fields,
        )
        self.db.add(opportunity)
        await self.db.flush()
        return opportunity
