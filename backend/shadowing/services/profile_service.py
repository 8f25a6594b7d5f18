"""Profile service: get and upsert the role-specific profile attached to a user.

A profile row is keyed by ``user_id`` with a unique constraint. Saves merge:
fields absent from the request keep their stored values. The first save
inserts with ``INSERT ... ON CONFLICT (user_id) DO NOTHING`` so two concurrent
first saves for the same user still end up with a single row.
"""

import logging
from typing import Any

from sqlalchemy import select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.dialects.sqlite import insert as sqlite_insert
from sqlalchemy.ext.asyncio import AsyncSession

from shadowing.errors import AccessDenied, NotFound, ProfileRequired, StorageError, ValidationError
from shadowing.models.base import utcnow
from shadowing.models.business_profile import BusinessProfile
from shadowing.models.student_profile import StudentProfile
from shadowing.schemas.business_profile import REQUIRED_FIELDS, BusinessProfileSave
from shadowing.schemas.student_profile import StudentProfileSave
from shadowing.schemas.user import Actor

logger = logging.getLogger(__name__)

ProfileModel = type[StudentProfile] | type[BusinessProfile]


_DIALECT_INSERTS = {"postgresql": pg_insert, "sqlite": sqlite_insert}


def _insert_for(db: AsyncSession):
    dialect = db.get_bind().dialect.name
    try:
        return _DIALECT_INSERTS[dialect]
    except KeyError:
        raise StorageError(f"Profile upsert not supported on {dialect}") from None


async def _load(db: AsyncSession, model: ProfileModel, user_id):
    result = await db.execute(select(model).where(model.user_id == user_id))
    return result.scalar_one_or_none()


def _require_role(actor: Actor, role: str) -> None:
    if actor.role != role:
        raise AccessDenied(f"Only {role} accounts can manage a {role} profile")


async def _upsert(db: AsyncSession, model: ProfileModel, user_id, changes: dict[str, Any]):
    """Insert-if-absent, else update in place. Returns (profile, created)."""
    profile = await _load(db, model, user_id)

    if profile is None:
        insert = _insert_for(db)
        stmt = (
            insert(model)
            .values(user_id=user_id, **changes)
            .on_conflict_do_nothing(index_elements=["user_id"])
        )
        result = await db.execute(stmt)
        profile = await _load(db, model, user_id)
        if result.rowcount:
            return profile, True

    for field, value in changes.items():
        setattr(profile, field, value)
    profile.updated_at = utcnow()
    await db.flush()
    return profile, False


def _merged(profile, changes: dict[str, Any], fields) -> dict[str, Any]:
    current = {field: getattr(profile, field) for field in fields} if profile else {}
    current.update(changes)
    return current


# --- Student ---

async def get_student_profile(db: AsyncSession, user_id) -> StudentProfile:
    profile = await _load(db, StudentProfile, user_id)
    if not profile:
        raise NotFound("Student profile not found")
    return profile


async def get_student_profile_or_none(db: AsyncSession, user_id) -> StudentProfile | None:
    return await _load(db, StudentProfile, user_id)


async def require_student_profile(db: AsyncSession, actor: Actor) -> StudentProfile:
    """Return the caller's student profile or fail with ProfileRequired."""
    profile = await _load(db, StudentProfile, actor.user_id)
    if not profile:
        raise ProfileRequired("Student profile required")
    return profile


async def save_student_profile(db: AsyncSession, actor: Actor, data: StudentProfileSave) -> StudentProfile:
    _require_role(actor, "student")
    changes = data.model_dump(exclude_unset=True)

    existing = await _load(db, StudentProfile, actor.user_id)
    merged = _merged(existing, changes, ("interests", "completed_onboarding"))
    if "completed_onboarding" in changes and changes["completed_onboarding"] is None:
        raise ValidationError(
            "completed_onboarding cannot be null",
            errors=[{"field": "completed_onboarding", "message": "must be true or false"}],
        )
    if merged.get("completed_onboarding") and not merged.get("interests"):
        raise ValidationError(
            "Select at least one interest to complete onboarding",
            errors=[{"field": "interests", "message": "must not be empty"}],
        )

    profile, created = await _upsert(db, StudentProfile, actor.user_id, changes)
    if created:
        logger.info("Created student profile %s for user %s", profile.id, actor.user_id)
    return profile


# --- Business ---

async def get_business_profile(db: AsyncSession, user_id) -> BusinessProfile:
    profile = await _load(db, BusinessProfile, user_id)
    if not profile:
        raise NotFound("Business profile not found")
    return profile


async def get_business_profile_or_none(db: AsyncSession, user_id) -> BusinessProfile | None:
    return await _load(db, BusinessProfile, user_id)


async def require_business_profile(db: AsyncSession, actor: Actor) -> BusinessProfile:
    """Return the caller's business profile or fail with ProfileRequired."""
    profile = await _load(db, BusinessProfile, actor.user_id)
    if not profile:
        raise ProfileRequired("Business profile required")
    return profile


async def save_business_profile(db: AsyncSession, actor: Actor, data: BusinessProfileSave) -> BusinessProfile:
    _require_role(actor, "business")
    changes = data.model_dump(mode="json", exclude_unset=True)

    existing = await _load(db, BusinessProfile, actor.user_id)
    merged = _merged(existing, changes, REQUIRED_FIELDS)
    missing = [field for field in REQUIRED_FIELDS if merged.get(field) is None]
    if missing:
        raise ValidationError(
            "Missing required fields: " + ", ".join(missing),
            errors=[{"field": field, "message": "is required"} for field in missing],
        )

    profile, created = await _upsert(db, BusinessProfile, actor.user_id, changes)
    if created:
        logger.info("Created business profile %s for user %s", profile.id, actor.user_id)
    return profile
