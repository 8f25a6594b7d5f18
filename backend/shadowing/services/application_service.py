"""Application lifecycle: submission, listing and the status state machine.

States: ``pending`` → ``accepted`` | ``rejected``; ``accepted`` → ``completed``.
By default any of the four statuses may be set at any time (a business can
flip an accepted application to rejected, or back to pending). With
``strict_status_transitions`` enabled only the edges in ALLOWED_TRANSITIONS
are accepted.
"""

import logging
from uuid import UUID

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shadowing.config import get_settings
from shadowing.errors import InvalidStatus, NotFound, ValidationError
from shadowing.models.application import APPLICATION_STATUSES, Application
from shadowing.models.base import utcnow
from shadowing.models.opportunity import Opportunity
from shadowing.schemas.application import ApplicationCreate
from shadowing.schemas.user import Actor
from shadowing.services.opportunity_service import get_opportunity, require_owned_opportunity
from shadowing.services.profile_service import require_student_profile

logger = logging.getLogger(__name__)

ALLOWED_TRANSITIONS = {
    "pending": {"accepted", "rejected"},
    "accepted": {"completed", "rejected"},
    "rejected": set(),
    "completed": set(),
}


async def get_application(db: AsyncSession, application_id: UUID) -> Application:
    application = await db.get(Application, application_id)
    if not application:
        raise NotFound("Application not found")
    return application


async def _reserve_seat(db: AsyncSession, opportunity_id: UUID) -> bool:
    """Atomically take one seat on an active posting that still has room."""
    result = await db.execute(
        update(Opportunity)
        .where(
            Opportunity.id == opportunity_id,
            Opportunity.status == "active",
            Opportunity.current_applicants < Opportunity.max_applicants,
        )
        .values(current_applicants=Opportunity.current_applicants + 1)
        .execution_options(synchronize_session=False)
    )
    return result.rowcount == 1


async def apply(db: AsyncSession, actor: Actor, data: ApplicationCreate) -> Application:
    """Submit an application. Always starts ``pending``."""
    student = await require_student_profile(db, actor)
    opportunity = await get_opportunity(db, data.opportunity_id)

    existing = await db.execute(
        select(Application.id).where(
            Application.student_profile_id == student.id,
            Application.opportunity_id == opportunity.id,
        )
    )
    if existing.scalar_one_or_none():
        raise ValidationError("You have already applied to this opportunity")

    if get_settings().enforce_capacity and not await _reserve_seat(db, opportunity.id):
        raise ValidationError("This opportunity is not accepting applications")

    application = Application(
        student_profile_id=student.id,
        opportunity_id=opportunity.id,
        cover_letter=data.cover_letter,
        notes=data.notes,
        status="pending",
        applied_at=utcnow(),
    )
    db.add(application)

    try:
        await db.flush()
    except IntegrityError:
        await db.rollback()
        raise ValidationError("You have already applied to this opportunity")

    logger.info("Student %s applied to opportunity %s", student.id, opportunity.id)
    return application


async def list_for_student(db: AsyncSession, actor: Actor) -> list[Application]:
    student = await require_student_profile(db, actor)
    result = await db.execute(
        select(Application)
        .where(Application.student_profile_id == student.id)
        .order_by(Application.applied_at.desc())
    )
    return list(result.scalars().all())


async def list_for_opportunity(db: AsyncSession, actor: Actor, opportunity_id: UUID) -> list[Application]:
    """Applications to one posting, newest first. Owner only."""
    opportunity = await get_opportunity(db, opportunity_id)
    await require_owned_opportunity(db, actor, opportunity)

    result = await db.execute(
        select(Application)
        .where(Application.opportunity_id == opportunity.id)
        .order_by(Application.applied_at.desc())
    )
    return list(result.scalars().all())


async def set_status(db: AsyncSession, actor: Actor, application_id: UUID, new_status: str) -> Application:
    """Move an application to ``new_status`` and stamp ``responded_at``.

    Only the business owning the opportunity may do this.
    """
    if new_status not in APPLICATION_STATUSES:
        raise InvalidStatus(f"Invalid status '{new_status}'")

    application = await get_application(db, application_id)
    opportunity = await get_opportunity(db, application.opportunity_id)
    await require_owned_opportunity(db, actor, opportunity)

    previous = application.status
    if get_settings().strict_status_transitions and new_status not in ALLOWED_TRANSITIONS[previous]:
        raise InvalidStatus(f"Cannot move application from '{previous}' to '{new_status}'")

    application.status = new_status
    application.responded_at = utcnow()
    await db.flush()
    await db.refresh(application)

    logger.info("Application %s: %s -> %s", application.id, previous, new_status)
    return application
