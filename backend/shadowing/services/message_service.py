"""Message threads: one ordered conversation per application."""

import logging
from datetime import timedelta
from uuid import UUID

from sqlalchemy import func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from shadowing.errors import AccessDenied, ValidationError
from shadowing.models.application import Application
from shadowing.models.base import ensure_utc, utcnow
from shadowing.models.business_profile import BusinessProfile
from shadowing.models.message import Message
from shadowing.models.opportunity import Opportunity
from shadowing.models.student_profile import StudentProfile
from shadowing.schemas.message import MessageCreate
from shadowing.schemas.user import Actor
from shadowing.services.application_service import get_application

logger = logging.getLogger(__name__)


async def require_participant(db: AsyncSession, actor: Actor, application_id: UUID) -> Application:
    """Return the application if the caller is its student or the posting's business."""
    application = await get_application(db, application_id)

    if actor.role == "student":
        query = select(StudentProfile.id).where(
            StudentProfile.id == application.student_profile_id,
            StudentProfile.user_id == actor.user_id,
        )
    else:
        query = (
            select(BusinessProfile.id)
            .join(Opportunity, Opportunity.business_profile_id == BusinessProfile.id)
            .where(
                Opportunity.id == application.opportunity_id,
                BusinessProfile.user_id == actor.user_id,
            )
        )

    result = await db.execute(query)
    if result.scalar_one_or_none() is None:
        raise AccessDenied()
    return application


async def list_messages(db: AsyncSession, actor: Actor, application_id: UUID) -> list[Message]:
    """Oldest first, so a thread reads top to bottom."""
    application = await require_participant(db, actor, application_id)
    result = await db.execute(
        select(Message)
        .where(Message.application_id == application.id)
        .order_by(Message.sent_at.asc(), Message.id.asc())
    )
    return list(result.scalars().all())


async def post_message(db: AsyncSession, actor: Actor, application_id: UUID, data: MessageCreate) -> Message:
    if not data.content or not data.content.strip():
        raise ValidationError(
            "Message content is required",
            errors=[{"field": "content", "message": "must not be empty"}],
        )

    application = await require_participant(db, actor, application_id)

    # sent_at is strictly increasing within a thread
    sent_at = utcnow()
    latest = ensure_utc(await db.scalar(
        select(func.max(Message.sent_at)).where(Message.application_id == application.id)
    ))
    if latest is not None and sent_at <= latest:
        sent_at = latest + timedelta(microseconds=1)

    message = Message(
        application_id=application.id,
        sender_id=actor.user_id,
        content=data.content,
        sent_at=sent_at,
    )
    db.add(message)
    await db.flush()

    logger.info("User %s posted message %s on application %s", actor.user_id, message.id, application.id)
    return message


async def mark_read(db: AsyncSession, actor: Actor, application_id: UUID) -> int:
    """Stamp ``read_at`` on the other party's unread messages. Returns how many."""
    application = await require_participant(db, actor, application_id)
    result = await db.execute(
        update(Message)
        .where(
            Message.application_id == application.id,
            Message.sender_id != actor.user_id,
            Message.read_at.is_(None),
        )
        .values(read_at=utcnow())
        .execution_options(synchronize_session=False)
    )
    return result.rowcount
