"""Opportunity catalog: public listing plus business-scoped authoring."""

import logging
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from shadowing.errors import AccessDenied, NotFound, ValidationError
from shadowing.models.base import ensure_utc, utcnow
from shadowing.models.opportunity import Opportunity
from shadowing.schemas.opportunity import OpportunityCreate, OpportunityUpdate
from shadowing.schemas.user import Actor
from shadowing.services.profile_service import get_business_profile_or_none, require_business_profile

logger = logging.getLogger(__name__)


async def list_opportunities(
    db: AsyncSession,
    industry: str | None = None,
    location: str | None = None,
    is_remote: bool | None = None,
) -> list[Opportunity]:
    """Active postings only, newest first. Filters are exact-match and combine with AND."""
    query = select(Opportunity).where(Opportunity.status == "active")

    if industry:
        query = query.where(Opportunity.industry == industry)
    if location:
        query = query.where(Opportunity.location == location)
    if is_remote is not None:
        query = query.where(Opportunity.is_remote == is_remote)

    query = query.order_by(Opportunity.created_at.desc())
    result = await db.execute(query)
    return list(result.scalars().all())


async def get_opportunity(db: AsyncSession, opportunity_id: UUID) -> Opportunity:
    opportunity = await db.get(Opportunity, opportunity_id)
    if not opportunity:
        raise NotFound("Opportunity not found")
    return opportunity


async def require_owned_opportunity(db: AsyncSession, actor: Actor, opportunity: Opportunity) -> None:
    """Fail with AccessDenied unless the caller's business profile owns the posting."""
    business = await get_business_profile_or_none(db, actor.user_id)
    if business is None or opportunity.business_profile_id != business.id:
        raise AccessDenied()


async def create_opportunity(db: AsyncSession, actor: Actor, data: OpportunityCreate) -> Opportunity:
    business = await require_business_profile(db, actor)

    opportunity = Opportunity(
        **data.model_dump(),
        business_profile_id=business.id,
        current_applicants=0,
        status="active",
    )
    db.add(opportunity)
    await db.flush()

    logger.info("Business %s published opportunity %s", business.id, opportunity.id)
    return opportunity


async def update_opportunity(
    db: AsyncSession, actor: Actor, opportunity_id: UUID, data: OpportunityUpdate
) -> Opportunity:
    opportunity = await get_opportunity(db, opportunity_id)
    await require_owned_opportunity(db, actor, opportunity)

    changes = data.model_dump(exclude_unset=True)
    for field in ("title", "description", "industry", "is_remote", "max_applicants", "status"):
        if field in changes and (changes[field] is None or changes[field] == ""):
            raise ValidationError(f"{field} cannot be empty", errors=[{"field": field, "message": "is required"}])

    max_applicants = changes.get("max_applicants", opportunity.max_applicants)
    if max_applicants < opportunity.current_applicants:
        raise ValidationError(
            f"max_applicants cannot be below the {opportunity.current_applicants} applications already received",
            errors=[{"field": "max_applicants", "message": "below current applicants"}],
        )

    start_date = ensure_utc(changes.get("start_date", opportunity.start_date))
    end_date = ensure_utc(changes.get("end_date", opportunity.end_date))
    if start_date and end_date and end_date < start_date:
        raise ValidationError(
            "end_date must not be before start_date",
            errors=[{"field": "end_date", "message": "before start_date"}],
        )

    for field, value in changes.items():
        setattr(opportunity, field, value)
    opportunity.updated_at = utcnow()
    await db.flush()

    logger.info("Opportunity %s updated (%s)", opportunity.id, ", ".join(sorted(changes)) or "no changes")
    return opportunity


async def list_for_business(db: AsyncSession, actor: Actor) -> list[Opportunity]:
    """Every posting owned by the caller, any status, newest first."""
    business = await require_business_profile(db, actor)
    result = await db.execute(
        select(Opportunity)
        .where(Opportunity.business_profile_id == business.id)
        .order_by(Opportunity.created_at.desc())
    )
    return list(result.scalars().all())
