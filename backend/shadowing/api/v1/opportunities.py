"""Opportunity API endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from shadowing.dependencies.auth import require_business
from shadowing.models.base import get_db
from shadowing.schemas.opportunity import OpportunityCreate, OpportunityRead, OpportunityUpdate
from shadowing.schemas.user import Actor
from shadowing.services import opportunity_service

router = APIRouter(tags=["opportunities"])


@router.get("/opportunities", response_model=list[OpportunityRead])
async def list_opportunities(
    db: AsyncSession = Depends(get_db),
    industry: str | None = Query(None, description="Exact industry match"),
    location: str | None = Query(None, description="Exact location match"),
    is_remote: bool | None = Query(None, description="Remote postings only (true) or on-site only (false)"),
):
    """List active opportunities, newest first."""
    return await opportunity_service.list_opportunities(
        db, industry=industry, location=location, is_remote=is_remote
    )


@router.get("/opportunities/{opportunity_id}", response_model=OpportunityRead)
async def get_opportunity(opportunity_id: UUID, db: AsyncSession = Depends(get_db)):
    return await opportunity_service.get_opportunity(db, opportunity_id)


@router.post("/opportunities", response_model=OpportunityRead)
async def create_opportunity(
    data: OpportunityCreate,
    actor: Actor = Depends(require_business),
    db: AsyncSession = Depends(get_db),
):
    """Publish an opportunity. It starts active with no applicants."""
    return await opportunity_service.create_opportunity(db, actor, data)


@router.patch("/opportunities/{opportunity_id}", response_model=OpportunityRead)
async def update_opportunity(
    opportunity_id: UUID,
    data: OpportunityUpdate,
    actor: Actor = Depends(require_business),
    db: AsyncSession = Depends(get_db),
):
    return await opportunity_service.update_opportunity(db, actor, opportunity_id, data)


@router.get("/business/opportunities", response_model=list[OpportunityRead])
async def list_business_opportunities(
    actor: Actor = Depends(require_business),
    db: AsyncSession = Depends(get_db),
):
    """All of the caller's postings regardless of status."""
    return await opportunity_service.list_for_business(db, actor)
