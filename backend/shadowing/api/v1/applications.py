"""Application lifecycle endpoints."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shadowing.dependencies.auth import require_business, require_student
from shadowing.models.base import get_db
from shadowing.schemas.application import ApplicationCreate, ApplicationRead, ApplicationStatusUpdate
from shadowing.schemas.user import Actor
from shadowing.services import application_service

router = APIRouter(tags=["applications"])


@router.post("/applications", response_model=ApplicationRead)
async def apply(
    data: ApplicationCreate,
    actor: Actor = Depends(require_student),
    db: AsyncSession = Depends(get_db),
):
    return await application_service.apply(db, actor, data)


@router.get("/student/applications", response_model=list[ApplicationRead])
async def list_student_applications(
    actor: Actor = Depends(require_student),
    db: AsyncSession = Depends(get_db),
):
    return await application_service.list_for_student(db, actor)


@router.get("/opportunities/{opportunity_id}/applications", response_model=list[ApplicationRead])
async def list_opportunity_applications(
    opportunity_id: UUID,
    actor: Actor = Depends(require_business),
    db: AsyncSession = Depends(get_db),
):
    """Applications received for one of the caller's postings."""
    return await application_service.list_for_opportunity(db, actor, opportunity_id)


@router.patch("/applications/{application_id}/status", response_model=ApplicationRead)
async def set_application_status(
    application_id: UUID,
    data: ApplicationStatusUpdate,
    actor: Actor = Depends(require_business),
    db: AsyncSession = Depends(get_db),
):
    return await application_service.set_status(db, actor, application_id, data.status)
