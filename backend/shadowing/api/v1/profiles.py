"""Student and business profile endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shadowing.dependencies.auth import require_business, require_student
from shadowing.models.base import get_db
from shadowing.schemas.business_profile import BusinessProfileRead, BusinessProfileSave
from shadowing.schemas.student_profile import StudentProfileRead, StudentProfileSave
from shadowing.schemas.user import Actor
from shadowing.services import profile_service

router = APIRouter(tags=["profiles"])


@router.get("/student/profile", response_model=StudentProfileRead)
async def get_student_profile(actor: Actor = Depends(require_student), db: AsyncSession = Depends(get_db)):
    return await profile_service.get_student_profile(db, actor.user_id)


@router.post("/student/profile", response_model=StudentProfileRead)
async def save_student_profile(
    data: StudentProfileSave,
    actor: Actor = Depends(require_student),
    db: AsyncSession = Depends(get_db),
):
    """Create or update the caller's student profile. Omitted fields are left as they were."""
    return await profile_service.save_student_profile(db, actor, data)


@router.get("/business/profile", response_model=BusinessProfileRead)
async def get_business_profile(actor: Actor = Depends(require_business), db: AsyncSession = Depends(get_db)):
    return await profile_service.get_business_profile(db, actor.user_id)


@router.post("/business/profile", response_model=BusinessProfileRead)
async def save_business_profile(
    data: BusinessProfileSave,
    actor: Actor = Depends(require_business),
    db: AsyncSession = Depends(get_db),
):
    """Create or update the caller's business profile. Omitted fields are left as they were."""
    return await profile_service.save_business_profile(db, actor, data)
