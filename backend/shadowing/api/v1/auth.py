"""Authentication API: register, login, logout, current user."""

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from shadowing.dependencies.auth import login_session, logout_session, require_user
from shadowing.models.base import get_db
from shadowing.models.user import User
from shadowing.schemas.business_profile import BusinessProfileRead
from shadowing.schemas.student_profile import StudentProfileRead
from shadowing.schemas.user import CurrentUserRead, LoginRequest, RegisterRequest, UserRead
from shadowing.services import auth_service, profile_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.post("/register", response_model=UserRead)
async def register(request: Request, data: RegisterRequest, db: AsyncSession = Depends(get_db)):
    """Create an account and start a session."""
    user = await auth_service.register_user(db, data)
    login_session(request, user)
    return user


@router.post("/login", response_model=UserRead)
async def login(request: Request, data: LoginRequest, db: AsyncSession = Depends(get_db)):
    user = await auth_service.authenticate(db, data)
    login_session(request, user)
    return user


@router.post("/logout")
async def logout(request: Request):
    logout_session(request)
    return {"message": "Logged out"}


@router.get("/user", response_model=CurrentUserRead)
async def current_user(user: User = Depends(require_user), db: AsyncSession = Depends(get_db)):
    """The logged-in user plus their profile (null until the first save)."""
    if user.role == "student":
        profile = await profile_service.get_student_profile_or_none(db, user.id)
        profile_data = StudentProfileRead.model_validate(profile) if profile else None
    else:
        profile = await profile_service.get_business_profile_or_none(db, user.id)
        profile_data = BusinessProfileRead.model_validate(profile) if profile else None

    return CurrentUserRead(**UserRead.model_validate(user).model_dump(), profile=profile_data)
