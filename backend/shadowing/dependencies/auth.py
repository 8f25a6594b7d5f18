"""Authentication dependencies for FastAPI routes."""

from uuid import UUID

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from shadowing.errors import AccessDenied, NotAuthenticated
from shadowing.models.base import get_db
from shadowing.models.user import User
from shadowing.schemas.user import Actor
from shadowing.services.auth_service import get_user


async def get_current_user(request: Request, db: AsyncSession = Depends(get_db)) -> User | None:
    """Return the logged-in user or None."""
    user_id = request.session.get("user_id")
    if not user_id:
        return None
    try:
        user_id = UUID(user_id)
    except ValueError:
        return None
    return await get_user(db, user_id)


async def require_user(request: Request, db: AsyncSession = Depends(get_db)) -> User:
    """Return the logged-in user or raise 401."""
    user = await get_current_user(request, db)
    if not user:
        raise NotAuthenticated()
    return user


async def require_actor(user: User = Depends(require_user)) -> Actor:
    """Verified (user_id, role) for the current request."""
    return Actor(user_id=user.id, role=user.role)


async def require_student(actor: Actor = Depends(require_actor)) -> Actor:
    if actor.role != "student":
        raise AccessDenied("Student account required")
    return actor


async def require_business(actor: Actor = Depends(require_actor)) -> Actor:
    if actor.role != "business":
        raise AccessDenied("Business account required")
    return actor


def login_session(request: Request, user: User) -> None:
    request.session["user_id"] = str(user.id)


def logout_session(request: Request) -> None:
    request.session.clear()
