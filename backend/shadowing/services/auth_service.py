"""Authentication helpers: password hashing with bcrypt, registration and login."""

import logging

import bcrypt
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from shadowing.errors import NotAuthenticated, ValidationError
from shadowing.models.base import utcnow
from shadowing.models.user import User
from shadowing.schemas.user import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


def hash_password(password: str) -> str:
    """Hash a plaintext password using bcrypt."""
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt()).decode("utf-8")


def verify_password(password: str, hashed: str) -> bool:
    """Check a plaintext password against a bcrypt hash."""
    return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))


async def get_user(db: AsyncSession, user_id) -> User | None:
    result = await db.execute(select(User).where(User.id == user_id, User.is_active == True))  # noqa: E712
    return result.scalar_one_or_none()


async def register_user(db: AsyncSession, data: RegisterRequest) -> User:
    """Create an account. The role chosen here is fixed for the account's lifetime."""
    email = data.email.strip().lower()

    existing = await db.execute(select(User.id).where(User.email == email))
    if existing.scalar_one_or_none():
        raise ValidationError("Email already registered")

    user = User(
        email=email,
        display_name=data.display_name.strip(),
        hashed_password=hash_password(data.password),
        role=data.role,
        last_login_at=utcnow(),
    )
    db.add(user)

    try:
        await db.flush()
    except IntegrityError:
        # Lost a race with a concurrent registration for the same email
        await db.rollback()
        raise ValidationError("Email already registered")

    logger.info("Registered %s user %s", user.role, user.id)
    return user


async def authenticate(db: AsyncSession, data: LoginRequest) -> User:
    """Verify credentials and stamp the login time."""
    email = data.email.strip().lower()
    result = await db.execute(select(User).where(User.email == email))
    user = result.scalar_one_or_none()

    if not user or not verify_password(data.password, user.hashed_password):
        raise NotAuthenticated("Invalid email or password")

    if not user.is_active:
        raise NotAuthenticated("This account has been deactivated")

    user.last_login_at = utcnow()
    await db.flush()
    return user
