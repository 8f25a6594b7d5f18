"""API v1 router aggregation."""

from fastapi import APIRouter

from shadowing.api.v1.auth import router as auth_router
from shadowing.api.v1.profiles import router as profiles_router
from shadowing.api.v1.opportunities import router as opportunities_router
from shadowing.api.v1.applications import router as applications_router
from shadowing.api.v1.messages import router as messages_router

router = APIRouter(prefix="/api/v1")

router.include_router(auth_router)
router.include_router(profiles_router)
router.include_router(opportunities_router)
router.include_router(applications_router)
router.include_router(messages_router)
