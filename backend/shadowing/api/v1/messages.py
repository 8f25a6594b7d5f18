"""Message thread endpoints, open to both sides of an application."""

from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from shadowing.dependencies.auth import require_actor
from shadowing.models.base import get_db
from shadowing.schemas.message import MarkReadResponse, MessageCreate, MessageRead
from shadowing.schemas.user import Actor
from shadowing.services import message_service

router = APIRouter(prefix="/applications/{application_id}/messages", tags=["messages"])


@router.get("", response_model=list[MessageRead])
async def list_messages(
    application_id: UUID,
    actor: Actor = Depends(require_actor),
    db: AsyncSession = Depends(get_db),
):
    """The thread, oldest message first."""
    return await message_service.list_messages(db, actor, application_id)


@router.post("", response_model=MessageRead)
async def post_message(
    application_id: UUID,
    data: MessageCreate,
    actor: Actor = Depends(require_actor),
    db: AsyncSession = Depends(get_db),
):
    return await message_service.post_message(db, actor, application_id, data)


@router.post("/read", response_model=MarkReadResponse)
async def mark_read(
    application_id: UUID,
    actor: Actor = Depends(require_actor),
    db: AsyncSession = Depends(get_db),
):
    marked = await message_service.mark_read(db, actor, application_id)
    return MarkReadResponse(marked_read=marked)
