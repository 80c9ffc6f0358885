# faithguide/api/v1/routers/chat.py
import logging
from fastapi import APIRouter, Depends, Query
from tortoise.exceptions import BaseORMException
from faithguide.api.v1.deps import get_current_user
from faithguide.models.user import User
from faithguide.schemas.journal import ChatMessageIn
from faithguide.services import chat_history

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/chat", tags=["chat"])


def _message_out(m) -> dict:
    return {
        "id": m.id,
        "message": m.message,
        "role": m.role,
        "contextType": m.context_type,
        "createdAt": m.created_at.isoformat(),
    }


@router.get("/history")
async def get_history(
    user: User = Depends(get_current_user),
    limit: int = Query(chat_history.DEFAULT_HISTORY_LIMIT, ge=1, le=200),
):
    """Latest `limit` messages for the session user, oldest first."""
    rows = await chat_history.get_chat_history(str(user.id), limit)
    return {"success": True, "data": {"items": [_message_out(m) for m in rows]}}


@router.post("/history")
async def add_message(body: ChatMessageIn, user: User = Depends(get_current_user)):
    try:
        m = await chat_history.save_chat_message(str(user.id), body.message, body.role, body.contextType)
    except BaseORMException:
        logger.error("[chat] save message failed for user=%s", user.id, exc_info=True)
        return {"success": False, "error": "Failed to save message"}
    return {"success": True, "data": _message_out(m)}


@router.delete("/history")
async def prune_history(
    user: User = Depends(get_current_user),
    daysToKeep: int = Query(chat_history.DEFAULT_DAYS_TO_KEEP, ge=0),
):
    """Delete messages older than `daysToKeep` days."""
    deleted = await chat_history.clear_old_chat_history(str(user.id), daysToKeep)
    return {"success": True, "data": {"deleted": deleted}}
