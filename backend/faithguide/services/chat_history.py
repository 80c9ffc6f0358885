# faithguide/services/chat_history.py
"""
Chat history storage: append messages, read the recent window, prune old
messages.
"""
import datetime as dt
import logging

from faithguide.models.chat import ChatMessage

logger = logging.getLogger(__name__)

DEFAULT_HISTORY_LIMIT = 50
DEFAULT_DAYS_TO_KEEP = 7


async def save_chat_message(
    user_id: str,
    message: str,
    role: str,
    context_type: str | None = None,
) -> ChatMessage:
    return await ChatMessage.create(user_id=user_id, message=message, role=role, context_type=context_type)


async def get_chat_history(user_id: str, limit: int = DEFAULT_HISTORY_LIMIT) -> list[ChatMessage]:
    """The latest `limit` messages, returned oldest first."""
    rows = await ChatMessage.filter(user_id=user_id).order_by("-created_at", "-id").limit(limit)
    return list(reversed(rows))


async def clear_old_chat_history(
    user_id: str,
    days_to_keep: int = DEFAULT_DAYS_TO_KEEP,
    now: dt.datetime | None = None,
) -> int:
    """Delete messages older than `days_to_keep` days. Returns the number removed."""
    now = now or dt.datetime.now(dt.timezone.utc)
    cutoff = now - dt.timedelta(days=days_to_keep)
    deleted = await ChatMessage.filter(user_id=user_id, created_at__lt=cutoff).delete()
    if deleted:
        logger.info("[chat] pruned %s messages for user=%s (cutoff=%s)", deleted, user_id, cutoff.isoformat())
    return deleted
