# faithguide/api/v1/routers/progress.py
import logging
from fastapi import APIRouter, Depends
from tortoise.exceptions import BaseORMException
from faithguide.api.v1.deps import get_current_user
from faithguide.models.lesson import LessonCompletion
from faithguide.models.user import User
from faithguide.schemas.progress import LessonCompleteIn, LessonCompletionOut, ProgressDelta, ProgressState
from faithguide.services import progress as progress_service

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/progress", tags=["progress"])


def _completion_out(c: LessonCompletion) -> dict:
    return LessonCompletionOut(
        id=c.id,
        lessonId=c.lesson_id,
        score=c.score,
        completedAt=c.completed_at.isoformat(),
    ).model_dump()


@router.get("")
async def get_progress(user: User = Depends(get_current_user)):
    """
    Get the session user's progress counters.

    Returns:
        dict: {"success": True, "data": ProgressState}; a user without a
        progress row gets all-zero counters.
    """
    state = await progress_service.get_progress(str(user.id))
    return {"success": True, "data": (state or ProgressState()).model_dump(mode="json")}


@router.post("/activity")
async def record_activity(body: ProgressDelta, user: User = Depends(get_current_user)):
    """
    Record activity (lesson/chapter counters and/or lesson pointer) for today.
    Today-counters restart on the first activity of a new UTC day.
    """
    try:
        state = await progress_service.record_activity(str(user.id), body)
    except BaseORMException:
        logger.error("[progress] record activity failed for user=%s", user.id, exc_info=True)
        return {"success": False, "error": "Failed to update progress"}
    return {"success": True, "data": state.model_dump(mode="json")}


@router.get("/lessons")
async def list_completions(user: User = Depends(get_current_user)):
    """List the session user's lesson completions, newest first."""
    rows = await progress_service.get_lesson_completions(str(user.id))
    return {"success": True, "data": {"items": [_completion_out(c) for c in rows]}}


@router.post("/lessons/{lesson_id}/complete")
async def complete_lesson(lesson_id: str, body: LessonCompleteIn, user: User = Depends(get_current_user)):
    """
    Record a finished lesson.
    The completion row and the counter bump are stored together or not at all.
    """
    try:
        completion = await progress_service.save_lesson_completion(str(user.id), lesson_id, body.score)
    except BaseORMException:
        logger.error("[progress] lesson completion failed for user=%s lesson=%s", user.id, lesson_id, exc_info=True)
        return {"success": False, "error": "Failed to save lesson completion"}
    return {"success": True, "data": _completion_out(completion)}


@router.get("/lessons/{lesson_id}")
async def lesson_status(lesson_id: str, user: User = Depends(get_current_user)):
    """Whether the session user has completed the lesson at least once."""
    done = await progress_service.is_lesson_completed(str(user.id), lesson_id)
    return {"success": True, "data": {"lessonId": lesson_id, "completed": done}}
