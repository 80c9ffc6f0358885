# faithguide/api/v1/routers/journal.py
import logging
from fastapi import APIRouter, Depends, Query
from tortoise.exceptions import BaseORMException
from faithguide.api.v1.deps import get_current_user
from faithguide.models.user import User
from faithguide.schemas.journal import LessonAnswerIn, ReflectionIn
from faithguide.services import journal

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/journal", tags=["journal"])


def _answer_out(a) -> dict:
    return {
        "id": a.id,
        "lessonId": a.lesson_id,
        "questionText": a.question_text,
        "selectedOption": a.selected_option,
        "isCorrect": a.is_correct,
        "answeredAt": a.answered_at.isoformat(),
    }


def _reflection_out(r) -> dict:
    return {
        "id": r.id,
        "lessonId": r.lesson_id,
        "reflectionType": r.reflection_type,
        "questionText": r.question_text,
        "userResponse": r.user_response,
        "aiFeedback": r.ai_feedback,
        "createdAt": r.created_at.isoformat(),
    }


@router.post("/lessons/{lesson_id}/answers")
async def add_answer(lesson_id: str, body: LessonAnswerIn, user: User = Depends(get_current_user)):
    try:
        a = await journal.save_lesson_answer(
            str(user.id), lesson_id, body.questionText, body.selectedOption, body.isCorrect
        )
    except BaseORMException:
        logger.error("[journal] save answer failed for user=%s lesson=%s", user.id, lesson_id, exc_info=True)
        return {"success": False, "error": "Failed to save answer"}
    return {"success": True, "data": _answer_out(a)}


@router.get("/lessons/{lesson_id}/answers")
async def list_answers(lesson_id: str, user: User = Depends(get_current_user)):
    rows = await journal.get_lesson_answers(str(user.id), lesson_id)
    return {"success": True, "data": {"items": [_answer_out(a) for a in rows]}}


@router.post("/reflections")
async def add_reflection(body: ReflectionIn, user: User = Depends(get_current_user)):
    """Save a written reflection; reflectionType is "application" or "reflection"."""
    try:
        r = await journal.save_reflection(
            str(user.id),
            body.lessonId,
            body.reflectionType,
            body.questionText,
            body.userResponse,
            body.aiFeedback,
        )
    except BaseORMException:
        logger.error("[journal] save reflection failed for user=%s", user.id, exc_info=True)
        return {"success": False, "error": "Failed to save reflection"}
    return {"success": True, "data": _reflection_out(r)}


@router.get("/reflections")
async def list_reflections(
    user: User = Depends(get_current_user),
    lessonId: str | None = Query(default=None),
):
    """List reflections newest first, optionally for one lesson."""
    rows = await journal.get_reflections(str(user.id), lessonId)
    return {"success": True, "data": {"items": [_reflection_out(r) for r in rows]}}
