# faithguide/services/journal.py
"""
Lesson answers and written reflections. Append-only storage with simple
per-user listing.
"""
from faithguide.models.lesson import LessonAnswer, Reflection


async def save_lesson_answer(
    user_id: str,
    lesson_id: str,
    question_text: str,
    selected_option: str,
    is_correct: bool,
) -> LessonAnswer:
    return await LessonAnswer.create(
        user_id=user_id,
        lesson_id=lesson_id,
        question_text=question_text,
        selected_option=selected_option,
        is_correct=is_correct,
    )


async def get_lesson_answers(user_id: str, lesson_id: str) -> list[LessonAnswer]:
    """Answers for one lesson in the order they were given."""
    return await LessonAnswer.filter(user_id=user_id, lesson_id=lesson_id).order_by("answered_at", "id")


async def save_reflection(
    user_id: str,
    lesson_id: str,
    reflection_type: str,
    question_text: str,
    user_response: str,
    ai_feedback: str | None = None,
) -> Reflection:
    return await Reflection.create(
        user_id=user_id,
        lesson_id=lesson_id,
        reflection_type=reflection_type,
        question_text=question_text,
        user_response=user_response,
        ai_feedback=ai_feedback,
    )


async def get_reflections(user_id: str, lesson_id: str | None = None) -> list[Reflection]:
    """Reflections newest first, optionally limited to one lesson."""
    qs = Reflection.filter(user_id=user_id)
    if lesson_id:
        qs = qs.filter(lesson_id=lesson_id)
    return await qs.order_by("-created_at", "-id")
