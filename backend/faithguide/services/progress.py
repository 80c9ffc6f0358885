# faithguide/services/progress.py
"""
Progress tracking service.

Maintains per-user daily counters (reset when a new UTC day starts),
cumulative totals (never reset) and the days-active count. Every write is a
read-modify-write inside one transaction with the progress row locked, so
concurrent updates for the same user serialise instead of overwriting each
other.
"""
import datetime as dt
import logging
from tortoise.transactions import in_transaction

from faithguide.models.lesson import LessonCompletion
from faithguide.models.progress import UserProgress
from faithguide.schemas.progress import ProgressDelta, ProgressState

logger = logging.getLogger(__name__)


def today_utc() -> dt.date:
    return dt.datetime.now(dt.timezone.utc).date()


def compute_progress_update(
    current: ProgressState | None,
    delta: ProgressDelta,
    today: dt.date,
) -> ProgressState:
    """
    Apply a delta to a progress snapshot for activity happening on `today`.

    - A stored date different from `today` starts a new day: days_active
      goes up by one and both today-counters restart from 0.
    - Today-counters present in the delta are added to that baseline.
    - Totals present in the delta are added to the stored totals.
    - Lesson pointer fields are replaced only when present in the delta.
    """
    cur = current or ProgressState()
    is_new_day = cur.lastActiveDate != today

    days_active = cur.daysActive + 1 if is_new_day else cur.daysActive
    lessons_today = 0 if is_new_day else cur.lessonsCompletedToday
    chapters_today = 0 if is_new_day else cur.chaptersReadToday

    if delta.lessonsCompletedToday is not None:
        lessons_today += delta.lessonsCompletedToday
    if delta.chaptersReadToday is not None:
        chapters_today += delta.chaptersReadToday

    total_lessons = cur.totalLessonsCompleted + (delta.totalLessonsCompleted or 0)
    total_chapters = cur.totalChaptersRead + (delta.totalChaptersRead or 0)

    return ProgressState(
        currentLessonId=delta.currentLessonId if delta.currentLessonId is not None else cur.currentLessonId,
        currentLessonStep=delta.currentLessonStep if delta.currentLessonStep is not None else cur.currentLessonStep,
        lessonsCompletedToday=lessons_today,
        chaptersReadToday=chapters_today,
        totalLessonsCompleted=total_lessons,
        totalChaptersRead=total_chapters,
        daysActive=days_active,
        lastActiveDate=today,
    )


async def get_progress(user_id: str) -> ProgressState | None:
    row = await UserProgress.get_or_none(user_id=user_id)
    return ProgressState.from_model(row) if row else None


async def _record_activity(conn, user_id: str, delta: ProgressDelta, today: dt.date) -> ProgressState:
    """Locked read-modify-write of one progress row on an open transaction."""
    row = await UserProgress.filter(user_id=user_id).select_for_update().using_db(conn).first()
    if row is None:
        row = await UserProgress.create(user_id=user_id, using_db=conn)
        current = None
    else:
        current = ProgressState.from_model(row)

    new = compute_progress_update(current, delta, today)

    row.current_lesson_id = new.currentLessonId
    row.current_lesson_step = new.currentLessonStep
    row.lessons_completed_today = new.lessonsCompletedToday
    row.chapters_read_today = new.chaptersReadToday
    row.total_lessons_completed = new.totalLessonsCompleted
    row.total_chapters_read = new.totalChaptersRead
    row.days_active = new.daysActive
    row.last_active_date = new.lastActiveDate
    await row.save(using_db=conn)
    return new


async def record_activity(user_id: str, delta: ProgressDelta, today: dt.date | None = None) -> ProgressState:
    """
    Record activity for a user and return the updated progress.

    Args:
        user_id: Owner of the progress row (created if missing)
        delta: Counter increments and/or lesson pointer update
        today: Calendar date of the activity (defaults to the current UTC date)
    """
    today = today or today_utc()
    async with in_transaction() as conn:
        return await _record_activity(conn, user_id, delta, today)


async def save_lesson_completion(
    user_id: str,
    lesson_id: str,
    score: int,
    today: dt.date | None = None,
) -> LessonCompletion:
    """
    Record a finished lesson and bump the lesson counters as one unit.
    If the counter update fails, the completion row is rolled back too.
    """
    today = today or today_utc()
    async with in_transaction() as conn:
        completion = await LessonCompletion.create(
            user_id=user_id,
            lesson_id=lesson_id,
            score=score,
            using_db=conn,
        )
        await _record_activity(
            conn,
            user_id,
            ProgressDelta(totalLessonsCompleted=1, lessonsCompletedToday=1),
            today,
        )
    logger.info("[progress] user=%s completed lesson=%s score=%s", user_id, lesson_id, score)
    return completion


async def is_lesson_completed(user_id: str, lesson_id: str) -> bool:
    return await LessonCompletion.filter(user_id=user_id, lesson_id=lesson_id).exists()


async def get_lesson_completions(user_id: str) -> list[LessonCompletion]:
    """All completions for a user, newest first."""
    return await LessonCompletion.filter(user_id=user_id).order_by("-completed_at", "-id")
