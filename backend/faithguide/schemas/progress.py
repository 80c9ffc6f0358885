# faithguide/schemas/progress.py
"""
Pydantic schemas for progress tracking.
"""
import datetime as dt
from pydantic import BaseModel, Field


class ProgressDelta(BaseModel):
    """
    Changes to apply to a user's progress.
    Counter fields are increments; None means "not part of this update".
    """
    lessonsCompletedToday: int | None = Field(default=None, ge=0)
    chaptersReadToday: int | None = Field(default=None, ge=0)
    totalLessonsCompleted: int | None = Field(default=None, ge=0)
    totalChaptersRead: int | None = Field(default=None, ge=0)
    currentLessonId: str | None = None
    currentLessonStep: int | None = None


class ProgressState(BaseModel):
    """Snapshot of a UserProgress row."""
    currentLessonId: str | None = None
    currentLessonStep: int | None = None
    lessonsCompletedToday: int = 0
    chaptersReadToday: int = 0
    totalLessonsCompleted: int = 0
    totalChaptersRead: int = 0
    daysActive: int = 0
    lastActiveDate: dt.date | None = None

    @classmethod
    def from_model(cls, row) -> "ProgressState":
        return cls(
            currentLessonId=row.current_lesson_id,
            currentLessonStep=row.current_lesson_step,
            lessonsCompletedToday=row.lessons_completed_today,
            chaptersReadToday=row.chapters_read_today,
            totalLessonsCompleted=row.total_lessons_completed,
            totalChaptersRead=row.total_chapters_read,
            daysActive=row.days_active,
            lastActiveDate=row.last_active_date,
        )


class LessonCompleteIn(BaseModel):
    score: int = 0


class LessonCompletionOut(BaseModel):
    id: int
    lessonId: str
    score: int
    completedAt: str
