# faithguide/models/progress.py
"""
Database model for per-user activity counters.
"Today" counters reset when the stored last_active_date is not the current
date; totals only ever grow.
"""
from tortoise import fields, models


class UserProgress(models.Model):
    """
    UserProgress database model.

    One row per user, created together with the user at signup.

    Relationships:
    - Belongs to a User (one-to-one)
    """
    id = fields.IntField(pk=True)
    user = fields.OneToOneField(
        "models.User",
        related_name="progress",
        on_delete=fields.CASCADE,
    )  # Owner; cascade delete with the user
    current_lesson_id = fields.CharField(max_length=128, null=True)  # Lesson pointer
    current_lesson_step = fields.IntField(null=True)  # Step within the current lesson
    lessons_completed_today = fields.IntField(default=0)
    chapters_read_today = fields.IntField(default=0)
    total_lessons_completed = fields.IntField(default=0)
    total_chapters_read = fields.IntField(default=0)
    days_active = fields.IntField(default=0)  # Number of calendar days with any activity
    last_active_date = fields.DateField(null=True)  # UTC date of the last recorded activity
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "user_progress"
