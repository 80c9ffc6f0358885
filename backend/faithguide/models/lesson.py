# faithguide/models/lesson.py
"""
Database models for lesson activity: completions, quiz answers and
written reflections. All rows are append-only.
"""
from tortoise import fields, models


class LessonCompletion(models.Model):
    """One finished lesson with its score."""
    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField("models.User", related_name="lesson_completions", on_delete=fields.CASCADE)
    lesson_id = fields.CharField(max_length=128, index=True)
    score = fields.IntField(default=0)
    completed_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "lesson_completions"


class LessonAnswer(models.Model):
    """A single quiz answer given inside a lesson."""
    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField("models.User", related_name="lesson_answers", on_delete=fields.CASCADE)
    lesson_id = fields.CharField(max_length=128, index=True)
    question_text = fields.TextField()
    selected_option = fields.TextField()
    is_correct = fields.BooleanField()
    answered_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "lesson_answers"


class Reflection(models.Model):
    """A free-text journal response to a lesson prompt."""
    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField("models.User", related_name="reflections", on_delete=fields.CASCADE)
    lesson_id = fields.CharField(max_length=128, index=True)
    reflection_type = fields.CharField(max_length=16)  # "application" or "reflection"
    question_text = fields.TextField()
    user_response = fields.TextField()
    ai_feedback = fields.TextField(null=True)
    created_at = fields.DatetimeField(auto_now_add=True)

    class Meta:
        table = "reflections"
