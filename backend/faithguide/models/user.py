# faithguide/models/user.py
"""
Database model for users.
Represents an account: login credentials plus the onboarding answers used
to personalise content.
"""
import uuid
from tortoise import fields, models


class User(models.Model):
    """
    User database model.

    Relationships:
    - Has one UserProgress (one-to-one, via related_name="progress")
    - Has many LessonCompletions, LessonAnswers, Reflections, ChatMessages

    Security:
    - Email is stored lower-cased and is unique (the unique index is the
      authority for signup conflicts)
    - Password is stored as a hash and never leaves the auth service
    """
    id = fields.UUIDField(pk=True, default=uuid.uuid4)  # Primary key: unique user identifier
    email = fields.CharField(max_length=255, unique=True, index=True)  # Lower-cased login email
    username = fields.CharField(max_length=256)  # Display name (not unique)
    password_hash = fields.CharField(max_length=255)  # Argon2 digest
    onboarding_completed = fields.BooleanField(default=False)  # Set once the questionnaire is submitted
    faith_stage = fields.CharField(max_length=64, null=True)  # Free text; questionnaire offers new-believer, growing, seeking, returning, mature
    current_needs = fields.TextField(null=True)
    brings_here = fields.TextField(null=True)  # "What brings you here" answer
    created_at = fields.DatetimeField(auto_now_add=True)
    updated_at = fields.DatetimeField(auto_now=True)

    class Meta:
        """Tortoise ORM metadata configuration."""
        table = "users"  # Database table name
