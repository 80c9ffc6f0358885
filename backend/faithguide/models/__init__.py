"""
Database models module initialization.
Exports all Tortoise ORM models for convenient imports.

Models exported:
- User: account, credentials and onboarding answers
- UserProgress: daily and cumulative activity counters
- LessonCompletion, LessonAnswer, Reflection: lesson activity
- ChatMessage: chat history
"""
from .user import User
from .progress import UserProgress
from .lesson import LessonCompletion, LessonAnswer, Reflection
from .chat import ChatMessage
