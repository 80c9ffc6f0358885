# faithguide/schemas/journal.py
"""
Pydantic schemas for lesson answers, reflections and chat history.
"""
from typing import Literal, Optional
from pydantic import BaseModel, Field


class LessonAnswerIn(BaseModel):
    questionText: str
    selectedOption: str
    isCorrect: bool


class ReflectionIn(BaseModel):
    lessonId: str
    reflectionType: Literal["application", "reflection"]
    questionText: str
    userResponse: str
    aiFeedback: Optional[str] = None


class ChatMessageIn(BaseModel):
    message: str = Field(min_length=1)
    role: Literal["user", "assistant"]
    contextType: Optional[str] = None
