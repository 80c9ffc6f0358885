# faithguide/models/chat.py
"""
Database model for chat history.
"""
from tortoise import fields, models


class ChatMessage(models.Model):
    """
    One chat turn, stored in the order it was sent.

    Relationships:
    - Belongs to a User (many-to-one)
    """
    id = fields.IntField(pk=True)
    user = fields.ForeignKeyField("models.User", related_name="chat_messages", on_delete=fields.CASCADE)
    message = fields.TextField()
    role = fields.CharField(max_length=16)  # "user" or "assistant"
    context_type = fields.CharField(max_length=64, null=True)  # Screen the message came from (e.g. "lesson")
    created_at = fields.DatetimeField(auto_now_add=True, index=True)

    class Meta:
        table = "chat_history"
