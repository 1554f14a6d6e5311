"""Message model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel

from discord_markdown.core.discord.models.user import User


class Message(BaseModel):
    model_config = {"frozen": True, "coerce_numbers_to_str": True}

    id: str
    author: User
    timestamp: datetime
    content: str = ""
