"""Channel model and ChannelKind enum."""

from __future__ import annotations

from enum import IntEnum

from pydantic import BaseModel, model_validator


class ChannelKind(IntEnum):
    GUILD_TEXT_CHAT = 0
    DIRECT_TEXT_CHAT = 1
    GUILD_VOICE_CHAT = 2
    DIRECT_GROUP_TEXT_CHAT = 3
    GUILD_CATEGORY = 4
    GUILD_NEWS = 5
    GUILD_NEWS_THREAD = 10
    GUILD_PUBLIC_THREAD = 11
    GUILD_PRIVATE_THREAD = 12
    GUILD_STAGE_VOICE = 13
    GUILD_DIRECTORY = 14
    GUILD_FORUM = 15


class Channel(BaseModel):
    model_config = {"frozen": True, "coerce_numbers_to_str": True}

    id: str
    kind: ChannelKind = ChannelKind.GUILD_TEXT_CHAT
    name: str

    @property
    def is_voice(self) -> bool:
        return self.kind in (ChannelKind.GUILD_VOICE_CHAT, ChannelKind.GUILD_STAGE_VOICE)

    @model_validator(mode="before")
    @classmethod
    def _from_api(cls, data: dict) -> dict:  # type: ignore[override]
        if not isinstance(data, dict) or "type" not in data:
            return data

        return {
            "id": data.get("id"),
            "kind": data["type"],
            "name": data.get("name") or "",
        }
