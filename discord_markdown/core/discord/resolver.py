"""Mention resolver - read-only lookups of users, channels and roles by id."""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Iterable, Mapping

from pydantic import ValidationError

from discord_markdown.core.discord.models.channel import Channel
from discord_markdown.core.discord.models.role import Role
from discord_markdown.core.discord.models.user import User
from discord_markdown.core.exceptions import MentionDataError

logger = logging.getLogger(__name__)


class MentionResolver(ABC):
    """Looks up the entities referenced by mentions.

    Each lookup returns ``None`` when the id is unknown (deleted or uncached
    entity).  Renderers treat that as a normal condition and fall back to a
    placeholder label.
    """

    @abstractmethod
    def get_user(self, user_id: str) -> User | None: ...

    @abstractmethod
    def get_channel(self, channel_id: str) -> Channel | None: ...

    @abstractmethod
    def get_role(self, role_id: str) -> Role | None: ...


class InMemoryMentionResolver(MentionResolver):
    """Dict-backed resolver, populated once and never mutated afterwards."""

    def __init__(
        self,
        users: Iterable[User] = (),
        channels: Iterable[Channel] = (),
        roles: Iterable[Role] = (),
    ) -> None:
        self._users: dict[str, User] = {u.id: u for u in users}
        self._channels: dict[str, Channel] = {c.id: c for c in channels}
        self._roles: dict[str, Role] = {r.id: r for r in roles}

    # -- lookups --

    def get_user(self, user_id: str) -> User | None:
        return self._users.get(user_id)

    def get_channel(self, channel_id: str) -> Channel | None:
        return self._channels.get(channel_id)

    def get_role(self, role_id: str) -> Role | None:
        return self._roles.get(role_id)

    # -- construction --

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> InMemoryMentionResolver:
        """Build a resolver from ``{"users": [...], "channels": [...], "roles": [...]}``.

        Entries may be in the library's own shape or raw Discord API objects.
        """
        if not isinstance(data, Mapping):
            raise MentionDataError(
                f"Mention data must be an object, got {type(data).__name__}", is_fatal=True
            )

        try:
            users = [User.model_validate(u) for u in data.get("users") or []]
            channels = [Channel.model_validate(c) for c in data.get("channels") or []]
            roles = [Role.model_validate(r) for r in data.get("roles") or []]
        except ValidationError as exc:
            raise MentionDataError(f"Invalid mention data: {exc}", is_fatal=True) from exc

        logger.debug(
            "Loaded %d users, %d channels, %d roles",
            len(users),
            len(channels),
            len(roles),
        )
        return cls(users, channels, roles)

    @classmethod
    def from_file(cls, path: str | Path) -> InMemoryMentionResolver:
        """Read mention data from a JSON file."""
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except OSError as exc:
            raise MentionDataError(f"Cannot read mention data from {path}: {exc}", is_fatal=True) from exc
        except json.JSONDecodeError as exc:
            raise MentionDataError(f"Mention data in {path} is not valid JSON: {exc}", is_fatal=True) from exc

        return cls.from_mapping(data)
