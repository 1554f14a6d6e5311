"""Shared fixtures."""

from __future__ import annotations

from datetime import datetime, timezone

import pytest

from discord_markdown.core.discord.models.channel import Channel, ChannelKind
from discord_markdown.core.discord.models.message import Message
from discord_markdown.core.discord.models.role import Role
from discord_markdown.core.discord.models.user import User
from discord_markdown.core.discord.resolver import InMemoryMentionResolver


# ---------------------------------------------------------------------------
# Model fixtures
# ---------------------------------------------------------------------------


@pytest.fixture
def alice() -> User:
    return User(id="42", name="Alice")


@pytest.fixture
def bob() -> User:
    return User(id="1001", name="bob", discriminator=7)


@pytest.fixture
def resolver(alice: User, bob: User) -> InMemoryMentionResolver:
    return InMemoryMentionResolver(
        users=[alice, bob],
        channels=[
            Channel(id="100", kind=ChannelKind.GUILD_TEXT_CHAT, name="general"),
            Channel(id="200", kind=ChannelKind.GUILD_VOICE_CHAT, name="voice-room"),
        ],
        roles=[
            Role(id="2001", name="Moderator", color="#ff5733"),
            Role(id="3001", name="NoColor"),
        ],
    )


@pytest.fixture
def empty_resolver() -> InMemoryMentionResolver:
    return InMemoryMentionResolver()


def make_message(
    message_id: int,
    author: User,
    timestamp: datetime,
    content: str = "hello",
) -> Message:
    return Message(id=str(message_id), author=author, timestamp=timestamp, content=content)


def utc(hour: int, minute: int = 0) -> datetime:
    return datetime(2024, 6, 15, hour, minute, tzinfo=timezone.utc)
