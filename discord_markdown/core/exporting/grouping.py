"""Grouping of consecutive messages for display."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Iterable, Iterator, Sequence

from discord_markdown.core.discord.models.message import Message
from discord_markdown.core.discord.models.user import User

DEFAULT_GROUP_LIMIT = 64

_MAX_GROUP_SPAN = timedelta(hours=1)


@dataclass(frozen=True)
class MessageGroup:
    """A run of messages shown under a single author header."""

    author: User
    timestamp: datetime
    messages: Sequence[Message]

    @classmethod
    def from_messages(cls, messages: Sequence[Message]) -> MessageGroup:
        first = messages[0]
        return cls(first.author, first.timestamp, tuple(messages))


def _breaks_group(first: Message, message: Message, size: int, limit: int) -> bool:
    return (
        message.author.id != first.author.id
        or message.timestamp - first.timestamp > _MAX_GROUP_SPAN
        or message.timestamp.hour != first.timestamp.hour
        or size >= limit
    )


def group_messages(
    messages: Iterable[Message],
    limit: int = DEFAULT_GROUP_LIMIT,
) -> Iterator[MessageGroup]:
    """Batch adjacent messages by author and time.

    A new group starts when the author changes, when a message is more than
    an hour after the first message of the group, when the hour of day
    changes, or when the group already holds *limit* messages.
    """
    if limit < 1:
        raise ValueError(f"Group limit must be positive, got {limit}")

    buffer: list[Message] = []
    for message in messages:
        if buffer and _breaks_group(buffer[0], message, len(buffer), limit):
            yield MessageGroup.from_messages(buffer)
            # New list, so groups already handed out are never mutated
            buffer = []
        buffer.append(message)

    if buffer:
        yield MessageGroup.from_messages(buffer)
