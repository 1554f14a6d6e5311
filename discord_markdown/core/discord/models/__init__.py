"""Discord data models."""

from discord_markdown.core.discord.models.cdn import ImageCdn
from discord_markdown.core.discord.models.channel import Channel, ChannelKind
from discord_markdown.core.discord.models.message import Message
from discord_markdown.core.discord.models.role import Role
from discord_markdown.core.discord.models.user import User

__all__ = [
    "Channel",
    "ChannelKind",
    "ImageCdn",
    "Message",
    "Role",
    "User",
]
