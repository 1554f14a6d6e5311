"""Discord markdown AST node types."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

from discord_markdown.core.discord.models.cdn import ImageCdn


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------


class TextFormatting(Enum):
    BOLD = "bold"
    ITALIC = "italic"
    UNDERLINE = "underline"
    STRIKETHROUGH = "strikethrough"
    SPOILER = "spoiler"


class MentionType(Enum):
    META = "meta"
    USER = "user"
    CHANNEL = "channel"
    ROLE = "role"


# ---------------------------------------------------------------------------
# Base node
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class MarkdownNode:
    """Abstract base for every markdown AST node."""


# ---------------------------------------------------------------------------
# Concrete nodes
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class TextNode(MarkdownNode):
    text: str


@dataclass(frozen=True)
class FormattedNode(MarkdownNode):
    formatting: TextFormatting
    children: Sequence[MarkdownNode]

    def __post_init__(self) -> None:
        children = tuple(self.children)
        if not children:
            raise ValueError(f"{self.formatting.name} node requires at least one child")
        object.__setattr__(self, "children", children)

    @classmethod
    def wrap(cls, formatting: TextFormatting, child: MarkdownNode) -> FormattedNode:
        return cls(formatting, (child,))


@dataclass(frozen=True)
class InlineCodeBlockNode(MarkdownNode):
    code: str


@dataclass(frozen=True)
class MultilineCodeBlockNode(MarkdownNode):
    code: str
    language: str | None = None


@dataclass(frozen=True)
class MentionNode(MarkdownNode):
    # Snowflake for user/channel/role, the bare keyword (e.g. "everyone") for meta
    id: str
    type: MentionType


@dataclass(frozen=True)
class EmojiNode(MarkdownNode):
    id: str
    name: str
    is_animated: bool = False

    @property
    def image_url(self) -> str:
        return ImageCdn.get_custom_emoji_url(self.id, self.is_animated)


@dataclass(frozen=True)
class LinkNode(MarkdownNode):
    url: str
    title: str


# ---------------------------------------------------------------------------
# Container check helper
# ---------------------------------------------------------------------------


def get_children(node: MarkdownNode) -> Sequence[MarkdownNode] | None:
    """Return the children of a container node, or None if it is a leaf."""
    if isinstance(node, FormattedNode):
        return node.children
    return None
