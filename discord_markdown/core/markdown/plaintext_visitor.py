"""Plain text markdown visitor - strips formatting, resolves mentions."""

from __future__ import annotations

import logging
from io import StringIO
from typing import TYPE_CHECKING

from discord_markdown.core.markdown.nodes import (
    EmojiNode,
    InlineCodeBlockNode,
    LinkNode,
    MentionNode,
    MentionType,
    MultilineCodeBlockNode,
    TextNode,
)
from discord_markdown.core.markdown.parser import parse_minimal
from discord_markdown.core.markdown.visitor import MarkdownVisitor

if TYPE_CHECKING:
    from discord_markdown.core.discord.resolver import MentionResolver

logger = logging.getLogger(__name__)


class PlainTextMarkdownVisitor(MarkdownVisitor):
    """Renders a markdown AST as plain text.

    Formatting nodes contribute only their children.  :meth:`format` uses the
    minimal parser (only mentions and custom emoji), so markdown syntax in
    the source survives as typed.
    """

    def __init__(self, resolver: MentionResolver, buffer: StringIO) -> None:
        self._resolver = resolver
        self._buffer = buffer

    # -- text --

    def visit_text(self, node: TextNode) -> None:
        self._buffer.write(node.text)

    # -- code blocks --

    def visit_inline_code_block(self, node: InlineCodeBlockNode) -> None:
        self._buffer.write(node.code)

    def visit_multiline_code_block(self, node: MultilineCodeBlockNode) -> None:
        self._buffer.write(f"```{node.language or ''}\n{node.code}\n```")

    # -- links --

    def visit_link(self, node: LinkNode) -> None:
        if node.title == node.url:
            self._buffer.write(node.url)
        else:
            self._buffer.write(f"{node.title} ({node.url})")

    # -- emoji --

    def visit_emoji(self, node: EmojiNode) -> None:
        self._buffer.write(f":{node.name}:")

    # -- mentions --

    def visit_mention(self, node: MentionNode) -> None:
        if node.type == MentionType.META:
            self._buffer.write(f"@{node.id}")

        elif node.type == MentionType.USER:
            user = self._resolver.get_user(node.id)
            if user is None:
                logger.debug("Unresolved user mention: %s", node.id)
            self._buffer.write(f"@{user.display_name if user is not None else node.id}")

        elif node.type == MentionType.CHANNEL:
            channel = self._resolver.get_channel(node.id)
            if channel is None:
                logger.debug("Unresolved channel mention: %s", node.id)
            self._buffer.write(f"#{channel.name if channel is not None else node.id}")
            if channel is not None and channel.is_voice:
                self._buffer.write(" [voice]")

        elif node.type == MentionType.ROLE:
            role = self._resolver.get_role(node.id)
            if role is None:
                logger.debug("Unresolved role mention: %s", node.id)
            self._buffer.write(f"@{role.name if role is not None else node.id}")

        else:
            raise ValueError(f"Unknown mention type: {node.type!r}")

    # -- static entry point --

    @staticmethod
    def format(resolver: MentionResolver, markdown: str) -> str:
        """Parse *markdown* with the minimal parser and render as plain text."""
        nodes = parse_minimal(markdown)
        buf = StringIO()
        visitor = PlainTextMarkdownVisitor(resolver, buf)
        visitor.visit_many(nodes)
        return buf.getvalue()
