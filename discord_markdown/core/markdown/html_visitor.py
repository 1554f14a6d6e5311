"""HTML markdown visitor - renders AST nodes to HTML."""

from __future__ import annotations

import logging
from html import escape as html_escape
from io import StringIO
from typing import TYPE_CHECKING, Sequence

from discord_markdown.core.markdown.nodes import (
    EmojiNode,
    FormattedNode,
    InlineCodeBlockNode,
    LinkNode,
    MarkdownNode,
    MentionNode,
    MentionType,
    MultilineCodeBlockNode,
    TextFormatting,
    TextNode,
)
from discord_markdown.core.markdown.parser import parse
from discord_markdown.core.markdown.visitor import MarkdownVisitor

if TYPE_CHECKING:
    from discord_markdown.core.discord.resolver import MentionResolver

logger = logging.getLogger(__name__)


def _html_encode(text: str) -> str:
    return html_escape(text, quote=True)


def is_jumbo(nodes: Sequence[MarkdownNode]) -> bool:
    """True when *nodes* hold at least one emoji and nothing but emoji and whitespace."""
    return any(isinstance(n, EmojiNode) for n in nodes) and all(
        isinstance(n, EmojiNode) or (isinstance(n, TextNode) and not n.text.strip())
        for n in nodes
    )


class HtmlMarkdownVisitor(MarkdownVisitor):
    """Renders a markdown AST to HTML."""

    def __init__(
        self,
        resolver: MentionResolver,
        buffer: StringIO,
        is_jumbo: bool = False,
    ) -> None:
        self._resolver = resolver
        self._buffer = buffer
        self._is_jumbo = is_jumbo

    # -- text --

    def visit_text(self, node: TextNode) -> None:
        self._buffer.write(_html_encode(node.text))

    # -- formatting --

    def visit_formatted(self, node: FormattedNode) -> None:
        if node.formatting == TextFormatting.BOLD:
            opening, closing = "<b>", "</b>"
        elif node.formatting == TextFormatting.ITALIC:
            opening, closing = "<i>", "</i>"
        elif node.formatting == TextFormatting.UNDERLINE:
            opening, closing = "<u>", "</u>"
        elif node.formatting == TextFormatting.STRIKETHROUGH:
            opening, closing = "<s>", "</s>"
        elif node.formatting == TextFormatting.SPOILER:
            opening, closing = '<span class="spoiler spoiler--hidden">', "</span>"
        else:
            raise ValueError(f"Unknown formatting kind: {node.formatting!r}")

        self._buffer.write(opening)
        self.visit_many(node.children)
        self._buffer.write(closing)

    # -- code blocks --

    def visit_inline_code_block(self, node: InlineCodeBlockNode) -> None:
        self._buffer.write(
            f'<span class="pre pre--inline">{_html_encode(node.code)}</span>'
        )

    def visit_multiline_code_block(self, node: MultilineCodeBlockNode) -> None:
        highlight_class = (
            f"language-{_html_encode(node.language)}" if node.language else "nohighlight"
        )
        self._buffer.write(
            f'<div class="pre pre--multiline {highlight_class}">'
            f"{_html_encode(node.code)}</div>"
        )

    # -- links --

    def visit_link(self, node: LinkNode) -> None:
        self._buffer.write(
            f'<a href="{_html_encode(node.url)}">{_html_encode(node.title)}</a>'
        )

    # -- emoji --

    def visit_emoji(self, node: EmojiNode) -> None:
        css_class = "emoji emoji--large" if self._is_jumbo else "emoji"
        self._buffer.write(
            f'<img class="{css_class}" '
            f'alt="{_html_encode(node.name)}" '
            f'title="{_html_encode(node.name)}" '
            f'src="{_html_encode(node.image_url)}" />'
        )

    # -- mentions --

    def visit_mention(self, node: MentionNode) -> None:
        if node.type == MentionType.META:
            self._buffer.write(f'<span class="mention">@{_html_encode(node.id)}</span>')

        elif node.type == MentionType.USER:
            user = self._resolver.get_user(node.id)
            if user is not None:
                full_name, name = user.full_name, user.display_name
            else:
                logger.debug("Unresolved user mention: %s", node.id)
                full_name, name = "Unknown user", node.id

            self._buffer.write(
                f'<span class="mention" title="{_html_encode(full_name)}">'
                f"@{_html_encode(name)}</span>"
            )

        elif node.type == MentionType.CHANNEL:
            channel = self._resolver.get_channel(node.id)
            if channel is None:
                logger.debug("Unresolved channel mention: %s", node.id)
            symbol = "\U0001F50A" if channel is not None and channel.is_voice else "#"
            name = channel.name if channel is not None else node.id

            self._buffer.write(
                f'<span class="mention">{symbol}{_html_encode(name)}</span>'
            )

        elif node.type == MentionType.ROLE:
            role = self._resolver.get_role(node.id)
            if role is None:
                logger.debug("Unresolved role mention: %s", node.id)
            name = role.name if role is not None else node.id

            rgb = role.color_rgb if role is not None else None
            if rgb is not None:
                r, g, b = rgb
                style = (
                    f' style="color: rgb({r}, {g}, {b}); '
                    f'background-color: rgba({r}, {g}, {b}, 0.1);"'
                )
            else:
                style = ""

            self._buffer.write(
                f'<span class="mention"{style}>@{_html_encode(name)}</span>'
            )

        else:
            raise ValueError(f"Unknown mention type: {node.type!r}")

    # -- static entry point --

    @staticmethod
    def format(
        resolver: MentionResolver,
        markdown: str,
        is_jumbo_allowed: bool = True,
    ) -> str:
        """Parse *markdown* with the full parser and render as HTML."""
        nodes = parse(markdown)
        buf = StringIO()
        visitor = HtmlMarkdownVisitor(resolver, buf, is_jumbo_allowed and is_jumbo(nodes))
        visitor.visit_many(nodes)
        return buf.getvalue()
