"""Entry points that turn markdown (or an already parsed AST) into output text."""

from __future__ import annotations

from io import StringIO
from typing import TYPE_CHECKING, Sequence

from discord_markdown.core.exporting.format import RenderFormat
from discord_markdown.core.markdown.html_visitor import HtmlMarkdownVisitor
from discord_markdown.core.markdown.plaintext_visitor import PlainTextMarkdownVisitor

if TYPE_CHECKING:
    from discord_markdown.core.discord.resolver import MentionResolver
    from discord_markdown.core.markdown.nodes import MarkdownNode


def render(
    nodes: Sequence[MarkdownNode],
    resolver: MentionResolver,
    target: RenderFormat = RenderFormat.HTML,
) -> str:
    """Render *nodes* in order for *target*.

    The walk is depth-first and left-to-right.  Nothing is mutated; the only
    side effects are lookups on *resolver*, and an unknown mention target
    falls back to a placeholder instead of failing.
    """
    buf = StringIO()
    if target is RenderFormat.HTML:
        HtmlMarkdownVisitor(resolver, buf).visit_many(nodes)
    elif target is RenderFormat.PLAIN_TEXT:
        PlainTextMarkdownVisitor(resolver, buf).visit_many(nodes)
    else:
        raise ValueError(f"Unknown render format: {target!r}")
    return buf.getvalue()


def render_markdown(
    markdown: str,
    resolver: MentionResolver,
    target: RenderFormat = RenderFormat.HTML,
) -> str:
    """Parse *markdown* the way *target* needs and render it."""
    if target.is_html:
        return HtmlMarkdownVisitor.format(resolver, markdown)
    return PlainTextMarkdownVisitor.format(resolver, markdown)
