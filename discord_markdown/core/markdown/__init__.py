"""Discord markdown parsing and rendering."""

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
from discord_markdown.core.markdown.parser import (
    extract_emojis,
    extract_links,
    parse,
    parse_minimal,
)
from discord_markdown.core.markdown.renderer import render, render_markdown
from discord_markdown.core.markdown.visitor import MarkdownVisitor

__all__ = [
    # Nodes
    "MarkdownNode",
    "TextNode",
    "FormattedNode",
    "InlineCodeBlockNode",
    "MultilineCodeBlockNode",
    "LinkNode",
    "MentionNode",
    "EmojiNode",
    # Enums
    "TextFormatting",
    "MentionType",
    # Parser
    "parse",
    "parse_minimal",
    "extract_emojis",
    "extract_links",
    # Rendering
    "MarkdownVisitor",
    "render",
    "render_markdown",
]
