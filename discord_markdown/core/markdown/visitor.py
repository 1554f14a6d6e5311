"""Base markdown visitor."""

from __future__ import annotations

from typing import Sequence

from discord_markdown.core.markdown.nodes import (
    EmojiNode,
    FormattedNode,
    InlineCodeBlockNode,
    LinkNode,
    MarkdownNode,
    MentionNode,
    MultilineCodeBlockNode,
    TextNode,
)


class MarkdownVisitor:
    """Abstract visitor that walks a markdown AST.

    Override the ``visit_*`` methods in subclasses to implement custom
    behaviour.  The default implementation for formatted nodes simply
    recurses into their children; leaves are no-ops.

    :meth:`visit` is the single dispatch point over the closed set of node
    kinds.  A node type it does not know about is a programming error and
    raises ``TypeError`` rather than being skipped silently.
    """

    # -- leaf visitors (no-ops by default) --

    def visit_text(self, node: TextNode) -> None:
        pass

    def visit_inline_code_block(self, node: InlineCodeBlockNode) -> None:
        pass

    def visit_multiline_code_block(self, node: MultilineCodeBlockNode) -> None:
        pass

    def visit_mention(self, node: MentionNode) -> None:
        pass

    def visit_emoji(self, node: EmojiNode) -> None:
        pass

    def visit_link(self, node: LinkNode) -> None:
        pass

    # -- container visitors (recurse by default) --

    def visit_formatted(self, node: FormattedNode) -> None:
        self.visit_many(node.children)

    # -- dispatch --

    def visit(self, node: MarkdownNode) -> None:
        if isinstance(node, TextNode):
            self.visit_text(node)
        elif isinstance(node, FormattedNode):
            self.visit_formatted(node)
        elif isinstance(node, InlineCodeBlockNode):
            self.visit_inline_code_block(node)
        elif isinstance(node, MultilineCodeBlockNode):
            self.visit_multiline_code_block(node)
        elif isinstance(node, MentionNode):
            self.visit_mention(node)
        elif isinstance(node, EmojiNode):
            self.visit_emoji(node)
        elif isinstance(node, LinkNode):
            self.visit_link(node)
        else:
            raise TypeError(f"Unknown markdown node type: {type(node).__name__}")

    def visit_many(self, nodes: Sequence[MarkdownNode]) -> None:
        for node in nodes:
            self.visit(node)
