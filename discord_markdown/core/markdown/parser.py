"""Regex-based Discord markdown parser.

Discord does NOT use a recursive-descent parser for markdown which becomes
evident in some scenarios, like when multiple formatting nodes are nested
together.  To replicate Discord's behaviour we employ a set of regular
expressions that are executed sequentially in a first-matched-first-served
manner: the earliest match in the remaining input wins, and matches that
start at the same position are resolved by the order of the matcher list.

Anything that no matcher claims is literal text.  Unterminated delimiters
simply never match, so parsing cannot fail.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Sequence

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
    get_children,
)

# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

_MAX_DEPTH = 32


@dataclass(frozen=True)
class _Segment:
    """A view into the parsed source string."""

    source: str
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def relocate(self, new_start: int, new_length: int) -> _Segment:
        return _Segment(self.source, new_start, new_length)

    def __str__(self) -> str:
        return self.source[self.start : self.end]


@dataclass(frozen=True)
class _ParsedMatch:
    """A located match whose node is only built once the match is accepted."""

    segment: _Segment
    build: Callable[[], MarkdownNode]


# Matcher: callable that takes (depth, segment) -> Optional[_ParsedMatch]
_Matcher = Callable[[int, _Segment], _ParsedMatch | None]


def _regex_matcher(
    pattern: re.Pattern[str],
    transform: Callable[[int, _Segment, re.Match[str]], MarkdownNode],
) -> _Matcher:
    """Build a matcher from a compiled regex and a transform function."""

    def _match(depth: int, segment: _Segment) -> _ParsedMatch | None:
        # pos/endpos keep the search (and the ^/$ anchors) inside the segment
        m = pattern.search(segment.source, segment.start, segment.end)
        if m is None:
            return None

        seg_match = segment.relocate(m.start(), m.end() - m.start())
        return _ParsedMatch(seg_match, lambda: transform(depth, seg_match, m))

    return _match


def _string_matcher(
    needle: str,
    transform: Callable[[_Segment], MarkdownNode],
) -> _Matcher:
    """Build a matcher that looks for an exact substring."""

    def _match(depth: int, segment: _Segment) -> _ParsedMatch | None:
        idx = segment.source.find(needle, segment.start, segment.end)
        if idx < 0:
            return None
        seg_match = segment.relocate(idx, len(needle))
        return _ParsedMatch(seg_match, lambda: transform(seg_match))

    return _match


def _append(results: list[MarkdownNode], node: MarkdownNode) -> None:
    """Append *node*, merging it into a trailing TextNode when both are text."""
    if isinstance(node, TextNode) and results and isinstance(results[-1], TextNode):
        results[-1] = TextNode(results[-1].text + node.text)
    else:
        results.append(node)


def _match_all(
    matchers: Sequence[_Matcher],
    depth: int,
    segment: _Segment,
) -> list[MarkdownNode]:
    """Apply *matchers* across *segment*, filling gaps with TextNodes.

    At every step the earliest hit wins; hits starting at the same position
    go to the matcher listed first.  A matcher's last hit stays valid while
    it starts at or after the cursor, so each matcher only searches again
    once the cursor has moved past its hit.  A matcher that found nothing
    will find nothing further along either, and is not asked again.
    """
    results: list[MarkdownNode] = []
    hits: list[_ParsedMatch | None] = [None] * len(matchers)
    exhausted = [False] * len(matchers)
    current = segment.start

    while current < segment.end:
        earliest: _ParsedMatch | None = None
        for i, matcher in enumerate(matchers):
            if exhausted[i]:
                continue
            hit = hits[i]
            if hit is None or hit.segment.start < current:
                hit = matcher(depth, segment.relocate(current, segment.end - current))
                hits[i] = hit
                if hit is None:
                    exhausted[i] = True
                    continue
            if earliest is None or hit.segment.start < earliest.segment.start:
                earliest = hit
            if earliest.segment.start == current:
                break

        if earliest is None:
            break
        if earliest.segment.start > current:
            _append(results, TextNode(segment.source[current : earliest.segment.start]))
        _append(results, earliest.build())
        current = earliest.segment.end

    if current < segment.end:
        _append(results, TextNode(segment.source[current : segment.end]))
    return results


# ---------------------------------------------------------------------------
# Recursive parse helpers
# ---------------------------------------------------------------------------


def _parse(
    depth: int,
    segment: _Segment,
    matchers: Sequence[_Matcher],
) -> list[MarkdownNode]:
    if depth >= _MAX_DEPTH:
        return [TextNode(str(segment))]
    return _match_all(matchers, depth + 1, segment)


def _seg_from_group(segment: _Segment, m: re.Match[str], group: int) -> _Segment:
    """Create a _Segment pointing at a regex match group."""
    return segment.relocate(m.start(group), m.end(group) - m.start(group))


def _formatted(
    formatting: TextFormatting,
    depth: int,
    segment: _Segment,
    matchers: Sequence[_Matcher],
) -> FormattedNode:
    return FormattedNode(formatting, _parse(depth, segment, matchers))


# ---------------------------------------------------------------------------
# Regex flags
# ---------------------------------------------------------------------------

_BASE = re.VERBOSE | re.MULTILINE
_BASE_S = _BASE | re.DOTALL


# ---------------------------------------------------------------------------
# Matchers - text escapes
# ---------------------------------------------------------------------------


def _mk_shrug_text() -> _Matcher:
    # Keeps the kaomoji intact instead of reading "\_" as an escape
    return _string_matcher(r"¯\_(ツ)_/¯", lambda s: TextNode(str(s)))


def _mk_escaped_character_text() -> _Matcher:
    pat = re.compile(r"\\([^a-zA-Z0-9\s])", _BASE)

    def _t(d: int, s: _Segment, m: re.Match[str]) -> MarkdownNode:
        return TextNode(m.group(1))

    return _regex_matcher(pat, _t)


# ---------------------------------------------------------------------------
# Matchers - code blocks
# ---------------------------------------------------------------------------


def _mk_multiline_code_block() -> _Matcher:
    pat = re.compile(r"```(?:(\w*)\n)?(.*?)```", _BASE_S)

    def _t(d: int, s: _Segment, m: re.Match[str]) -> MarkdownNode:
        language = m.group(1) or None
        code = m.group(2).strip("\r\n")
        return MultilineCodeBlockNode(code, language)

    return _regex_matcher(pat, _t)


def _mk_inline_code_block() -> _Matcher:
    pat = re.compile(r"(`{1,2})([^`]+)\1", _BASE_S)

    def _t(d: int, s: _Segment, m: re.Match[str]) -> MarkdownNode:
        return InlineCodeBlockNode(m.group(2))

    return _regex_matcher(pat, _t)


# ---------------------------------------------------------------------------
# Matchers - formatting
# ---------------------------------------------------------------------------


def _mk_italic_bold() -> _Matcher:
    pat = re.compile(r"\*(\*\*.+?\*\*)\*(?!\*)", _BASE_S)

    def _t(d: int, s: _Segment, m: re.Match[str]) -> MarkdownNode:
        return _formatted(TextFormatting.ITALIC, d, _seg_from_group(s, m, 1), _BOLD_MATCHERS)

    return _regex_matcher(pat, _t)


def _mk_italic_underline() -> _Matcher:
    pat = re.compile(r"_(__.+?__)_(?!_)", _BASE_S)

    def _t(d: int, s: _Segment, m: re.Match[str]) -> MarkdownNode:
        return _formatted(TextFormatting.ITALIC, d, _seg_from_group(s, m, 1), _UNDERLINE_MATCHERS)

    return _regex_matcher(pat, _t)


def _mk_simple_formatting(pattern: str, formatting: TextFormatting) -> _Matcher:
    """Delimited span whose first group is parsed recursively as markdown."""
    pat = re.compile(pattern, _BASE_S)

    def _t(d: int, s: _Segment, m: re.Match[str]) -> MarkdownNode:
        return _formatted(formatting, d, _seg_from_group(s, m, 1), _NODE_MATCHERS)

    return _regex_matcher(pat, _t)


def _mk_bold() -> _Matcher:
    return _mk_simple_formatting(r"\*\*(.+?)\*\*(?!\*)", TextFormatting.BOLD)


def _mk_italic() -> _Matcher:
    return _mk_simple_formatting(r"\*(?!\s)(.+?)(?<!\s|\*)\*(?!\*)", TextFormatting.ITALIC)


def _mk_underline() -> _Matcher:
    return _mk_simple_formatting(r"__(.+?)__(?!_)", TextFormatting.UNDERLINE)


def _mk_italic_alt() -> _Matcher:
    return _mk_simple_formatting(r"_(.+?)_(?!\w)", TextFormatting.ITALIC)


def _mk_strikethrough() -> _Matcher:
    return _mk_simple_formatting(r"~~(.+?)~~", TextFormatting.STRIKETHROUGH)


def _mk_spoiler() -> _Matcher:
    return _mk_simple_formatting(r"\|\|(.+?)\|\|", TextFormatting.SPOILER)


# ---------------------------------------------------------------------------
# Matchers - mentions
# ---------------------------------------------------------------------------


def _mk_meta_mention(keyword: str) -> _Matcher:
    return _string_matcher(f"@{keyword}", lambda s: MentionNode(keyword, MentionType.META))


def _mk_id_mention(pattern: str, mention_type: MentionType) -> _Matcher:
    pat = re.compile(pattern, _BASE)

    def _t(d: int, s: _Segment, m: re.Match[str]) -> MarkdownNode:
        return MentionNode(m.group(1), mention_type)

    return _regex_matcher(pat, _t)


def _mk_user_mention() -> _Matcher:
    return _mk_id_mention(r"<@!?(\d+)>", MentionType.USER)


def _mk_channel_mention() -> _Matcher:
    return _mk_id_mention(r"<\#!?(\d+)>", MentionType.CHANNEL)


def _mk_role_mention() -> _Matcher:
    return _mk_id_mention(r"<@&(\d+)>", MentionType.ROLE)


# ---------------------------------------------------------------------------
# Matchers - emoji
# ---------------------------------------------------------------------------


def _mk_custom_emoji() -> _Matcher:
    pat = re.compile(r"<(a)?:(\w+):(\d+)>", _BASE)

    def _t(d: int, s: _Segment, m: re.Match[str]) -> MarkdownNode:
        return EmojiNode(id=m.group(3), name=m.group(2), is_animated=m.group(1) is not None)

    return _regex_matcher(pat, _t)


# ---------------------------------------------------------------------------
# Matchers - links
# ---------------------------------------------------------------------------


def _mk_masked_link() -> _Matcher:
    pat = re.compile(r"\[([^\[\]]+)\]\(([^\s()]+)\)", _BASE)

    def _t(d: int, s: _Segment, m: re.Match[str]) -> MarkdownNode:
        return LinkNode(url=m.group(2), title=m.group(1))

    return _regex_matcher(pat, _t)


def _mk_hidden_link() -> _Matcher:
    pat = re.compile(r"""<(https?://\S*[^\.,:;\"'\s>])>""", _BASE)

    def _t(d: int, s: _Segment, m: re.Match[str]) -> MarkdownNode:
        return LinkNode(url=m.group(1), title=m.group(1))

    return _regex_matcher(pat, _t)


def _mk_auto_link() -> _Matcher:
    pat = re.compile(r"""(https?://\S*[^\.,:;\"'\s])""", _BASE)

    def _t(d: int, s: _Segment, m: re.Match[str]) -> MarkdownNode:
        return LinkNode(url=m.group(1), title=m.group(1))

    return _regex_matcher(pat, _t)


# ---------------------------------------------------------------------------
# Matcher sets, in priority order
# ---------------------------------------------------------------------------

# Some matchers parse their content with a narrower set
_BOLD_MATCHER = _mk_bold()
_UNDERLINE_MATCHER = _mk_underline()
_BOLD_MATCHERS: tuple[_Matcher, ...] = (_BOLD_MATCHER,)
_UNDERLINE_MATCHERS: tuple[_Matcher, ...] = (_UNDERLINE_MATCHER,)

# Full node matchers
_NODE_MATCHERS: tuple[_Matcher, ...] = (
    # Escaped text
    _mk_shrug_text(),
    _mk_escaped_character_text(),
    # Code blocks
    _mk_multiline_code_block(),
    _mk_inline_code_block(),
    # Formatting (most specific first)
    _mk_italic_bold(),
    _mk_italic_underline(),
    _BOLD_MATCHER,
    _mk_italic(),
    _UNDERLINE_MATCHER,
    _mk_italic_alt(),
    _mk_strikethrough(),
    _mk_spoiler(),
    # Mentions
    _mk_meta_mention("everyone"),
    _mk_meta_mention("here"),
    _mk_user_mention(),
    _mk_channel_mention(),
    _mk_role_mention(),
    # Emoji
    _mk_custom_emoji(),
    # Links
    _mk_masked_link(),
    _mk_hidden_link(),
    _mk_auto_link(),
)

# Minimal matchers (for plain-text output)
_MINIMAL_NODE_MATCHERS: tuple[_Matcher, ...] = (
    # Mentions
    _mk_meta_mention("everyone"),
    _mk_meta_mention("here"),
    _mk_user_mention(),
    _mk_channel_mention(),
    _mk_role_mention(),
    # Emoji
    _mk_custom_emoji(),
)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------


def parse(markdown: str) -> list[MarkdownNode]:
    """Parse Discord markdown text into an AST (full formatting)."""
    segment = _Segment(markdown, 0, len(markdown))
    return _parse(0, segment, _NODE_MATCHERS)


def parse_minimal(markdown: str) -> list[MarkdownNode]:
    """Parse Discord markdown text into an AST (minimal - mentions and custom emoji only)."""
    segment = _Segment(markdown, 0, len(markdown))
    return _parse(0, segment, _MINIMAL_NODE_MATCHERS)


def _extract_nodes_of_type(
    nodes: Sequence[MarkdownNode],
    node_type: type,
    result: list[MarkdownNode],
) -> None:
    """Recursively extract all nodes of a given type from the AST."""
    for node in nodes:
        if isinstance(node, node_type):
            result.append(node)
        children = get_children(node)
        if children is not None:
            _extract_nodes_of_type(children, node_type, result)


def extract_emojis(markdown: str) -> list[EmojiNode]:
    """Extract all emoji nodes from parsed markdown."""
    result: list[MarkdownNode] = []
    _extract_nodes_of_type(parse(markdown), EmojiNode, result)
    return result  # type: ignore[return-value]


def extract_links(markdown: str) -> list[LinkNode]:
    """Extract all link nodes from parsed markdown."""
    result: list[MarkdownNode] = []
    _extract_nodes_of_type(parse(markdown), LinkNode, result)
    return result  # type: ignore[return-value]
