"""Render target definitions."""

from enum import Enum


class RenderFormat(Enum):
    PLAIN_TEXT = "plaintext"
    HTML = "html"

    @property
    def display_name(self) -> str:
        return {
            RenderFormat.PLAIN_TEXT: "TXT",
            RenderFormat.HTML: "HTML",
        }[self]

    @property
    def is_html(self) -> bool:
        return self is RenderFormat.HTML
