"""Discord CDN URL helpers."""

from __future__ import annotations

_CDN_BASE_URL = "https://cdn.discordapp.com"


class ImageCdn:
    """Static helper for building Discord CDN image URLs."""

    @staticmethod
    def get_custom_emoji_url(emoji_id: str, is_animated: bool = False) -> str:
        ext = "gif" if is_animated else "png"
        return f"{_CDN_BASE_URL}/emojis/{emoji_id}.{ext}"
