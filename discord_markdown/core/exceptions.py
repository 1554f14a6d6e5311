"""Custom exceptions for discord-markdown."""

from __future__ import annotations


class DiscordMarkdownError(Exception):
    """Base exception for all discord-markdown errors.

    Malformed markdown and unknown mention targets are never errors; these
    exceptions cover the data handed to the library from outside.

    Attributes:
        is_fatal: If True, the error is unrecoverable and the user should be
                  prompted to take corrective action (e.g. a broken file).
    """

    def __init__(
        self,
        message: str,
        is_fatal: bool = False,
        *args: object,
    ) -> None:
        super().__init__(message, *args)
        self.is_fatal = is_fatal


class MentionDataError(DiscordMarkdownError):
    """Raised when mention lookup data cannot be loaded or validated."""
