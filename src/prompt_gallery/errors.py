"""Exception types raised while loading the prompt collection."""

from __future__ import annotations


class PromptGalleryError(Exception):
    """Base class for prompt gallery errors."""


class FetchError(PromptGalleryError):
    """The raw prompt collection could not be obtained from its source."""

    def __init__(self, source: str, message: str, status_code: int | None = None) -> None:
        self.source = source
        self.status_code = status_code
        super().__init__(f"{message} (source={source})")
