"""Exceptions raised while reading a site's sources."""

from __future__ import annotations

from pathlib import Path

from cleanurls.exceptions import CleanUrlsError


class SiteError(CleanUrlsError):
    """Base class for site reading and planning errors."""


class SourceReadError(SiteError):
    """Raised when a source file or its front matter cannot be read."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Failed to read '{path}': {reason}")


class InvalidPostFilenameError(SiteError):
    """Raised when a file in ``_posts`` is not named ``YYYY-MM-DD-title.ext``."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Invalid post file name '{name}'. Expected YYYY-MM-DD-title.ext.")


class MissingPostDateError(SiteError):
    """Raised when a post's URL needs a date and the post has none."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Post '{name}' has no date.")
