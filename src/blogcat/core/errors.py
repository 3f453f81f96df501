"""
Exceptions raised while loading a content tree.

Every load-time failure is a ContentError so callers can catch one type and
still report which file broke the load.
"""

from __future__ import annotations

from pathlib import Path


class BlogcatError(Exception):
    """Base exception for blogcat."""


class ContentError(BlogcatError):
    """A content file or directory could not be turned into posts."""

    def __init__(self, message: str, path: Path | str | None = None):
        self.message = message
        self.path = Path(path) if path is not None else None
        super().__init__(message)

    def __str__(self) -> str:
        if self.path is not None:
            return f"{self.path}: {self.message}"
        return self.message


class ContentIOError(ContentError):
    """A file or directory under the content root is unreadable."""
    pass


class MissingFrontMatter(ContentError):
    """The file has no front matter block."""

    def __init__(self, path: Path | str | None = None):
        super().__init__("no front matter found", path=path)


class MetadataParseError(ContentError):
    """Front matter is malformed or lacks a required field."""

    def __init__(
        self,
        message: str,
        field: str | None = None,
        path: Path | str | None = None,
    ):
        self.field = field
        if field:
            message = f"{field}: {message}"
        super().__init__(message, path=path)


class DuplicateSlugError(ContentError):
    """Two posts of the same language resolved to one slug."""
    pass
