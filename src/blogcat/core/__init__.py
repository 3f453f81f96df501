"""Core utilities for blogcat."""

from blogcat.core.config import Settings, find_content_root, get_content_root, get_settings
from blogcat.core.errors import (
    BlogcatError,
    ContentError,
    ContentIOError,
    DuplicateSlugError,
    MetadataParseError,
    MissingFrontMatter,
)
from blogcat.core.lang import Lang

__all__ = [
    # Config
    "Settings",
    "find_content_root",
    "get_content_root",
    "get_settings",
    # Errors
    "BlogcatError",
    "ContentError",
    "ContentIOError",
    "DuplicateSlugError",
    "MetadataParseError",
    "MissingFrontMatter",
    # Languages
    "Lang",
]
