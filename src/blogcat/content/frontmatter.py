"""
Front matter splitting and metadata parsing.

A content file is a YAML block between ``---`` fences followed by a markdown
body. Timestamps must carry a UTC offset.
"""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Any

import yaml
from frontmatter.default_handlers import YAMLHandler

from blogcat.content.models import PostMetadata
from blogcat.core.errors import MetadataParseError, MissingFrontMatter
from blogcat.core.lang import Lang

REQUIRED_FIELDS = ("title", "description", "author", "tags", "created_at", "updated_at")

_OPTIONAL_STRING_FIELDS = (
    "series",
    "series_description",
    "series_status",
    "prev_post",
    "next_post",
    "og_image",
    "slug",
)


def split_front_matter(
    text: str, path: Path | None = None
) -> tuple[dict[str, Any], str]:
    """Split raw file text into a front matter mapping and markdown body.

    Args:
        text: Raw file content
        path: Optional file path for error context

    Returns:
        Tuple of (front matter dict, body string)

    Raises:
        MissingFrontMatter: If the text has no complete front matter block
        MetadataParseError: If the block is not valid YAML or not a mapping
    """
    handler = YAMLHandler()
    if not handler.detect(text):
        raise MissingFrontMatter(path=path)

    # An opening fence without a closing one
    try:
        fm_text, body = handler.split(text)
    except ValueError as e:
        raise MissingFrontMatter(path=path) from e

    try:
        fm = handler.load(fm_text)
    except yaml.YAMLError as e:
        raise MetadataParseError(f"invalid YAML: {e}", path=path) from e

    if fm is None:
        fm = {}
    if not isinstance(fm, dict):
        raise MetadataParseError("front matter is not a mapping", path=path)

    return fm, body.strip()


def _parse_timestamp(value: Any, field: str, path: Path | None) -> datetime:
    if isinstance(value, datetime):
        parsed = value
    elif isinstance(value, date):
        raise MetadataParseError("timestamp needs a time and UTC offset", field, path)
    elif isinstance(value, str):
        text = value.strip()
        if text.endswith(("Z", "z")):
            text = text[:-1] + "+00:00"
        try:
            parsed = datetime.fromisoformat(text)
        except ValueError as e:
            raise MetadataParseError(f"invalid timestamp {value!r}", field, path) from e
    else:
        raise MetadataParseError(f"expected a timestamp, got {type(value).__name__}", field, path)

    if parsed.tzinfo is None or parsed.utcoffset() is None:
        raise MetadataParseError(f"timestamp {value!s} has no UTC offset", field, path)
    return parsed


def _parse_tags(value: Any, path: Path | None) -> list[str]:
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise MetadataParseError("expected a list of tags", "tags", path)
    return [str(tag) for tag in value]


def _parse_series_order(value: Any, path: Path | None) -> int | float | None:
    if value is None:
        return None
    # bool is an int subclass
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise MetadataParseError("expected a number", "series_order", path)
    return value


def parse_metadata(fm: dict[str, Any], path: Path | None = None) -> PostMetadata:
    """Build typed PostMetadata from a front matter mapping.

    Args:
        fm: Front matter mapping
        path: Optional file path for error context

    Raises:
        MetadataParseError: For a missing required field, a wrongly typed
            field, an unknown language code, or a timestamp without offset
    """
    for name in REQUIRED_FIELDS:
        if fm.get(name) is None:
            raise MetadataParseError("required field is missing", name, path)

    optional: dict[str, str | None] = {}
    for name in _OPTIONAL_STRING_FIELDS:
        value = fm.get(name)
        optional[name] = str(value) if value not in (None, "") else None

    lang = None
    if fm.get("lang"):
        lang = Lang.parse(str(fm["lang"]), strict=True)
        if lang is None:
            raise MetadataParseError(f"unsupported language {fm['lang']!r}", "lang", path)

    return PostMetadata(
        title=str(fm["title"]),
        description=str(fm["description"]),
        author=str(fm["author"]),
        tags=_parse_tags(fm["tags"], path),
        created_at=_parse_timestamp(fm["created_at"], "created_at", path),
        updated_at=_parse_timestamp(fm["updated_at"], "updated_at", path),
        series_order=_parse_series_order(fm.get("series_order"), path),
        lang=lang,
        **optional,
    )


def read_post_source(text: str, path: Path | None = None) -> tuple[PostMetadata, str]:
    """Split and parse a content file in one step."""
    fm, body = split_front_matter(text, path=path)
    return parse_metadata(fm, path=path), body
