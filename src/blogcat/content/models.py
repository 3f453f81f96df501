"""
Post data model.

A Post is built once per content file; only the series links in its
metadata are filled in afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta, timezone
from enum import Enum
from pathlib import Path
from typing import Any

from blogcat.core.lang import Lang

RECENT_DAYS = 30


class PostCategory(Enum):
    """Kinds of posts, named after their content directories."""

    BLOG = "blog"
    REVIEW = "review"
    DIARY = "diary"

    @classmethod
    def from_dir_name(cls, name: str) -> PostCategory | None:
        """Match a directory name case-insensitively."""
        try:
            return cls(name.lower())
        except ValueError:
            return None

    def __str__(self) -> str:
        return self.value


@dataclass
class PostMetadata:
    """Author-supplied front matter."""

    title: str
    description: str
    author: str
    tags: list[str]
    created_at: datetime
    updated_at: datetime
    series: str | None = None
    series_order: int | float | None = None
    series_description: str | None = None
    series_status: str | None = None
    prev_post: str | None = None
    next_post: str | None = None
    og_image: str | None = None
    lang: Lang | None = None
    slug: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "title": self.title,
            "description": self.description,
            "author": self.author,
            "tags": list(self.tags),
            "created_at": self.created_at.isoformat(),
            "updated_at": self.updated_at.isoformat(),
            "series": self.series,
            "series_order": self.series_order,
            "series_description": self.series_description,
            "series_status": self.series_status,
            "prev_post": self.prev_post,
            "next_post": self.next_post,
            "og_image": self.og_image,
            "lang": self.lang.value if self.lang else None,
            "slug": self.slug,
        }


@dataclass(frozen=True)
class TocEntry:
    """A level 2 or 3 heading in a post."""

    level: int
    text: str
    id: str


@dataclass
class Post:
    """One published unit of content."""

    category: PostCategory
    metadata: PostMetadata
    content: str
    slug: str
    lang: Lang
    translation_key: str
    toc: list[TocEntry] = field(default_factory=list)
    reading_time_min: int = 1
    source_path: Path | None = None

    @property
    def title(self) -> str:
        return self.metadata.title

    @property
    def created_at(self) -> datetime:
        return self.metadata.created_at

    @property
    def updated_at(self) -> datetime:
        return self.metadata.updated_at

    @property
    def tags(self) -> list[str]:
        return self.metadata.tags

    @property
    def series(self) -> str | None:
        return self.metadata.series

    def is_recent(self, now: datetime | None = None) -> bool:
        """True if the post was created within the last 30 days."""
        if now is None:
            now = datetime.now(timezone.utc)
        return now - self.metadata.created_at <= timedelta(days=RECENT_DAYS)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output (body excluded)."""
        return {
            "slug": self.slug,
            "category": self.category.value,
            "lang": self.lang.value,
            "translation_key": self.translation_key,
            "reading_time_min": self.reading_time_min,
            "toc": [{"level": e.level, "text": e.text, "id": e.id} for e in self.toc],
            "metadata": self.metadata.to_dict(),
        }
