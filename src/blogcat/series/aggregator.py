"""
Series summaries.

One record per series name across all languages, rebuilt from the post list
whenever the catalog changes.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any

from blogcat.content.models import Post

_COMPLETED_WORDS = {"completed", "complete", "done", "finished", "ended"}


class SeriesStatus(Enum):
    """Whether a series is still being written."""

    ONGOING = "ongoing"
    COMPLETED = "completed"

    @classmethod
    def parse(cls, value: str | None) -> SeriesStatus:
        if value and value.strip().lower() in _COMPLETED_WORDS:
            return cls.COMPLETED
        return cls.ONGOING


@dataclass
class Series:
    """Summary of a series."""

    name: str
    updated_at: datetime
    description: str | None = None
    status: SeriesStatus = SeriesStatus.ONGOING
    authors: list[str] = field(default_factory=list)
    post_count: int = 0

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "name": self.name,
            "description": self.description,
            "status": self.status.value,
            "authors": self.authors,
            "updated_at": self.updated_at.isoformat(),
            "post_count": self.post_count,
        }


def aggregate_series(posts: Iterable[Post]) -> list[Series]:
    """Build series summaries.

    Authors are merged, the first non-empty description and status win,
    every language variant counts towards post_count, and updated_at is the
    newest member update.

    Returns:
        Series sorted by updated_at, newest first
    """
    by_name: dict[str, Series] = {}
    authors: dict[str, set[str]] = {}
    status_text: dict[str, str] = {}

    for post in posts:
        meta = post.metadata
        name = meta.series
        if not name:
            continue

        entry = by_name.get(name)
        if entry is None:
            entry = Series(name=name, updated_at=meta.updated_at)
            by_name[name] = entry
            authors[name] = set()

        entry.post_count += 1
        authors[name].add(meta.author)
        if meta.updated_at > entry.updated_at:
            entry.updated_at = meta.updated_at
        if not entry.description and meta.series_description:
            entry.description = meta.series_description
        if name not in status_text and meta.series_status:
            status_text[name] = meta.series_status

    for name, entry in by_name.items():
        entry.authors = sorted(authors[name])
        entry.status = SeriesStatus.parse(status_text.get(name))

    return sort_series(list(by_name.values()))


def sort_series(series: Iterable[Series], ascending: bool = False) -> list[Series]:
    """Sort series by last update."""
    return sorted(series, key=lambda s: s.updated_at, reverse=not ascending)


def find_series(series: Iterable[Series], name: str) -> Series | None:
    """Look up a series by exact name; None if it does not exist."""
    return next((s for s in series if s.name == name), None)
