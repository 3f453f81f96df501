"""
Series navigation chains.

Posts sharing a series name and a language form a linear chain ordered by
``series_order`` (then creation time). Chains never cross languages.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from blogcat.content.models import Post
from blogcat.core.lang import Lang

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SeriesNavInfo:
    """Where a post sits inside its series."""

    series_name: str
    position: int  # 1-based
    total: int
    prev_slug: str | None = None
    prev_title: str | None = None
    next_slug: str | None = None
    next_title: str | None = None

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for JSON output."""
        return {
            "series_name": self.series_name,
            "position": self.position,
            "total": self.total,
            "prev_slug": self.prev_slug,
            "prev_title": self.prev_title,
            "next_slug": self.next_slug,
            "next_title": self.next_title,
        }


def series_sort_key(post: Post) -> tuple[bool, float, datetime]:
    """Order by explicit series_order, unordered posts last, then created_at."""
    order = post.metadata.series_order
    return (order is None, order if order is not None else 0, post.metadata.created_at)


def group_by_series(posts: Iterable[Post]) -> dict[tuple[str, Lang], list[Post]]:
    """Group series members by (series name, language), each group sorted."""
    groups: dict[tuple[str, Lang], list[Post]] = defaultdict(list)
    for post in posts:
        if post.metadata.series:
            groups[(post.metadata.series, post.lang)].append(post)
    for members in groups.values():
        members.sort(key=series_sort_key)
    return dict(groups)


def link_series(posts: list[Post]) -> int:
    """Fill in missing prev/next slugs along every series chain.

    Values set in front matter are kept; each end of a link is decided
    independently.

    Args:
        posts: Freshly loaded posts, modified in place

    Returns:
        Number of prev/next fields filled in
    """
    filled = 0
    for (name, lang), members in group_by_series(posts).items():
        for i, post in enumerate(members):
            meta = post.metadata
            if meta.prev_post is None and i > 0:
                meta.prev_post = members[i - 1].slug
                filled += 1
            if meta.next_post is None and i < len(members) - 1:
                meta.next_post = members[i + 1].slug
                filled += 1
        logger.debug("Linked series %r (%s): %d posts", name, lang.value, len(members))
    return filled


def _title_for(posts: Iterable[Post], slug: str, lang: Lang) -> str | None:
    fallback = None
    for post in posts:
        if post.slug != slug:
            continue
        if post.lang == lang:
            return post.metadata.title
        if fallback is None:
            fallback = post.metadata.title
    return fallback


def get_series_nav_info(posts: list[Post], post: Post) -> SeriesNavInfo | None:
    """Compute series navigation for a post.

    Returns:
        SeriesNavInfo, or None if the post is not part of a series
    """
    name = post.metadata.series
    if not name:
        return None

    members = sorted(
        (p for p in posts if p.metadata.series == name and p.lang == post.lang),
        key=series_sort_key,
    )
    position = next((i for i, p in enumerate(members) if p is post), None)
    if position is None:
        return None

    prev_slug = post.metadata.prev_post
    next_slug = post.metadata.next_post
    return SeriesNavInfo(
        series_name=name,
        position=position + 1,
        total=len(members),
        prev_slug=prev_slug,
        prev_title=_title_for(posts, prev_slug, post.lang) if prev_slug else None,
        next_slug=next_slug,
        next_title=_title_for(posts, next_slug, post.lang) if next_slug else None,
    )
