"""
Read-side queries over the post catalog.

All functions take a sequence of posts and return new lists; none of them
modifies a post.
"""

from __future__ import annotations

from collections.abc import Sequence

from blogcat.catalog.translations import dedup_by_translation
from blogcat.content.models import Post, PostCategory
from blogcat.core.config import RECENT_POSTS_LIMIT
from blogcat.core.lang import Lang
from blogcat.series.navigation import series_sort_key

SEARCH_LIMIT = 20


def _newest_first(posts: list[Post], ascending: bool = False) -> list[Post]:
    return sorted(posts, key=lambda p: p.metadata.created_at, reverse=not ascending)


def get_recent_posts(
    posts: Sequence[Post],
    lang: Lang,
    limit: int = RECENT_POSTS_LIMIT,
) -> list[Post]:
    """Newest posts, one per translation key, at most ``limit``."""
    return _newest_first(dedup_by_translation(posts, lang))[:limit]


def get_posts_by_category(
    posts: Sequence[Post],
    category: PostCategory,
    lang: Lang,
    tag: str | None = None,
    ascending: bool = False,
) -> list[Post]:
    """Posts of one category, optionally filtered by tag.

    Args:
        posts: Catalog posts
        category: Category to list
        lang: Preferred language for translation dedup
        tag: Only posts carrying this tag
        ascending: Oldest first instead of newest first
    """
    matching = [
        p
        for p in posts
        if p.category == category and (tag is None or tag in p.metadata.tags)
    ]
    return _newest_first(dedup_by_translation(matching, lang), ascending=ascending)


def get_posts_by_series(
    posts: Sequence[Post],
    series_name: str,
    lang: Lang,
    ascending: bool = True,
) -> list[Post]:
    """Posts of a series in reading order (or reversed)."""
    matching = [p for p in posts if p.metadata.series == series_name]
    members = sorted(dedup_by_translation(matching, lang), key=series_sort_key)
    if not ascending:
        members.reverse()
    return members


def find_post(posts: Sequence[Post], slug: str, lang: Lang) -> Post | None:
    """Find a post by slug, preferring the requested language."""
    fallback = None
    for post in posts:
        if post.slug != slug:
            continue
        if post.lang == lang:
            return post
        if fallback is None:
            fallback = post
    return fallback


def search_posts(
    posts: Sequence[Post],
    query: str,
    lang: Lang,
    limit: int = SEARCH_LIMIT,
) -> list[Post]:
    """Case-insensitive search in titles, descriptions and tags."""
    q = query.strip().lower()
    if not q:
        return []

    matching = [
        p
        for p in posts
        if q in p.metadata.title.lower()
        or q in p.metadata.description.lower()
        or any(q in tag.lower() for tag in p.metadata.tags)
    ]
    return _newest_first(dedup_by_translation(matching, lang))[:limit]


def collect_tags(posts: Sequence[Post], category: PostCategory) -> list[str]:
    """Distinct tags used in a category, sorted."""
    return sorted({tag for p in posts if p.category == category for tag in p.metadata.tags})
