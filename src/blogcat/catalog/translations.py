"""Collapse language variants of the same post."""

from __future__ import annotations

from collections.abc import Iterable

from blogcat.content.models import Post
from blogcat.core.lang import Lang


def dedup_by_translation(posts: Iterable[Post], lang: Lang) -> list[Post]:
    """Keep one post per translation key, preferring ``lang``.

    The first post seen for a key is kept unless a later one is in ``lang``
    and the kept one is not. Without a match in ``lang`` the first post seen
    wins, so callers should pass posts in a stable order.

    Returns:
        Representatives in first-seen key order
    """
    chosen: dict[str, Post] = {}
    for post in posts:
        current = chosen.get(post.translation_key)
        if current is None or (post.lang == lang and current.lang != lang):
            chosen[post.translation_key] = post
    return list(chosen.values())


def get_available_translations(posts: Iterable[Post], translation_key: str) -> list[Lang]:
    """Languages a post is available in, in display order."""
    present = {p.lang for p in posts if p.translation_key == translation_key}
    return [lang for lang in Lang.all() if lang in present]
