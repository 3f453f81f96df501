"""Catalog snapshots and the queries run against them."""

from blogcat.catalog.queries import (
    collect_tags,
    find_post,
    get_posts_by_category,
    get_posts_by_series,
    get_recent_posts,
    search_posts,
)
from blogcat.catalog.store import Catalog, CatalogStore, build_catalog
from blogcat.catalog.translations import dedup_by_translation, get_available_translations

__all__ = [
    "Catalog",
    "CatalogStore",
    "build_catalog",
    "collect_tags",
    "dedup_by_translation",
    "find_post",
    "get_available_translations",
    "get_posts_by_category",
    "get_posts_by_series",
    "get_recent_posts",
    "search_posts",
]
