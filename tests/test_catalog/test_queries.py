"""Tests for catalog read queries."""

from datetime import datetime, timedelta, timezone

import pytest

from blogcat.catalog.queries import (
    collect_tags,
    find_post,
    get_posts_by_category,
    get_posts_by_series,
    get_recent_posts,
    search_posts,
)
from blogcat.content.models import PostCategory
from blogcat.core.lang import Lang

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _day(n: int) -> datetime:
    return T0 + timedelta(days=n)


@pytest.fixture
def catalog(make_post):
    return [
        make_post("rust-intro", created=_day(1), tags=["rust"], title="Rust intro"),
        make_post("rust-intro", lang=Lang.KO, created=_day(2), tags=["rust"], title="러스트 소개"),
        make_post("axum", created=_day(5), tags=["rust", "web"], title="Axum server"),
        make_post("book", category=PostCategory.REVIEW, created=_day(3), tags=["books"]),
        make_post("monday", category=PostCategory.DIARY, created=_day(4)),
        make_post("old-1", created=_day(-10)),
        make_post("old-2", created=_day(-20)),
        make_post("old-3", created=_day(-30), description="Memory safety notes"),
    ]


# ---------------------------------------------------------------------------
# get_recent_posts()
# ---------------------------------------------------------------------------

def test_recent_posts_bounded_and_newest_first(catalog):
    recent = get_recent_posts(catalog, Lang.EN)

    assert len(recent) == 5
    dates = [p.created_at for p in recent]
    assert dates == sorted(dates, reverse=True)
    assert [p.slug for p in recent] == ["axum", "monday", "book", "rust-intro", "old-1"]


def test_recent_posts_deduplicated_by_language(catalog):
    recent = get_recent_posts(catalog, Lang.KO)
    intro = [p for p in recent if p.translation_key == "rust-intro"]
    assert len(intro) == 1
    assert intro[0].lang is Lang.KO


def test_recent_posts_custom_limit(catalog):
    assert len(get_recent_posts(catalog, Lang.EN, limit=2)) == 2


# ---------------------------------------------------------------------------
# get_posts_by_category()
# ---------------------------------------------------------------------------

def test_posts_by_category(catalog):
    blog = get_posts_by_category(catalog, PostCategory.BLOG, Lang.EN)
    assert [p.slug for p in blog] == ["axum", "rust-intro", "old-1", "old-2", "old-3"]


def test_posts_by_category_with_tag(catalog):
    tagged = get_posts_by_category(catalog, PostCategory.BLOG, Lang.EN, tag="web")
    assert [p.slug for p in tagged] == ["axum"]


def test_posts_by_category_ascending(catalog):
    blog = get_posts_by_category(catalog, PostCategory.BLOG, Lang.EN, ascending=True)
    assert blog[0].slug == "old-3"
    assert blog[-1].slug == "axum"


# ---------------------------------------------------------------------------
# get_posts_by_series()
# ---------------------------------------------------------------------------

def test_posts_by_series_in_reading_order(make_post):
    posts = [
        make_post("g-2", series="Guide", series_order=2),
        make_post("g-1", series="Guide", series_order=1),
        make_post("g-1", series="Guide", series_order=1, lang=Lang.KO),
        make_post("other", series="Other"),
    ]

    ko = get_posts_by_series(posts, "Guide", Lang.KO)
    assert [(p.slug, p.lang) for p in ko] == [("g-1", Lang.KO), ("g-2", Lang.EN)]

    reversed_ = get_posts_by_series(posts, "Guide", Lang.EN, ascending=False)
    assert [p.slug for p in reversed_] == ["g-2", "g-1"]


def test_posts_by_unknown_series_empty(catalog):
    assert get_posts_by_series(catalog, "Missing", Lang.EN) == []


# ---------------------------------------------------------------------------
# find_post(), search_posts(), collect_tags()
# ---------------------------------------------------------------------------

def test_find_post_prefers_language(catalog):
    assert find_post(catalog, "rust-intro", Lang.KO).lang is Lang.KO
    assert find_post(catalog, "rust-intro", Lang.EN).lang is Lang.EN


def test_find_post_falls_back_to_any_language(catalog):
    assert find_post(catalog, "rust-intro", Lang.JA).lang is Lang.EN
    assert find_post(catalog, "nope", Lang.EN) is None


def test_search_matches_title_description_and_tags(catalog):
    assert [p.slug for p in search_posts(catalog, "AXUM", Lang.EN)] == ["axum"]
    assert [p.slug for p in search_posts(catalog, "memory", Lang.EN)] == ["old-3"]
    assert [p.slug for p in search_posts(catalog, "rust", Lang.EN)] == ["axum", "rust-intro"]


def test_search_blank_query(catalog):
    assert search_posts(catalog, "   ", Lang.EN) == []


def test_collect_tags(catalog):
    assert collect_tags(catalog, PostCategory.BLOG) == ["rust", "web"]
    assert collect_tags(catalog, PostCategory.REVIEW) == ["books"]
