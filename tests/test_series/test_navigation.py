"""Tests for series navigation chains."""

from datetime import datetime, timedelta, timezone

from blogcat.core.lang import Lang
from blogcat.series.navigation import (
    get_series_nav_info,
    group_by_series,
    link_series,
)

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _day(n: int) -> datetime:
    return T0 + timedelta(days=n)


# ---------------------------------------------------------------------------
# link_series()
# ---------------------------------------------------------------------------

def test_chain_by_explicit_order(make_post):
    p3 = make_post("s-3", series="S", series_order=3, created=_day(0))
    p1 = make_post("s-1", series="S", series_order=1, created=_day(2))
    p2 = make_post("s-2", series="S", series_order=2, created=_day(1))
    posts = [p3, p1, p2]

    filled = link_series(posts)

    assert (p1.metadata.prev_post, p1.metadata.next_post) == (None, "s-2")
    assert (p2.metadata.prev_post, p2.metadata.next_post) == ("s-1", "s-3")
    assert (p3.metadata.prev_post, p3.metadata.next_post) == ("s-2", None)
    assert filled == 4


def test_author_values_preserved(make_post):
    p1 = make_post("s-1", series="S", series_order=1)
    p2 = make_post("s-2", series="S", series_order=2, next_post="elsewhere")
    p3 = make_post("s-3", series="S", series_order=3)

    link_series([p1, p2, p3])

    assert p2.metadata.prev_post == "s-1"
    assert p2.metadata.next_post == "elsewhere"
    assert p3.metadata.prev_post == "s-2"


def test_falls_back_to_created_at(make_post):
    late = make_post("late", series="S", created=_day(5))
    early = make_post("early", series="S", created=_day(1))

    link_series([late, early])

    assert early.metadata.next_post == "late"
    assert late.metadata.prev_post == "early"


def test_ordered_posts_before_unordered(make_post):
    unordered = make_post("unordered", series="S", created=_day(0))
    second = make_post("second", series="S", series_order=2, created=_day(3))
    first = make_post("first", series="S", series_order=1, created=_day(4))

    groups = group_by_series([unordered, second, first])

    assert [p.slug for p in groups[("S", Lang.EN)]] == ["first", "second", "unordered"]


def test_chains_never_cross_languages(make_post):
    en1 = make_post("g-1", series="G", series_order=1, lang=Lang.EN)
    ko1 = make_post("g-1", series="G", series_order=1, lang=Lang.KO)
    en2 = make_post("g-2", series="G", series_order=2, lang=Lang.EN)

    link_series([en1, ko1, en2])

    assert en1.metadata.next_post == "g-2"
    assert ko1.metadata.next_post is None
    assert ko1.metadata.prev_post is None


def test_posts_outside_series_untouched(make_post):
    loner = make_post("loner")
    assert link_series([loner]) == 0
    assert loner.metadata.prev_post is None
    assert loner.metadata.next_post is None


# ---------------------------------------------------------------------------
# get_series_nav_info()
# ---------------------------------------------------------------------------

def test_nav_info_position_and_titles(make_post):
    posts = [
        make_post("s-1", series="S", series_order=1, title="One"),
        make_post("s-2", series="S", series_order=2, title="Two"),
        make_post("s-3", series="S", series_order=3, title="Three"),
    ]
    link_series(posts)

    nav = get_series_nav_info(posts, posts[1])

    assert nav.series_name == "S"
    assert (nav.position, nav.total) == (2, 3)
    assert (nav.prev_slug, nav.prev_title) == ("s-1", "One")
    assert (nav.next_slug, nav.next_title) == ("s-3", "Three")


def test_nav_info_prefers_same_language_title(make_post):
    posts = [
        make_post("g-1", series="G", series_order=1, title="Intro", lang=Lang.EN),
        make_post("g-1", series="G", series_order=1, title="소개", lang=Lang.KO),
        make_post("g-2", series="G", series_order=2, title="다음", lang=Lang.KO),
    ]
    link_series(posts)

    nav = get_series_nav_info(posts, posts[2])

    assert nav.total == 2
    assert nav.prev_title == "소개"


def test_nav_info_none_outside_series(make_post):
    post = make_post("plain")
    assert get_series_nav_info([post], post) is None
