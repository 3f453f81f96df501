"""Tests for language suffix and translation key resolution."""

from datetime import datetime, timezone

import pytest

from blogcat.content.language import resolve_language, resolve_slug, split_lang_suffix
from blogcat.content.models import PostMetadata
from blogcat.core.lang import Lang


def _meta(**fields) -> PostMetadata:
    now = datetime(2024, 1, 1, tzinfo=timezone.utc)
    return PostMetadata(
        title="T", description="D", author="A", tags=[],
        created_at=now, updated_at=now, **fields,
    )


@pytest.mark.parametrize(
    "stem, expected",
    [
        ("guide.ko", ("guide", Lang.KO)),
        ("guide.ja", ("guide", Lang.JA)),
        ("guide.en", ("guide", Lang.EN)),
        ("my.long.name.KO", ("my.long.name", Lang.KO)),
    ],
)
def test_split_recognized_suffix(stem, expected):
    assert split_lang_suffix(stem) == expected


@pytest.mark.parametrize("stem", ["intro", "notes.xx", "v1.2", "archive.kor", ".ko", "ko"])
def test_split_unrecognized_keeps_stem(stem):
    assert split_lang_suffix(stem) == (stem, None)


def test_suffix_wins_over_metadata():
    assert resolve_language("guide.ko", _meta(lang=Lang.JA)) == ("guide", Lang.KO)


def test_metadata_lang_used_without_suffix():
    assert resolve_language("guide", _meta(lang=Lang.JA)) == ("guide", Lang.JA)


def test_default_language_without_any_marker():
    assert resolve_language("intro", _meta()) == ("intro", Lang.EN)


def test_caller_default_language():
    assert resolve_language("intro", _meta(), default=Lang.KO) == ("intro", Lang.KO)


def test_slug_defaults_to_translation_key():
    assert resolve_slug("guide", _meta()) == "guide"


def test_explicit_slug_wins():
    assert resolve_slug("guide", _meta(slug="guide-ko")) == "guide-ko"
