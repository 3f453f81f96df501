"""
Language and translation key resolution.

File names may carry a language suffix (``guide.ko.md``). The suffix wins
over the ``lang`` front matter field; without either, the post is in the
default language and its translation key is the whole stem.
"""

from __future__ import annotations

from blogcat.content.models import PostMetadata
from blogcat.core.lang import Lang


def split_lang_suffix(stem: str) -> tuple[str, Lang | None]:
    """Strip a trailing ``.<code>`` language suffix from a file stem.

    Examples:
        "guide.ko"  -> ("guide", Lang.KO)
        "intro"     -> ("intro", None)
        "notes.xx"  -> ("notes.xx", None)  (not a supported code)
    """
    base, dot, suffix = stem.rpartition(".")
    if not dot or not base or len(suffix) != 2:
        return stem, None
    lang = Lang.from_code(suffix)
    if lang is None:
        return stem, None
    return base, lang


def resolve_language(
    stem: str,
    metadata: PostMetadata,
    default: Lang | None = None,
) -> tuple[str, Lang]:
    """Return ``(translation_key, lang)`` for a content file.

    Args:
        stem: File name without its extension
        metadata: Parsed front matter
        default: Language used when neither suffix nor metadata names one
    """
    key, lang = split_lang_suffix(stem)
    if lang is not None:
        return key, lang
    if metadata.lang is not None:
        return stem, metadata.lang
    return stem, default or Lang.default()


def resolve_slug(translation_key: str, metadata: PostMetadata) -> str:
    """Explicit front matter slug wins, otherwise the translation key."""
    return metadata.slug or translation_key
