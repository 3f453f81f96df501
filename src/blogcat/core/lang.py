"""Supported display languages."""

from __future__ import annotations

from enum import Enum


class Lang(Enum):
    """Closed set of languages a post can be written in.

    Member order is the display order used by language pickers.
    """

    KO = "ko"
    JA = "ja"
    EN = "en"

    @classmethod
    def default(cls) -> Lang:
        return cls.EN

    @classmethod
    def all(cls) -> list[Lang]:
        return list(cls)

    @classmethod
    def from_code(cls, code: str) -> Lang | None:
        """Look up an exact two-letter code (case-insensitive)."""
        try:
            return cls(code.lower())
        except ValueError:
            return None

    @classmethod
    def parse(cls, value: str, strict: bool = False) -> Lang | None:
        """Parse a language tag, accepting regional forms like ``ko-KR``.

        Args:
            value: Language tag
            strict: Return None for unknown tags instead of the default

        Returns:
            Matching Lang, the default language, or None when strict
        """
        primary = value.strip().lower().replace("_", "-").split("-", 1)[0]
        lang = cls.from_code(primary)
        if lang is None and not strict:
            return cls.default()
        return lang

    @classmethod
    def from_accept_language(cls, header_value: str) -> Lang:
        """Pick the supported language with the highest q-value.

        Ties keep the first candidate listed in the header.
        """
        best_lang = cls.default()
        best_q = -1.0

        for part in header_value.split(","):
            part = part.strip()
            if not part:
                continue
            tag, _, params = part.partition(";")
            q = 1.0
            params = params.strip()
            if params.startswith("q="):
                try:
                    q = float(params[2:])
                except ValueError:
                    q = 0.0

            candidate = cls.parse(tag, strict=True)
            if candidate is not None and q > best_q:
                best_q = q
                best_lang = candidate

        return best_lang

    @property
    def code(self) -> str:
        """Upper-case badge code, e.g. ``KO``."""
        return self.value.upper()

    @property
    def label(self) -> str:
        return _LABELS[self]

    def __str__(self) -> str:
        return self.value


_LABELS = {
    Lang.KO: "한국어",
    Lang.JA: "日本語",
    Lang.EN: "English",
}
