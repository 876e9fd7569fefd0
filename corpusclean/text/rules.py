"""Deterministic corpus normalization rules.

Responsibilities:
- Provide the ordered substitution rules that reduce raw text to corpus form.
- Keep every rule a pure `str -> str` transformation for reproducibility.

Rule order is significant: possessive suffixes are removed before stray
apostrophes, apostrophes are handled before generic punctuation, and whitespace
is collapsed last because earlier rules inject spaces.
"""

from __future__ import annotations

import re
from typing import Protocol

MOJIBAKE_APOSTROPHE = "\u00e2\u20ac\u2122"


class CorpusRule(Protocol):
    """Protocol for corpus normalization rules."""

    def apply(self, text: str) -> str:
        """Apply a single normalization transformation."""


class LowercaseText:
    """Fold all alphabetic characters to lowercase."""

    def apply(self, text: str) -> str:
        """Apply case folding."""

        return text.lower()


class RepairMojibakeApostrophe:
    """Repair right single quotation marks that were decoded as cp1252.

    Only the literal three-character sequence is replaced; this is not a general
    encoding repair and leaves already-clean text untouched.
    """

    def apply(self, text: str) -> str:
        """Replace the mis-decoded quote sequence with an ASCII apostrophe."""

        return text.replace(MOJIBAKE_APOSTROPHE, "'")


class StripPossessiveSuffix:
    """Remove a word-final `'s` from a run of lowercase letters.

    Plural possessives ending in a bare apostrophe (`dogs'`) are left to
    `StripStrayApostrophes`.
    """

    _POSSESSIVE_RE = re.compile(r"(?<![a-z0-9])([a-z]+)'s(?![a-z0-9])")

    def apply(self, text: str) -> str:
        """Strip possessive suffixes until none remain."""

        count = 1
        while count:
            text, count = self._POSSESSIVE_RE.subn(r"\1", text)
        return text


class StripStrayApostrophes:
    """Replace apostrophes that are not embedded between letters with a space."""

    _STRAY_APOSTROPHE_RE = re.compile(r"(?<![a-z])'|'(?![a-z])")

    def apply(self, text: str) -> str:
        """Apply stray-apostrophe cleanup."""

        return self._STRAY_APOSTROPHE_RE.sub(" ", text)


class StripNonCorpusCharacters:
    """Replace runs of characters outside the corpus alphabet with one space."""

    _NON_CORPUS_RE = re.compile(r"[^a-z0-9'\s]+")

    def apply(self, text: str) -> str:
        """Apply punctuation and non-ASCII cleanup."""

        return self._NON_CORPUS_RE.sub(" ", text)


class CollapseCorpusWhitespace:
    """Collapse whitespace runs into single spaces and trim the ends."""

    _WHITESPACE_RE = re.compile(r"\s+")

    def apply(self, text: str) -> str:
        """Apply whitespace collapse."""

        return self._WHITESPACE_RE.sub(" ", text).strip()


def default_corpus_rules() -> list[CorpusRule]:
    """Return a fresh copy of the fixed normalization rule chain."""

    return [
        LowercaseText(),
        RepairMojibakeApostrophe(),
        StripPossessiveSuffix(),
        StripStrayApostrophes(),
        StripNonCorpusCharacters(),
        CollapseCorpusWhitespace(),
    ]
