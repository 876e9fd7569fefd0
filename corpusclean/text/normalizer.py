"""Corpus normalization stage.

Responsibilities:
- Run the fixed corpus rule chain over raw text.
- Report simple corpus statistics alongside the normalized text.

The output alphabet is lowercase ASCII letters, digits, apostrophes and single
spaces, with no leading or trailing space.
"""

from __future__ import annotations

from dataclasses import dataclass

from .rules import CorpusRule, default_corpus_rules


@dataclass(frozen=True, slots=True)
class NormalizationReport:
    """Structured output of one corpus normalization pass."""

    normalized_text: str
    input_chars: int
    word_count: int


class CorpusNormalizer:
    """Apply corpus rules in order to produce normalized corpus text."""

    def __init__(self, rules: list[CorpusRule] | None = None) -> None:
        """Initialize with custom rules or the default rule sequence."""

        self.rules = rules or default_corpus_rules()

    def normalize_with_report(self, text: str) -> NormalizationReport:
        """Normalize text and return it with input/output statistics."""

        current = text
        for rule in self.rules:
            current = rule.apply(current)
        return NormalizationReport(
            normalized_text=current,
            input_chars=len(text),
            word_count=len(current.split()),
        )

    def normalize(self, text: str) -> str:
        """Apply all configured rules in order."""

        return self.normalize_with_report(text).normalized_text


def normalize_corpus_text(text: str) -> str:
    """Normalize text with the default corpus rule chain."""

    return CorpusNormalizer().normalize(text)
