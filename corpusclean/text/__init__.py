"""Corpus text normalization components.

This package provides the deterministic rule chain that reduces raw text to the
flat lowercase corpus form consumed by n-gram and embedding trainers.
"""

from .normalizer import CorpusNormalizer, NormalizationReport, normalize_corpus_text
from .rules import (
    CollapseCorpusWhitespace,
    CorpusRule,
    LowercaseText,
    RepairMojibakeApostrophe,
    StripNonCorpusCharacters,
    StripPossessiveSuffix,
    StripStrayApostrophes,
    default_corpus_rules,
)

__all__ = [
    "CorpusNormalizer",
    "NormalizationReport",
    "normalize_corpus_text",
    "CorpusRule",
    "LowercaseText",
    "RepairMojibakeApostrophe",
    "StripPossessiveSuffix",
    "StripStrayApostrophes",
    "StripNonCorpusCharacters",
    "CollapseCorpusWhitespace",
    "default_corpus_rules",
]
