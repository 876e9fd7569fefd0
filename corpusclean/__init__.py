"""Top-level package for corpusclean.

This package normalizes raw natural-language text into a flat lowercase corpus
for n-gram and embedding model training. The main entry points are
`normalize_corpus_text` for in-memory text and `clean_corpus` for files.
"""

from .pipeline import CleanRunResult, clean_corpus, default_output_path
from .text.normalizer import CorpusNormalizer, normalize_corpus_text

__all__ = [
    "CleanRunResult",
    "CorpusNormalizer",
    "clean_corpus",
    "default_output_path",
    "normalize_corpus_text",
    "__version__",
]

__version__ = "0.1.0"
