"""Input/output components for corpusclean."""

from .storage import CorpusFileStore

__all__ = ["CorpusFileStore"]
