"""Corpus file storage.

Responsibilities:
- Read and write whole corpus files with a fixed text encoding.
- Create missing parent directories for output files.
"""

from __future__ import annotations

from pathlib import Path

DEFAULT_ENCODING = "utf-8"


class CorpusFileStore:
    """Filesystem-backed whole-file text storage."""

    def __init__(self, encoding: str = DEFAULT_ENCODING) -> None:
        """Initialize the store with the text encoding used for reads and writes."""

        self.encoding = encoding

    def load_text(self, path: Path) -> str:
        """Load the full text content of `path`."""

        return path.read_text(encoding=self.encoding)

    def save_text(self, path: Path, content: str) -> Path:
        """Create or truncate `path`, write `content`, and return the path."""

        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding=self.encoding)
        return path
