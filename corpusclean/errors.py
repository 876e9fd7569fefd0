"""Domain exceptions for corpus cleaning diagnostics."""

from __future__ import annotations

from pathlib import Path


class CorpusStageError(RuntimeError):
    """Raised when reading, writing, or configuring a cleaning run fails.

    The normalizer itself never raises; every failure originates at the file or
    config boundary and is tagged with the stage name (`config`, `read`, `write`).
    """

    def __init__(
        self,
        *,
        stage: str,
        detail: str,
        path: Path | None = None,
        hint: str | None = None,
    ) -> None:
        """Initialize a stage-scoped error bound to an optional file path."""

        super().__init__(detail)
        self.stage = stage
        self.detail = detail
        self.path = path
        self.hint = hint
