"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level logs for cleaning runs.
- Route all output through `loguru` with a plain message format.
"""

from __future__ import annotations

import sys
from typing import Any, TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/"} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    return " " + " ".join(
        f"{key}={_sanitize_context_value(context[key])}" for key in sorted(context)
    )


class RunLogger:
    """Emit deterministic stage logs for a corpus cleaning run.

    Each instance owns exactly one loguru handler and only its own records reach
    that handler. Handlers registered by the host application are left alone
    unless `exclusive=True` is requested by a process-owning entrypoint.
    """

    def __init__(self, sink: TextIO | None = None, *, exclusive: bool = False) -> None:
        """Add a message-only loguru handler for `sink` (stdout by default)."""

        self._sink = sink or sys.stdout
        if exclusive:
            _loguru_logger.remove()
        self._token = object()
        self._logger = _loguru_logger.bind(corpusclean_run=self._token)
        self._handler_id: int | None = _loguru_logger.add(
            self._sink,
            format="{message}",
            level="INFO",
            colorize=False,
            filter=self._owns_record,
        )

    def _owns_record(self, record: dict[str, Any]) -> bool:
        """Return whether a loguru record was emitted by this run logger."""

        return record["extra"].get("corpusclean_run") is self._token

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured stage log line."""

        line = f"[stage] level={level} stage={stage} event={event}{_format_context(context)}"
        self._logger.log(level, line)

    def log_stage_start(self, stage: str) -> None:
        """Emit a stage-start event."""

        self._emit("INFO", "start", stage)

    def log_stage_complete(self, stage: str, **context: object) -> None:
        """Emit a stage-complete event with optional context counters."""

        self._emit("INFO", "complete", stage, **context)

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without the failing payload."""

        self._emit("ERROR", "failure", stage, error_type=error_type)

    def log_message(self, message: str) -> None:
        """Emit a free-form informational line."""

        self._logger.info(message)

    def close(self) -> None:
        """Remove this logger's handler; other loguru handlers stay registered."""

        if self._handler_id is not None:
            _loguru_logger.remove(self._handler_id)
            self._handler_id = None
