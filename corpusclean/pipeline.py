"""Corpus cleaning pipeline.

Responsibilities:
- Read one raw corpus file, normalize it, and write the cleaned corpus.
- Map file-boundary failures to stage-scoped `CorpusStageError` diagnostics.

The whole file is read and written in one operation each; the normalization
step runs entirely in memory between them.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .errors import CorpusStageError
from .io.storage import CorpusFileStore
from .telemetry.logger import RunLogger
from .text.normalizer import CorpusNormalizer, NormalizationReport

RAW_CORPUS_DIR_NAME = "rawCorpus"
CLEAN_CORPUS_DIR_NAME = "cleanCorpus"


@dataclass(frozen=True, slots=True)
class CleanRunResult:
    """Outcome of one successful cleaning run."""

    input_path: Path
    output_path: Path
    report: NormalizationReport


def default_output_path(input_path: Path) -> Path:
    """Derive the cleaned corpus location for `input_path`.

    Files under a `rawCorpus` directory map to the sibling `cleanCorpus`
    directory with the same filename; any other file gets a `.clean` infix.
    """

    if input_path.parent.name == RAW_CORPUS_DIR_NAME:
        return input_path.parent.parent / CLEAN_CORPUS_DIR_NAME / input_path.name
    return input_path.with_name(f"{input_path.stem}.clean{input_path.suffix}")


def _on_stage_start(run_logger: RunLogger | None, stage: str) -> None:
    """Emit a stage-start event when a run logger is attached."""

    if run_logger is not None:
        run_logger.log_stage_start(stage)


def _on_stage_complete(run_logger: RunLogger | None, stage: str, **context: object) -> None:
    """Emit a stage-complete event when a run logger is attached."""

    if run_logger is not None:
        run_logger.log_stage_complete(stage, **context)


def _on_stage_failure(run_logger: RunLogger | None, stage: str, exc: Exception) -> None:
    """Emit a stage-failure event with the exception type only."""

    if run_logger is not None:
        run_logger.log_stage_failure(stage, type(exc).__name__)


def clean_corpus(
    input_path: Path,
    output_path: Path,
    *,
    logger: RunLogger | None = None,
    store: CorpusFileStore | None = None,
) -> CleanRunResult:
    """Normalize the corpus at `input_path` and write it to `output_path`.

    Logging is off unless a `RunLogger` is passed.
    """

    file_store = store or CorpusFileStore()

    _on_stage_start(logger, "read")
    try:
        raw_text = file_store.load_text(input_path)
    except FileNotFoundError as exc:
        _on_stage_failure(logger, "read", exc)
        raise CorpusStageError(
            stage="read",
            detail=f"Input corpus not found: `{input_path}`.",
            path=input_path,
            hint="Pass an existing text file as the input path.",
        ) from exc
    except UnicodeDecodeError as exc:
        _on_stage_failure(logger, "read", exc)
        raise CorpusStageError(
            stage="read",
            detail=(
                f"Input corpus `{input_path}` is not valid {file_store.encoding}: {exc.reason}."
            ),
            path=input_path,
            hint="Re-encode the file as UTF-8 before cleaning.",
        ) from exc
    except OSError as exc:
        _on_stage_failure(logger, "read", exc)
        raise CorpusStageError(
            stage="read",
            detail=f"Failed to read input corpus `{input_path}`: {exc}",
            path=input_path,
        ) from exc
    _on_stage_complete(logger, "read", chars=len(raw_text))

    _on_stage_start(logger, "normalize")
    report = CorpusNormalizer().normalize_with_report(raw_text)
    _on_stage_complete(logger, "normalize", words=report.word_count)

    _on_stage_start(logger, "write")
    try:
        written_path = file_store.save_text(output_path, report.normalized_text)
    except OSError as exc:
        _on_stage_failure(logger, "write", exc)
        raise CorpusStageError(
            stage="write",
            detail=f"Failed to write cleaned corpus `{output_path}`: {exc}",
            path=output_path,
            hint="Check that the output location is writable.",
        ) from exc
    _on_stage_complete(logger, "write")

    if logger is not None:
        logger.log_message(f"Corpus size: {report.word_count}")
        logger.log_message(f"Cleaned corpus written to {written_path}")
    return CleanRunResult(input_path=input_path, output_path=written_path, report=report)
