"""Unit tests for the file-level corpus cleaning pipeline."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from loguru import logger

from corpusclean.errors import CorpusStageError
from corpusclean.pipeline import clean_corpus, default_output_path
from corpusclean.telemetry.logger import RunLogger


def test_clean_corpus_writes_normalized_text_and_logs_output_path(tmp_path: Path) -> None:
    """Pipeline should write the cleaned corpus and report where it went."""

    input_path = tmp_path / "raw.txt"
    input_path.write_text("The dog's bone.\nDon't stop—now!\n", encoding="utf-8")
    output_path = tmp_path / "nested" / "clean.txt"
    sink = io.StringIO()

    result = clean_corpus(input_path, output_path, logger=RunLogger(sink=sink))

    assert output_path.read_text(encoding="utf-8") == "the dog bone don't stop now"
    assert result.output_path == output_path
    assert result.report.word_count == 6
    log_text = sink.getvalue()
    assert "[stage] level=INFO stage=read event=start" in log_text
    assert "stage=normalize event=complete words=6" in log_text
    assert "Corpus size: 6" in log_text
    assert f"Cleaned corpus written to {output_path}" in log_text


def test_clean_corpus_truncates_existing_output(tmp_path: Path) -> None:
    """Existing output content should be fully replaced."""

    input_path = tmp_path / "raw.txt"
    input_path.write_text("Short.", encoding="utf-8")
    output_path = tmp_path / "clean.txt"
    output_path.write_text("previous much longer content", encoding="utf-8")

    clean_corpus(input_path, output_path, logger=RunLogger(sink=io.StringIO()))

    assert output_path.read_text(encoding="utf-8") == "short"


def test_clean_corpus_reports_missing_input_without_writing(tmp_path: Path) -> None:
    """Missing input should fail at the read stage and produce no output file."""

    output_path = tmp_path / "clean.txt"
    sink = io.StringIO()

    with pytest.raises(CorpusStageError) as exc_info:
        clean_corpus(tmp_path / "missing.txt", output_path, logger=RunLogger(sink=sink))

    assert exc_info.value.stage == "read"
    assert exc_info.value.path == tmp_path / "missing.txt"
    assert isinstance(exc_info.value.__cause__, FileNotFoundError)
    assert "Input corpus not found" in exc_info.value.detail
    assert "stage=read event=failure error_type=FileNotFoundError" in sink.getvalue()
    assert not output_path.exists()


def test_clean_corpus_reports_undecodable_input(tmp_path: Path) -> None:
    """Bytes that are not UTF-8 should fail at the read stage."""

    input_path = tmp_path / "raw.txt"
    input_path.write_bytes(b"\xff\xfe broken")

    with pytest.raises(CorpusStageError) as exc_info:
        clean_corpus(input_path, tmp_path / "clean.txt", logger=RunLogger(sink=io.StringIO()))

    assert exc_info.value.stage == "read"
    assert isinstance(exc_info.value.__cause__, UnicodeDecodeError)


def test_clean_corpus_reports_write_failure(tmp_path: Path) -> None:
    """Unwritable output locations should fail at the write stage."""

    input_path = tmp_path / "raw.txt"
    input_path.write_text("text", encoding="utf-8")
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(CorpusStageError) as exc_info:
        clean_corpus(
            input_path,
            blocker / "clean.txt",
            logger=RunLogger(sink=io.StringIO()),
        )

    assert exc_info.value.stage == "write"
    assert exc_info.value.path == blocker / "clean.txt"


def test_default_output_path_maps_raw_corpus_directory() -> None:
    """Inputs under `rawCorpus` should map to the sibling `cleanCorpus` directory."""

    assert default_output_path(Path("app/rawCorpus/fairy_tales.txt")) == Path(
        "app/cleanCorpus/fairy_tales.txt"
    )


def test_default_output_path_adds_clean_infix_elsewhere() -> None:
    """Other inputs should get a `.clean` infix next to the source file."""

    assert default_output_path(Path("books/alice.txt")) == Path("books/alice.clean.txt")
    assert default_output_path(Path("corpus")) == Path("corpus.clean")


def test_clean_corpus_without_logger_leaves_host_handlers_untouched(tmp_path: Path) -> None:
    """Library calls without a run logger should not reconfigure loguru."""

    input_path = tmp_path / "raw.txt"
    input_path.write_text("The dog's bone.", encoding="utf-8")
    host_sink = io.StringIO()
    host_handler_id = logger.add(host_sink, format="{message}", level="INFO")
    try:
        clean_corpus(input_path, tmp_path / "clean.txt")
        logger.info("host message after cleaning")
    finally:
        logger.remove(host_handler_id)

    assert host_sink.getvalue().splitlines() == ["host message after cleaning"]


def test_run_logger_removes_only_its_own_handler(tmp_path: Path) -> None:
    """Closing a run logger should keep host sinks and stop its own sink."""

    input_path = tmp_path / "raw.txt"
    input_path.write_text("text", encoding="utf-8")
    host_sink = io.StringIO()
    run_sink = io.StringIO()
    host_handler_id = logger.add(host_sink, format="{message}", level="INFO")
    try:
        run_logger = RunLogger(sink=run_sink)
        clean_corpus(input_path, tmp_path / "clean.txt", logger=run_logger)
        run_logger.close()
        logger.info("host message after cleaning")
        run_logger.close()
    finally:
        logger.remove(host_handler_id)

    assert "host message after cleaning" in host_sink.getvalue()
    assert "Corpus size: 1" in run_sink.getvalue()
    assert "host message after cleaning" not in run_sink.getvalue()
