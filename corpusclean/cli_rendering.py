"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics
and cleaning run summaries.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import CorpusStageError
from .pipeline import CleanRunResult


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, CorpusStageError):
        typer.secho(
            f"{command_name} failed at stage `{exc.stage}`: {exc.detail}",
            fg=typer.colors.RED,
            err=True,
        )
        if exc.hint:
            typer.secho(f"Hint: {exc.hint}", fg=typer.colors.YELLOW, err=True)
    else:
        typer.secho(f"{command_name} failed: {exc}", fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1) from exc


def echo_run_summary(result: CleanRunResult) -> None:
    """Print input/output locations and corpus counters for a finished run."""

    typer.echo(f"Input: {result.input_path}")
    typer.echo(f"Output: {result.output_path}")
    typer.echo(f"Characters read: {result.report.input_chars}")
    typer.echo(f"Words: {result.report.word_count}")
