"""Command-line interface for corpusclean.

Responsibilities:
- Expose the `clean` command that normalizes one corpus file.
- Merge YAML config defaults with explicit CLI arguments.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from . import __version__
from .cli_rendering import echo_run_summary, exit_with_command_error
from .config import CleanConfig, ConfigLoader
from .errors import CorpusStageError
from .pipeline import clean_corpus
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="corpusclean",
    no_args_is_help=True,
    help="Normalize raw text into a flat lowercase corpus.",
)


def _load_yaml_config(config_path: Path | None) -> CleanConfig | None:
    """Load a YAML config file when requested and map failures to stage errors."""

    if config_path is None:
        return None

    try:
        return ConfigLoader.from_yaml(config_path)
    except FileNotFoundError as exc:
        raise CorpusStageError(
            stage="config",
            detail=f"Config file not found: `{config_path}`.",
            path=config_path,
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CorpusStageError(
            stage="config",
            detail=f"Invalid config file `{config_path}`: {exc}",
            path=config_path,
            hint="Fix config keys/values and rerun.",
        ) from exc
    except OSError as exc:
        raise CorpusStageError(
            stage="config",
            detail=f"Failed to load config file `{config_path}`: {exc}",
            path=config_path,
            hint="Verify file permissions.",
        ) from exc


def _resolve_command_config(
    config_file: Path | None,
    input_path: Path | None,
    out: Path | None,
) -> CleanConfig:
    """Resolve effective command config from YAML defaults and explicit CLI overrides."""

    loaded_config = _load_yaml_config(config_file)

    if loaded_config is None:
        if input_path is None:
            raise CorpusStageError(
                stage="config",
                detail="Input corpus path is required when `--config` is not provided.",
                hint="Pass `<input.txt>` or use `--config <path.yaml>` with `input_path`.",
            )
        config = CleanConfig(input_path=input_path, output_path=out)
    else:
        config = CleanConfig(
            input_path=input_path if input_path is not None else loaded_config.input_path,
            output_path=out if out is not None else loaded_config.output_path,
        )

    try:
        config.validate()
    except ValueError as exc:
        raise CorpusStageError(stage="config", detail=str(exc)) from exc
    return config


@app.command("clean")
def clean_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(
            help="Path to the raw corpus text file. Required unless provided by `--config`.",
        ),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option(
            "--out",
            help="Cleaned corpus file (defaults to `cleanCorpus/<name>` or `<stem>.clean<ext>`).",
        ),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option(
            "--config",
            help="Path to YAML config file with command defaults.",
        ),
    ] = None,
) -> None:
    """Normalize one corpus file and write the cleaned result."""

    try:
        config = _resolve_command_config(config_file, input_path, out)
        run_logger = RunLogger(exclusive=True)
        try:
            result = clean_corpus(
                config.input_path,
                config.resolved_output_path(),
                logger=run_logger,
            )
        finally:
            run_logger.close()
    except Exception as exc:
        exit_with_command_error("clean", exc)

    echo_run_summary(result)


@app.command("version")
def version_command() -> None:
    """Print the installed corpusclean version."""

    typer.echo(__version__)


def main() -> None:
    """Run the corpusclean CLI."""

    app()
