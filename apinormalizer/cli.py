"""Command-line interface for apinormalizer.

Responsibilities:
- Expose user-facing commands for normalizing and checking emitter output.
- Convert CLI arguments into `NormalizerConfig` and run `CodeNormalizer`.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_check_result, echo_marker_catalog, exit_with_command_error
from .config import ConfigLoader, NormalizerConfig
from .errors import NormalizationError
from .markers import (
    ATTRIBUTE_MARKER,
    EVENT_MODIFIER_MARKER_TEMPLATE,
    EVENT_REMOVE_PUBLIC_MARKER,
    READONLY_MARKER,
    STATIC_MARKER,
)
from .telemetry.logger import RunLogger
from .text.normalizer import CodeNormalizer

app = typer.Typer(
    name="apinormalizer",
    no_args_is_help=True,
    help="Normalize generated public-API text into diff-stable source.",
)

_STDIN_TOKEN = "-"


def _resolve_config(
    config_file: Path | None,
    newline: str | None,
    strict: bool | None,
) -> NormalizerConfig:
    """Resolve effective config and map failures to stage errors."""

    try:
        return ConfigLoader.resolve(config_file, newline=newline, strict=strict)
    except FileNotFoundError as exc:
        raise NormalizationError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise NormalizationError(
            stage="config",
            detail=f"Invalid configuration: {exc}",
            hint="Fix config values and rerun.",
        ) from exc


def _read_input(input_path: Path | None, encoding: str) -> str:
    """Read generated text from a file, or stdin when no path is given."""

    if input_path is None or str(input_path) == _STDIN_TOKEN:
        return sys.stdin.read()
    try:
        with input_path.open("r", encoding=encoding, newline="") as handle:
            return handle.read()
    except OSError as exc:
        raise NormalizationError(
            stage="read",
            detail=f"Failed to read `{input_path}`: {exc.strerror or exc}",
            hint="Verify the input file exists and is readable.",
        ) from exc
    except UnicodeDecodeError as exc:
        raise NormalizationError(
            stage="read",
            detail=f"Failed to decode `{input_path}` as `{encoding}`.",
            hint="Pass the right codec via the `encoding` config key.",
        ) from exc


def _write_output(output_path: Path, text: str, encoding: str) -> None:
    """Write normalized text without newline translation."""

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with output_path.open("w", encoding=encoding, newline="") as handle:
            handle.write(text)
    except OSError as exc:
        raise NormalizationError(
            stage="write",
            detail=f"Failed to write `{output_path}`: {exc.strerror or exc}",
            hint="Verify the output directory is writable.",
        ) from exc


def _build_normalizer(
    config: NormalizerConfig, run_logger: RunLogger, strict: bool
) -> CodeNormalizer:
    """Create a normalizer wired to `run_logger`."""

    return CodeNormalizer(
        newline=config.newline_sequence,
        strict=strict,
        run_logger=run_logger,
    )


@app.command("normalize")
def normalize_command(
    input_path: Annotated[
        Path | None,
        typer.Argument(help="Generated text file. Reads stdin when omitted or `-`."),
    ] = None,
    out: Annotated[
        Path | None,
        typer.Option("--out", help="Write normalized text here instead of stdout."),
    ] = None,
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with defaults."),
    ] = None,
    newline: Annotated[
        str | None,
        typer.Option("--newline", help="Canonical line ending: `lf`, `crlf` or `native`."),
    ] = None,
    strict: Annotated[
        bool | None,
        typer.Option(
            "--strict/--no-strict",
            help="Fail when marker tokens survive normalization.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", help="Log every rewrite stage to stderr."),
    ] = False,
) -> None:
    """Normalize one generated public-API text."""

    try:
        config = _resolve_config(config_file, newline, strict)
        run_logger = RunLogger(level="DEBUG" if verbose else "WARNING")
        normalizer = _build_normalizer(config, run_logger, config.strict)
        report = normalizer.normalize_with_report(_read_input(input_path, config.encoding))
        if verbose:
            run_logger.log_summary(
                "normalize",
                rules=",".join(report.applied_rules) or "none",
                unresolved=",".join(report.unresolved_markers) or "none",
            )
        if out is not None:
            _write_output(out, report.normalized_text, config.encoding)
    except Exception as exc:
        exit_with_command_error("normalize", exc)

    if out is None:
        typer.echo(report.normalized_text + config.newline_sequence, nl=False)
    else:
        typer.echo(f"Normalized output: {out}", err=True)


@app.command("check")
def check_command(
    input_path: Annotated[Path, typer.Argument(help="Text file expected to be normalized.")],
    config_file: Annotated[
        Path | None,
        typer.Option("--config", help="Path to YAML config file with defaults."),
    ] = None,
    newline: Annotated[
        str | None,
        typer.Option("--newline", help="Canonical line ending: `lf`, `crlf` or `native`."),
    ] = None,
) -> None:
    """Exit with code 1 unless the file is normalized and marker-free."""

    try:
        config = _resolve_config(config_file, newline, None)
        raw_text = _read_input(input_path, config.encoding)
        normalizer = _build_normalizer(config, RunLogger(level="WARNING"), strict=False)
        report = normalizer.normalize_with_report(raw_text)
    except Exception as exc:
        exit_with_command_error("check", exc)

    normalized = report.normalized_text
    up_to_date = raw_text in (normalized, normalized + config.newline_sequence)
    echo_check_result(str(input_path), report, up_to_date)
    if not (up_to_date and report.is_clean):
        raise typer.Exit(code=1)


@app.command("markers")
def markers_command() -> None:
    """Print the marker literals the emitter must use."""

    echo_marker_catalog(
        [
            ("static", STATIC_MARKER),
            ("readonly", READONLY_MARKER),
            ("attribute", ATTRIBUTE_MARKER),
            ("event_modifier", EVENT_MODIFIER_MARKER_TEMPLATE),
            ("event_remove_public", EVENT_REMOVE_PUBLIC_MARKER),
        ]
    )


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
