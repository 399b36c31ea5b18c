"""CLI output and error rendering helpers.

This module centralizes user-facing CLI presentation for command diagnostics,
check results and the marker catalog listing.
"""

from __future__ import annotations

from typing import NoReturn

import typer

from .errors import NormalizationError
from .text.normalizer import NormalizationReport


def exit_with_command_error(command_name: str, exc: Exception) -> NoReturn:
    """Print concise diagnostics for command failures and exit with code 1."""

    if isinstance(exc, NormalizationError):
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


def echo_check_result(path_label: str, report: NormalizationReport, up_to_date: bool) -> None:
    """Print one check verdict line plus reasons."""

    if up_to_date and report.is_clean:
        typer.echo(f"{path_label}: normalized")
        return
    typer.secho(f"{path_label}: not normalized", fg=typer.colors.RED, err=True)
    if not up_to_date:
        typer.echo("  Reason: normalization would change the text.", err=True)
    if not report.is_clean:
        typer.echo(
            f"  Reason: unresolved marker(s): {', '.join(report.unresolved_markers)}.",
            err=True,
        )


def echo_marker_catalog(rows: list[tuple[str, str]]) -> None:
    """Print `name: literal` rows in the given order."""

    for name, literal in rows:
        typer.echo(f"{name}: {literal!r}")
