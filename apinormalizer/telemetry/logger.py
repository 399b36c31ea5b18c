"""Structured run logging utilities.

Responsibilities:
- Emit concise, deterministic stage-level normalization logs through `loguru`.
- Keep the default sink on stderr so normalized text on stdout stays clean.
"""

from __future__ import annotations

import sys
from typing import TextIO

from loguru import logger as _loguru_logger


def _sanitize_context_value(value: object) -> str:
    """Convert context values into stable, shell-safe tokens."""

    raw = str(value).strip()
    if not raw:
        return "none"
    return "".join(
        character if character.isalnum() or character in {"-", "_", ".", ":", "/", ","} else "_"
        for character in raw
    )


def _format_context(context: dict[str, object]) -> str:
    """Serialize context key/value pairs in deterministic key order."""

    if not context:
        return ""
    tokens = [
        f"{key}={_sanitize_context_value(context[key])}"
        for key in sorted(context.keys())
    ]
    return " " + " ".join(tokens)


class RunLogger:
    """Emit deterministic stage logs for normalization activity."""

    def __init__(self, sink: TextIO | None = None, level: str = "INFO") -> None:
        """Initialize logger sink and configure deterministic formatting."""

        self._sink = sink or sys.stderr
        _loguru_logger.remove()
        _loguru_logger.add(self._sink, format="{message}", level=level, colorize=False)

    def _emit(self, level: str, event: str, stage: str, **context: object) -> None:
        """Emit one structured runtime log line."""

        line = f"[normalize] level={level} stage={stage} event={event}{_format_context(context)}"
        _loguru_logger.log(level, line)

    def log_stage_start(self, stage: str) -> None:
        """Emit a stage-start event."""

        self._emit("DEBUG", "start", stage)

    def log_stage_complete(self, stage: str, changed: bool) -> None:
        """Emit a stage-complete event noting whether the text changed."""

        self._emit("DEBUG", "complete", stage, changed="true" if changed else "false")

    def log_unresolved_markers(self, markers: tuple[str, ...]) -> None:
        """Emit a warning naming marker families that survived normalization."""

        self._emit("WARNING", "unresolved", "verify", markers=",".join(markers))

    def log_stage_failure(self, stage: str, error_type: str) -> None:
        """Emit a stage-failure event without payload details."""

        self._emit("ERROR", "failure", stage, error_type=error_type)

    def log_summary(self, stage: str, **context: object) -> None:
        """Emit a run summary line."""

        self._emit("INFO", "summary", stage, **context)
