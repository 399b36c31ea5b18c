"""Ordered normalization of emitter output.

Responsibilities:
- Compose the rewrite stages in their required order.
- Verify that no marker token survives, raising in strict mode.

Stage order is part of the contract: accessor collapse runs before marker
resolution, and line normalization always runs last.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from ..errors import UnresolvedMarkerError
from ..markers import find_unresolved_markers
from ..telemetry.logger import RunLogger
from .attributes import ResolveAttributeMarkers
from .events import ResolveEventModifiers
from .lines import DropBlankLines, NormalizeLineEndings
from .modifiers import ResolveStaticReadonlyMarkers
from .rules import RewriteRule
from .structure import (
    CollapseAccessorBodies,
    CollapseEmptyBodies,
    RemoveBannerComments,
    TightenStatementTerminators,
)


class SupportsGetValue(Protocol):
    """In-memory writer such as `io.StringIO`."""

    def getvalue(self) -> str:
        """Return the buffered text."""


@dataclass(frozen=True, slots=True)
class NormalizationReport:
    """Structured output of one normalization call."""

    normalized_text: str
    unresolved_markers: tuple[str, ...]
    applied_rules: tuple[str, ...]

    @property
    def is_clean(self) -> bool:
        """Return whether every marker token was resolved."""

        return not self.unresolved_markers


def default_rules(newline: str = "\n") -> list[RewriteRule]:
    """Return the default stage sequence for `newline`."""

    return [
        RemoveBannerComments(),
        CollapseAccessorBodies(),
        CollapseEmptyBodies(),
        TightenStatementTerminators(),
        ResolveAttributeMarkers(),
        ResolveEventModifiers(),
        ResolveStaticReadonlyMarkers(),
        NormalizeLineEndings(newline),
        DropBlankLines(newline),
    ]


class CodeNormalizer:
    """Apply the ordered rewrite stages to generated public-API text."""

    def __init__(
        self,
        rules: list[RewriteRule] | None = None,
        *,
        newline: str = "\n",
        strict: bool = False,
        run_logger: RunLogger | None = None,
    ) -> None:
        """Initialize with custom rules or the default stage sequence.

        Args:
            rules: Optional replacement for the default stage sequence.
            newline: Canonical line ending used by the default line stages.
            strict: Raise `UnresolvedMarkerError` when markers survive.
            run_logger: Optional logger receiving per-stage events.
        """

        self.rules = rules or default_rules(newline)
        self.newline = newline
        self.strict = strict
        self._run_logger = run_logger

    def normalize_with_report(self, text: str) -> NormalizationReport:
        """Apply all rules in order and return the text with diagnostics.

        Raises:
            TypeError: If `text` is not a string.
            UnresolvedMarkerError: In strict mode, if markers survive.
        """

        if not isinstance(text, str):
            raise TypeError(f"Expected generated text as `str`, got `{type(text).__name__}`.")

        current = text
        applied: list[str] = []
        for rule in self.rules:
            self._log_stage_start(rule.name)
            rewritten = rule.apply(current)
            changed = rewritten != current
            if changed:
                applied.append(rule.name)
            self._log_stage_complete(rule.name, changed)
            current = rewritten

        unresolved = find_unresolved_markers(current)
        if unresolved:
            if self._run_logger is not None:
                self._run_logger.log_unresolved_markers(unresolved)
            if self.strict:
                error = UnresolvedMarkerError(unresolved)
                if self._run_logger is not None:
                    self._run_logger.log_stage_failure(error.stage, type(error).__name__)
                raise error

        return NormalizationReport(
            normalized_text=current,
            unresolved_markers=unresolved,
            applied_rules=tuple(applied),
        )

    def normalize(self, text: str) -> str:
        """Return normalized text."""

        return self.normalize_with_report(text).normalized_text

    def normalize_writer(self, writer: SupportsGetValue) -> str:
        """Normalize the contents of an in-memory writer."""

        return self.normalize(writer.getvalue())

    def _log_stage_start(self, stage: str) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_start(stage)

    def _log_stage_complete(self, stage: str, changed: bool) -> None:
        if self._run_logger is not None:
            self._run_logger.log_stage_complete(stage, changed)


def normalize(generated_text: str, *, newline: str = "\n", strict: bool = False) -> str:
    """Normalize emitter output into diff-stable text.

    Example:
        >>> normalize("    void Run() ;  \\n\\n")
        '    void Run();'
    """

    return CodeNormalizer(newline=newline, strict=strict).normalize(generated_text)


def normalize_writer(writer: SupportsGetValue, *, newline: str = "\n", strict: bool = False) -> str:
    """Normalize the buffered contents of an emitter writer."""

    return CodeNormalizer(newline=newline, strict=strict).normalize_writer(writer)
