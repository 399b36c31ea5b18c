"""Rule primitives shared by all rewrite stages.

Responsibilities:
- Define the protocol every rewrite rule implements.
- Provide an ordered (pattern, replacement) rule and a composite that runs
  several of them in sequence.
"""

from __future__ import annotations

from dataclasses import dataclass
import re
from typing import Protocol


class RewriteRule(Protocol):
    """Protocol for text rewrite rules."""

    name: str

    def apply(self, text: str) -> str:
        """Apply a single rewrite transformation."""


@dataclass(frozen=True, slots=True)
class PatternRule:
    """Regex substitution with a fixed replacement template."""

    name: str
    pattern: re.Pattern[str]
    replacement: str

    def apply(self, text: str) -> str:
        """Replace every match of `pattern`."""

        return self.pattern.sub(self.replacement, text)


class RuleSequence:
    """Apply a fixed ordered list of pattern rules as one stage.

    Order is significant: later rules may only match after earlier ones have
    reshaped the text.
    """

    name = "sequence"

    def __init__(self, rules: list[PatternRule]) -> None:
        """Initialize with the ordered rule list."""

        self.rules = list(rules)

    def apply(self, text: str) -> str:
        """Apply all rules in order."""

        for rule in self.rules:
            text = rule.apply(text)
        return text
