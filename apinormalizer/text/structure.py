"""Structural cleanup of emitter boilerplate.

Responsibilities:
- Remove auto-generated banner comment blocks.
- Collapse verbose accessor bodies into canonical auto-property forms.
- Collapse empty bodies and whitespace before statement terminators.
"""

from __future__ import annotations

import re

from .rules import PatternRule, RuleSequence


_BANNER_RE = re.compile(r"^//-+\s*$.*?^//-+\s*$", re.MULTILINE | re.DOTALL)

# The combined get/set shapes must come before the single-accessor shapes,
# otherwise the get-only pattern would match inside a get/set pair.
_ACCESSOR_RULES = [
    PatternRule(
        "empty_get_set",
        re.compile(r"\s+\{\s+get\s+\{\s+\}\s+set\s+\{\s+\}\s+\}"),
        " { get; set; }",
    ),
    PatternRule("get_set", re.compile(r"\s+\{\s+get;\s+set;\s+\}"), " { get; set; }"),
    PatternRule("empty_get", re.compile(r"\s+\{\s+get\s+\{\s+\}\s+\}"), " { get; }"),
    PatternRule("empty_set", re.compile(r"\s+\{\s+set\s+\{\s+\}\s+\}"), " { set; }"),
    PatternRule("get", re.compile(r"\s+\{\s+get;\s+\}"), " { get; }"),
    PatternRule("set", re.compile(r"\s+\{\s+set;\s+\}"), " { set; }"),
]


class RemoveBannerComments:
    """Remove ``//----`` delimited auto-generated header blocks."""

    name = "remove_banner_comments"

    def apply(self, text: str) -> str:
        """Delete each banner block, one delimiter pair per occurrence."""

        return _BANNER_RE.sub("", text)


class CollapseAccessorBodies(RuleSequence):
    """Collapse empty accessor bodies to ``{ get; set; }`` style forms."""

    name = "collapse_accessor_bodies"

    def __init__(self) -> None:
        super().__init__(_ACCESSOR_RULES)


class CollapseEmptyBodies:
    """Canonicalize whitespace-only brace bodies to ``{ }``."""

    name = "collapse_empty_bodies"
    _EMPTY_BODY_RE = re.compile(r"\s+\{\s+\}")

    def apply(self, text: str) -> str:
        return self._EMPTY_BODY_RE.sub(" { }", text)


class TightenStatementTerminators:
    """Remove whitespace between a closing parenthesis and ``;``."""

    name = "tighten_statement_terminators"
    _TERMINATOR_RE = re.compile(r"\)\s+;")

    def apply(self, text: str) -> str:
        return self._TERMINATOR_RE.sub(");", text)
