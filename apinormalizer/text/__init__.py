"""Text rewrite stages and their orchestrator.

This package provides the ordered rewrite rules that turn emitter output into
canonical source text.
"""

from .attributes import ResolveAttributeMarkers
from .events import ResolveEventModifiers, event_keywords
from .lines import DropBlankLines, NormalizeLineEndings
from .modifiers import ResolveStaticReadonlyMarkers
from .normalizer import CodeNormalizer, NormalizationReport, default_rules
from .rules import PatternRule, RewriteRule, RuleSequence
from .structure import (
    CollapseAccessorBodies,
    CollapseEmptyBodies,
    RemoveBannerComments,
    TightenStatementTerminators,
)

__all__ = [
    "CodeNormalizer",
    "NormalizationReport",
    "default_rules",
    "RewriteRule",
    "PatternRule",
    "RuleSequence",
    "RemoveBannerComments",
    "CollapseAccessorBodies",
    "CollapseEmptyBodies",
    "TightenStatementTerminators",
    "ResolveAttributeMarkers",
    "ResolveEventModifiers",
    "event_keywords",
    "ResolveStaticReadonlyMarkers",
    "NormalizeLineEndings",
    "DropBlankLines",
]
