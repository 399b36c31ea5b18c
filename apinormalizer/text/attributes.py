"""Attribute-marker resolution.

The emitter writes attribute applications as ``[NameMARKER(args)]`` because it
cannot decide up front whether the ``Attribute`` suffix or an empty argument
list should survive. This rule decides both from the text that follows the
marker.
"""

from __future__ import annotations

import re

from ..markers import ATTRIBUTE_MARKER


_MARKER = re.escape(ATTRIBUTE_MARKER)

# DOTALL is required so multi-line argument arrays are matched.
_ATTRIBUTE_MARKER_RE = re.compile(
    rf"""
    (Attribute)?                        # suffix, always deleted when present
    (?:
        {_MARKER}(?:\(\))?(?=\])        # empty parens (deleted) then ]
        |
        {_MARKER}(?=\(.+\)\])           # non-empty parens then ]
        |
        {_MARKER}(?=\(.*?\}}\)\])       # initializer argument ending in }} then )]
    )
    """,
    re.DOTALL | re.VERBOSE,
)


class ResolveAttributeMarkers:
    """Strip attribute markers, the ``Attribute`` suffix and empty argument lists.

    A marker followed by none of the recognized shapes is left in place so
    the post-normalization marker check reports it.
    """

    name = "resolve_attribute_markers"

    def apply(self, text: str) -> str:
        """Resolve every recognizable attribute marker in `text`."""

        return _ATTRIBUTE_MARKER_RE.sub("", text)
