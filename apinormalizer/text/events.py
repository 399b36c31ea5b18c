"""Event-modifier marker resolution.

Event declarations arrive as ``public _<modifier>_<delimiter>_ event ...``.
The embedded modifier decides which keywords replace ``public event``.
"""

from __future__ import annotations

import re

from ..markers import (
    EVENT_MODIFIER_DELIMITER,
    EVENT_REMOVE_PUBLIC_MARKER,
    event_modifier_marker,
)


# Lines are scanned before line endings are normalized, so a bare CR also
# ends a line.
_EVENT_LINE_RE = re.compile(
    rf"(?P<line>[^\r\n]*_(?P<modifier>[^_\r\n]*)_{EVENT_MODIFIER_DELIMITER}_[^\r\n]*)"
)
_PUBLIC_EVENT_RE = re.compile(r"\bpublic[ \t]+event[ \t]+")
_ACCESSIBILITY_KEYWORDS = frozenset({"public", "protected", "internal", "private"})


def event_keywords(modifier: str) -> str:
    """Return the keyword run, with trailing space, that replaces ``public event``.

    A modifier that already opens with an accessibility keyword replaces
    ``public`` instead of being appended to it.

    Examples:
        ``override`` -> ``public override event ``
        ``protected internal`` -> ``protected internal event ``
        ``removepublic`` -> ``event ``
        ``protected removepublic`` -> ``protected event ``
    """

    if modifier.endswith(EVENT_REMOVE_PUBLIC_MARKER):
        remaining = " ".join(modifier[: -len(EVENT_REMOVE_PUBLIC_MARKER)].split())
        if not remaining:
            return "event "
        return f"{remaining} event "
    keywords = " ".join(modifier.split())
    if not keywords:
        return "public event "
    if keywords.split(" ", 1)[0] in _ACCESSIBILITY_KEYWORDS:
        return f"{keywords} event "
    return f"public {keywords} event "


class ResolveEventModifiers:
    """Rewrite marked event declarations into literal modifier keywords."""

    name = "resolve_event_modifiers"

    def apply(self, text: str) -> str:
        """Resolve each line carrying an event-modifier marker."""

        return _EVENT_LINE_RE.sub(self._resolve_line, text)

    @staticmethod
    def _resolve_line(match: re.Match[str]) -> str:
        modifier = match.group("modifier")
        line = match.group("line").replace(event_modifier_marker(modifier), "")
        # Dropping a marker between `public` and `event` leaves a double space.
        return _PUBLIC_EVENT_RE.sub(event_keywords(modifier), line, count=1)
