"""Static and readonly marker resolution."""

from __future__ import annotations

from ..markers import READONLY_MARKER, STATIC_MARKER


class ResolveStaticReadonlyMarkers:
    """Replace static/readonly type markers with their keywords.

    Leftover readonly markers (emitted on struct constructors) are deleted.
    Leftover static markers sit on members and become a plain ``static``.
    """

    name = "resolve_static_readonly_markers"

    def apply(self, text: str) -> str:
        text = text.replace("class " + STATIC_MARKER, "static class ")
        text = text.replace("struct " + READONLY_MARKER, "readonly struct ")
        text = text.replace(READONLY_MARKER, "")
        return text.replace(STATIC_MARKER, "static ")
