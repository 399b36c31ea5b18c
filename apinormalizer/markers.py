"""Marker vocabulary shared with the public-API emitter.

Responsibilities:
- Define the exact literal text of every marker the emitter embeds.
- Render parameterized event-modifier markers.
- Detect marker families that survived normalization.

The emitter must write these literals verbatim, e.g. ``class static_... Foo``
instead of ``static class Foo``. Every rewrite rule recognizes markers only
through the constants in this module.
"""

from __future__ import annotations


STATIC_MARKER = "static_C91E2709_C00B-4CAB_8BBC_B2B11DC75E50 "
READONLY_MARKER = "readonly_79D3ED2A_0B60_4C3B_8432_941FE471A38B "
ATTRIBUTE_MARKER = "_attribute_292C96C3_C42E_4C07_BEED_73F5DAA0A6DF_"
EVENT_MODIFIER_DELIMITER = "292C96C3C42E4C07BEED73F5DAA0A6DF"
EVENT_MODIFIER_MARKER_TEMPLATE = "_{0}_" + EVENT_MODIFIER_DELIMITER + "_"
EVENT_REMOVE_PUBLIC_MARKER = "removepublic"

# Family name -> literal probe. Probes omit trailing spaces so a marker that
# lost its separator is still reported.
_MARKER_PROBES: tuple[tuple[str, str], ...] = (
    ("static", STATIC_MARKER.rstrip()),
    ("readonly", READONLY_MARKER.rstrip()),
    ("attribute", ATTRIBUTE_MARKER),
    ("event_modifier", f"_{EVENT_MODIFIER_DELIMITER}_"),
)

MARKER_FAMILIES: tuple[str, ...] = tuple(name for name, _ in _MARKER_PROBES)


def event_modifier_marker(modifier: str) -> str:
    """Render the event-modifier marker carrying `modifier`.

    Args:
        modifier: Keyword sequence such as ``protected internal``, or a value
            ending in `EVENT_REMOVE_PUBLIC_MARKER`.

    Returns:
        Marker text to place inside a ``public ... event`` declaration.
    """

    return EVENT_MODIFIER_MARKER_TEMPLATE.format(modifier)


def static_class(name: str) -> str:
    """Return the emitter form of a ``static class`` header."""

    return f"class {STATIC_MARKER}{name}"


def readonly_struct(name: str) -> str:
    """Return the emitter form of a ``readonly struct`` header."""

    return f"struct {READONLY_MARKER}{name}"


def attribute(name: str, arguments: str | None = None) -> str:
    """Return the emitter form of one attribute application.

    `arguments` is the raw argument list text without parentheses; `None`
    renders empty parentheses.
    """

    return f"[{name}{ATTRIBUTE_MARKER}({arguments or ''})]"


def find_unresolved_markers(text: str) -> tuple[str, ...]:
    """Return names of marker families still present in `text`, in catalog order."""

    return tuple(name for name, probe in _MARKER_PROBES if probe in text)
