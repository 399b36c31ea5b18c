"""Unit tests for event-modifier marker resolution."""

from __future__ import annotations

import pytest

from apinormalizer.markers import event_modifier_marker
from apinormalizer.text.events import ResolveEventModifiers, event_keywords


def _resolve(text: str) -> str:
    return ResolveEventModifiers().apply(text)


def test_access_modifier_replaces_public() -> None:
    """An accessibility modifier should stand in for `public`."""

    text = f"public {event_modifier_marker('protected internal')} event EventHandler Foo;"

    assert _resolve(text) == "protected internal event EventHandler Foo;"


def test_remove_public_sentinel_alone_drops_visibility() -> None:
    """The bare sentinel should leave no visibility keyword at all."""

    text = f"public {event_modifier_marker('removepublic')} event EventHandler Foo;"

    assert _resolve(text) == "event EventHandler Foo;"


def test_non_access_modifier_is_appended_after_public() -> None:
    """Ordinary modifiers should follow `public`."""

    text = f"    public {event_modifier_marker('override')} event EventHandler Foo;"

    assert _resolve(text) == "    public override event EventHandler Foo;"


def test_modifier_prefix_before_sentinel_is_kept_without_public() -> None:
    """A modifier ending in the sentinel should keep its prefix and drop `public`."""

    text = f"public {event_modifier_marker('protected removepublic')} event EventHandler Foo;"

    assert _resolve(text) == "protected event EventHandler Foo;"


def test_marker_prefixed_to_event_type_resolves_without_double_spaces() -> None:
    """A marker placed after `event` should resolve to the same keyword run."""

    text = f"public event {event_modifier_marker('static')}EventHandler Foo;"

    assert _resolve(text) == "public static event EventHandler Foo;"


def test_only_marked_lines_are_rewritten() -> None:
    """Unmarked event declarations on other lines should stay as they are."""

    text = (
        "public event EventHandler Plain;\n"
        f"public {event_modifier_marker('removepublic')} event EventHandler Hidden;\n"
        "public event EventHandler AlsoPlain;"
    )

    assert _resolve(text) == (
        "public event EventHandler Plain;\n"
        "event EventHandler Hidden;\n"
        "public event EventHandler AlsoPlain;"
    )


@pytest.mark.parametrize(
    ("modifier", "expected"),
    [
        ("removepublic", "event "),
        ("internalremovepublic", "internal event "),
        ("public", "public event "),
        ("virtual", "public virtual event "),
        ("new  abstract", "public new abstract event "),
    ],
)
def test_event_keywords_produce_single_spaced_runs(modifier: str, expected: str) -> None:
    """Keyword runs should contain single spaces and end in `event `."""

    assert event_keywords(modifier) == expected


def test_carriage_return_only_lines_resolve_every_marked_event() -> None:
    """A bare CR should end a line so each marked event resolves on its own."""

    text = (
        f"public {event_modifier_marker('removepublic')} event EventHandler A;\r"
        f"public {event_modifier_marker('override')} event EventHandler B;\r"
    )

    assert _resolve(text) == (
        "event EventHandler A;\rpublic override event EventHandler B;\r"
    )
