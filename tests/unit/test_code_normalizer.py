"""Unit tests for the ordered normalization pipeline and its post-condition."""

from __future__ import annotations

import io

import pytest

from apinormalizer import CodeNormalizer, UnresolvedMarkerError, normalize, normalize_writer
from apinormalizer.markers import (
    ATTRIBUTE_MARKER,
    STATIC_MARKER,
    event_modifier_marker,
    find_unresolved_markers,
)
from apinormalizer.telemetry.logger import RunLogger


def test_empty_input_normalizes_to_empty_output() -> None:
    """Empty text should stay empty."""

    assert normalize("") == ""


def test_static_class_with_verbose_accessor_is_canonicalized() -> None:
    """Static markers resolve, blank lines vanish and accessors collapse."""

    text = (
        f"public class {STATIC_MARKER}Foo\n"
        "{\n"
        f"    {STATIC_MARKER}void Bar() {{ get {{ }} set {{ }} }}\n"
        "}\n"
    )

    result = normalize(text)

    assert result == "public static class Foo\n{\n    static void Bar() { get; set; }\n}"
    assert "\n\n" not in result


def test_fixture_output_matches_approved_baseline(
    generated_api_text: str, normalized_api_text: str
) -> None:
    """Full emitter output should normalize to the approved baseline text."""

    assert normalize(generated_api_text) == normalized_api_text


def test_normalization_is_idempotent(generated_api_text: str) -> None:
    """A second pass over normalized text should change nothing."""

    once = normalize(generated_api_text)

    assert normalize(once) == once


def test_normalized_fixture_contains_no_marker(generated_api_text: str) -> None:
    """Valid emitter output should leave no marker family behind."""

    assert find_unresolved_markers(normalize(generated_api_text)) == ()


def test_crlf_input_and_newline_option_are_honored(generated_api_text: str) -> None:
    """Line endings in the input should not affect output beyond the chosen newline."""

    crlf_input = generated_api_text.replace("\n", "\r\n")

    assert normalize(crlf_input) == normalize(generated_api_text)
    assert normalize(generated_api_text, newline="\r\n") == (
        normalize(generated_api_text).replace("\n", "\r\n")
    )


def test_attribute_and_event_segments_resolve_in_one_pass() -> None:
    """Attribute and event markers should both be resolved by the full pipeline."""

    text = (
        f"    [FooAttribute{ATTRIBUTE_MARKER}(1, 2)]\n"
        f"    public {event_modifier_marker('removepublic')} event EventHandler Foo;\n"
    )

    assert normalize(text) == "    [Foo(1, 2)]\n    event EventHandler Foo;"


def test_report_lists_rules_that_changed_text() -> None:
    """Only rules that rewrote the text should be listed, in execution order."""

    report = CodeNormalizer().normalize_with_report("void Run() ;")

    assert report.normalized_text == "void Run();"
    assert report.applied_rules == ("tighten_statement_terminators",)
    assert report.is_clean


def test_unresolved_marker_is_reported_in_lenient_mode() -> None:
    """Lenient mode should return the text and expose surviving markers."""

    text = f"[Foo{ATTRIBUTE_MARKER} broken]"

    report = CodeNormalizer().normalize_with_report(text)

    assert report.normalized_text == text
    assert report.unresolved_markers == ("attribute",)
    assert not report.is_clean


def test_unresolved_marker_raises_in_strict_mode() -> None:
    """Strict mode should fail with the surviving marker families."""

    with pytest.raises(UnresolvedMarkerError, match="attribute") as exc_info:
        CodeNormalizer(strict=True).normalize(f"[Foo{ATTRIBUTE_MARKER} broken]")

    assert exc_info.value.stage == "verify"
    assert exc_info.value.markers == ("attribute",)


def test_non_string_input_is_rejected() -> None:
    """Bytes input should fail fast instead of being rewritten."""

    with pytest.raises(TypeError, match="bytes"):
        normalize(b"public class Foo")  # type: ignore[arg-type]


def test_writer_contents_are_normalized() -> None:
    """In-memory emitter writers should be accepted directly."""

    writer = io.StringIO()
    writer.write("public class Foo\n\n{\n}\n")

    assert normalize_writer(writer) == "public class Foo { }"


def test_custom_rule_sequence_replaces_defaults() -> None:
    """An explicit rule list should be used instead of the default stages."""

    class UpperCase:
        name = "upper_case"

        def apply(self, text: str) -> str:
            return text.upper()

    normalizer = CodeNormalizer(rules=[UpperCase()])

    assert normalizer.normalize("a\n\nb") == "A\n\nB"


def test_run_logger_receives_stage_events() -> None:
    """Attached loggers should see start/complete events and unresolved warnings."""

    sink = io.StringIO()
    normalizer = CodeNormalizer(run_logger=RunLogger(sink=sink, level="DEBUG"))

    normalizer.normalize(f"[Foo{ATTRIBUTE_MARKER} broken]\n")

    output = sink.getvalue()
    assert "stage=remove_banner_comments event=start" in output
    assert "stage=drop_blank_lines event=complete changed=true" in output
    assert "level=WARNING stage=verify event=unresolved markers=attribute" in output


def test_carriage_return_only_input_leaves_no_event_marker() -> None:
    """Old Mac line endings should normalize as cleanly as LF input."""

    text = (
        "public class Widget\r{\r"
        f"    public {event_modifier_marker('removepublic')} event EventHandler A;\r"
        f"    public {event_modifier_marker('override')} event EventHandler B;\r"
        "}\r"
    )

    result = CodeNormalizer(strict=True).normalize(text)

    assert result == (
        "public class Widget\n{\n"
        "    event EventHandler A;\n"
        "    public override event EventHandler B;\n"
        "}"
    )
    assert find_unresolved_markers(result) == ()
