"""Shared parsing helpers for configuration value normalization."""

from __future__ import annotations

import os


_TRUE_BOOLEAN_TOKENS = frozenset({"1", "true", "yes", "on"})
_FALSE_BOOLEAN_TOKENS = frozenset({"0", "false", "no", "off"})
_NEWLINE_TOKENS = {
    "lf": "\n",
    "crlf": "\r\n",
    "native": os.linesep,
}


def normalize_optional_string(value: object) -> str | None:
    """Normalize an optional value to a stripped non-empty string.

    Args:
        value: Arbitrary input value.

    Returns:
        Stripped string value, or `None` when the value is empty after trimming.
    """

    if value is None:
        return None
    text = str(value).strip()
    if not text:
        return None
    return text


def parse_permissive_boolean(value: object) -> bool | None:
    """Parse a permissive boolean token and return `None` for invalid values."""

    if isinstance(value, bool):
        return value

    normalized = normalize_optional_string(value)
    if normalized is None:
        return None

    token = normalized.lower()
    if token in _TRUE_BOOLEAN_TOKENS:
        return True
    if token in _FALSE_BOOLEAN_TOKENS:
        return False
    return None


def parse_required_boolean(value: object, field_name: str) -> bool:
    """Parse a required boolean value from accepted textual tokens.

    Raises:
        ValueError: If the token is not one of the accepted boolean values.
    """

    parsed = parse_permissive_boolean(value)
    if parsed is not None:
        return parsed

    raise ValueError(
        f"`{field_name}` must be a boolean value (`true`/`false`, `1`/`0`, `yes`/`no`)."
    )


def parse_newline(value: object, field_name: str) -> str:
    """Resolve a newline token (`lf`, `crlf`, `native`) to its character sequence.

    Raises:
        ValueError: If the token is unknown.
    """

    normalized = normalize_optional_string(value)
    token = normalized.lower() if normalized is not None else ""
    if token in _NEWLINE_TOKENS:
        return _NEWLINE_TOKENS[token]
    supported = ", ".join(f"`{name}`" for name in _NEWLINE_TOKENS)
    raise ValueError(f"`{field_name}` must be one of {supported}.")
