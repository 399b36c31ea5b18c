"""Line-ending and blank-line normalization.

Responsibilities:
- Map every line-ending variant onto one canonical newline.
- Drop empty or whitespace-only lines and trim trailing whitespace,
  keeping indentation intact.
"""

from __future__ import annotations

import re


_LINE_ENDING_RE = re.compile(r"\r\n|\n\r|\r|\n")


class NormalizeLineEndings:
    """Normalize CR, LF, CRLF and LFCR to the configured newline."""

    name = "normalize_line_endings"

    def __init__(self, newline: str = "\n") -> None:
        """Initialize with the canonical newline sequence."""

        self.newline = newline

    def apply(self, text: str) -> str:
        """Replace every line-ending variant with `newline`."""

        return _LINE_ENDING_RE.sub(self.newline, text)


class DropBlankLines:
    """Drop blank lines and trailing whitespace.

    Expects text whose line endings are already canonical.
    """

    name = "drop_blank_lines"

    def __init__(self, newline: str = "\n") -> None:
        """Initialize with the canonical newline sequence."""

        self.newline = newline

    def apply(self, text: str) -> str:
        """Return `text` without blank lines, each line right-trimmed."""

        return self.newline.join(
            line.rstrip() for line in text.split(self.newline) if line.strip()
        )
