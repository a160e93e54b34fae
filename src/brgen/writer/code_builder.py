"""
Line-oriented builder for generated source text.

Keeps an ordered list of lines and the current indentation depth. Braced
blocks are opened with ``block()``; the text is joined with a single
separator constant so output is byte-stable across platforms.
"""

from collections.abc import Iterator
from contextlib import contextmanager

LINE_SEPARATOR = "\n"
INDENT = "    "


class CodeBuilder:
    """Accumulates indented lines of source code."""

    def __init__(self, indent: str = INDENT):
        self.indent = indent
        self.depth = 0
        self._lines: list[str] = []

    def line(self, text: str = "") -> "CodeBuilder":
        """Append one line at the current depth."""
        if text:
            self._lines.append(self.indent * self.depth + text)
        else:
            self._lines.append("")
        return self

    @contextmanager
    def block(self, header: str) -> Iterator["CodeBuilder"]:
        """Open ``header {``, indent the body, and close with ``}``."""
        self.line(f"{header} {{")
        self.depth += 1
        try:
            yield self
        finally:
            self.depth -= 1
            self.line("}")

    @property
    def lines(self) -> list[str]:
        return list(self._lines)

    def generate(self) -> str:
        """Join all lines, terminating the text with one separator."""
        if not self._lines:
            return ""
        return LINE_SEPARATOR.join(self._lines) + LINE_SEPARATOR
