"""
Indentation measurement for shorthand lines.

Only spaces and tabs are indentation.  A tab counts as one level; spaces
count as one level per ``tab_spaces`` of them (remainders are dropped).
With ``tab_spaces == 0`` spaces never count.
"""

from __future__ import annotations

from core.errors import MalformedIndentation
from xs_types import IndentLevel

INDENT_CHARS = " \t"


class IndentCalculator:
    def __init__(self, tab_spaces: int = 4) -> None:
        self.tab_spaces = tab_spaces

    def count(self, tabs: int, spaces: int) -> IndentLevel:
        if self.tab_spaces == 0:
            return tabs
        return tabs + spaces // self.tab_spaces

    def level(self, line: str) -> IndentLevel:
        """Indent level of ``line``; depends only on its leading whitespace run."""
        spaces = 0
        tabs = 0
        for c in line:
            if c == " ":
                spaces += 1
            elif c == "\t":
                tabs += 1
            else:
                break
        return self.count(tabs, spaces)

    def skip_indent(self, line: str, level: IndentLevel) -> int:
        """Offset just past the whitespace that makes up ``level``.

        Raises MalformedIndentation if a non-indent character shows up before
        the running count reaches ``level``.
        """
        if level == 0:
            return 0
        spaces = 0
        tabs = 0
        for idx, c in enumerate(line):
            if c == " ":
                spaces += 1
            elif c == "\t":
                tabs += 1
            else:
                raise MalformedIndentation(
                    f"Only space or tab characters were expected before indent level {level}, found {c!r}"
                )
            if self.count(tabs, spaces) == level:
                return idx + 1
        raise MalformedIndentation(f"Line ends before reaching indent level {level}")

    def content(self, line: str, level: IndentLevel) -> str:
        """``line`` trimmed to its first non-whitespace character."""
        return line[self.skip_indent(line, level):].lstrip(INDENT_CHARS)


def last_non_whitespace(line: str) -> int:
    """Index of the last character that is not a space or tab, -1 if none."""
    idx = len(line) - 1
    while idx >= 0 and line[idx] in INDENT_CHARS:
        idx -= 1
    return idx


__all__ = ["IndentCalculator", "last_non_whitespace", "INDENT_CHARS"]
