"""
Line reassembly: physical lines ending in a backslash are joined with the
following line into one logical line.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, Tuple

from core.errors import TruncatedContinuation
from xs_types import LineNumber

logger = logging.getLogger(__name__)

CONTINUATION_MARKER = "\\"


def strip_terminator(line: str) -> str:
    return line.rstrip("\r\n")


class LineReassembler:
    """Yields ``(line_number, logical_line)`` pairs.

    ``line_number`` is the number of the last physical line that went into the
    logical line.  ``line_count`` keeps counting physical lines as they are read.
    """

    def __init__(self, allow_truncated: bool = False) -> None:
        self.allow_truncated = allow_truncated
        self.line_count: LineNumber = 0
        self._pending: List[str] = []

    def reassemble(self, lines: Iterable[str]) -> Iterator[Tuple[LineNumber, str]]:
        for raw in lines:
            self.line_count += 1
            line = strip_terminator(raw)
            if line.endswith(CONTINUATION_MARKER):
                self._pending.append(line[:-1])
                continue
            if self._pending:
                self._pending.append(line)
                line = "".join(self._pending)
                self._pending = []
            yield self.line_count, line
        self._finish()

    def _finish(self) -> None:
        fragment = "".join(self._pending)
        self._pending = []
        if not fragment:
            return
        if not self.allow_truncated:
            raise TruncatedContinuation(
                "Input ended inside a continued line", self.line_count
            )
        logger.warning("Dropping unterminated continued line %d: %r", self.line_count, fragment)


__all__ = ["LineReassembler", "CONTINUATION_MARKER", "strip_terminator"]
