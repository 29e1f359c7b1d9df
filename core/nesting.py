"""
Open element stack.

Frames are ``(indent level, tag name)``.  Levels strictly increase from
bottom to top because every push is preceded by ``close_down_to`` at the same
level.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, List

from gen.xml.writer import XmlLineWriter
from xs_types import IndentLevel, TagName

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class OpenElement:
    level: IndentLevel
    tag: TagName


class ElementStack:
    def __init__(self, writer: XmlLineWriter, expand: Callable[[str], str]) -> None:
        self.writer = writer
        self.expand = expand
        self._frames: List[OpenElement] = []

    def __len__(self) -> int:
        return len(self._frames)

    @property
    def frames(self) -> List[OpenElement]:
        return list(self._frames)

    def _pop_and_close(self) -> None:
        frame = self._frames.pop()
        self.writer.write_close_tag(frame.level, self.expand(frame.tag))

    def close_down_to(self, level: IndentLevel) -> int:
        """Close every open element whose level is >= ``level``."""
        closed = 0
        while self._frames and self._frames[-1].level >= level:
            self._pop_and_close()
            closed += 1
        return closed

    def push(self, level: IndentLevel, tag: TagName) -> None:
        if self._frames and self._frames[-1].level >= level:
            raise RuntimeError(
                f"Cannot open '{tag}' at level {level} above level {self._frames[-1].level}"
            )
        self._frames.append(OpenElement(level, tag))

    def close_all(self) -> int:
        closed = 0
        while self._frames:
            self._pop_and_close()
            closed += 1
        if closed:
            logger.debug("Closed %d element(s) at end of input", closed)
        return closed


__all__ = ["OpenElement", "ElementStack"]
