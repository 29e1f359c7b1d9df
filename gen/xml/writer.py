from __future__ import annotations

from typing import Iterable, List, Optional, Tuple

from app.config import ConversionOptions, DEFAULT_OPTIONS
from xs_types import IndentLevel, LineSink, TextSink


class XmlLineWriter:
    """Renders XML lines for the converter and pushes them into a sink.

    Names and values handed to the writer are already abbreviation-expanded;
    nothing is escaped.
    """

    def __init__(self, sink: LineSink, options: Optional[ConversionOptions] = None) -> None:
        self.sink: LineSink = sink
        self.options: ConversionOptions = options or DEFAULT_OPTIONS
        self.lines_written: int = 0

    def indent(self, level: IndentLevel) -> str:
        return self.options.indent_text(level)

    def render_open_tag(self, level: IndentLevel, name: str, attributes: Iterable[Tuple[str, str]],
                        is_empty: bool = False) -> List[str]:
        """Opening tag as one or more output lines."""
        lines: List[str] = []
        current = f"{self.indent(level)}<{name}"
        for i, (att, value) in enumerate(attributes):
            if self.options.one_attribute_per_line and i > 0:
                lines.append(current)
                current = self.indent(level + 1)
            else:
                current += " "
            current += f'{att}="{value}"'
        if is_empty:
            current += " /"
        lines.append(current + ">")
        return lines

    def render_close_tag(self, level: IndentLevel, name: str) -> str:
        return f"{self.indent(level)}</{name}>"

    def write_lines(self, lines: Iterable[str]) -> None:
        for line in lines:
            self.write_raw(line)

    def write_raw(self, line: str) -> None:
        """Write a line verbatim (preamble, comment, declaration, text)."""
        self.sink(line)
        self.lines_written += 1

    def write_close_tag(self, level: IndentLevel, name: str) -> None:
        self.write_raw(self.render_close_tag(level, name))


class StreamLineSink:
    """Adapts a text stream to a LineSink, terminating each line with ``newline``."""

    def __init__(self, stream: TextSink, newline: str = "\n") -> None:
        self.stream = stream
        self.newline = newline

    def __call__(self, line: str) -> None:
        self.stream.write(line + self.newline)


__all__ = ["XmlLineWriter", "StreamLineSink"]
