"""
XML Shorthand to XML converter.

The converter reads logical lines, measures their indentation, classifies
them and emits XML.  Elements opened by tag lines are closed implicitly when
a later tag line (or XML comment) appears at the same or a lower indent
level, and at end of input.

    <root
        <child attribute "value"
        text
        <child /

becomes

    <root>
        <child attribute="value">
        text
        </child>
        <child />
    </root>
"""

from __future__ import annotations

import io
import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional

from app.config import ConversionOptions, DEFAULT_OPTIONS
from core.abbreviations import AbbreviationTable
from core.classifier import LineKind, classify
from core.continuation import LineReassembler
from core.errors import ConversionError, XSError
from core.indentation import IndentCalculator
from core.nesting import ElementStack
from core.tokenizer import tokenize_tag_line
from gen.xml.writer import StreamLineSink, XmlLineWriter
from xs_types import IndentLevel, LineNumber, LineSink, TextSink

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    lines_read: int
    lines_written: int


class _ConversionRun:
    """State owned by a single conversion: stack, continuation buffer, table snapshot."""

    def __init__(self, options: ConversionOptions, abbreviations: AbbreviationTable, sink: LineSink) -> None:
        self.options = options
        self.abbreviations = abbreviations
        self.indent = IndentCalculator(options.tab_spaces)
        self.reassembler = LineReassembler(allow_truncated=options.allow_truncated_continuation)
        self.writer = XmlLineWriter(sink, options)
        self.stack = ElementStack(self.writer, self.abbreviations.expand)

    def run(self, lines: Iterable[str]) -> ConversionResult:
        for line_number, line in self.reassembler.reassemble(lines):
            try:
                self.process_line(line, line_number)
            except XSError as e:
                if e.line_number is None:
                    e.line_number = line_number
                raise
        self.stack.close_all()
        return ConversionResult(self.reassembler.line_count, self.writer.lines_written)

    def process_line(self, line: str, line_number: LineNumber) -> None:
        level = self.indent.level(line)
        content = self.indent.content(line, level)
        kind = classify(content)

        if kind is LineKind.XS_COMMENT:
            return
        if kind is LineKind.XML_COMMENT:
            # keeps the comment outside of elements it is not indented under
            self.stack.close_down_to(level)
            self.writer.write_raw(line)
        elif kind is LineKind.TAG:
            self.process_tag_line(content, level, line_number)
        else:
            self.writer.write_raw(line)

    def process_tag_line(self, content: str, level: IndentLevel, line_number: LineNumber) -> None:
        tag_line = tokenize_tag_line(content, line_number)
        expand = self.abbreviations.expand

        # Expand everything first so a bad abbreviation emits nothing for this line
        attributes = [(expand(name), expand(value)) for name, value in tag_line.attributes.items()]
        rendered = self.writer.render_open_tag(level, expand(tag_line.name), attributes, tag_line.is_empty)

        self.stack.close_down_to(level)
        if not tag_line.is_empty:
            self.stack.push(level, tag_line.name)
        self.writer.write_lines(rendered)


class Converter:
    """Converts XML Shorthand lines into XML lines.

    Options and abbreviations are fixed for the converter's lifetime from the
    point of view of a run: the table is copied when each run starts.
    """

    def __init__(self, options: Optional[ConversionOptions] = None,
                 abbreviations: Optional[AbbreviationTable] = None) -> None:
        self.options: ConversionOptions = options or DEFAULT_OPTIONS
        self.abbreviations: AbbreviationTable = (
            abbreviations if abbreviations is not None else AbbreviationTable.with_builtins()
        )

    def convert(self, lines: Iterable[str], sink: LineSink) -> ConversionResult:
        """Convert ``lines`` and hand each output line (no terminator) to ``sink``.

        Raises an XSError subclass on the first invalid line; output already
        passed to the sink is not retracted.  I/O failures from the input
        iterable or the sink, and undecodable input, are wrapped in
        ConversionError.
        """
        run = _ConversionRun(self.options, self.abbreviations.snapshot(), sink)
        try:
            result = run.run(lines)
        except (OSError, UnicodeDecodeError) as e:
            raise ConversionError(f"I/O failure: {e}", run.reassembler.line_count or None) from e
        logger.debug("Converted %d input line(s) into %d output line(s)",
                     result.lines_read, result.lines_written)
        return result

    def convert_stream(self, reader: Iterable[str], writer: TextSink) -> ConversionResult:
        return self.convert(reader, StreamLineSink(writer))

    def convert_text(self, text: str) -> str:
        out: List[str] = []
        self.convert(io.StringIO(text), out.append)
        return "".join(line + "\n" for line in out)


def convert_text(text: str, options: Optional[ConversionOptions] = None,
                 abbreviations: Optional[AbbreviationTable] = None) -> str:
    return Converter(options, abbreviations).convert_text(text)


__all__ = ["Converter", "ConversionResult", "convert_text"]
