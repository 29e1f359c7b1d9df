#!/usr/bin/env python3
"""
Tests for XML line rendering
"""

import io

from app.config import ConversionOptions
from gen.xml.writer import StreamLineSink, XmlLineWriter


class TestRenderOpenTag:
    """Test XmlLineWriter.render_open_tag"""

    def test_no_attributes(self):
        w = XmlLineWriter([].append)
        assert w.render_open_tag(0, "root", []) == ["<root>"]

    def test_attributes_in_order(self):
        w = XmlLineWriter([].append)
        lines = w.render_open_tag(1, "a", [("b", "1"), ("c", "2")])
        assert lines == ['    <a b="1" c="2">']

    def test_empty_tag(self):
        w = XmlLineWriter([].append)
        assert w.render_open_tag(0, "a", [("b", "1")], is_empty=True) == ['<a b="1" />']
        assert w.render_open_tag(2, "a", [], is_empty=True) == ["        <a />"]

    def test_one_attribute_per_line(self):
        w = XmlLineWriter([].append, ConversionOptions(one_attribute_per_line=True))
        lines = w.render_open_tag(1, "a", [("x", "1"), ("y", "2"), ("z", "3")], is_empty=True)
        assert lines == [
            '    <a x="1"',
            '        y="2"',
            '        z="3" />',
        ]

    def test_tabs(self):
        w = XmlLineWriter([].append, ConversionOptions(indent_with_spaces=False))
        assert w.render_open_tag(2, "a", []) == ["\t\t<a>"]
        assert w.render_close_tag(1, "a") == "\t</a>"


class TestWriting:
    """Test sink output"""

    def test_counts_written_lines(self):
        out = []
        w = XmlLineWriter(out.append)
        w.write_lines(["<a>", "text"])
        w.write_close_tag(0, "a")
        assert out == ["<a>", "text", "</a>"]
        assert w.lines_written == 3

    def test_stream_sink_terminates_lines(self):
        buf = io.StringIO()
        sink = StreamLineSink(buf)
        sink("<a>")
        sink("</a>")
        assert buf.getvalue() == "<a>\n</a>\n"
