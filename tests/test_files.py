#!/usr/bin/env python3
"""
Tests for file conveniences around the converter
"""

import os
import stat
from pathlib import Path

import pytest

from app.files import (
    collect_sources, convert_file, has_xs_ext, is_stale, update_file, xs_to_xml_path,
)
from core.converter import Converter
from core.errors import ConversionError, InvalidTagLine


def _touch(path: Path, mtime: float) -> None:
    os.utime(path, (mtime, mtime))


class TestNaming:
    """Test .xs detection and .xml naming"""

    @pytest.mark.parametrize("name", ["file.xs", "file.XS", "file.xS", "dir/file.Xs"])
    def test_has_xs_ext(self, name):
        assert has_xs_ext(name)

    @pytest.mark.parametrize("name", ["file.xml", "file.xsd", "xs", "file"])
    def test_has_no_xs_ext(self, name):
        assert not has_xs_ext(name)

    def test_xs_to_xml_path(self):
        assert xs_to_xml_path("dir/a.xs") == Path("dir/a.xml")
        assert xs_to_xml_path("A.XS") == Path("A.xml")
        assert xs_to_xml_path("notes.txt") == Path("notes.txt.xml")


class TestConvertFile:
    """Test convert_file"""

    def test_writes_sibling_xml(self, tmp_path):
        src = tmp_path / "doc.xs"
        src.write_text("<root\n    <a x \"1\" /\n", encoding="utf-8")
        dst = convert_file(Converter(), src)
        assert dst == tmp_path / "doc.xml"
        assert dst.read_text(encoding="utf-8") == '<root>\n    <a x="1" />\n</root>\n'

    def test_explicit_destination(self, tmp_path):
        src = tmp_path / "doc.xs"
        src.write_text("<root\n", encoding="utf-8")
        dst = convert_file(Converter(), src, tmp_path / "out.xml")
        assert dst.read_text(encoding="utf-8") == "<root>\n</root>\n"

    def test_failure_keeps_previous_output(self, tmp_path):
        src = tmp_path / "doc.xs"
        dst = tmp_path / "doc.xml"
        src.write_text("<root\n    <1bad\n", encoding="utf-8")
        dst.write_text("previous", encoding="utf-8")
        with pytest.raises(InvalidTagLine):
            convert_file(Converter(), src)
        assert dst.read_text(encoding="utf-8") == "previous"
        assert sorted(p.name for p in tmp_path.iterdir()) == ["doc.xml", "doc.xs"]

    def test_new_output_honours_umask(self, tmp_path):
        src = tmp_path / "doc.xs"
        src.write_text("<root\n", encoding="utf-8")
        old = os.umask(0o022)
        try:
            dst = convert_file(Converter(), src)
            plain = tmp_path / "plain.xml"
            plain.write_text("x", encoding="utf-8")
        finally:
            os.umask(old)
        assert stat.S_IMODE(dst.stat().st_mode) == 0o644
        assert dst.stat().st_mode == plain.stat().st_mode

    def test_existing_output_keeps_its_mode(self, tmp_path):
        src = tmp_path / "doc.xs"
        dst = tmp_path / "doc.xml"
        src.write_text("<root\n", encoding="utf-8")
        dst.write_text("previous", encoding="utf-8")
        os.chmod(dst, 0o640)
        convert_file(Converter(), src)
        assert stat.S_IMODE(dst.stat().st_mode) == 0o640
        assert dst.read_text(encoding="utf-8") == "<root>\n</root>\n"

    def test_undecodable_source(self, tmp_path):
        src = tmp_path / "doc.xs"
        src.write_bytes(b"<root\n\xff\n")
        with pytest.raises(ConversionError):
            convert_file(Converter(), src)
        assert sorted(p.name for p in tmp_path.iterdir()) == ["doc.xs"]

    def test_missing_source(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            convert_file(Converter(), tmp_path / "nope.xs")

    def test_directory_source(self, tmp_path):
        with pytest.raises(IsADirectoryError):
            convert_file(Converter(), tmp_path)


class TestUpdate:
    """Test is_stale and update_file"""

    def test_missing_target_is_stale(self, tmp_path):
        src = tmp_path / "a.xs"
        src.write_text("<a\n", encoding="utf-8")
        assert is_stale(src, tmp_path / "a.xml")

    def test_older_target_is_stale(self, tmp_path):
        src = tmp_path / "a.xs"
        dst = tmp_path / "a.xml"
        src.write_text("<a\n", encoding="utf-8")
        dst.write_text("old", encoding="utf-8")
        _touch(dst, 1_000_000)
        _touch(src, 2_000_000)
        assert is_stale(src, dst)

    def test_same_or_newer_target_is_fresh(self, tmp_path):
        src = tmp_path / "a.xs"
        dst = tmp_path / "a.xml"
        src.write_text("<a\n", encoding="utf-8")
        dst.write_text("old", encoding="utf-8")
        _touch(src, 2_000_000)
        _touch(dst, 2_000_000)
        assert not is_stale(src, dst)
        _touch(dst, 3_000_000)
        assert not is_stale(src, dst)

    def test_update_skips_fresh_target(self, tmp_path):
        src = tmp_path / "a.xs"
        dst = tmp_path / "a.xml"
        src.write_text("<a\n", encoding="utf-8")
        dst.write_text("kept", encoding="utf-8")
        _touch(src, 1_000_000)
        _touch(dst, 2_000_000)
        assert update_file(Converter(), src) == (dst, False)
        assert dst.read_text(encoding="utf-8") == "kept"

    def test_update_converts_stale_target(self, tmp_path):
        src = tmp_path / "a.xs"
        src.write_text("<a\n", encoding="utf-8")
        dst, converted = update_file(Converter(), src)
        assert converted
        assert dst.read_text(encoding="utf-8") == "<a>\n</a>\n"


class TestCollectSources:
    """Test collect_sources"""

    def test_directories_expand_to_xs_files(self, tmp_path):
        (tmp_path / "b.XS").write_text("<b\n", encoding="utf-8")
        (tmp_path / "a.xs").write_text("<a\n", encoding="utf-8")
        (tmp_path / "c.txt").write_text("c", encoding="utf-8")
        (tmp_path / "sub.xs").mkdir()
        other = tmp_path / "other.txt"
        found = collect_sources([tmp_path, other])
        assert found == [tmp_path / "a.xs", tmp_path / "b.XS", other]
