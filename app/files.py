"""
File helpers around the converter: ``.xs`` naming, stale checks, atomic
writes and directory expansion.
"""
from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Tuple, Union

from core.converter import ConversionResult, Converter
from core.errors import ConversionError

logger = logging.getLogger(__name__)

XS_EXT = ".xs"
XML_EXT = ".xml"

PathLike = Union[str, os.PathLike]


def has_xs_ext(name: PathLike) -> bool:
    return str(name).lower().endswith(XS_EXT)


def xs_to_xml_path(path: PathLike) -> Path:
    """Sibling .xml path: 'a.xs' -> 'a.xml', 'a.txt' -> 'a.txt.xml'."""
    p = Path(path)
    if has_xs_ext(p.name):
        return p.with_name(p.name[:-len(XS_EXT)] + XML_EXT)
    return p.with_name(p.name + XML_EXT)


def is_stale(src: PathLike, dst: PathLike) -> bool:
    """True unless ``dst`` exists and is not older than ``src``."""
    dst_path = Path(dst)
    if not dst_path.exists():
        return True
    return dst_path.stat().st_mtime < Path(src).stat().st_mtime


def _target_mode(dst_path: Path) -> int:
    """Mode for a new ``dst_path``: the existing file's, or 0o666 minus the umask."""
    if dst_path.exists():
        return stat.S_IMODE(dst_path.stat().st_mode)
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def convert_file(converter: Converter, src: PathLike, dst: Optional[PathLike] = None) -> Path:
    """Convert ``src`` into ``dst`` (default: sibling .xml), overwriting it.

    Output goes to a temporary file next to ``dst`` that replaces it only when
    the conversion succeeds, so a failed run leaves any previous ``dst`` intact.
    I/O failures are raised as ConversionError.
    """
    src_path = Path(src)
    dst_path = Path(dst) if dst is not None else xs_to_xml_path(src_path)
    if not src_path.exists():
        raise FileNotFoundError(f"{src_path} does not exist")
    if src_path.is_dir():
        raise IsADirectoryError(f"{src_path} is a directory")

    tmp_name: Optional[str] = None
    try:
        fd, tmp_name = tempfile.mkstemp(prefix=f".{dst_path.name}.", suffix=".tmp",
                                        dir=str(dst_path.parent))
        with os.fdopen(fd, "w", encoding="utf-8") as writer, \
                open(src_path, "r", encoding="utf-8") as reader:
            result: ConversionResult = converter.convert_stream(reader, writer)
        # mkstemp creates 0600 files
        os.chmod(tmp_name, _target_mode(dst_path))
        os.replace(tmp_name, dst_path)
        tmp_name = None
    except OSError as e:
        raise ConversionError(f"Cannot convert {src_path}: {e}") from e
    finally:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
    logger.debug("%s: %d line(s) in, %d line(s) out", src_path, result.lines_read, result.lines_written)
    return dst_path


def update_file(converter: Converter, src: PathLike, dst: Optional[PathLike] = None) -> Tuple[Path, bool]:
    """Convert only if the target is missing or older than the source.

    Returns the target path and whether a conversion happened.
    """
    dst_path = Path(dst) if dst is not None else xs_to_xml_path(src)
    if Path(src).exists() and not is_stale(src, dst_path):
        return dst_path, False
    return convert_file(converter, src, dst_path), True


def collect_sources(paths: Iterable[PathLike]) -> List[Path]:
    """Files as given; directories contribute their ``*.xs`` files, sorted."""
    sources: List[Path] = []
    for p in paths:
        path = Path(p)
        if path.is_dir():
            found = sorted(f for f in path.iterdir() if f.is_file() and has_xs_ext(f.name))
            if not found:
                logger.warning("No %s files in directory %s", XS_EXT, path)
            sources.extend(found)
        else:
            sources.append(path)
    return sources


__all__ = [
    "XS_EXT",
    "XML_EXT",
    "has_xs_ext",
    "xs_to_xml_path",
    "is_stale",
    "convert_file",
    "update_file",
    "collect_sources",
]
