#!/usr/bin/env python3
"""
CLI entrypoint for xs2xml.

Usage:
  python -m app.cli [paths...] [flags]

With no paths, XML Shorthand is read from standard input and XML written to
standard output.  Each file 'name.xs' is converted to 'name.xml' beside it;
directories contribute their *.xs files.

Flags:
  --tab-spaces N         spaces per indent level (default 4)
  --tabs                 indent output with tabs
  --attr-per-line        one attribute per line
  --abbreviations PATH   (repeatable) JSON, YAML or key=value file
  -D KEY=VALUE           (repeatable) define an abbreviation
  --update               convert only if the .xml is older than the .xs
  --check                verify the produced XML is well-formed
  --allow-truncated      drop a dangling trailing continuation
  -v, --verbose
"""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from app.config import ConversionOptions, DEFAULT_OPTIONS
from app.files import collect_sources, convert_file, update_file
from core.abbreviations import AbbreviationTable
from core.converter import Converter
from core.errors import InvalidConfiguration, XSError
from utils.logging_config import configure_logging
from utils.xml import check_well_formed

TOOL_NAME = "Xml Shorthand tool"

logger = logging.getLogger(__name__)


def parse_define(text: str) -> Tuple[str, str]:
    key, sep, value = text.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=VALUE, got '{text}'")
    return key, value


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="xs2xml",
        description="Convert XML Shorthand (.xs) into XML",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  xs2xml < doc.xs > doc.xml
  xs2xml docs/a.xs docs/b.xs
  xs2xml --update --check docs/
        """,
    )
    ap.add_argument("paths", nargs="*", help=".xs files or directories; none reads stdin")
    ap.add_argument("--tab-spaces", type=int, default=DEFAULT_OPTIONS.tab_spaces,
                    help="spaces equivalent to one tab (default: %(default)s)")
    ap.add_argument("--tabs", action="store_true", help="indent output with tab characters")
    ap.add_argument("--attr-per-line", action="store_true", help="write one attribute per line")
    ap.add_argument("--abbreviations", action="append", default=[], metavar="PATH",
                    help="load abbreviations from a JSON, YAML or properties file")
    ap.add_argument("-D", "--define", action="append", default=[], type=parse_define,
                    metavar="KEY=VALUE", help="define an abbreviation")
    ap.add_argument("--update", action="store_true",
                    help="skip files whose .xml is not older than the .xs")
    ap.add_argument("--check", action="store_true", help="check that the output is well-formed XML")
    ap.add_argument("--allow-truncated", action="store_true",
                    help="drop a trailing line continuation instead of failing")
    ap.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return ap


def build_converter(args: argparse.Namespace) -> Converter:
    options = ConversionOptions(
        tab_spaces=args.tab_spaces,
        indent_with_spaces=not args.tabs,
        one_attribute_per_line=args.attr_per_line,
        allow_truncated_continuation=args.allow_truncated,
    )
    table = AbbreviationTable.with_builtins()
    for path in args.abbreviations:
        table.load(path)
    for key, value in args.define:
        table[key] = value
    return Converter(options, table)


def convert_stdin(converter: Converter, check: bool) -> int:
    logger.info("Reading from standard input...")
    out: List[str] = []
    try:
        converter.convert(sys.stdin, out.append)
    except XSError as e:
        logger.error("Error: %s", e)
        return 1
    text = "".join(line + "\n" for line in out)
    sys.stdout.write(text)
    sys.stdout.flush()
    if check:
        problem = check_well_formed(text)
        if problem:
            logger.error("Output is not well-formed XML: %s", problem)
            return 1
    return 0


def convert_paths(converter: Converter, paths: List[str], update: bool, check: bool) -> int:
    logger.info("Processing files...")
    failures = 0
    for src in collect_sources(paths):
        try:
            if update:
                dst, converted = update_file(converter, src)
            else:
                dst, converted = convert_file(converter, src), True
            if converted:
                logger.info("%s -> %s", src.name, dst.name)
            else:
                logger.info("%s is up to date", dst.name)
            if check and not _check_file(dst):
                failures += 1
        except (XSError, OSError) as e:
            logger.error("Error: %s: %s", src, e)
            failures += 1
    return 1 if failures else 0


def _check_file(path: Path) -> bool:
    problem = check_well_formed(path.read_text(encoding="utf-8"))
    if problem:
        logger.error("%s is not well-formed XML: %s", path, problem)
        return False
    return True


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)
    logger.info(TOOL_NAME)

    try:
        converter = build_converter(args)
    except (InvalidConfiguration, OSError) as e:
        logger.error("Configuration error: %s", e)
        return 2

    if args.paths:
        status = convert_paths(converter, args.paths, args.update, args.check)
    else:
        status = convert_stdin(converter, args.check)
    logger.info("Done!")
    return status


if __name__ == "__main__":
    raise SystemExit(main())
