"""
Tag line tokenizer.

A tag line looks like::

    <name attr "value" other="value" /

The trailing '/' marks an empty (self-closing) element.  Attribute names may
be separated from their quoted value by '=', by whitespace, or by nothing.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass, field
from typing import Optional

from core.errors import InvalidAttributeLine, InvalidTagLine
from core.indentation import last_non_whitespace
from xs_types import AttributeMap, LineNumber, TagName

logger = logging.getLogger(__name__)

# A letter, '_', ':' or '$' followed by at least one name character,
# or a single (optionally '$'-prefixed) letter
NAME_REGEX = r"[$a-zA-Z_:][a-zA-Z0-9_:.]+|\$?[a-zA-Z]"
STRING_REGEX = r'"(.*?)"'

TAG_PATTERN = re.compile(r"<(" + NAME_REGEX + r")[ \t]*")
ATT_PATTERN = re.compile(r"[ \t]*(" + NAME_REGEX + r")[= \t]?[ \t]*" + STRING_REGEX + r"[ \t]*")

EMPTY_TAG_MARKER = "/"


@dataclass
class TagLine:
    name: TagName
    attributes: AttributeMap = field(default_factory=dict)
    is_empty: bool = False


def tokenize_tag_line(content: str, line_number: Optional[LineNumber] = None) -> TagLine:
    """Split a tag line into name, attributes and the empty-tag flag.

    ``content`` must already start with '<'.  Attribute values are returned
    without their quotes and without abbreviation expansion.
    """
    tail = last_non_whitespace(content)
    is_empty = tail >= 0 and content[tail] == EMPTY_TAG_MARKER
    if is_empty:
        content = content[:tail]

    m = TAG_PATTERN.match(content)
    if m is None:
        raise InvalidTagLine(f"Invalid tag line '{content}'", line_number)

    attributes: AttributeMap = {}
    idx = m.end()
    while idx < len(content):
        am = ATT_PATTERN.match(content, idx)
        if am is None:
            raise InvalidAttributeLine(
                f"Invalid attribute in tag line at column {idx + 1}: '{content[idx:]}'", line_number
            )
        name, value = am.group(1), am.group(2)
        if name in attributes:
            logger.warning("Duplicate attribute '%s' on line %s; keeping last value", name, line_number)
        attributes[name] = value
        idx = am.end()

    return TagLine(name=TagName(m.group(1)), attributes=attributes, is_empty=is_empty)


__all__ = ["TagLine", "tokenize_tag_line", "TAG_PATTERN", "ATT_PATTERN"]
