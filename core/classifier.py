from __future__ import annotations

from enum import Enum


class LineKind(Enum):
    XS_COMMENT = "xs-comment"
    PREAMBLE = "preamble"
    XML_COMMENT = "xml-comment"
    DECLARATION = "declaration"
    TAG = "tag"
    TEXT = "text"


# Order matters: '<!--' must be tested before '<!', and both before '<'
_PREFIXES = (
    ("//", LineKind.XS_COMMENT),
    ("<?", LineKind.PREAMBLE),
    ("<!--", LineKind.XML_COMMENT),
    ("<!", LineKind.DECLARATION),
    ("<", LineKind.TAG),
)


def classify(content: str) -> LineKind:
    """Kind of a line, given its content with indentation already removed."""
    for prefix, kind in _PREFIXES:
        if content.startswith(prefix):
            return kind
    return LineKind.TEXT


__all__ = ["LineKind", "classify"]
