"""
Error hierarchy for XML Shorthand conversion.

Every error may carry the 1-based number of the input line being processed
when it was raised.  Any of them aborts the whole conversion run.
"""

from __future__ import annotations

from typing import Optional

from xs_types import LineNumber


class XSError(Exception):
    """Base class for XML Shorthand expansion faults."""

    def __init__(self, message: str = "", line_number: Optional[LineNumber] = None) -> None:
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def __str__(self) -> str:
        if self.line_number is None:
            return self.message
        return f"line {self.line_number}: {self.message}"


class MalformedIndentation(XSError):
    """Leading whitespace could not be scanned up to the computed indent level."""


class InvalidTagLine(XSError):
    """A line starting with '<' has no valid tag name."""


class InvalidAttributeLine(XSError):
    """Text after the tag name is not a sequence of name "value" pairs."""


class InvalidAbbreviation(XSError):
    """A bare '$' with no abbreviation key."""


class UndefinedAbbreviation(XSError):
    """A '$key' token whose key is missing from the abbreviation table."""

    def __init__(self, key: str, line_number: Optional[LineNumber] = None) -> None:
        super().__init__(f"Abbreviation '{key}' not defined", line_number)
        self.key = key


class InvalidConfiguration(XSError, ValueError):
    """Rejected conversion option or abbreviation source."""


class TruncatedContinuation(XSError):
    """Input ended while a continued line was still pending."""


class ConversionError(XSError):
    """Underlying I/O failure; the original exception is the ``__cause__``."""


__all__ = [
    "XSError",
    "MalformedIndentation",
    "InvalidTagLine",
    "InvalidAttributeLine",
    "InvalidAbbreviation",
    "UndefinedAbbreviation",
    "InvalidConfiguration",
    "TruncatedContinuation",
    "ConversionError",
]
