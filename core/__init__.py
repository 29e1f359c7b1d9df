#!/usr/bin/env python3
"""
Core conversion engine for XML Shorthand.

The converter itself lives in ``core.converter``; only the error hierarchy is
re-exported here so that ``app.config`` can import it without a cycle.
"""

from .errors import (
    XSError, MalformedIndentation, InvalidTagLine, InvalidAttributeLine,
    InvalidAbbreviation, UndefinedAbbreviation, InvalidConfiguration,
    TruncatedContinuation, ConversionError
)

__all__ = [
    'XSError', 'MalformedIndentation', 'InvalidTagLine', 'InvalidAttributeLine',
    'InvalidAbbreviation', 'UndefinedAbbreviation', 'InvalidConfiguration',
    'TruncatedContinuation', 'ConversionError',
]
