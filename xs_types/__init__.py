#!/usr/bin/env python3
"""
Types module for xs2xml.
Centralized type definitions shared by the engine and the writer.
"""

from .base import (
    IndentLevel, TagName, LineNumber,
    AttributeMap, LineSink
)

from .protocols import TextSink

__all__ = [
    'IndentLevel', 'TagName', 'LineNumber',
    'AttributeMap', 'LineSink',
    'TextSink',
]
