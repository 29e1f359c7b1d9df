#!/usr/bin/env python3
"""
Protocols for xs2xml.
"""

from typing import Protocol


class TextSink(Protocol):
    """Anything with a text ``write`` method (files, StringIO, sys.stdout)."""
    def write(self, text: str) -> int: ...
