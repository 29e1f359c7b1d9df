#!/usr/bin/env python3
"""
Base type aliases for xs2xml.
"""

from typing import Callable, Dict, NewType

# ---------- Engine type aliases ----------
IndentLevel = int
TagName = NewType('TagName', str)
LineNumber = int

# Insertion-ordered: first occurrence fixes the position, last write the value
AttributeMap = Dict[str, str]

# Receives one output line, without terminator
LineSink = Callable[[str], None]
