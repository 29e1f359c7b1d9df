from __future__ import annotations

from dataclasses import dataclass, replace as dc_replace
from typing import Any

from core.errors import InvalidConfiguration


@dataclass(frozen=True)
class ConversionOptions:
    # Spaces per tab, used both to read input indentation and to write output
    tab_spaces: int = 4
    indent_with_spaces: bool = True            # False: one tab per level
    one_attribute_per_line: bool = False

    # Drop a dangling trailing '\' fragment instead of failing
    allow_truncated_continuation: bool = False

    def __post_init__(self) -> None:
        if isinstance(self.tab_spaces, bool) or not isinstance(self.tab_spaces, int):
            raise InvalidConfiguration(
                f"The number of spaces equivalent to a tab must be an integer, got {self.tab_spaces!r}"
            )
        if self.tab_spaces < 0:
            raise InvalidConfiguration(
                f"The number of spaces equivalent to a tab cannot be {self.tab_spaces}"
            )

    def replace(self, **changes: Any) -> "ConversionOptions":
        return dc_replace(self, **changes)

    def indent_text(self, level: int) -> str:
        if self.indent_with_spaces:
            return " " * (level * self.tab_spaces)
        return "\t" * level


DEFAULT_OPTIONS = ConversionOptions()

__all__ = [
    "ConversionOptions",
    "DEFAULT_OPTIONS",
]
