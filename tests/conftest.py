import os
import sys
import textwrap

import pytest

# Ensure project root is first on sys.path so local packages like `core` are used
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), os.pardir))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from app.config import ConversionOptions  # noqa: E402
from core.abbreviations import AbbreviationTable  # noqa: E402
from core.converter import Converter  # noqa: E402


def dedent(text: str) -> str:
    """Strip the common indentation and the leading newline of a test document."""
    return textwrap.dedent(text).lstrip("\n")


@pytest.fixture
def xs():
    """Convert a shorthand document (dedented) with optional options/abbreviations."""
    def _convert(text, abbreviations=None, **options):
        table = AbbreviationTable.with_builtins()
        if abbreviations:
            table.update(abbreviations)
        converter = Converter(ConversionOptions(**options), table)
        return converter.convert_text(dedent(text))
    return _convert
