"""
Abbreviation table and `$` expansion.

Tag names, attribute names and attribute values written as ``$key`` are
replaced by the table entry for ``key``.  Tables can be loaded from JSON,
YAML or ``key=value`` properties files.
"""

from __future__ import annotations

import json
import logging
import os
from typing import Any, Dict, Iterator, Mapping, MutableMapping, Optional

import yaml

from core.errors import InvalidAbbreviation, InvalidConfiguration, UndefinedAbbreviation
from meta import DEFAULT_META

logger = logging.getLogger(__name__)

ABBREVIATION_PREFIX = "$"


class AbbreviationTable(MutableMapping[str, str]):
    """Mapping of abbreviation key (without '$') to its expansion."""

    def __init__(self, entries: Optional[Mapping[str, str]] = None) -> None:
        self._entries: Dict[str, str] = {}
        if entries:
            self.update(entries)

    @classmethod
    def with_builtins(cls) -> "AbbreviationTable":
        return cls(DEFAULT_META.xml.builtin_abbreviations)

    def __getitem__(self, key: str) -> str:
        return self._entries[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._entries[key] = value

    def __delitem__(self, key: str) -> None:
        del self._entries[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"AbbreviationTable({self._entries!r})"

    def snapshot(self) -> "AbbreviationTable":
        return AbbreviationTable(self._entries)

    def expand(self, token: str) -> str:
        return expand(token, self._entries)

    def load(self, path: str) -> None:
        """Merge entries from ``path``; later entries overwrite earlier ones."""
        entries = load_abbreviations(path)
        logger.debug("Loaded %d abbreviations from %s", len(entries), path)
        self.update(entries)


def expand(token: str, table: Mapping[str, str]) -> str:
    if not token.startswith(ABBREVIATION_PREFIX):
        return token
    if len(token) == 1:
        raise InvalidAbbreviation("Invalid abbreviation '$'")
    key = token[1:]
    try:
        return table[key]
    except KeyError:
        raise UndefinedAbbreviation(key) from None


def _parse_properties(text: str) -> Dict[str, str]:
    entries: Dict[str, str] = {}
    for line in text.splitlines():
        stripped = line.strip()
        if not stripped or stripped[0] in "#!":
            continue
        sep = min((i for i in (stripped.find("="), stripped.find(":")) if i >= 0), default=-1)
        if sep < 0:
            raise InvalidConfiguration(f"Expected key=value, got '{stripped}'")
        entries[stripped[:sep].strip()] = stripped[sep + 1:].strip()
    return entries


def _check_entries(data: Any, path: str) -> Dict[str, str]:
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidConfiguration(f"Abbreviation file must contain a mapping: {path}")
    for k, v in data.items():
        if not isinstance(k, str) or not isinstance(v, str):
            raise InvalidConfiguration(f"Abbreviation {k!r} in {path} must map a string to a string")
    return data


def load_abbreviations(path: str) -> Dict[str, str]:
    if not os.path.isfile(path):
        raise FileNotFoundError(f"Abbreviation file not found: {path}")
    with open(path, "r", encoding="utf-8") as f:
        text = f.read()
    lower = path.lower()
    try:
        if lower.endswith((".yml", ".yaml")):
            data = yaml.safe_load(text)
        elif lower.endswith(".json"):
            data = json.loads(text)
        else:
            data = _parse_properties(text)
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise InvalidConfiguration(f"Cannot parse abbreviation file {path}: {e}") from e
    return _check_entries(data, path)


__all__ = [
    "AbbreviationTable",
    "expand",
    "load_abbreviations",
    "ABBREVIATION_PREFIX",
]
