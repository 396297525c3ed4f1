"""Abbreviation glossary for the jargon used in pager messages.

The source is a plain text file of ``KEY: expansion`` lines. Keys are
matched literally; a second index keyed on the key without spaces catches
messages that drop the spaces inside multi-word abbreviations.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path

from ..errors import LoadError

logger = logging.getLogger(__name__)

NO_ABBREVIATIONS = "No known abbreviations"


def _squash(token: str) -> str:
    return token.replace(" ", "")


class AbbreviationGlossary:
    """Read-only abbreviation lookup."""

    def __init__(self, entries: Mapping[str, str] | None = None):
        self._entries: dict[str, str] = {}
        self._entries_no_space: dict[str, str] = {}
        for key, value in (entries or {}).items():
            self._add(key, value)

    def _add(self, key: str, value: str) -> None:
        self._entries[key] = value
        squashed = _squash(key)
        if squashed:
            self._entries_no_space[squashed] = value

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> AbbreviationGlossary:
        """Build a glossary from ``key: value`` lines."""
        glossary = cls()
        for line in lines:
            if not line.strip():
                continue
            key, sep, value = line.partition(":")
            if not sep:
                continue
            key = key.strip()
            value = value.strip()
            if key and value:
                glossary._add(key, value)
        return glossary

    @classmethod
    def load(cls, path: str | Path, *, encoding: str = "utf-8") -> AbbreviationGlossary:
        path = Path(path)
        try:
            text = path.read_text(encoding=encoding, errors="replace")
        except OSError as exc:
            raise LoadError(f"Cannot load abbreviations {path}: {exc}") from exc
        glossary = cls.from_lines(text.splitlines())
        logger.info("Loaded %s abbreviations from %s", len(glossary), path)
        return glossary

    def __len__(self) -> int:
        return len(self._entries)

    def expand(self, token: str) -> str | None:
        """Return the expansion for ``token`` or ``None``."""
        hit = self._entries.get(token)
        if hit is not None:
            return hit
        squashed = _squash(token)
        if not squashed:
            return None
        return self._entries_no_space.get(squashed)

    def find_in_text(self, text: str) -> list[tuple[str, str]]:
        """Return ``(literal, expansion)`` pairs found in ``text``.

        Each position first tries the token glued to its right neighbour
        ("P" "1" -> "P1"); a pair match consumes both tokens. Every literal
        is reported once, in order of first occurrence.
        """
        tokens = text.split()
        found: dict[str, str] = {}
        i = 0
        while i < len(tokens):
            if i + 1 < len(tokens):
                joined = tokens[i] + tokens[i + 1]
                expansion = self.expand(joined)
                if expansion is not None:
                    found.setdefault(joined, expansion)
                    i += 2
                    continue
            expansion = self.expand(tokens[i])
            if expansion is not None:
                found.setdefault(tokens[i], expansion)
            i += 1
        return list(found.items())

    def expand_text(self, text: str) -> str:
        """Format the abbreviations in ``text`` as ``"lit: expansion; ..."``."""
        pairs = self.find_in_text(text)
        if not pairs:
            return NO_ABBREVIATIONS
        return "; ".join(f"{literal}: {expansion}" for literal, expansion in pairs)
