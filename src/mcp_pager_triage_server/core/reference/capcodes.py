"""Capcode directory: device identifiers to registered descriptions."""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Mapping, Sequence
from pathlib import Path

from ..errors import LoadError
from ..models import CapcodeInfo

logger = logging.getLogger(__name__)

CAPCODE_FIELDS = 6


def normalize_code(code: str) -> str:
    """Strip leading zeros; an all-zero code becomes ``"0"``."""
    trimmed = code.lstrip("0")
    return trimmed or "0"


def _clean(value: str) -> str:
    return value.strip().strip('"')


def _row_to_info(row: Sequence[str]) -> CapcodeInfo:
    code, service, region, place, description, short = (
        _clean(v) for v in row[:CAPCODE_FIELDS]
    )
    return CapcodeInfo(
        code=code,
        service=service,
        region=region,
        place=place,
        description=description,
        short=short,
    )


class CapcodeDirectory:
    """Read-only lookup of capcodes keyed by their normalized form."""

    def __init__(self, entries: Mapping[str, CapcodeInfo] | None = None):
        self._entries: dict[str, CapcodeInfo] = dict(entries or {})

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[str]]) -> CapcodeDirectory:
        """Build a directory from raw rows; short rows are skipped."""
        entries: dict[str, CapcodeInfo] = {}
        skipped = 0
        for row in rows:
            if len(row) < CAPCODE_FIELDS:
                skipped += 1
                continue
            info = _row_to_info(row)
            # Later rows win for a duplicate key.
            entries[normalize_code(info.code)] = info
        if skipped:
            logger.debug("Skipped %s short capcode rows", skipped)
        return cls(entries)

    @classmethod
    def load(cls, path: str | Path, *, encoding: str = "utf-8") -> CapcodeDirectory:
        """Load a ``;``-delimited capcode list without a header row."""
        path = Path(path)
        try:
            with path.open(newline="", encoding=encoding, errors="replace") as f:
                directory = cls.from_rows(csv.reader(f, delimiter=";"))
        except (OSError, csv.Error) as exc:
            raise LoadError(f"Cannot load capcode list {path}: {exc}") from exc
        logger.info("Loaded %s capcodes from %s", len(directory), path)
        return directory

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, code: object) -> bool:
        return isinstance(code, str) and normalize_code(code) in self._entries

    def resolve(self, code: str) -> CapcodeInfo | None:
        """Return the entry for ``code`` or ``None`` when it is unknown."""
        return self._entries.get(normalize_code(code))

    def describe(self, code: str) -> str | None:
        """Return the description, falling back to the short label."""
        info = self.resolve(code)
        if info is None:
            return None
        return info.description or info.short or None
