"""Gazetteer: free-text place name lookup.

Records are merged from up to three sources that share no single key:

- an observations table (``;``) giving, per place code, the canonical
  place name (``GM000C``), province (``PV0002``) and region (``LD0002``);
- a region codes table (``;``) giving a title per place code, used as an
  additional searchable alias;
- an optional postcode table (``,``) with latitude/longitude keyed by
  place name.

Lookups scan every alias, longest first, for a case-insensitive substring
hit. The alias list is in the low thousands, which keeps the linear scan
cheap at interactive rates.
"""

from __future__ import annotations

import csv
import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from pathlib import Path

from ..errors import LoadError
from ..models import FoundLocation, LocationInfo

logger = logging.getLogger(__name__)

MEASURE_PLACE = "GM000C"
MEASURE_PROVINCE = "PV0002"
MEASURE_REGION = "LD0002"

MIN_ALIAS_LENGTH = 3

OBSERVATION_FIELDS = 6
REGION_CODE_FIELDS = 5
COORDINATE_FIELDS = 6


def _unquote(value: str) -> str:
    return value.strip().strip('"').strip()


def _read_rows(path: Path, *, delimiter: str, encoding: str) -> Iterator[list[str]]:
    """Yield data rows of a delimited file, skipping the header row."""
    with path.open(newline="", encoding=encoding, errors="replace") as f:
        reader = csv.reader(f, delimiter=delimiter)
        next(reader, None)
        yield from reader


class GazetteerBuilder:
    """Accumulate the three sources, then build an immutable ``Gazetteer``.

    Attributes live in separate maps keyed by place code so each source can
    fill its own part without touching records built by another.
    """

    def __init__(self) -> None:
        self._places: dict[str, str] = {}
        self._provinces: dict[str, str] = {}
        self._regions: dict[str, str] = {}
        self._titles: dict[str, list[str]] = {}
        self._aliases: list[str] = []
        self._alias_codes: dict[str, str] = {}
        self._coordinates: dict[str, tuple[float, float]] = {}

    def add_alias(self, alias: str, code: str) -> bool:
        """Register a searchable name; the first code seen for it wins."""
        alias = alias.strip()
        if len(alias) < MIN_ALIAS_LENGTH or alias in self._alias_codes:
            return False
        self._alias_codes[alias] = code
        self._aliases.append(alias)
        return True

    def add_observation(self, measure: str, code: str, value: str) -> None:
        value = value.strip()
        if measure == MEASURE_PLACE:
            self._places[code] = value
            self.add_alias(value, code)
        elif measure == MEASURE_PROVINCE:
            self._provinces[code] = value
        elif measure == MEASURE_REGION:
            self._regions[code] = value

    def add_region_code(self, code: str, title: str) -> None:
        if not code or not title:
            return
        self._titles.setdefault(code, []).append(title)
        self.add_alias(title, code)

    def add_coordinates(self, name: str, latitude: float, longitude: float) -> None:
        self._coordinates[name] = (latitude, longitude)

    def read_observations(self, rows: Iterable[Sequence[str]]) -> None:
        for row in rows:
            if len(row) < OBSERVATION_FIELDS:
                continue
            self.add_observation(row[1].strip(), row[2].strip(), row[4])

    def read_region_codes(self, rows: Iterable[Sequence[str]]) -> None:
        for row in rows:
            if len(row) < REGION_CODE_FIELDS:
                continue
            self.add_region_code(_unquote(row[0]), _unquote(row[4]))

    def read_coordinates(self, rows: Iterable[Sequence[str]]) -> None:
        for row in rows:
            if len(row) < COORDINATE_FIELDS:
                continue
            try:
                lat = float(row[4])
                lon = float(row[5])
            except ValueError:
                continue
            self.add_coordinates(_unquote(row[1]), lat, lon)

    def _coordinates_for(self, code: str) -> tuple[float, float] | None:
        place = self._places.get(code)
        if place is not None and place in self._coordinates:
            return self._coordinates[place]
        for title in self._titles.get(code, ()):
            if title in self._coordinates:
                return self._coordinates[title]
        return None

    def build(self) -> Gazetteer:
        codes = self._places.keys() | self._provinces.keys() | self._regions.keys()
        records: dict[str, LocationInfo] = {}
        for code in codes:
            coords = self._coordinates_for(code)
            records[code] = LocationInfo(
                place=self._places.get(code, ""),
                province=self._provinces.get(code, ""),
                region=self._regions.get(code, ""),
                latitude=coords[0] if coords else None,
                longitude=coords[1] if coords else None,
            )
        return Gazetteer(records, self._aliases, self._alias_codes)


class Gazetteer:
    """Read-only place lookup by code or by free text."""

    def __init__(
        self,
        records: Mapping[str, LocationInfo],
        aliases: Sequence[str],
        alias_codes: Mapping[str, str],
    ):
        self._records: dict[str, LocationInfo] = dict(records)
        self._alias_codes: dict[str, str] = dict(alias_codes)
        # Longest first so "Den Haag" wins over "Haag"; sorted() is stable.
        ordered = sorted(aliases, key=len, reverse=True)
        self._search: tuple[tuple[str, str], ...] = tuple((a, a.lower()) for a in ordered)

    @classmethod
    def load(
        cls,
        observations_path: str | Path,
        region_codes_path: str | Path,
        coordinates_path: str | Path | None = None,
        *,
        encoding: str = "utf-8",
    ) -> Gazetteer:
        """Build the gazetteer from its source files.

        The coordinates file is optional: when it is missing or unreadable
        the records simply carry no coordinates.
        """
        builder = GazetteerBuilder()

        if coordinates_path is not None:
            coords = Path(coordinates_path)
            if coords.is_file():
                try:
                    builder.read_coordinates(_read_rows(coords, delimiter=",", encoding=encoding))
                except (OSError, csv.Error) as exc:
                    logger.warning("Ignoring coordinates file %s: %s", coords, exc)
            else:
                logger.info("No coordinates file at %s", coords)

        for path, read in (
            (Path(observations_path), builder.read_observations),
            (Path(region_codes_path), builder.read_region_codes),
        ):
            try:
                read(_read_rows(path, delimiter=";", encoding=encoding))
            except (OSError, csv.Error) as exc:
                raise LoadError(f"Cannot load gazetteer source {path}: {exc}") from exc

        gazetteer = builder.build()
        logger.info(
            "Loaded gazetteer: %s places, %s aliases", len(gazetteer), len(gazetteer.aliases)
        )
        return gazetteer

    def __len__(self) -> int:
        return len(self._records)

    @property
    def aliases(self) -> tuple[str, ...]:
        """Searchable names in match order (longest first)."""
        return tuple(alias for alias, _ in self._search)

    def resolve(self, code: str) -> LocationInfo | None:
        return self._records.get(code)

    def code_for(self, alias: str) -> str | None:
        return self._alias_codes.get(alias)

    def find_in_text(self, text: str) -> FoundLocation | None:
        """Return the longest known place name contained in ``text``."""
        text_lower = text.lower()
        for alias, alias_lower in self._search:
            if alias_lower not in text_lower:
                continue
            info = self._records.get(self._alias_codes[alias])
            if info is not None:
                return FoundLocation(found_place=alias, info=info)
        return None

    @staticmethod
    def format_info(info: LocationInfo) -> str:
        """Render ``"place, province, region"`` skipping empty parts."""
        parts = [p.strip() for p in (info.place, info.province, info.region) if p]
        return ", ".join(parts)

    def format_code(self, code: str) -> str:
        info = self.resolve(code)
        if info is None:
            return code
        return self.format_info(info)

    @staticmethod
    def format_found_location(found: FoundLocation) -> str:
        """Render a hit as ``"Alias (Place) | province | region | [lat, lon]"``."""
        found_place = found.found_place.strip()
        place = found.info.place.strip()
        parts = [f"{found_place} ({place})" if found_place != place else found_place]
        if found.info.province:
            parts.append(found.info.province.strip())
        if found.info.region:
            parts.append(found.info.region.strip())
        coords = found.info.coordinates
        if coords is not None:
            parts.append(f"[{coords[0]:.6f}, {coords[1]:.6f}]")
        return " | ".join(parts)
