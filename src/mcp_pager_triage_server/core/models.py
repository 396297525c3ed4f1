"""Core data models for pager message triage."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True, slots=True)
class ParsedMessage:
    """Structured record derived from one raw transmission line."""

    protocol: str
    timestamp: datetime  # local time, converted from the UTC wire value
    radio_address: str
    frequency: str
    capcodes: tuple[str, ...]
    message_type: str
    content: str
    priority: str | None
    incident_code: str | None
    location: str  # best-effort trailing fragment of content
    units: tuple[str, ...]
    raw: str | None = None
    line_no: int | None = None

    def __str__(self) -> str:
        return f"[{self.timestamp:%H:%M:%S}] {self.priority or '?'} - {self.content}"


@dataclass(frozen=True, slots=True)
class CapcodeInfo:
    """Capcode directory row."""

    code: str
    service: str
    region: str
    place: str
    description: str
    short: str


@dataclass(frozen=True, slots=True)
class LocationInfo:
    """Merged gazetteer record for one place code."""

    place: str = ""
    province: str = ""
    region: str = ""
    latitude: float | None = None
    longitude: float | None = None

    @property
    def coordinates(self) -> tuple[float, float] | None:
        if self.latitude is None or self.longitude is None:
            return None
        return self.latitude, self.longitude


@dataclass(frozen=True, slots=True)
class FoundLocation:
    """Gazetteer hit: the alias found in the text plus its record."""

    found_place: str
    info: LocationInfo


@dataclass(frozen=True, slots=True)
class EnrichedMessage:
    """A parsed message together with its readable annotations."""

    message: ParsedMessage
    capcodes: str | None  # None: no capcode resolved, show the raw list
    location: str
    found_location: FoundLocation | None
    abbreviations: str

    @property
    def capcode_display(self) -> str:
        if self.capcodes is not None:
            return self.capcodes
        return ", ".join(self.message.capcodes)
