"""JSON-facing models returned by the MCP tools."""

from __future__ import annotations

from pydantic import BaseModel, Field

from .models import CapcodeInfo, EnrichedMessage, FoundLocation


class CapcodeModel(BaseModel):
    code: str = Field(description="Capcode as registered in the directory.")
    service: str = Field(description="Emergency service (e.g. Brandweer, Ambulance).")
    region: str = Field(description="Safety region.")
    place: str = Field(description="Station or place.")
    description: str = Field(description="Free-text description of the unit.")
    short: str = Field(description="Short label.")

    @classmethod
    def from_info(cls, info: CapcodeInfo) -> CapcodeModel:
        return cls(
            code=info.code,
            service=info.service,
            region=info.region,
            place=info.place,
            description=info.description,
            short=info.short,
        )


class LocationModel(BaseModel):
    found_place: str = Field(description="Place name as found in the message text.")
    place: str = Field(description="Canonical place name.")
    province: str = ""
    region: str = ""
    latitude: float | None = None
    longitude: float | None = None
    display: str = Field(description="Formatted one-line location.")

    @classmethod
    def from_found(cls, found: FoundLocation, *, display: str) -> LocationModel:
        return cls(
            found_place=found.found_place,
            place=found.info.place,
            province=found.info.province,
            region=found.info.region,
            latitude=found.info.latitude,
            longitude=found.info.longitude,
            display=display,
        )


class EnrichedMessageModel(BaseModel):
    line_no: int | None = None
    timestamp: str = Field(description="Local time, ISO-8601.")
    protocol: str
    radio_address: str
    frequency: str
    message_type: str
    priority: str | None = None
    incident_code: str | None = None
    capcodes: list[str] = Field(default_factory=list)
    capcode_descriptions: str = Field(
        description="Readable capcodes; the raw list when none resolved."
    )
    location: str = Field(description="Formatted gazetteer hit or the raw location fragment.")
    found_location: LocationModel | None = None
    abbreviations: str
    content: str
    raw: str | None = None

    @classmethod
    def from_enriched(
        cls,
        enriched: EnrichedMessage,
        *,
        include_raw: bool = False,
    ) -> EnrichedMessageModel:
        msg = enriched.message
        found = None
        if enriched.found_location is not None:
            found = LocationModel.from_found(enriched.found_location, display=enriched.location)
        return cls(
            line_no=msg.line_no,
            timestamp=msg.timestamp.isoformat(),
            protocol=msg.protocol,
            radio_address=msg.radio_address,
            frequency=msg.frequency,
            message_type=msg.message_type,
            priority=msg.priority,
            incident_code=msg.incident_code,
            capcodes=list(msg.capcodes),
            capcode_descriptions=enriched.capcode_display,
            location=enriched.location,
            found_location=found,
            abbreviations=enriched.abbreviations,
            content=msg.content,
            raw=msg.raw if include_raw else None,
        )
