"""Annotate parsed messages with readable context from the reference data."""

from __future__ import annotations

from dataclasses import dataclass

from .models import EnrichedMessage, FoundLocation, ParsedMessage
from .reference import ReferenceData


@dataclass(frozen=True, slots=True)
class Enricher:
    """Compose a ``ParsedMessage`` with the capcode, gazetteer and glossary lookups."""

    reference: ReferenceData

    def describe_capcodes(self, message: ParsedMessage) -> str | None:
        """Readable capcode list, or ``None`` when no capcode resolves."""
        directory = self.reference.capcodes
        parts: list[str] = []
        resolved_any = False
        for code in message.capcodes:
            info = directory.resolve(code)
            if info is None:
                parts.append(code)
                continue
            resolved_any = True
            parts.append(info.description or info.short or code)
        if not resolved_any:
            return None
        return ", ".join(parts)

    def find_location(self, message: ParsedMessage) -> FoundLocation | None:
        # The location fragment is lossy, so the whole content is searched too.
        text = f"{message.location} {message.content}"
        return self.reference.gazetteer.find_in_text(text)

    def _format_location(self, message: ParsedMessage, found: FoundLocation | None) -> str:
        if found is None:
            return message.location
        return self.reference.gazetteer.format_found_location(found)

    def locate(self, message: ParsedMessage) -> str:
        """Formatted gazetteer hit, else the raw location fragment."""
        return self._format_location(message, self.find_location(message))

    def expand_abbreviations(self, message: ParsedMessage) -> str:
        return self.reference.abbreviations.expand_text(message.content)

    def enrich(self, message: ParsedMessage) -> EnrichedMessage:
        found = self.find_location(message)
        return EnrichedMessage(
            message=message,
            capcodes=self.describe_capcodes(message),
            location=self._format_location(message, found),
            found_location=found,
            abbreviations=self.expand_abbreviations(message),
        )
