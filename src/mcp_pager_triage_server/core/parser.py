"""Parser for pipe-delimited P2000 transmission lines.

A line looks like::

    FLEX|2026-01-01 20:14:32|1600/2/K/A|03.091|002029575 001503282|ALN|P 2 BDH-07 ...

Fields are protocol, UTC timestamp, radio address, frequency, capcodes,
message type and the free-text body. The body may itself contain ``|``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import UTC, datetime

from .errors import InvalidFormat, InvalidTimestamp
from .models import ParsedMessage

DELIMITER = "|"
MIN_FIELDS = 7
TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


def extract_location(content: str) -> str:
    """Return the trailing words of ``content`` that look like a place.

    Scans tokens from the end. A short all-digit token (a trailing case
    number) ends the scan; tokens of three characters or fewer and longer
    digit/hyphen codes are skipped. The result is lossy on purpose and
    callers search the full content as well.
    """
    location_parts: list[str] = []

    for part in reversed(content.split()):
        if len(part) <= 6 and all(c.isnumeric() for c in part):
            break

        if len(part) <= 3 or all(c.isnumeric() or c == "-" for c in part):
            continue

        location_parts.append(part)

    location_parts.reverse()
    return " ".join(location_parts)


@dataclass(frozen=True, slots=True)
class MessageParser:
    """Turn raw transmission lines into ``ParsedMessage`` records."""

    # P1/A2 style priorities, also written with a space ("P 2"), or a bare B.
    _priority_re = re.compile(r"^([PA]\s?\d|B)\s")
    _incident_code_re = re.compile(r"\b([A-Z]{2,3}-\d{2})\b")

    @staticmethod
    def _parse_ts(ts_str: str) -> datetime:
        """Parse the UTC wire timestamp and convert it to local time."""
        try:
            naive = datetime.strptime(ts_str, TIMESTAMP_FORMAT)
        except ValueError as exc:
            raise InvalidTimestamp(f"Invalid timestamp: {ts_str!r}") from exc
        return naive.replace(tzinfo=UTC).astimezone()

    def extract_priority(self, content: str) -> str | None:
        m = self._priority_re.match(content)
        return m.group(1) if m else None

    def extract_incident_code(self, content: str) -> str | None:
        m = self._incident_code_re.search(content)
        return m.group(1) if m else None

    def parse(self, line: str, line_no: int | None = None) -> ParsedMessage:
        """Parse one line; raises ``InvalidFormat`` or ``InvalidTimestamp``."""
        parts = line.split(DELIMITER)
        if len(parts) < MIN_FIELDS:
            raise InvalidFormat(
                f"Invalid FLEX format: expected at least {MIN_FIELDS} fields, got {len(parts)}"
            )

        timestamp = self._parse_ts(parts[1])
        capcodes = tuple(parts[4].split())
        content = DELIMITER.join(parts[6:])

        return ParsedMessage(
            protocol=parts[0],
            timestamp=timestamp,
            radio_address=parts[2],
            frequency=parts[3],
            capcodes=capcodes,
            message_type=parts[5],
            content=content,
            priority=self.extract_priority(content),
            incident_code=self.extract_incident_code(content),
            location=extract_location(content),
            units=capcodes,
            raw=line,
            line_no=line_no,
        )


_DEFAULT_PARSER = MessageParser()


def parse_line(line: str, line_no: int | None = None) -> ParsedMessage:
    """Parse a line with the shared default parser."""
    return _DEFAULT_PARSER.parse(line, line_no)
