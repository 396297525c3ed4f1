"""MCP tool implementations.

This module contains the *implementation* behind the exposed MCP tools.
Keep this layer thin: validate inputs, translate them into core calls, and
return JSON-serializable data structures.
"""

from __future__ import annotations

from typing import Any

from mcp_pager_triage_server.core.enrichment import Enricher
from mcp_pager_triage_server.core.message_service import read_messages
from mcp_pager_triage_server.core.paths import resolve_allowed_file
from mcp_pager_triage_server.core.reference import ReferenceData
from mcp_pager_triage_server.core.schemas import (
    CapcodeModel,
    EnrichedMessageModel,
    LocationModel,
)

DEFAULT_LIMIT = 200
HARD_LIMIT = 5000


def _resolve_limit(limit: int | None) -> int:
    if limit is None:
        return DEFAULT_LIMIT
    if limit <= 0:
        raise ValueError("limit must be > 0")
    return min(limit, HARD_LIMIT)


async def triage_messages_impl(
    reference: ReferenceData,
    *,
    path: str,
    query: str | None = None,
    contains: str | None = None,
    limit: int | None = None,
    include_raw: bool = False,
) -> dict[str, Any]:
    """Implementation for the `triage_messages` MCP tool.

    Notes
    -----
    - The newest messages are returned: a file is in arrival order, so the
      last ``limit`` messages are kept.
    - Rejected lines are reported by line number and reason, never raised.
    - ``path`` must stay under ``PAGER_TRIAGE_BASE_DIR`` and have an allowed
      suffix; otherwise ``ValueError`` is raised before anything is read.
    """
    limit = _resolve_limit(limit)
    resolved = resolve_allowed_file(path)
    batch = await read_messages(resolved, query=query, contains=contains)

    enricher = Enricher(reference)
    messages = batch.messages[-limit:]
    entries = [
        EnrichedMessageModel.from_enriched(enricher.enrich(m), include_raw=include_raw).model_dump()
        for m in messages
    ]
    return {
        "count": len(entries),
        "total": len(batch.messages),
        "entries": entries,
        "rejected": [{"line_no": r.line_no, "reason": r.reason} for r in batch.rejected],
    }


def lookup_capcode_impl(reference: ReferenceData, code: str) -> dict[str, Any]:
    """Implementation for the `lookup_capcode` MCP tool."""
    code = code.strip()
    if not code:
        raise ValueError("code must not be empty")
    info = reference.capcodes.resolve(code)
    return {
        "code": code,
        "found": info is not None,
        "capcode": CapcodeModel.from_info(info).model_dump() if info is not None else None,
    }


def find_location_impl(reference: ReferenceData, text: str) -> dict[str, Any]:
    """Implementation for the `find_location` MCP tool."""
    gazetteer = reference.gazetteer
    found = gazetteer.find_in_text(text)
    if found is None:
        return {"found": False, "location": None}
    model = LocationModel.from_found(found, display=gazetteer.format_found_location(found))
    return {"found": True, "location": model.model_dump()}


def expand_abbreviation_impl(reference: ReferenceData, token: str) -> dict[str, Any]:
    """Implementation for the `expand_abbreviation` MCP tool.

    A single token is looked up directly; longer text is scanned the same
    way message content is.
    """
    glossary = reference.abbreviations
    expansion = glossary.expand(token.strip())
    return {
        "token": token,
        "expansion": expansion,
        "matches": [
            {"literal": literal, "expansion": value}
            for literal, value in glossary.find_in_text(token)
        ],
    }
