"""MCP server entrypoint (stdio transport).

This module wires together:
- Tools: triage a transmission file, look up capcodes, places and abbreviations
- Resources: help text, a sample transmission, response schema, file reads
- Prompts: a reusable triage workflow

Reference data is loaded once before the server starts; a missing
reference file aborts startup.

Run locally (stdio):
    python -m mcp_pager_triage_server.server.pager_server
"""

from __future__ import annotations

import logging
import os
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_pager_triage_server.core.config import ReferencePaths
from mcp_pager_triage_server.core.errors import LoadError
from mcp_pager_triage_server.core.reference import ReferenceData, load_reference_data
from mcp_pager_triage_server.prompts.registry import register_prompts
from mcp_pager_triage_server.resources.registry import register_resources
from mcp_pager_triage_server.tools.triage import (
    expand_abbreviation_impl,
    find_location_impl,
    lookup_capcode_impl,
    triage_messages_impl,
)

LOGGER = logging.getLogger(__name__)


def _configure_logging() -> None:
    """Configure a reasonable default logging setup.

    The MCP client typically captures stderr; keeping logs concise makes them easier to consume.
    """
    level_name = os.getenv("PAGER_TRIAGE_LOG_LEVEL", "INFO").upper()
    level = getattr(logging, level_name, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_server(reference: ReferenceData) -> FastMCP:
    """Create the MCP server bound to already-loaded reference data."""
    mcp = FastMCP("pager-triage", json_response=True)

    register_resources(mcp)
    register_prompts(mcp)

    @mcp.tool()
    async def triage_messages(
        path: str,
        query: str | None = None,
        contains: str | None = None,
        limit: int | None = None,
        include_raw: bool = False,
    ) -> dict[str, Any]:
        """Parse and enrich the P2000 messages in a transmission file.

        Parameters
        ----------
        path:
            Transmission file under PAGER_TRIAGE_BASE_DIR (one pipe-delimited line per message).
            Supports plain text and .gz.
        query:
            Case-insensitive filter on message content, priority or location.
        contains:
            Case-sensitive substring filter applied to the raw line.
        limit:
            Maximum number of (most recent) messages returned.
        include_raw:
            Whether to include the original line in each entry.

        Returns
        -------
        dict:
            {"count": int, "total": int, "entries": list[dict], "rejected": list[dict]}
        """
        return await triage_messages_impl(
            reference,
            path=path,
            query=query,
            contains=contains,
            limit=limit,
            include_raw=include_raw,
        )

    @mcp.tool()
    def lookup_capcode(code: str) -> dict[str, Any]:
        """Return the directory entry for a capcode (leading zeros are ignored)."""
        return lookup_capcode_impl(reference, code)

    @mcp.tool()
    def find_location(text: str) -> dict[str, Any]:
        """Find the longest known place name in free text."""
        return find_location_impl(reference, text)

    @mcp.tool()
    def expand_abbreviation(token: str) -> dict[str, Any]:
        """Expand an abbreviation, or every abbreviation found in a text."""
        return expand_abbreviation_impl(reference, token)

    return mcp


def main() -> None:
    """Load reference data and start the MCP server over stdio."""
    _configure_logging()
    try:
        reference = load_reference_data(ReferencePaths.from_env())
    except LoadError as exc:
        LOGGER.error("Cannot start: %s", exc)
        raise SystemExit(2) from exc
    LOGGER.debug("Starting MCP server (transport=stdio)")
    build_server(reference).run(transport="stdio")


if __name__ == "__main__":
    main()
