"""MCP resource registry.

Resources are addressable by URI and can be fetched by the MCP client on demand.
"""

from __future__ import annotations

import asyncio
import gzip
from pathlib import Path
from typing import Any

from mcp.server.fastmcp import FastMCP

from mcp_pager_triage_server.core.paths import (
    ALLOWED_FILE_SUFFIXES,
    BASE_DIR_ENV,
    base_dir,
    resolve_allowed_file,
)
from mcp_pager_triage_server.core.schemas import EnrichedMessageModel

TEXT_ENCODING = "utf-8"
TEXT_ERRORS = "replace"

SAMPLE_TRANSMISSIONS = (
    "FLEX|2026-01-01 20:14:32|1600/2/K/A|03.091|002029575 001503282|ALN|"
    "P 2 BDH-07 Ongeval (los object) Gangetje Leiden 169252\n"
    "FLEX|2026-01-01 20:15:03|1600/2/K/A|03.091|000120901|ALN|"
    "A1 Duizel Rit: 461\n"
    "FLEX|2026-01-01 20:16:40|1600/2/K/A|03.091|001720117|ALN|"
    "B 2 BRT-03 Brandgerucht Dorpsstraat Montferland\n"
)


def _open_text(path: Path) -> str:
    """Read text from a file, supporting optional gzip compression."""
    if path.suffix.lower() == ".gz":
        with gzip.open(path, mode="rt", encoding=TEXT_ENCODING, errors=TEXT_ERRORS) as f:
            return f.read()
    return path.read_text(encoding=TEXT_ENCODING, errors=TEXT_ERRORS)


def register_resources(mcp: FastMCP) -> None:
    """Register resource handlers on the MCP server."""

    @mcp.resource("app://pager-triage/help")
    def help_resource() -> str:
        """Return a short list of available resource URIs."""
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        return (
            "Resources:\n"
            "- app://pager-triage/help\n"
            "- app://pager-triage/examples/sample-transmissions\n"
            "- app://pager-triage/schemas/enriched-message\n"
            f"- file://{{path}} (restricted to {BASE_DIR_ENV}; allowed: {allowed}, .gz)\n"
            "\nLine format: protocol|YYYY-MM-DD HH:MM:SS (UTC)|address|frequency|"
            "capcodes|type|content\n"
            f"\nBase directory: {base_dir()}\n"
        )

    @mcp.resource("app://pager-triage/examples/sample-transmissions")
    def sample_transmissions() -> str:
        """Return a few sample transmission lines for demos and tests."""
        return SAMPLE_TRANSMISSIONS

    @mcp.resource("app://pager-triage/schemas/enriched-message")
    def enriched_message_schema() -> dict[str, Any]:
        """Return the JSON schema of an enriched message entry."""
        return EnrichedMessageModel.model_json_schema()

    @mcp.resource("file://{path}")
    async def read_file(path: str) -> str:
        """Read a text file from within PAGER_TRIAGE_BASE_DIR."""
        p = resolve_allowed_file(path)
        return await asyncio.to_thread(_open_text, p)
