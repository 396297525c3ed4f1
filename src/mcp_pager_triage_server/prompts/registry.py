"""MCP prompt registry.

Prompts are predefined conversation/workflow templates that the client can invoke explicitly.
"""

from __future__ import annotations

from typing import Any

from mcp.server.fastmcp import FastMCP


def register_prompts(mcp: FastMCP) -> None:
    """Register prompt templates on the MCP server."""

    @mcp.prompt()
    def triage_pager_file(
        path: str,
        query: str | None = None,
        limit: int = 50,
    ) -> list[dict[str, Any]]:
        """Build a prompt for an incident overview of a transmission file."""
        call_lines = [f"- path: {path}", f"- limit: {limit}"]
        if query:
            call_lines.append(f"- query: {query}")
        call_block = "\n".join(call_lines)
        return [
            {
                "role": "system",
                "content": (
                    "You are an emergency dispatch analyst reading P2000 pager traffic. "
                    "Summarize incidents from the structured messages you are given. "
                    "Do not invent details; if a field is missing, say so."
                ),
            },
            {
                "role": "user",
                "content": (
                    "Triage the transmission file using triage_messages. Follow this workflow:\n"
                    "- Always call triage_messages first with the parameters below.\n"
                    "- Group messages that share an incident code and location.\n"
                    "- Use priority (A1/P1 most urgent, B lowest) to order the groups.\n"
                    "- Quote capcode descriptions and abbreviation expansions as returned; "
                    "use lookup_capcode, find_location or expand_abbreviation for anything "
                    "left unexplained.\n"
                    "- Mention rejected lines only as a count.\n\n"
                    "Call triage_messages with:\n"
                    f"{call_block}\n\n"
                    "Return this structure:\n"
                    "1) Overview (message count, time span)\n"
                    "2) Incidents by priority: time, priority, code, location, units\n"
                    "3) Open questions\n"
                ),
            },
        ]
