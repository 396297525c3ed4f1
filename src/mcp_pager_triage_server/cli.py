from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from mcp_pager_triage_server.core.config import ReferencePaths
from mcp_pager_triage_server.core.enrichment import Enricher
from mcp_pager_triage_server.core.errors import LoadError
from mcp_pager_triage_server.core.message_service import MessageBatch, parse_lines, read_messages
from mcp_pager_triage_server.core.models import EnrichedMessage
from mcp_pager_triage_server.core.reference import load_reference_data


def _format(e: EnrichedMessage, *, include_raw: bool) -> str:
    msg = e.message
    ts = msg.timestamp.strftime("%Y-%m-%d %H:%M:%S")
    lines = [
        f"{msg.line_no} {ts} [{msg.priority or '?'}] {msg.content}",
        f"    code: {msg.incident_code or '-'} | type: {msg.message_type} | freq: {msg.frequency}",
        f"    location: {e.location or '-'}",
        f"    units: {e.capcode_display or '-'}",
        f"    abbreviations: {e.abbreviations}",
    ]
    if include_raw and msg.raw is not None:
        lines.append(f"    raw: {msg.raw}")
    return "\n".join(lines)


def _read(path: str | None, query: str | None) -> MessageBatch:
    if path is None or path == "-":
        print("Reading from stdin... (or provide a file path as argument)", file=sys.stderr)
        return parse_lines(sys.stdin, query=query)
    return asyncio.run(read_messages(Path(path), query=query))


def main() -> None:
    p = argparse.ArgumentParser(description="Parse and enrich P2000 pager transmissions.")
    p.add_argument("path", nargs="?", default=None, help="Transmission file (default: stdin)")
    p.add_argument("--data-dir", default=None, help="Reference data directory (default: $PAGER_TRIAGE_DATA_DIR or ./data)")
    p.add_argument("--query", default=None, help="Only show messages whose content, priority or location contains this text")
    p.add_argument("--max", dest="max_results", type=int, default=None, help="Show at most N (most recent) messages")
    p.add_argument("--raw", dest="include_raw", action="store_true", help="Include the raw line")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = p.parse_args()
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.max_results is not None and args.max_results <= 0:
        print("Error: --max must be > 0", file=sys.stderr)
        raise SystemExit(2)

    try:
        reference = load_reference_data(ReferencePaths.from_env(args.data_dir))
        batch = _read(args.path, args.query)
    except LoadError as e:
        print(f"Error: {e}", file=sys.stderr)
        raise SystemExit(2)
    except FileNotFoundError as e:
        print(str(e), file=sys.stderr)
        raise SystemExit(2)

    messages = batch.messages
    if args.max_results is not None:
        messages = messages[-args.max_results:]

    enricher = Enricher(reference)
    for m in messages:
        print(_format(enricher.enrich(m), include_raw=args.include_raw))

    print(f"\nFound {len(messages)} messages ({len(batch.rejected)} lines rejected).")


if __name__ == "__main__":
    main()
