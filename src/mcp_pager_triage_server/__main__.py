"""Module entrypoint.

Allows:
    python -m mcp_pager_triage_server
"""

from __future__ import annotations

from mcp_pager_triage_server.server.pager_server import main

if __name__ == "__main__":
    main()
