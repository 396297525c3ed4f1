"""File access rules shared by the MCP tools and resources.

Every path a client hands in is resolved under ``PAGER_TRIAGE_BASE_DIR``
(default: the working directory) and must be a text file with an allowed
suffix, optionally gzipped.
"""

from __future__ import annotations

import os
from pathlib import Path

ALLOWED_FILE_SUFFIXES = {".txt", ".log", ".csv"}
BASE_DIR_ENV = "PAGER_TRIAGE_BASE_DIR"


def base_dir() -> Path:
    """Return the resolved base directory for client-supplied paths."""
    raw = os.getenv(BASE_DIR_ENV, os.getcwd())
    return Path(raw).resolve()


def safe_resolve(path: str | Path) -> Path:
    """Resolve a path under the configured base directory."""
    base = base_dir()
    p = Path(path).expanduser()
    if not p.is_absolute():
        p = base / p
    p = p.resolve()
    if base not in p.parents and p != base:
        raise ValueError("Path escapes base dir")
    return p


def resolve_allowed_file(path: str | Path) -> Path:
    """Resolve ``path`` and check that it is an existing file of an allowed type."""
    resolved = safe_resolve(path)
    if not resolved.is_file():
        raise FileNotFoundError(f"File not found: {resolved}")
    suffix = resolved.suffix.lower()
    if suffix == ".gz":
        suffix = resolved.with_suffix("").suffix.lower()
    if suffix not in ALLOWED_FILE_SUFFIXES:
        allowed = ", ".join(sorted(ALLOWED_FILE_SUFFIXES))
        raise ValueError(f"File type not allowed. Allowed: {allowed}.")
    return resolved
