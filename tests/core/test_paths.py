from __future__ import annotations

from pathlib import Path

import pytest

from mcp_pager_triage_server.core.paths import base_dir, resolve_allowed_file, safe_resolve


def test_base_dir_defaults_to_cwd(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.delenv("PAGER_TRIAGE_BASE_DIR", raising=False)
    monkeypatch.chdir(tmp_path)
    assert base_dir() == tmp_path.resolve()


def test_safe_resolve_rejects_escape(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("PAGER_TRIAGE_BASE_DIR", str(tmp_path))
    assert safe_resolve("p2000.txt") == (tmp_path / "p2000.txt").resolve()
    with pytest.raises(ValueError, match="escapes"):
        safe_resolve("../outside.txt")
    with pytest.raises(ValueError, match="escapes"):
        safe_resolve("/etc/passwd")


def test_resolve_allowed_file_checks_suffix(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    monkeypatch.setenv("PAGER_TRIAGE_BASE_DIR", str(tmp_path))
    (tmp_path / "p2000.txt").write_text("x\n", encoding="utf-8")
    (tmp_path / "p2000.log.gz").write_bytes(b"")
    (tmp_path / "notes.exe").write_text("x\n", encoding="utf-8")

    assert resolve_allowed_file("p2000.txt").name == "p2000.txt"
    assert resolve_allowed_file("p2000.log.gz").name == "p2000.log.gz"
    with pytest.raises(ValueError, match="not allowed"):
        resolve_allowed_file("notes.exe")
    with pytest.raises(FileNotFoundError):
        resolve_allowed_file("missing.txt")
