from __future__ import annotations

from pathlib import Path

import pytest

from mcp_pager_triage_server.core.config import ReferencePaths
from mcp_pager_triage_server.core.errors import LoadError
from mcp_pager_triage_server.core.reference import load_reference_data


def test_from_env_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    for env in (
        "PAGER_TRIAGE_DATA_DIR",
        "PAGER_TRIAGE_CAPCODES",
        "PAGER_TRIAGE_ABBREVIATIONS",
        "PAGER_TRIAGE_OBSERVATIONS",
        "PAGER_TRIAGE_REGION_CODES",
        "PAGER_TRIAGE_COORDINATES",
    ):
        monkeypatch.delenv(env, raising=False)

    paths = ReferencePaths.from_env()
    assert paths.capcodes == Path("data") / "capcodelist.csv"
    assert paths.region_codes == Path("data") / "RegioSCodes.csv"
    assert paths.coordinates == Path("data") / "4pp-final-2023.csv"


def test_from_env_overrides(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PAGER_TRIAGE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("PAGER_TRIAGE_ABBREVIATIONS", "/etc/afkortingen.txt")
    monkeypatch.delenv("PAGER_TRIAGE_CAPCODES", raising=False)

    paths = ReferencePaths.from_env()
    assert paths.capcodes == tmp_path / "capcodelist.csv"
    assert paths.abbreviations == Path("/etc/afkortingen.txt")

    explicit = ReferencePaths.from_env(tmp_path / "other")
    assert explicit.capcodes == tmp_path / "other" / "capcodelist.csv"


def test_load_reference_data(reference_paths: ReferencePaths) -> None:
    reference = load_reference_data(reference_paths)
    assert len(reference.capcodes) == 4
    assert len(reference.abbreviations) == 5
    assert len(reference.gazetteer) == 3


def test_load_reference_data_missing_file_is_fatal(reference_paths: ReferencePaths) -> None:
    reference_paths.abbreviations.unlink()
    with pytest.raises(LoadError):
        load_reference_data(reference_paths)
