from __future__ import annotations

from pathlib import Path

import pytest

from mcp_pager_triage_server.core.config import ReferencePaths
from mcp_pager_triage_server.core.errors import LoadError
from mcp_pager_triage_server.core.reference import NO_ABBREVIATIONS, AbbreviationGlossary


@pytest.fixture
def glossary(reference_paths: ReferencePaths) -> AbbreviationGlossary:
    return AbbreviationGlossary.load(reference_paths.abbreviations)


def test_load_skips_malformed_lines(glossary: AbbreviationGlossary) -> None:
    assert len(glossary) == 5
    assert glossary.expand("LEEG") is None
    assert glossary.expand("geen dubbele punt") is None


def test_exact_lookup(glossary: AbbreviationGlossary) -> None:
    assert glossary.expand("BDH") == "Brandweer dienstverlening hulpverlening"
    assert glossary.expand("bdh") is None


def test_value_split_at_first_colon() -> None:
    glossary = AbbreviationGlossary.from_lines(["DIA: Directe inzet: ja"])
    assert glossary.expand("DIA") == "Directe inzet: ja"


def test_space_stripped_fallback(glossary: AbbreviationGlossary) -> None:
    assert glossary.expand("OMS 1") == "Openbaar meldsysteem, eerste melding"
    assert glossary.expand("OMS1") == "Openbaar meldsysteem, eerste melding"
    assert glossary.expand("O MS1") == "Openbaar meldsysteem, eerste melding"
    assert glossary.expand("   ") is None


def test_adjacent_tokens_are_concatenated(glossary: AbbreviationGlossary) -> None:
    pairs = glossary.find_in_text("P 1 BDH Ongeval")
    assert pairs == [
        ("P1", "Prio 1, met spoed"),
        ("BDH", "Brandweer dienstverlening hulpverlening"),
    ]


def test_concatenation_uses_space_stripped_index(glossary: AbbreviationGlossary) -> None:
    assert glossary.find_in_text("P 2 BDH-07 Ongeval") == [("P2", "Prio 2, normaal")]


def test_each_literal_reported_once_in_first_occurrence_order(
    glossary: AbbreviationGlossary,
) -> None:
    text = glossary.expand_text("TS BDH brand TS BDH")
    assert text == "TS: Tankautospuit; BDH: Brandweer dienstverlening hulpverlening"


def test_no_match_placeholder(glossary: AbbreviationGlossary) -> None:
    assert glossary.expand_text("niets bekends hier") == NO_ABBREVIATIONS
    assert glossary.expand_text("") == NO_ABBREVIATIONS


def test_load_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(LoadError):
        AbbreviationGlossary.load(tmp_path / "missing.txt")
