from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from mcp_pager_triage_server.core.config import ReferencePaths
from mcp_pager_triage_server.core.reference import ReferenceData, load_reference_data

SAMPLE_LINE = (
    "FLEX|2026-01-01 20:14:32|1600/2/K/A|03.091|002029575 001503282|ALN|"
    "P 2 BDH-07 Ongeval (los object) Gangetje Leiden 169252"
)

CAPCODES = [
    '"0002029575";"Brandweer";"Hollands Midden";"Leiden";"Brandweer Leiden Tankautospuit";"TS 16-4231"',
    '"1503282";"Ambulance";"Hollands Midden";"Leiden";"";"AMB 16-103"',
    '"0001720117";"Brandweer";"Noord- en Oost-Gelderland";"Didam";"Brandweer Didam";"TS 06-1531"',
    "0000;Test;Test;Test;Nulcode;NUL",
    "123;too;short",
]

ABBREVIATIONS = [
    "P1: Prio 1, met spoed",
    "P 2: Prio 2, normaal",
    "BDH: Brandweer dienstverlening hulpverlening",
    "TS: Tankautospuit",
    "OMS 1: Openbaar meldsysteem, eerste melding",
    "",
    "geen dubbele punt",
    ": lege sleutel",
    "LEEG:   ",
]

OBSERVATIONS = [
    "ID;Measure;WijkenEnBuurten;Perioden;Value;ValueAttribute",
    "0;GM000C;WP0001;2023JJ00;Leiden;None",
    "1;PV0002;WP0001;2023JJ00;Zuid-Holland;None",
    "2;LD0002;WP0001;2023JJ00;West-Nederland;None",
    "3;GM000C;WP0002;2023JJ00;'s-Gravenhage;None",
    "4;PV0002;WP0002;2023JJ00;Zuid-Holland;None",
    "5;LD0002;WP0002;2023JJ00;West-Nederland;None",
    "6;GM000C;WP0003;2023JJ00;Montferland;None",
    "7;PV0002;WP0003;2023JJ00;Gelderland;None",
    "8;LD0002;WP0003;2023JJ00;Oost-Nederland;None",
    "9;XX0001;WP0001;2023JJ00;ignored;None",
    "10;GM000C;WP0004",
]

REGION_CODES = [
    '"Key";"Code";"Description";"CategoryGroupID";"Title"',
    '"WP0002";"GM0518";"";"1";"Den Haag"',
    '"WP0001";"GM0546";"";"1";"Leiden"',
    '"WP0003";"GM1955";"";"1";"Didam"',
    '"WP0009";"GM9999";"";"1";"Nergenshuizen"',
    '"WP0001";"GM0546";"";"1";"Ab"',
]

COORDINATES = [
    "postcode,woonplaats,gemeente,provincie,latitude,longitude",
    '2311,"Leiden",Leiden,Zuid-Holland,52.158,4.492',
    "6942,Didam,Montferland,Gelderland,51.94,6.13",
    "9999,Nergens,Nergens,Nergens,not-a-number,1.0",
]


def _write_lines(path: Path, lines: list[str]) -> None:
    path.write_text("\n".join(lines) + "\n", encoding="utf-8")


@pytest.fixture
def reference_paths(tmp_path: Path) -> ReferencePaths:
    data = tmp_path / "data"
    data.mkdir()
    paths = ReferencePaths.from_dir(data)
    _write_lines(paths.capcodes, CAPCODES)
    _write_lines(paths.abbreviations, ABBREVIATIONS)
    _write_lines(paths.observations, OBSERVATIONS)
    _write_lines(paths.region_codes, REGION_CODES)
    assert paths.coordinates is not None
    _write_lines(paths.coordinates, COORDINATES)
    return paths


@pytest.fixture
def reference(reference_paths: ReferencePaths) -> ReferenceData:
    return load_reference_data(reference_paths)


@pytest.fixture
def write_transmissions() -> Callable[[Path], None]:
    def _write(path: Path) -> None:
        _write_lines(
            path,
            [
                SAMPLE_LINE,
                "garbage without pipes",
                "",
                "FLEX|2026-01-01 20:15:03|1600/2/K/A|03.091|000120901|ALN|A1 Duizel Rit: 461",
                "FLEX|01-01-2026 20:16:00|1600/2/K/A|03.091|000120901|ALN|A2 bad timestamp",
                "FLEX|2026-01-01 20:16:40|1600/2/K/A|03.091|001720117|ALN|"
                "B 2 BRT-03 Brandgerucht Dorpsstraat Didam",
            ],
        )

    return _write


@pytest.fixture
def sample_line() -> str:
    return SAMPLE_LINE
