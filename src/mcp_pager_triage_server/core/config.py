"""Reference data locations, resolved from the environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

DATA_DIR_ENV = "PAGER_TRIAGE_DATA_DIR"
CAPCODES_ENV = "PAGER_TRIAGE_CAPCODES"
ABBREVIATIONS_ENV = "PAGER_TRIAGE_ABBREVIATIONS"
OBSERVATIONS_ENV = "PAGER_TRIAGE_OBSERVATIONS"
REGION_CODES_ENV = "PAGER_TRIAGE_REGION_CODES"
COORDINATES_ENV = "PAGER_TRIAGE_COORDINATES"

DEFAULT_DATA_DIR = "data"


@dataclass(frozen=True, slots=True)
class ReferencePaths:
    """Paths of the reference files loaded at startup."""

    capcodes: Path
    abbreviations: Path
    observations: Path
    region_codes: Path
    coordinates: Path | None = None  # optional

    @classmethod
    def from_dir(cls, data_dir: str | Path) -> ReferencePaths:
        base = Path(data_dir)
        return cls(
            capcodes=base / "capcodelist.csv",
            abbreviations=base / "abbreviations.txt",
            observations=base / "Observations.csv",
            region_codes=base / "RegioSCodes.csv",
            coordinates=base / "4pp-final-2023.csv",
        )

    @classmethod
    def from_env(cls, data_dir: str | Path | None = None) -> ReferencePaths:
        """Defaults under the data dir, each overridable by its own env var."""
        base = cls.from_dir(data_dir or os.getenv(DATA_DIR_ENV) or DEFAULT_DATA_DIR)

        def pick(env: str, default: Path | None) -> Path | None:
            value = os.getenv(env)
            return Path(value) if value else default

        return cls(
            capcodes=pick(CAPCODES_ENV, base.capcodes),
            abbreviations=pick(ABBREVIATIONS_ENV, base.abbreviations),
            observations=pick(OBSERVATIONS_ENV, base.observations),
            region_codes=pick(REGION_CODES_ENV, base.region_codes),
            coordinates=pick(COORDINATES_ENV, base.coordinates),
        )
