"""Load every reference dataset once, at startup."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from ..config import ReferencePaths
from .abbreviations import AbbreviationGlossary
from .capcodes import CapcodeDirectory
from .gazetteer import Gazetteer

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ReferenceData:
    """The three read-only resolvers, shared by every enrichment call."""

    capcodes: CapcodeDirectory
    abbreviations: AbbreviationGlossary
    gazetteer: Gazetteer


def load_reference_data(paths: ReferencePaths | None = None) -> ReferenceData:
    """Load all reference files; raises ``LoadError`` on any required file."""
    paths = paths or ReferencePaths.from_env()
    logger.debug("Loading reference data: %s", paths)
    return ReferenceData(
        capcodes=CapcodeDirectory.load(paths.capcodes),
        abbreviations=AbbreviationGlossary.load(paths.abbreviations),
        gazetteer=Gazetteer.load(paths.observations, paths.region_codes, paths.coordinates),
    )
