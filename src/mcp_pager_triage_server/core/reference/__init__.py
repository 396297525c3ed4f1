"""Reference datasets: capcode directory, abbreviation glossary, gazetteer."""

from __future__ import annotations

from .abbreviations import NO_ABBREVIATIONS, AbbreviationGlossary
from .capcodes import CapcodeDirectory, normalize_code
from .gazetteer import Gazetteer, GazetteerBuilder
from .loader import ReferenceData, load_reference_data

__all__ = [
    "AbbreviationGlossary",
    "CapcodeDirectory",
    "Gazetteer",
    "GazetteerBuilder",
    "NO_ABBREVIATIONS",
    "ReferenceData",
    "load_reference_data",
    "normalize_code",
]
