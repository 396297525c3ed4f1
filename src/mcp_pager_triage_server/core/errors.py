"""Exceptions raised by the parser and the reference data loaders."""

from __future__ import annotations


class ParseError(ValueError):
    """A transmission line could not be turned into a message."""


class InvalidFormat(ParseError):
    """The line has fewer than the required pipe-delimited fields."""


class InvalidTimestamp(ParseError):
    """The timestamp field does not match ``YYYY-MM-DD HH:MM:SS``."""


class LoadError(RuntimeError):
    """A required reference file is missing or unreadable."""
