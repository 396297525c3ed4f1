"""Reading transmission files into parsed messages.

Lines that fail to parse are dropped with a warning; one bad line never
stops the rest of the file.
"""

from __future__ import annotations

import gzip
import logging
from collections.abc import AsyncIterator, Callable, Iterable
from contextlib import asynccontextmanager
from dataclasses import dataclass, field
from pathlib import Path

import aiofiles
from aiofiles.threadpool import wrap

from .errors import ParseError
from .models import ParsedMessage
from .parser import MessageParser

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RejectedLine:
    """A line that could not be parsed, kept for diagnostics."""

    line_no: int
    line: str
    reason: str


@dataclass(slots=True)
class MessageBatch:
    messages: list[ParsedMessage] = field(default_factory=list)
    rejected: list[RejectedLine] = field(default_factory=list)


def matches_query(message: ParsedMessage, query: str | None) -> bool:
    """Case-insensitive match against content, priority or location."""
    if not query:
        return True
    q = query.lower()
    return (
        q in message.content.lower()
        or (message.priority is not None and q in message.priority.lower())
        or q in message.location.lower()
    )


@asynccontextmanager
async def _open_text(path: Path, *, encoding: str, decode_errors: str):
    """Open a transmission file for async text reading (plain or gzip)."""
    if path.suffix.lower() == ".gz":
        f = gzip.open(path, mode="rt", encoding=encoding, errors=decode_errors)
        af = wrap(f)
        try:
            yield af
        finally:
            await af.close()
    else:
        async with aiofiles.open(path, encoding=encoding, errors=decode_errors) as f:
            yield f


def _parse_one(
    parser: MessageParser,
    line_no: int,
    line: str,
    on_reject: Callable[[RejectedLine], None] | None,
) -> ParsedMessage | None:
    line = line.rstrip("\r\n")
    if not line.strip():
        return None
    try:
        return parser.parse(line, line_no)
    except ParseError as exc:
        logger.warning("Failed to parse line %s: %s", line_no, exc)
        if on_reject is not None:
            on_reject(RejectedLine(line_no=line_no, line=line, reason=str(exc)))
        return None


async def iter_messages(
    path: str | Path,
    *,
    parser: MessageParser | None = None,
    query: str | None = None,
    contains: str | None = None,
    encoding: str = "utf-8",
    decode_errors: str = "replace",
    on_reject: Callable[[RejectedLine], None] | None = None,
) -> AsyncIterator[ParsedMessage]:
    """Yield parsed messages from a file, in file order.

    ``contains`` filters on the raw line before parsing; ``query`` applies
    ``matches_query`` to the parsed message.
    """
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Message file not found: {path}")

    parser = parser or MessageParser()

    async with _open_text(path, encoding=encoding, decode_errors=decode_errors) as f:
        async for line_no, line in _enumerate_async(f, start=1):
            if contains is not None and contains not in line:
                continue
            message = _parse_one(parser, line_no, line, on_reject)
            if message is None or not matches_query(message, query):
                continue
            yield message


async def read_messages(
    path: str | Path,
    *,
    on_reject: Callable[[RejectedLine], None] | None = None,
    **iter_kwargs,
) -> MessageBatch:
    """Collect ``iter_messages`` into a batch, including rejected lines.

    A caller-supplied ``on_reject`` is still called for every rejected line.
    """
    batch = MessageBatch()

    def _reject(rejected: RejectedLine) -> None:
        batch.rejected.append(rejected)
        if on_reject is not None:
            on_reject(rejected)

    async for message in iter_messages(path, on_reject=_reject, **iter_kwargs):
        batch.messages.append(message)
    return batch


def parse_lines(
    lines: Iterable[str],
    *,
    parser: MessageParser | None = None,
    query: str | None = None,
) -> MessageBatch:
    """Parse an in-memory or streamed sequence of lines (e.g. stdin)."""
    parser = parser or MessageParser()
    batch = MessageBatch()
    for line_no, line in enumerate(lines, start=1):
        message = _parse_one(parser, line_no, line, batch.rejected.append)
        if message is not None and matches_query(message, query):
            batch.messages.append(message)
    return batch


async def _enumerate_async(iterable, start: int = 0):
    """Async enumerate helper for async iterators."""
    index = start
    async for item in iterable:
        yield index, item
        index += 1
