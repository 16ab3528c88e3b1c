"""Incremental UTF-8 reader that turns a byte stream into cumulative text."""

import codecs
import logging
from typing import AsyncIterable, AsyncIterator, Optional

from .errors import BodyNotReadable

logger = logging.getLogger(__name__)


class StreamReader:
    """Reads a byte stream and exposes the text decoded so far.

    Bytes of a character still incomplete when the stream ends are dropped.

    Iterating the reader yields the cumulative text once per chunk received,
    in receipt order. A multi-byte character split across two chunks is held
    back by the decoder until its remaining bytes arrive, so the snapshot for
    a chunk holding only part of a character repeats the previous one.

    A reader is single-pass: it owns one decoder and one accumulator and can
    only be iterated once.

    Args:
        body: Async iterable of byte chunks, e.g. ``response.aiter_bytes()``.
            ``None`` means the response has no body.
    """

    def __init__(self, body: Optional[AsyncIterable[bytes]]):
        if body is None:
            raise BodyNotReadable()
        self._body = body
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="replace")
        self._text = ""
        self._started = False
        self.chunk_count = 0

    @property
    def text(self) -> str:
        """Cumulative text decoded so far."""
        return self._text

    def _append(self, decoded: str) -> None:
        if decoded:
            self._text += decoded

    def __aiter__(self) -> AsyncIterator[str]:
        return self._snapshots()

    async def _snapshots(self) -> AsyncIterator[str]:
        if self._started:
            raise RuntimeError("StreamReader can only be iterated once")
        self._started = True

        async for chunk in self._body:
            self.chunk_count += 1
            self._append(self._decoder.decode(chunk))
            yield self._text

        logger.debug("Stream ended after %d chunk(s), %d chars", self.chunk_count, len(self._text))

    async def read_all(self) -> str:
        """Drain the stream and return the final text."""
        async for _ in self:
            pass
        return self._text
