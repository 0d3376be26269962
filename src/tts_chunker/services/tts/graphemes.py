"""
Grapheme Source for the TTS Chunker.

Turns strings, UTF-8 byte strings, byte readers and streams of text/byte
pieces into a lazy sequence of Unicode extended grapheme clusters.

Byte input is decoded incrementally, so a multi-byte code point split across
two reads is reassembled. The last cluster seen so far is always held back
until more input arrives: a combining mark, a zero-width joiner or the
``\\n`` of a CRLF pair can still extend it.

Usage:
    async for cluster in read_grapheme_clusters(stream_reader):
        ...

    for cluster in iter_grapheme_clusters("naïve café"):
        ...
"""

from __future__ import annotations

import codecs
import inspect
from collections.abc import AsyncIterator, Iterator
from typing import Any, Optional, Union

import regex

from ...config import get_settings

_CLUSTER_RE = regex.compile(r"\X")

_BYTES_TYPES = (bytes, bytearray, memoryview)

Piece = Union[str, bytes, bytearray, memoryview]


def split_graphemes(text: str) -> list[str]:
    """Split complete text into extended grapheme clusters."""
    return _CLUSTER_RE.findall(text)


class GraphemeReader:
    """
    Incremental grapheme splitter.

    Feed it ``str`` or UTF-8 ``bytes`` pieces in order; each call returns the
    clusters that can no longer change. Call ``close()`` once the input ends
    to get the remaining clusters.
    """

    def __init__(self) -> None:
        self._decoder = codecs.getincrementaldecoder("utf-8")(errors="strict")
        self._pending = ""

    def feed(self, piece: Piece) -> list[str]:
        if isinstance(piece, str):
            text = piece
        elif isinstance(piece, _BYTES_TYPES):
            text = self._decoder.decode(bytes(piece))
        else:
            raise TypeError(
                f"Expected str or bytes input piece, got {type(piece).__name__}"
            )

        if not text:
            return []

        clusters = split_graphemes(self._pending + text)
        self._pending = clusters.pop()
        return clusters

    def close(self) -> list[str]:
        """Finish decoding and return every cluster still held back."""
        # Raises UnicodeDecodeError on a truncated trailing sequence
        text = self._pending + self._decoder.decode(b"", final=True)
        self._pending = ""
        return split_graphemes(text) if text else []


def _one_shot(source: Any) -> Optional[list[str]]:
    if isinstance(source, str):
        return split_graphemes(source)
    if isinstance(source, _BYTES_TYPES):
        return split_graphemes(bytes(source).decode("utf-8"))
    return None


def _has_read(source: Any) -> bool:
    return callable(getattr(source, "read", None))


async def read_grapheme_clusters(
    source: Any,
    read_size: Optional[int] = None,
) -> AsyncIterator[str]:
    """
    Yield extended grapheme clusters from any supported source.

    Args:
        source: A ``str``, UTF-8 bytes, an object with an (async or sync)
                ``read(n)`` method, or a sync/async iterable of ``str`` or
                ``bytes`` pieces.
        read_size: Bytes requested per ``read()`` call. Defaults to the
                   configured ``read_size``.

    Yields:
        Grapheme clusters in input order.

    Raises:
        TypeError: The source type is not supported.
        UnicodeDecodeError: The byte input is not valid UTF-8.
    """
    clusters = _one_shot(source)
    if clusters is not None:
        for cluster in clusters:
            yield cluster
        return

    reader = GraphemeReader()

    if _has_read(source):
        if read_size is None:
            read_size = get_settings().read_size
        while True:
            piece = source.read(read_size)
            if inspect.isawaitable(piece):
                piece = await piece
            if not piece:
                break
            for cluster in reader.feed(piece):
                yield cluster
    elif hasattr(source, "__aiter__"):
        async for piece in source:
            for cluster in reader.feed(piece):
                yield cluster
    elif hasattr(source, "__iter__"):
        for piece in source:
            for cluster in reader.feed(piece):
                yield cluster
    else:
        raise TypeError(f"Unsupported text source: {type(source).__name__}")

    for cluster in reader.close():
        yield cluster


def iter_grapheme_clusters(
    source: Any,
    read_size: Optional[int] = None,
) -> Iterator[str]:
    """
    Synchronous counterpart of ``read_grapheme_clusters``.

    Accepts ``str``, UTF-8 bytes, objects with a blocking ``read(n)`` and
    sync iterables of ``str``/``bytes`` pieces.
    """
    clusters = _one_shot(source)
    if clusters is not None:
        yield from clusters
        return

    reader = GraphemeReader()

    if _has_read(source):
        if read_size is None:
            read_size = get_settings().read_size
        while True:
            piece = source.read(read_size)
            if inspect.isawaitable(piece):
                if inspect.iscoroutine(piece):
                    piece.close()
                raise TypeError(
                    "Asynchronous readers require read_grapheme_clusters()"
                )
            if not piece:
                break
            yield from reader.feed(piece)
    elif hasattr(source, "__iter__"):
        for piece in source:
            yield from reader.feed(piece)
    else:
        raise TypeError(f"Unsupported text source: {type(source).__name__}")

    yield from reader.close()


__all__ = [
    "GraphemeReader",
    "iter_grapheme_clusters",
    "read_grapheme_clusters",
    "split_graphemes",
]
