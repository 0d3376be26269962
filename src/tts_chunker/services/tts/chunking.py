"""Entry points that run a grapheme source through the text segmenter."""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Iterator, Optional

from ...config import get_settings
from ...schemas.chunk_options import ChunkOptions
from .graphemes import iter_grapheme_clusters, read_grapheme_clusters
from .text_segmenter import TextSegmenter
from .types import Chunk

logger = logging.getLogger(__name__)


def resolve_options(
    options: Optional[ChunkOptions] = None,
    *,
    boost: Optional[int] = None,
    minimum_words: Optional[int] = None,
    maximum_words: Optional[int] = None,
    preserve_clusters: Optional[bool] = None,
) -> ChunkOptions:
    """
    Combine base options with per-invocation overrides.

    The base is ``options`` when given, otherwise the configured defaults.
    Overrides left as ``None`` keep the base value.
    """
    base = options if options is not None else get_settings().chunk_options()
    overrides = {
        key: value
        for key, value in {
            "boost": boost,
            "minimum_words": minimum_words,
            "maximum_words": maximum_words,
            "preserve_clusters": preserve_clusters,
        }.items()
        if value is not None
    }
    if not overrides:
        return base
    return ChunkOptions.model_validate({**base.model_dump(), **overrides})


async def chunk_tts_input(
    source: Any,
    options: Optional[ChunkOptions] = None,
    *,
    boost: Optional[int] = None,
    minimum_words: Optional[int] = None,
    maximum_words: Optional[int] = None,
    preserve_clusters: Optional[bool] = None,
) -> AsyncIterator[Chunk]:
    """
    Split a string or UTF-8 byte stream into chunks suitable for TTS synthesis.

    Chunks are produced lazily: the source is only read while the consumer
    keeps asking for chunks, so closing the generator stops reading.
    Failures raised by the source propagate unchanged.

    Args:
        source: Text, UTF-8 bytes, an async/sync byte reader or an iterable
                of text/byte pieces (see ``read_grapheme_clusters``)
        options: Base options; defaults to the configured ``Settings``
        boost: Number of chunks emitted with greedier rules to reduce the
               initial delay on long input
        minimum_words: Minimum number of words in a chunk flushed early by
                       the word limit
        maximum_words: Maximum number of words in a chunk
        preserve_clusters: Keep multi-code-point grapheme clusters

    Yields:
        Chunks in input order
    """
    segmenter = TextSegmenter(
        resolve_options(
            options,
            boost=boost,
            minimum_words=minimum_words,
            maximum_words=maximum_words,
            preserve_clusters=preserve_clusters,
        )
    )

    async for grapheme in read_grapheme_clusters(source):
        for chunk in segmenter.consume(grapheme):
            yield chunk

    for chunk in segmenter.flush():
        yield chunk

    logger.debug(f"Chunking complete: {segmenter.emitted_count} chunks")


def iter_tts_chunks(
    source: Any,
    options: Optional[ChunkOptions] = None,
    *,
    boost: Optional[int] = None,
    minimum_words: Optional[int] = None,
    maximum_words: Optional[int] = None,
    preserve_clusters: Optional[bool] = None,
) -> Iterator[Chunk]:
    """Synchronous counterpart of ``chunk_tts_input`` for blocking sources."""
    segmenter = TextSegmenter(
        resolve_options(
            options,
            boost=boost,
            minimum_words=minimum_words,
            maximum_words=maximum_words,
            preserve_clusters=preserve_clusters,
        )
    )

    for grapheme in iter_grapheme_clusters(source):
        yield from segmenter.consume(grapheme)

    yield from segmenter.flush()

    logger.debug(f"Chunking complete: {segmenter.emitted_count} chunks")


def chunk_text(
    text: str,
    options: Optional[ChunkOptions] = None,
    **overrides: Any,
) -> list[Chunk]:
    """Chunk a complete string eagerly."""
    return list(iter_tts_chunks(text, options, **overrides))


__all__ = ["chunk_text", "chunk_tts_input", "iter_tts_chunks", "resolve_options"]
