"""
Text Segmenter for Streaming TTS Input.

This module turns a stream of grapheme clusters into bounded, speakable
chunks. It balances two goals:

- Time-to-first-audio: the first ``boost`` chunks are emitted at any
  breakpoint, however short.
- Natural prosody: afterwards chunks run to a hard break (sentence end,
  line break) and soft breaks (commas, colons, ...) only split a chunk that
  would otherwise grow past ``maximum_words``.

Architecture:
    grapheme source → TextSegmenter.consume() → chunks → synthesizer

Two buffers are kept: the pending span (text since the last breakpoint) and
the committed chunk body. A breakpoint commits the pending span to the body
and then decides whether the body is emitted.

Usage:
    segmenter = TextSegmenter(ChunkOptions(boost=2, maximum_words=12))

    for grapheme in graphemes:
        for chunk in segmenter.consume(grapheme):
            await chunk_queue.put(chunk)

    for chunk in segmenter.flush():
        await chunk_queue.put(chunk)
"""

from __future__ import annotations

import logging
from typing import Iterator, List, Optional

from ...schemas.chunk_options import ChunkOptions, get_default_chunk_options
from .classifier import (
    DECIMAL_SEPARATORS,
    GraphemeClass,
    classify,
    contains_digit,
    is_multi_codepoint,
)
from .types import Chunk, ChunkReason
from .word_counter import WordCounter

logger = logging.getLogger(__name__)


class TextSegmenter:
    """
    Stateful chunk accumulator fed one grapheme cluster at a time.

    A ``.`` or ``,`` right after a digit cannot be classified until the next
    cluster is known: between two digits it is a decimal point or thousands
    separator and is dropped, otherwise it is a breakpoint. Such a separator
    is held until the next ``consume()`` or ``flush()``.

    Attributes:
        options: Chunking thresholds for this run
    """

    def __init__(
        self,
        options: Optional[ChunkOptions] = None,
        word_counter: Optional[WordCounter] = None,
    ):
        self.options = options or get_default_chunk_options()
        self._word_counter = word_counter or WordCounter()
        self.reset()

    def reset(self) -> None:
        """Reset segmenter state for reuse."""
        self._buffer = ""
        self._chunk = ""
        self._chunk_words = 0
        self._emitted = 0
        self._previous: Optional[str] = None
        self._held_separator: Optional[str] = None
        self._finished = False

    def consume(self, grapheme: str) -> List[Chunk]:
        """
        Consume one grapheme cluster and return any chunks it completes.

        Args:
            grapheme: Next extended grapheme cluster from the source

        Returns:
            Chunks emitted because of this cluster (usually none or one,
            two when a limit pre-flush precedes a breakpoint emission)
        """
        if self._finished:
            raise RuntimeError("TextSegmenter already flushed; call reset() first")
        return list(self._consume(grapheme))

    def flush(self) -> List[Chunk]:
        """
        Flush remaining text once the source is exhausted.

        Returns:
            The pending chunks, at most two: a held separator may still
            complete a chunk before the final flush chunk.
        """
        if self._finished:
            return []
        chunks: List[Chunk] = []
        if self._held_separator is not None:
            separator = self._held_separator
            self._held_separator = None
            chunks.extend(self._breakpoint(separator, classify(separator)))

        if self._chunk or self._buffer:
            text = (self._chunk + self._buffer).strip()
            words = self._chunk_words + self._word_counter.count(self._buffer)
            chunks.append(self._emit(text, words, ChunkReason.FLUSH))
        self._buffer = ""
        self._finished = True
        return chunks

    @property
    def emitted_count(self) -> int:
        """Chunks emitted so far in this run."""
        return self._emitted

    @property
    def boosting(self) -> bool:
        """Whether the next breakpoint still emits under the boost budget."""
        return self._emitted < self.options.boost

    @property
    def buffer_size(self) -> int:
        """Characters held in the pending span and the committed body."""
        return len(self._chunk) + len(self._buffer)

    def _consume(self, grapheme: str) -> Iterator[Chunk]:
        if self._held_separator is not None:
            separator = self._held_separator
            self._held_separator = None
            # Between digits it is a decimal point or thousands separator: drop it
            if not contains_digit(grapheme):
                yield from self._breakpoint(separator, classify(separator))

        kind = classify(grapheme)

        if not kind.is_breakpoint:
            if is_multi_codepoint(grapheme) and not self.options.preserve_clusters:
                self._previous = grapheme
                return
            self._buffer += grapheme
            self._previous = grapheme
            return

        if grapheme in DECIMAL_SEPARATORS and contains_digit(self._previous):
            self._held_separator = grapheme
            return

        yield from self._breakpoint(grapheme, kind)

    def _breakpoint(self, grapheme: str, kind: GraphemeClass) -> Iterator[Chunk]:
        if not self._buffer:
            # Redundant breakpoint (leading or repeated punctuation)
            self._previous = grapheme
            return

        opts = self.options
        span_words = self._word_counter.count(self._buffer)

        if (
            self._chunk_words > opts.minimum_words
            and self._chunk_words + span_words > opts.maximum_words
        ):
            text = self._chunk.strip()
            if kind is GraphemeClass.EMPHASIS:
                text += grapheme
            yield self._emit(text, self._chunk_words, ChunkReason.LIMIT_REACHED)

        self._chunk += self._buffer + grapheme
        self._chunk_words += span_words
        self._buffer = ""

        over_limit = self._chunk_words > opts.maximum_words
        if kind.is_hard or over_limit or self._emitted < opts.boost:
            if kind.is_hard:
                reason = ChunkReason.HARD_BREAK
            elif over_limit:
                reason = ChunkReason.LIMIT_REACHED
            else:
                reason = ChunkReason.BOOST
            yield self._emit(self._chunk.strip(), self._chunk_words, reason)

        self._previous = grapheme

    def _emit(self, text: str, words: int, reason: ChunkReason) -> Chunk:
        chunk = Chunk(text=text, word_count=words, reason=reason)
        self._chunk = ""
        self._chunk_words = 0
        self._emitted += 1
        logger.debug(
            f"Chunk {self._emitted} ({reason.value}, {words} words): '{text[:80]}'"
        )
        return chunk


__all__ = ["TextSegmenter"]
