"""Value types produced by the TTS text chunker."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ChunkReason(str, Enum):
    """Why a chunk was emitted."""

    BOOST = "boost"
    LIMIT_REACHED = "limit"
    HARD_BREAK = "hard"
    FLUSH = "flush"


@dataclass(frozen=True)
class Chunk:
    """A bounded, speakable piece of text ready for synthesis.

    Attributes:
        text: Chunk text, trimmed of leading/trailing whitespace
        word_count: Number of word-like tokens counted toward the chunk
        reason: Rule that caused the chunk to be emitted
    """

    text: str
    word_count: int
    reason: ChunkReason


__all__ = ["Chunk", "ChunkReason"]
