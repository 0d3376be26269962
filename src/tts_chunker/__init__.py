"""Incremental text chunking for streaming text-to-speech."""

__version__ = "0.1.0"

from .schemas.chunk_options import ChunkOptions
from .services.tts import (
    Chunk,
    ChunkReason,
    TextSegmenter,
    chunk_text,
    chunk_tts_input,
    iter_tts_chunks,
)

__all__ = [
    "Chunk",
    "ChunkOptions",
    "ChunkReason",
    "TextSegmenter",
    "chunk_text",
    "chunk_tts_input",
    "iter_tts_chunks",
]
