"""
TTS (Text-to-Speech) Input Chunking Package.

This package turns unbounded text into chunks a synthesizer can speak one
at a time:

- graphemes: Decodes text/UTF-8 bytes into extended grapheme clusters
- classifier: Sorts clusters into hard breaks, soft breaks, emphasis marks,
  digits and content
- word_counter: Counts word-like tokens for the chunk size thresholds
- text_segmenter: The chunk accumulator state machine
- chunking: Async/sync entry points tying the pieces together

Architecture Overview:

    ┌──────────────┐     ┌────────────┐     ┌───────────────┐     ┌────────┐
    │ Text / bytes │────▶│ Graphemes  │────▶│ TextSegmenter │────▶│ Chunks │
    └──────────────┘     └────────────┘     └───────────────┘     └────────┘
                                                    │
                                                    ▼
                                            ┌──────────────┐
                                            │ WordCounter  │
                                            └──────────────┘

The first ``boost`` chunks are emitted at any breakpoint to start audio
quickly; later chunks wait for sentence ends unless they grow past
``maximum_words``.
"""

from .chunking import chunk_text, chunk_tts_input, iter_tts_chunks, resolve_options
from .graphemes import GraphemeReader, iter_grapheme_clusters, read_grapheme_clusters
from .text_segmenter import TextSegmenter
from .types import Chunk, ChunkReason
from .word_counter import WordCounter, count_words

__all__ = [
    "Chunk",
    "ChunkReason",
    "GraphemeReader",
    "TextSegmenter",
    "WordCounter",
    "chunk_text",
    "chunk_tts_input",
    "count_words",
    "iter_grapheme_clusters",
    "iter_tts_chunks",
    "read_grapheme_clusters",
    "resolve_options",
]
