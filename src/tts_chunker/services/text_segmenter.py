"""Queue-based chunking stage for a streaming TTS pipeline."""

import asyncio
import logging
from typing import Optional

from ..schemas.chunk_options import ChunkOptions
from .tts.chunking import resolve_options
from .tts.graphemes import GraphemeReader
from .tts.text_segmenter import TextSegmenter

logger = logging.getLogger(__name__)


async def process_text_chunks(
    chunk_queue: asyncio.Queue,
    phrase_queue: asyncio.Queue,
    options: Optional[ChunkOptions] = None,
    stop_event: Optional[asyncio.Event] = None,
) -> None:
    """
    Process text chunks and segment them into TTS chunks.

    Reads text deltas from chunk_queue until None arrives, splits them into
    grapheme clusters and runs them through a TextSegmenter. Every emitted
    Chunk is put on phrase_queue, followed by None once the input ends.

    Args:
        chunk_queue: Queue receiving text deltas (e.g. from an LLM stream)
        phrase_queue: Queue to send Chunk objects to the synthesizer
        options: Chunking thresholds; defaults to the configured Settings
        stop_event: Optional event to signal early stop
    """
    reader = GraphemeReader()
    segmenter = TextSegmenter(resolve_options(options))

    try:
        while True:
            # Check stop event
            if stop_event and stop_event.is_set():
                logger.debug("Text segmenter: stop event triggered")
                await phrase_queue.put(None)
                return

            # Get next text delta (with timeout to check stop event)
            try:
                text = await asyncio.wait_for(chunk_queue.get(), timeout=0.1)
            except asyncio.TimeoutError:
                continue

            # None signals end of text
            if text is None:
                for grapheme in reader.close():
                    for chunk in segmenter.consume(grapheme):
                        await phrase_queue.put(chunk)
                        logger.info(f"Segment ({chunk.reason.value}): '{chunk.text[:80]}'")
                for chunk in segmenter.flush():
                    await phrase_queue.put(chunk)
                    logger.info(f"Final segment: '{chunk.text[:80]}'")
                await phrase_queue.put(None)
                return

            for grapheme in reader.feed(text):
                for chunk in segmenter.consume(grapheme):
                    await phrase_queue.put(chunk)
                    logger.info(f"Segment ({chunk.reason.value}): '{chunk.text[:80]}'")

    except Exception as e:
        logger.error(f"Text segmenter error: {e}")
        await phrase_queue.put(None)
        raise


__all__ = ["process_text_chunks"]
