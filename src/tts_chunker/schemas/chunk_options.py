"""Chunking options schema for per-invocation configuration."""

from pydantic import BaseModel, ConfigDict, Field


class ChunkOptions(BaseModel):
    """Thresholds controlling how eagerly text is split into chunks."""

    model_config = ConfigDict(frozen=True)

    boost: int = Field(
        default=2,
        ge=0,
        description=(
            "Number of leading chunks emitted at any breakpoint to cut the "
            "delay before the first audio."
        ),
    )

    minimum_words: int = Field(
        default=4,
        ge=0,
        description=(
            "A chunk must hold more than this many words before it is flushed "
            "early because the next span would exceed maximum_words."
        ),
    )

    maximum_words: int = Field(
        default=12,
        ge=1,
        description="Word-count ceiling after which soft breaks split the chunk.",
    )

    preserve_clusters: bool = Field(
        default=True,
        description=(
            "Keep grapheme clusters made of several code points (emoji, "
            "combining sequences) as plain text. If False they are dropped."
        ),
    )


def get_default_chunk_options() -> ChunkOptions:
    """Return default chunking options."""
    return ChunkOptions()


__all__ = ["ChunkOptions", "get_default_chunk_options"]
