"""Pydantic schemas."""

from .chunk_options import ChunkOptions, get_default_chunk_options

__all__ = ["ChunkOptions", "get_default_chunk_options"]
