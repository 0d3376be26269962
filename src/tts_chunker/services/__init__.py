"""Chunking services."""
