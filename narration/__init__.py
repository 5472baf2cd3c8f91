"""Narration text chunking for size-limited speech synthesis."""

from .domain.entities import ChunkingOptions, TextChunk
from .infrastructure.text.pipeline import (
    NarrationTextChunker,
    estimate_chunk_count,
    needs_chunking,
    split_text_into_chunks,
)

__version__ = "0.1.0"

__all__ = [
    "ChunkingOptions",
    "NarrationTextChunker",
    "TextChunk",
    "estimate_chunk_count",
    "needs_chunking",
    "split_text_into_chunks",
]
