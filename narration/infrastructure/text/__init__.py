"""Narration text chunking."""

from .abbreviations import ABBREVIATIONS, is_abbreviation
from .dialogue import merge_dialogue_segments
from .long_segments import HARD_CUT_BUFFER, split_long_segment
from .merger import merge_segments_to_limit
from .paragraphs import split_by_paragraphs
from .pipeline import (
    NarrationTextChunker,
    SegmentStage,
    build_stages,
    estimate_chunk_count,
    needs_chunking,
    split_text_into_chunks,
)
from .sentences import split_by_sentences
from .tts_text import estimate_duration, truncate_text_for_tts

__all__ = [
    "ABBREVIATIONS",
    "HARD_CUT_BUFFER",
    "NarrationTextChunker",
    "SegmentStage",
    "build_stages",
    "estimate_chunk_count",
    "estimate_duration",
    "is_abbreviation",
    "merge_dialogue_segments",
    "merge_segments_to_limit",
    "needs_chunking",
    "split_by_paragraphs",
    "split_by_sentences",
    "split_long_segment",
    "split_text_into_chunks",
    "truncate_text_for_tts",
]
