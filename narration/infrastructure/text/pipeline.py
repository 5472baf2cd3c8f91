"""
Name: Narration Text Chunking Pipeline

Responsibilities:
  - Split long narration into chunks that fit a speech provider's limit
  - Select segment stages from ChunkingOptions
  - Provide the fast path for text that already fits
  - Offer cheap helpers for callers (needs_chunking, estimate_chunk_count)

Collaborators:
  - paragraphs, sentences, long_segments, dialogue: segment stages
  - merger: packs the final segments into TextChunk objects
  - logger: chunking summary (length, chunk count, average size)

Constraints:
  - Pure and synchronous; safe to call from several threads
  - Never raises for text input; only max_size <= 0 is rejected

Algorithm:
  segments = [text]
  for stage in build_stages(options): segments = stage(segments, max_size)
  chunks = merge_segments_to_limit(segments, max_size, min_chunk_size, text)

  Default stage order:
    paragraphs -> sentences (oversized only) -> long_segments (oversized
    only) -> dialogue (when preserve_dialogue)

Notes:
  - Without prefer_paragraphs the sentence stage receives the whole text
  - Expansion is local: segments that fit keep their coarser granularity
  - Very large inputs block the calling thread; async hosts should run
    this in a worker thread
"""

import math
from dataclasses import dataclass
from typing import Callable, List, Optional

from ...domain.entities import ChunkingOptions, TextChunk
from ...logger import logger
from .dialogue import merge_dialogue_segments
from .long_segments import split_long_segment
from .merger import merge_segments_to_limit
from .paragraphs import split_by_paragraphs
from .sentences import split_by_sentences

SegmentSplitter = Callable[[str], List[str]]

# R: Average chunk fill assumed by estimate_chunk_count
ESTIMATED_UTILIZATION = 0.8


@dataclass(frozen=True)
class SegmentStage:
    """
    R: One step of the segmentation pipeline.

    Attributes:
        name: Stage label used in debug logs
        apply: (segments, max_size) -> segments
    """

    name: str
    apply: Callable[[List[str], int], List[str]]

    def __call__(self, segments: List[str], max_size: int) -> List[str]:
        return self.apply(segments, max_size)


def expand_oversized(name: str, splitter: Callable[[str, int], List[str]]) -> SegmentStage:
    """R: Stage that re-splits only segments longer than max_size."""

    def apply(segments: List[str], max_size: int) -> List[str]:
        expanded: List[str] = []
        for segment in segments:
            if len(segment) <= max_size:
                expanded.append(segment)
            else:
                expanded.extend(splitter(segment, max_size))
        return expanded

    return SegmentStage(name=name, apply=apply)


def paragraph_stage() -> SegmentStage:
    def apply(segments: List[str], max_size: int) -> List[str]:
        return [p for segment in segments for p in split_by_paragraphs(segment)]

    return SegmentStage(name="paragraphs", apply=apply)


def sentence_stage(sentence_splitter: SegmentSplitter = split_by_sentences) -> SegmentStage:
    return expand_oversized("sentences", lambda segment, _max: sentence_splitter(segment))


def long_segment_stage() -> SegmentStage:
    return expand_oversized("long_segments", split_long_segment)


def dialogue_stage() -> SegmentStage:
    return SegmentStage(name="dialogue", apply=merge_dialogue_segments)


def build_stages(
    options: ChunkingOptions,
    sentence_splitter: SegmentSplitter = split_by_sentences,
) -> List[SegmentStage]:
    """
    Build the ordered segment stages for the given options.

    Args:
        options: Chunking options
        sentence_splitter: Sentence boundary detector (swap for locale rules)
    """
    stages: List[SegmentStage] = []
    if options.prefer_paragraphs:
        stages.append(paragraph_stage())
    stages.append(sentence_stage(sentence_splitter))
    stages.append(long_segment_stage())
    if options.preserve_dialogue:
        stages.append(dialogue_stage())
    return stages


def split_text_into_chunks(
    text: str,
    max_size: int,
    options: Optional[ChunkingOptions] = None,
    stages: Optional[List[SegmentStage]] = None,
) -> List[TextChunk]:
    """
    Split text into chunks that respect natural boundaries.

    Args:
        text: Narration text
        max_size: Maximum characters per chunk (provider limit)
        options: Chunking behaviour (default: ChunkingOptions())
        stages: Explicit segment stages (default: build_stages(options))

    Returns:
        Ordered chunks indexed from 0; [] for blank text

    Raises:
        ValueError: If max_size <= 0

    Examples:
        >>> split_text_into_chunks("Short text.", 4096)
        [TextChunk(text='Short text.', index=0, start_offset=0, end_offset=11)]
    """
    if max_size <= 0:
        raise ValueError(f"max_size must be > 0, got {max_size}")

    if not text.strip():
        return []

    if len(text) <= max_size:
        return [TextChunk(text=text, index=0, start_offset=0, end_offset=len(text))]

    options = options or ChunkingOptions()
    if stages is None:
        stages = build_stages(options)

    logger.info(
        "Splitting text into chunks",
        extra={
            "text_length": len(text),
            "max_size": max_size,
            "prefer_paragraphs": options.prefer_paragraphs,
            "min_chunk_size": options.min_chunk_size,
        },
    )

    segments = [text]
    for stage in stages:
        segments = stage(segments, max_size)
        logger.debug(
            "Segment stage complete",
            extra={"stage": stage.name, "segment_count": len(segments)},
        )

    chunks = merge_segments_to_limit(segments, max_size, options.min_chunk_size, source=text)

    logger.info(
        "Text splitting complete",
        extra={
            "original_length": len(text),
            "chunk_count": len(chunks),
            "avg_chunk_size": round(len(text) / len(chunks)) if chunks else 0,
        },
    )

    return chunks


def needs_chunking(text: str, max_size: int) -> bool:
    """R: True when text exceeds the provider limit."""
    return len(text) > max_size


def estimate_chunk_count(text: str, max_size: int) -> int:
    """
    R: Fast upper-bound estimate of chunk count for progress reporting.

    Not guaranteed to equal len(split_text_into_chunks(text, max_size)).
    """
    if len(text) <= max_size:
        return 1
    return math.ceil(len(text) / (max_size * ESTIMATED_UTILIZATION))


class NarrationTextChunker:
    """
    R: Default TextChunkerService implementation using split_text_into_chunks.

    Validates parameters on initialization to fail fast.
    """

    def __init__(self, max_size: int = 4096, options: Optional[ChunkingOptions] = None):
        """
        Initialize chunker with validated parameters.

        Args:
            max_size: Maximum characters per chunk (must be > 0)
            options: Chunking behaviour (default: ChunkingOptions())

        Raises:
            ValueError: If max_size is invalid
        """
        if max_size <= 0:
            raise ValueError(f"max_size must be > 0, got {max_size}")

        self.max_size = max_size
        self.options = options or ChunkingOptions()
        self._stages = build_stages(self.options)

    def chunk(self, text: str) -> List[TextChunk]:
        return split_text_into_chunks(text, self.max_size, self.options, stages=self._stages)
