"""
Name: Domain Entities

Responsibilities:
  - Define core entities for narration chunking (TextChunk, ChunkingOptions)
  - Provide type safety for the domain layer

Collaborators:
  - None (pure domain layer, no external dependencies)

Constraints:
  - No dependencies on infrastructure or frameworks
  - Immutable (frozen dataclasses): built fresh per call, never mutated

Notes:
  - TextChunk offsets are character positions in the original text
  - ChunkingOptions defaults match the narration pipeline defaults
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextChunk:
    """
    R: A bounded-size, in-order piece of the original text.

    Attributes:
        text: Chunk content sent to the speech provider
        index: Zero-based position in the chunk sequence
        start_offset: Character offset where this chunk starts in the original text
        end_offset: Character offset where this chunk ends in the original text
    """

    text: str
    index: int
    start_offset: int
    end_offset: int

    def __len__(self) -> int:
        return len(self.text)


@dataclass(frozen=True)
class ChunkingOptions:
    """
    R: Per-call chunking behaviour.

    Attributes:
        prefer_paragraphs: Split on paragraph breaks before sentences
        min_chunk_size: Soft floor; smaller chunks merge into the previous one
        preserve_dialogue: Keep quoted speech together within one chunk
    """

    prefer_paragraphs: bool = True
    min_chunk_size: int = 500
    preserve_dialogue: bool = True

    def __post_init__(self) -> None:
        if self.min_chunk_size < 0:
            raise ValueError(f"min_chunk_size must be >= 0, got {self.min_chunk_size}")


@dataclass(frozen=True)
class SynthesizedChunk:
    """
    R: Audio produced for one chunk.

    Attributes:
        chunk: The text chunk that was synthesized
        audio: Raw audio bytes returned by the provider
    """

    chunk: TextChunk
    audio: bytes
