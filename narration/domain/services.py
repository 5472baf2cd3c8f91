"""
Name: Domain Service Interfaces

Responsibilities:
  - Define contracts for text chunking and speech synthesis
  - Keep use cases independent of any speech provider

Collaborators:
  - Implementations in infrastructure.text and infrastructure.services

Constraints:
  - Pure interfaces (Protocol), no implementation
  - Provider-agnostic (cloud or local speech engines)

Notes:
  - Using typing.Protocol for structural subtyping
  - Enables testing with mock or fake services
"""

from typing import List, Protocol

from .entities import TextChunk


class TextChunkerService(Protocol):
    """
    R: Interface for narration text chunking.

    Implementations must provide:
      - Deterministic output for same input
      - Chunks in original order, indexed from 0
    """

    def chunk(self, text: str) -> List[TextChunk]:
        """
        R: Split text into bounded-size chunks.

        Args:
            text: Narration text (paragraphs separated by blank lines)

        Returns:
            Ordered list of TextChunk
        """
        ...


class SpeechSynthesisService(Protocol):
    """
    R: Interface for a text-to-speech provider.

    Implementations must provide:
      - One audio payload per request
      - The provider's per-request character limit
    """

    def synthesize(self, text: str) -> bytes:
        """
        R: Synthesize speech for a single request.

        Args:
            text: Text no longer than get_max_text_length()

        Returns:
            Encoded audio bytes
        """
        ...

    def get_max_text_length(self) -> int:
        """R: Maximum characters accepted per synthesis request."""
        ...
