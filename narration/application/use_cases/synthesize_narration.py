"""
Name: Synthesize Narration Use Case

Responsibilities:
  - Orchestrate narration synthesis: chunk → synthesize per chunk
  - Size chunks against the provider's per-request limit
  - Call the provider once per chunk, in ascending index order
  - Return audio per chunk for the caller to concatenate

Collaborators:
  - domain/services.SpeechSynthesisService: provider calls
  - domain/services.TextChunkerService: chunking (default NarrationTextChunker)
  - infrastructure/services/retry: backoff on transient provider errors

Constraints:
  - Must NOT call the provider for blank text
  - A failed chunk aborts the job (no partial audio is returned)

Notes:
  - Audio concatenation is the caller's job
  - narration_id/chunk_index are set in log context while running
"""

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from ...config import Settings, get_settings
from ...context import chunk_index_var, narration_id_var
from ...domain.entities import ChunkingOptions, SynthesizedChunk, TextChunk
from ...domain.services import SpeechSynthesisService, TextChunkerService
from ...exceptions import NarrationError, SynthesisError
from ...infrastructure.services.retry import create_retry_decorator
from ...infrastructure.text.pipeline import NarrationTextChunker, estimate_chunk_count
from ...infrastructure.text.tts_text import estimate_duration
from ...logger import configure_logging, logger


@dataclass
class SynthesizeNarrationInput:
    text: str
    narration_id: Optional[str] = None


@dataclass
class SynthesizeNarrationOutput:
    segments: List[SynthesizedChunk] = field(default_factory=list)

    @property
    def chunks(self) -> List[TextChunk]:
        return [segment.chunk for segment in self.segments]

    @property
    def audio_segments(self) -> List[bytes]:
        return [segment.audio for segment in self.segments]


class SynthesizeNarrationUseCase:
    """
    R: Use case for narrating long text through a size-limited provider.
    """

    def __init__(
        self,
        synthesis_service: SpeechSynthesisService,
        options: Optional[ChunkingOptions] = None,
        retry_decorator: Optional[Callable] = None,
        chunker: Optional[TextChunkerService] = None,
    ):
        """
        Args:
            synthesis_service: Speech provider
            options: Chunking behaviour for the default chunker
            retry_decorator: Retry policy for provider calls (default from settings)
            chunker: Chunker to use instead of a NarrationTextChunker sized
                to the provider limit
        """
        self.synthesis_service = synthesis_service
        self.options = options or ChunkingOptions()
        self._retry_decorator = retry_decorator
        self.chunker = chunker

    @classmethod
    def from_settings(
        cls,
        synthesis_service: SpeechSynthesisService,
        settings: Optional[Settings] = None,
    ) -> "SynthesizeNarrationUseCase":
        """R: Build the use case with chunking options and log level from settings."""
        settings = settings or get_settings()
        configure_logging(settings.log_level)
        return cls(synthesis_service, options=settings.chunking_options())

    def execute(self, input_data: SynthesizeNarrationInput) -> SynthesizeNarrationOutput:
        narration_token = narration_id_var.set(input_data.narration_id or "")
        try:
            max_size = self.synthesis_service.get_max_text_length()
            chunker = self.chunker or NarrationTextChunker(max_size=max_size, options=self.options)
            chunks = chunker.chunk(input_data.text)
            if not chunks:
                return SynthesizeNarrationOutput()

            logger.info(
                "Synthesizing narration",
                extra={
                    "chunk_count": len(chunks),
                    "estimated_chunk_count": estimate_chunk_count(input_data.text, max_size),
                    "estimated_duration_seconds": estimate_duration(input_data.text),
                },
            )

            retry_decorator = self._retry_decorator or create_retry_decorator()
            synthesize = retry_decorator(self.synthesis_service.synthesize)

            segments = [
                SynthesizedChunk(chunk=chunk, audio=self._synthesize_chunk(synthesize, chunk))
                for chunk in chunks
            ]
            return SynthesizeNarrationOutput(segments=segments)
        finally:
            narration_id_var.reset(narration_token)

    def _synthesize_chunk(self, synthesize: Callable[[str], bytes], chunk: TextChunk) -> bytes:
        chunk_token = chunk_index_var.set(chunk.index)
        try:
            return synthesize(chunk.text)
        except NarrationError:
            raise
        except Exception as exc:
            logger.error(
                "Speech synthesis failed",
                extra={"chunk_length": len(chunk.text), "error": str(exc)},
                exc_info=True,
            )
            raise SynthesisError(
                f"Speech synthesis failed for chunk {chunk.index}",
                chunk_index=chunk.index,
                original_error=exc,
            ) from exc
        finally:
            chunk_index_var.reset(chunk_token)
