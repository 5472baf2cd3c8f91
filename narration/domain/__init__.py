"""Domain layer exports"""

from .entities import ChunkingOptions, SynthesizedChunk, TextChunk
from .services import SpeechSynthesisService, TextChunkerService

__all__ = [
    "ChunkingOptions",
    "SynthesizedChunk",
    "TextChunk",
    "SpeechSynthesisService",
    "TextChunkerService",
]
