"""Use cases"""

from .synthesize_narration import (
    SynthesizeNarrationInput,
    SynthesizeNarrationOutput,
    SynthesizeNarrationUseCase,
)

__all__ = [
    "SynthesizeNarrationInput",
    "SynthesizeNarrationOutput",
    "SynthesizeNarrationUseCase",
]
