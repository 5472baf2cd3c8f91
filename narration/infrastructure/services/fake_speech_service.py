"""
Name: Fake Speech Synthesis Service (Deterministic)

Responsibilities:
  - Provide deterministic "audio" for testing/CI
  - Enforce the provider request limit like a real provider
  - Avoid external dependencies (no API calls)
"""

from __future__ import annotations

import hashlib
from typing import List

from ...logger import logger


class FakeSpeechSynthesisService:
    """R: Deterministic SpeechSynthesisService for tests/CI."""

    MODEL_ID = "fake-tts-v1"

    def __init__(self, max_text_length: int = 4096) -> None:
        self.max_text_length = max_text_length
        self.requests: List[str] = []
        logger.info("FakeSpeechSynthesisService initialized")

    def synthesize(self, text: str) -> bytes:
        if len(text) > self.max_text_length:
            raise ValueError(
                f"Text length {len(text)} exceeds limit {self.max_text_length}"
            )
        self.requests.append(text)
        return hashlib.sha256(text.encode("utf-8")).digest()

    def get_max_text_length(self) -> int:
        return self.max_text_length

    @property
    def model_id(self) -> str:
        return self.MODEL_ID
