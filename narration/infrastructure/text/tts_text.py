"""
Name: Narration Text Helpers

Responsibilities:
  - Estimate spoken duration of narration text
  - Truncate text to a provider limit at a sentence boundary

Collaborators:
  - application/use_cases/synthesize_narration.py: duration estimate in logs

Notes:
  - Duration assumes 140 words per minute (typical narration pace)
  - Prefer split_text_into_chunks over truncation; truncation drops text
"""

import math
import re
from typing import Final

from ...logger import logger

WORDS_PER_MINUTE: Final[int] = 140

# R: Room left below max_length before looking for a sentence end
TRUNCATION_BUFFER: Final[int] = 200

_WORD: Final[re.Pattern] = re.compile(r"\S+")


def count_words(text: str) -> int:
    return len(_WORD.findall(text))


def estimate_duration(text: str) -> int:
    """R: Estimated narration length in whole seconds (rounded up)."""
    return math.ceil(count_words(text) / WORDS_PER_MINUTE * 60)


def truncate_text_for_tts(text: str, max_length: int = 4096) -> str:
    """
    R: Truncate text to fit a TTS limit, preferring a sentence boundary.

    Args:
        text: Narration text
        max_length: Provider character limit

    Returns:
        text unchanged if it fits; otherwise the prefix ending at the last
        ".", "!" or "?" before max_length - 200, or that prefix plus "..."
    """
    if len(text) <= max_length:
        return text

    logger.warning(
        "Text exceeds recommended length, truncating",
        extra={"original_length": len(text), "max_length": max_length},
    )

    truncated = text[: max(max_length - TRUNCATION_BUFFER, 0)]
    last_sentence_end = max(truncated.rfind("."), truncated.rfind("!"), truncated.rfind("?"))

    if last_sentence_end > 0:
        return truncated[: last_sentence_end + 1]
    return truncated + "..."
