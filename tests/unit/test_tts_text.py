"""
Name: Narration Text Helper Unit Tests

Responsibilities:
  - Test word counting and duration estimates
  - Test sentence-aware truncation

Collaborators:
  - narration.infrastructure.text.tts_text: Module being tested
"""

import pytest

from narration.infrastructure.text.tts_text import (
    TRUNCATION_BUFFER,
    count_words,
    estimate_duration,
    truncate_text_for_tts,
)

pytestmark = pytest.mark.unit


class TestDurationEstimate:
    """Test word counts and spoken duration."""

    def test_count_words(self):
        assert count_words("one two  three\nfour") == 4
        assert count_words("   ") == 0

    @pytest.mark.parametrize(
        "words,seconds",
        [(0, 0), (140, 60), (141, 61), (70, 30)],
    )
    def test_estimate_duration(self, words, seconds):
        """R: Should assume 140 words per minute, rounded up."""
        assert estimate_duration(" ".join(["word"] * words)) == seconds


class TestTruncateTextForTts:
    """Test truncate_text_for_tts."""

    def test_fitting_text_unchanged(self):
        assert truncate_text_for_tts("Short text.", 4096) == "Short text."

    def test_truncates_at_sentence_end(self):
        """R: Should cut after the last full sentence below the buffer."""
        text = "Sentence one. " * 400

        result = truncate_text_for_tts(text, 4096)

        assert result.endswith(".")
        assert len(result) <= 4096 - TRUNCATION_BUFFER
        assert text.startswith(result)

    def test_appends_ellipsis_without_sentence_end(self):
        text = "x" * 5000

        assert truncate_text_for_tts(text, 4096) == "x" * (4096 - TRUNCATION_BUFFER) + "..."

    def test_limit_below_buffer(self):
        assert truncate_text_for_tts("a" * 300, 100) == "..."
