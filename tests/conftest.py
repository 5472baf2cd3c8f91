"""
Name: Pytest Configuration and Shared Fixtures

Responsibilities:
  - Provide reusable test fixtures
  - Mock the speech provider
  - Keep settings isolated from local .env files

Collaborators:
  - pytest: Test framework
  - unittest.mock: Mocking library
  - narration.domain: Entities and protocols

Notes:
  - Fixtures are auto-discovered by pytest
"""

import sys
from pathlib import Path
from unittest.mock import Mock

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from narration import config as narration_config  # noqa: E402

narration_config.Settings.model_config["env_file"] = None

from narration.domain.services import SpeechSynthesisService  # noqa: E402
from narration.infrastructure.services.fake_speech_service import (  # noqa: E402
    FakeSpeechSynthesisService,
)
from narration.infrastructure.services.retry import create_retry_decorator  # noqa: E402


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """R: Fresh Settings per test (env vars are set via monkeypatch)."""
    narration_config.get_settings.cache_clear()
    yield
    narration_config.get_settings.cache_clear()


# ============================================================================
# Text Fixtures
# ============================================================================


NARRATION_WORDS = [
    "the", "river", "carried", "paper", "lanterns", "past",
    "sleeping", "houses", "while", "owls", "watched", "quietly",
]


def build_narration(min_length: int, words_per_sentence: int = 8) -> str:
    """R: Single paragraph of capitalized 8-word sentences, at least min_length chars."""
    sentences = []
    i = 0
    while len(" ".join(sentences)) < min_length:
        words = [
            NARRATION_WORDS[(i + k) % len(NARRATION_WORDS)]
            for k in range(words_per_sentence)
        ]
        sentence = " ".join(words)
        sentences.append(sentence[0].upper() + sentence[1:] + ".")
        i += 1
    return " ".join(sentences)


@pytest.fixture
def narration_factory():
    return build_narration


@pytest.fixture
def long_narration() -> str:
    """R: Single-paragraph narration of about 5000 characters."""
    return build_narration(5000)


# ============================================================================
# Service Fixtures
# ============================================================================


@pytest.fixture
def fake_speech_service() -> FakeSpeechSynthesisService:
    return FakeSpeechSynthesisService(max_text_length=200)


@pytest.fixture
def mock_speech_service() -> Mock:
    """R: Create a mock SpeechSynthesisService."""
    mock = Mock(spec=SpeechSynthesisService)
    mock.get_max_text_length.return_value = 4096
    mock.synthesize.side_effect = lambda text: text.encode("utf-8")
    return mock


@pytest.fixture
def no_wait_retry():
    """R: Retry decorator without backoff delays."""
    return create_retry_decorator(max_attempts=3, base_delay=0.0, max_delay=0.0)
