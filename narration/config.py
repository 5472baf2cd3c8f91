"""
Name: Application Configuration (Settings)

Responsibilities:
  - Centralized, typed configuration using pydantic-settings
  - Validate environment variables at startup
  - Provide defaults for chunking, speech provider and retry behaviour

Collaborators:
  - application/use_cases/synthesize_narration.py: reads chunking options
  - infrastructure/services/retry.py: reads retry configuration
  - logger.py: reads log level

Constraints:
  - No business logic, pure configuration
  - Defaults must match the provider request limit (4096 characters)

Notes:
  - Singleton via lru_cache; call get_settings.cache_clear() in tests
"""

import logging
from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.entities import ChunkingOptions


class Settings(BaseSettings):
    """
    Settings loaded from environment variables.

    Attributes:
        tts_max_text_length: Provider per-request character limit (default: 4096)
        chunk_min_size: Soft floor below which chunks merge into a neighbour (default: 500)
        chunk_prefer_paragraphs: Split on paragraphs before sentences (default: True)
        chunk_preserve_dialogue: Keep quoted speech inside one chunk (default: True)
        tts_model: Speech model identifier
        tts_voice: Voice name
        tts_speed: Playback speed multiplier (0.25 - 4.0)
        tts_language: BCP 47 language tag of the narration
        retry_max_attempts: Attempts per synthesis call (default: 3)
        retry_base_delay_seconds: Initial backoff delay
        retry_max_delay_seconds: Backoff delay cap
        log_level: Logging level name (default: INFO)
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Chunking
    tts_max_text_length: int = 4096
    chunk_min_size: int = 500
    chunk_prefer_paragraphs: bool = True
    chunk_preserve_dialogue: bool = True

    # Speech provider
    tts_model: str = "gpt-4o-mini-tts"
    tts_voice: str = "nova"
    tts_speed: float = 1.0
    tts_language: str = "en-US"

    # Retry/Resilience
    retry_max_attempts: int = 3
    retry_base_delay_seconds: float = 1.0
    retry_max_delay_seconds: float = 30.0

    # Observability
    log_level: str = "INFO"

    @field_validator("tts_max_text_length")
    @classmethod
    def max_text_length_must_be_positive(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("tts_max_text_length must be greater than 0")
        return v

    @field_validator("chunk_min_size")
    @classmethod
    def chunk_min_size_must_be_non_negative(cls, v: int) -> int:
        if v < 0:
            raise ValueError("chunk_min_size must be >= 0")
        return v

    @field_validator("tts_speed")
    @classmethod
    def tts_speed_in_range(cls, v: float) -> float:
        if not 0.25 <= v <= 4.0:
            raise ValueError("tts_speed must be between 0.25 and 4.0")
        return v

    @field_validator("retry_max_attempts")
    @classmethod
    def retry_attempts_must_be_positive(cls, v: int) -> int:
        if v < 1:
            raise ValueError("retry_max_attempts must be >= 1")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        level = v.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log_level: {v}")
        return level

    def validate_chunk_params(self) -> None:
        """
        Cross-field validation: min chunk size must be below the provider limit.
        Called explicitly after instantiation.
        """
        if self.chunk_min_size >= self.tts_max_text_length:
            raise ValueError(
                f"chunk_min_size ({self.chunk_min_size}) must be less than "
                f"tts_max_text_length ({self.tts_max_text_length})"
            )

    def chunking_options(self) -> ChunkingOptions:
        """R: Build the per-call chunking options from settings."""
        return ChunkingOptions(
            prefer_paragraphs=self.chunk_prefer_paragraphs,
            min_chunk_size=self.chunk_min_size,
            preserve_dialogue=self.chunk_preserve_dialogue,
        )


@lru_cache
def get_settings() -> Settings:
    """
    Get singleton Settings instance.

    Raises:
        ValidationError: If env vars are invalid
        ValueError: If cross-field validation fails
    """
    settings = Settings()
    settings.validate_chunk_params()
    return settings
