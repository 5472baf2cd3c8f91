"""Infrastructure services"""

from .fake_speech_service import FakeSpeechSynthesisService
from .retry import (
    PERMANENT_HTTP_CODES,
    TRANSIENT_HTTP_CODES,
    create_retry_decorator,
    is_transient_error,
)

__all__ = [
    "FakeSpeechSynthesisService",
    "is_transient_error",
    "create_retry_decorator",
    "TRANSIENT_HTTP_CODES",
    "PERMANENT_HTTP_CODES",
]
