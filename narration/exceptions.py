"""
Name: Custom Exceptions and Error Handling

Responsibilities:
  - Define narration-specific exceptions
  - Provide error response structure
  - Generate unique error IDs for tracking

Collaborators:
  - application/use_cases/synthesize_narration.py: raises SynthesisError
  - Callers that report failed narration jobs

Constraints:
  - Error responses must include: error_code, message, error_id
  - Chunking itself never raises for text input (only invalid config)

Notes:
  - error_id is UUID for log correlation
"""

from __future__ import annotations

from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class ErrorResponse:
    """Structured error response."""

    error_code: str
    message: str
    error_id: str

    def to_dict(self) -> dict:
        return {
            "error_code": self.error_code,
            "message": self.message,
            "error_id": self.error_id,
        }


class NarrationError(Exception):
    """Base exception for the narration package."""

    error_code: str = "NARRATION_ERROR"

    def __init__(
        self,
        message: str,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.message = message
        self.error_id = error_id or str(uuid4())
        self.original_error = original_error
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        return ErrorResponse(
            error_code=self.error_code,
            message=self.message,
            error_id=self.error_id,
        )


class SynthesisError(NarrationError):
    """Speech synthesis failed for a chunk (after retries)."""

    error_code: str = "SYNTHESIS_ERROR"

    def __init__(
        self,
        message: str,
        chunk_index: int | None = None,
        error_id: str | None = None,
        original_error: Exception | None = None,
    ):
        self.chunk_index = chunk_index
        super().__init__(message, error_id=error_id, original_error=original_error)
