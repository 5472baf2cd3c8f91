"""
Name: Retry Helper with Exponential Backoff + Jitter

Responsibilities:
  - Classify transient vs permanent errors (HTTP codes, exceptions)
  - Provide tenacity-based retry decorator for speech provider calls
  - Log retry attempts for observability

Collaborators:
  - tenacity: Retry library with configurable strategies
  - config.Settings: Retry configuration (max_attempts, delays)
  - logger: Structured logging with narration correlation

Constraints:
  - Only retry transient errors (429, 5xx, timeouts, connection errors)
  - Never retry permanent errors (400, 401, 403, 404)

Notes:
  - Exponential backoff: delay = min(base * 2^attempt, max_delay)
  - Jitter up to base_delay seconds is added to each wait
"""

from typing import Callable

from tenacity import (
    RetryCallState,
    retry,
    retry_if_exception,
    stop_after_attempt,
    wait_exponential_jitter,
)

from ...config import get_settings
from ...logger import logger

# R: HTTP status codes that indicate transient errors (retry-able)
TRANSIENT_HTTP_CODES: frozenset[int] = frozenset(
    {
        429,  # Too Many Requests (rate limit)
        500,  # Internal Server Error
        502,  # Bad Gateway
        503,  # Service Unavailable
        504,  # Gateway Timeout
    }
)

# R: HTTP status codes that indicate permanent errors (no retry)
PERMANENT_HTTP_CODES: frozenset[int] = frozenset(
    {
        400,  # Bad Request (e.g. text over the provider limit)
        401,  # Unauthorized
        403,  # Forbidden
        404,  # Not Found
    }
)


def get_http_status_code(exception: BaseException) -> int | None:
    """
    R: Extract HTTP status code from provider exception types.

    Returns:
        HTTP status code if found, None otherwise
    """
    code = getattr(exception, "code", None)
    if isinstance(code, int) and code >= 100:
        return code

    response = getattr(exception, "response", None)
    status = getattr(response, "status_code", None)
    if isinstance(status, int):
        return status

    status = getattr(exception, "status_code", None)
    if isinstance(status, int):
        return status

    return None


def is_transient_error(exception: BaseException) -> bool:
    """
    R: Determine if an exception is transient (should retry).

    Args:
        exception: The exception to classify

    Returns:
        True if transient (retry), False if permanent (fail fast)
    """
    status_code = get_http_status_code(exception)
    if status_code is not None:
        if status_code in PERMANENT_HTTP_CODES:
            return False
        if status_code in TRANSIENT_HTTP_CODES:
            return True

    exception_name = type(exception).__name__.lower()
    transient_patterns = (
        "timeout",
        "connection",
        "temporary",
        "unavailable",
        "ratelimit",
    )
    if any(pattern in exception_name for pattern in transient_patterns):
        return True

    message = str(exception).lower()
    transient_message_patterns = (
        "rate limit",
        "too many requests",
        "temporarily unavailable",
        "connection reset",
        "connection refused",
        "timed out",
    )
    if any(pattern in message for pattern in transient_message_patterns):
        return True

    # R: Default: unknown errors are permanent (fail fast)
    return False


def _log_retry(retry_state: RetryCallState) -> None:
    fn_name = getattr(retry_state.fn, "__name__", "unknown")
    attempt = retry_state.attempt_number
    wait_time = retry_state.next_action.sleep if retry_state.next_action else 0
    exc = retry_state.outcome.exception() if retry_state.outcome else None

    logger.warning(
        f"Retry attempt {attempt} for {fn_name}",
        extra={
            "function": fn_name,
            "attempt": attempt,
            "wait_seconds": round(wait_time, 2),
            "error": str(exc) if exc else None,
            "error_type": type(exc).__name__ if exc else None,
        },
    )


def create_retry_decorator(
    max_attempts: int | None = None,
    base_delay: float | None = None,
    max_delay: float | None = None,
) -> Callable:
    """
    R: Create a retry decorator with exponential backoff + jitter.

    Uses settings from config unless overridden.

    Args:
        max_attempts: Max attempts (default from settings)
        base_delay: Initial delay in seconds (default from settings)
        max_delay: Maximum delay cap in seconds (default from settings)

    Returns:
        Configured tenacity retry decorator
    """
    if max_attempts is None or base_delay is None or max_delay is None:
        settings = get_settings()
        max_attempts = max_attempts if max_attempts is not None else settings.retry_max_attempts
        base_delay = base_delay if base_delay is not None else settings.retry_base_delay_seconds
        max_delay = max_delay if max_delay is not None else settings.retry_max_delay_seconds

    return retry(
        stop=stop_after_attempt(max_attempts),
        wait=wait_exponential_jitter(initial=base_delay, max=max_delay, jitter=base_delay),
        retry=retry_if_exception(is_transient_error),
        before_sleep=_log_retry,
        reraise=True,  # R: Re-raise last exception after all retries exhausted
    )
