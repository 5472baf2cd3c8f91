"""
Name: Narration Context (ContextVars)

Responsibilities:
  - Store job-scoped data (narration_id, chunk_index)
  - Enable structured logging with narration correlation

Collaborators:
  - application/use_cases/synthesize_narration.py: sets context per job/chunk
  - logger.py: reads context for log enrichment

Constraints:
  - Only primitive types for safety
  - Defaults are "unset" markers, never None

Notes:
  - contextvars are thread and async safe (isolated per task)
"""

from contextvars import ContextVar

# R: Narration identifier (story/chapter id) - set by the caller or use case
narration_id_var: ContextVar[str] = ContextVar("narration_id", default="")

# R: Chunk currently being synthesized (-1 when idle)
chunk_index_var: ContextVar[int] = ContextVar("chunk_index", default=-1)


def get_context_dict() -> dict:
    """
    R: Get current context as dict for log enrichment.

    Returns:
        Dict with set context values only
    """
    ctx = {}

    if val := narration_id_var.get():
        ctx["narration_id"] = val
    if (idx := chunk_index_var.get()) >= 0:
        ctx["chunk_index"] = idx

    return ctx


def clear_context() -> None:
    """R: Reset all context vars (called at job end)."""
    narration_id_var.set("")
    chunk_index_var.set(-1)
