"""
Name: Long Segment Splitter

Responsibilities:
  - Break a segment that exceeds max_size at secondary punctuation
  - Hard-cut whatever still does not fit

Collaborators:
  - infrastructure.text.pipeline: expands oversized sentences
  - infrastructure.text.dialogue: re-bounds oversized dialogue pieces

Constraints:
  - Delimiters stay attached to the preceding piece
  - Hard cut has no word-boundary awareness (lossy last resort)
  - Always terminates; every piece fits max_size

Notes:
  - Hard cut width is max_size - HARD_CUT_BUFFER; for max_size at or
    below the buffer the width is max_size itself
"""

import re
from typing import Final

# R: Split after comma, semicolon, colon, em dash, en dash or hyphen
SECONDARY_BREAK: Final[re.Pattern] = re.compile(r"(?<=[,;:—–-])")

HARD_CUT_BUFFER: Final[int] = 50


def hard_cut_width(max_size: int) -> int:
    """R: Width of each hard-cut piece for a given limit."""
    if max_size > HARD_CUT_BUFFER:
        return max_size - HARD_CUT_BUFFER
    return max(1, max_size)


def _hard_cut(piece: str, max_size: int) -> list[str]:
    width = hard_cut_width(max_size)
    cuts = (piece[i : i + width].strip() for i in range(0, len(piece), width))
    return [cut for cut in cuts if cut]


def split_long_segment(segment: str, max_size: int) -> list[str]:
    """
    Split an oversized segment into pieces no longer than max_size.

    Args:
        segment: Sentence or paragraph text
        max_size: Maximum characters per piece

    Returns:
        [segment] if it already fits, else ordered stripped pieces
    """
    if len(segment) <= max_size:
        return [segment]

    pieces: list[str] = []
    current = ""

    for part in SECONDARY_BREAK.split(segment):
        if len(current) + len(part) <= max_size:
            current += part
            continue
        if current.strip():
            pieces.append(current.strip())
        current = part

    if current.strip():
        pieces.append(current.strip())

    result: list[str] = []
    for piece in pieces:
        if len(piece) <= max_size:
            result.append(piece)
        else:
            result.extend(_hard_cut(piece, max_size))
    return result
