"""
Name: Dialogue Merger

Responsibilities:
  - Re-join segments that open a quotation with the segments that close it
  - Keep a spoken utterance inside a single synthesis request when it fits

Collaborators:
  - infrastructure.text.long_segments: re-bounds pieces that still do not fit
  - infrastructure.text.pipeline: runs this stage when preserve_dialogue is set

Constraints:
  - Never emits a segment longer than max_size
  - Order of text is preserved

Notes:
  - Curly quotes are directional: “ opens, ” closes
  - Straight double quotes are not directional: an odd count opens,
    any straight quote closes an open utterance
"""

import re
from typing import Final

from .long_segments import split_long_segment

OPEN_QUOTE: Final[str] = "“"
CLOSE_QUOTE: Final[str] = "”"
STRAIGHT_QUOTE: Final[str] = '"'

# R: Sentence-terminal punctuation followed by whitespace
_SENTENCE_END: Final[re.Pattern] = re.compile(r"(?<=[.!?])\s+")


def opens_dialogue(segment: str) -> bool:
    """R: True when the segment starts a quotation it does not close."""
    if segment.count(OPEN_QUOTE) > segment.count(CLOSE_QUOTE):
        return True
    return segment.count(STRAIGHT_QUOTE) % 2 == 1


def closes_dialogue(segment: str) -> bool:
    """R: True when the segment holds any closing quote."""
    return CLOSE_QUOTE in segment or STRAIGHT_QUOTE in segment


def _emit(buffer: str, max_size: int) -> list[str]:
    if len(buffer) <= max_size:
        return [buffer]

    # R: Too long to keep together; fall back to sentence pieces within budget
    pieces: list[str] = []
    for sentence in _SENTENCE_END.split(buffer):
        if sentence:
            pieces.extend(split_long_segment(sentence, max_size))
    return pieces


def merge_dialogue_segments(segments: list[str], max_size: int) -> list[str]:
    """
    Merge segments so that quoted speech is not split across segments.

    Args:
        segments: Ordered segments (paragraphs, sentences or pieces)
        max_size: Maximum characters per merged segment

    Returns:
        Ordered segments with open quotations merged
    """
    merged: list[str] = []
    buffer = ""
    in_dialogue = False

    for segment in segments:
        if in_dialogue:
            buffer += " " + segment
            if closes_dialogue(segment):
                merged.extend(_emit(buffer, max_size))
                buffer = ""
                in_dialogue = False
        elif opens_dialogue(segment):
            in_dialogue = True
            buffer = segment
        else:
            merged.append(segment)

    # R: Unclosed quotation at end of text
    if buffer:
        merged.extend(_emit(buffer, max_size))

    return merged
