"""
Name: Sentence Splitter

Responsibilities:
  - Split text into sentences with a single left-to-right scan
  - Avoid false boundaries at abbreviations, decimals and ellipses
  - Keep closing quotes attached to the sentence they close

Collaborators:
  - infrastructure.text.abbreviations: token set consulted at every "."
  - infrastructure.text.pipeline: runs this stage on oversized segments

Constraints:
  - Deterministic, no NLP model
  - Latin-script narration only (en, pt, es, fr, de)

Algorithm:
  At each ".", "!" or "?" the checks run in this order:
    1. Ellipsis ("...") is absorbed, never a boundary
    2. A closing quote right after the mark is absorbed
    3. "." after a known abbreviation is not a boundary
    4. "." between two digits is not a boundary
    5. Boundary if the text ends, the next 9 characters (leading whitespace
       trimmed) are blank or start with an uppercase letter or opening
       quote/bracket, or the next character is a newline

Notes:
  - The sentence buffer is always a contiguous slice text[start:i + 1],
    so no characters are copied until a sentence is emitted
"""

import re
from typing import AbstractSet, Final

from .abbreviations import ABBREVIATIONS, is_abbreviation

TERMINATORS: Final[frozenset[str]] = frozenset(".!?")
CLOSING_QUOTES: Final[frozenset[str]] = frozenset({'"', "'", "”", "’"})

# R: Characters inspected after a terminator to confirm a boundary
LOOKAHEAD_CHARS: Final[int] = 9

# R: Uppercase (ASCII + Latin-1 supplement) or an opening quote/bracket
_SENTENCE_START: Final[re.Pattern] = re.compile(
    r"[A-ZÀ-Ü\"'“”‘’\[(]"
)


def _is_ascii_digit(char: str) -> bool:
    return char.isascii() and char.isdigit()


def last_token(text: str, start: int, end: int) -> str:
    """R: Last whitespace-delimited token of text[start:end], scanning backwards."""
    while end > start and text[end - 1].isspace():
        end -= 1
    begin = end
    while begin > start and not text[begin - 1].isspace():
        begin -= 1
    return text[begin:end]


def _ends_with_abbreviation(
    text: str, start: int, end: int, abbreviations: AbstractSet[str]
) -> bool:
    token = last_token(text, start, end)
    return bool(token) and is_abbreviation(token, abbreviations)


def _is_boundary(text: str, i: int) -> bool:
    lookahead = text[i + 1 : i + 1 + LOOKAHEAD_CHARS].lstrip()
    if not lookahead:
        return True
    if _SENTENCE_START.match(lookahead):
        return True
    return text.startswith("\n", i + 1)


def split_by_sentences(
    text: str,
    abbreviations: AbstractSet[str] = ABBREVIATIONS,
) -> list[str]:
    """
    Split text into sentences.

    Args:
        text: Text to scan (a paragraph or a whole document)
        abbreviations: Tokens whose period does not end a sentence

    Returns:
        Stripped, non-empty sentences in original order

    Examples:
        >>> split_by_sentences("Dr. Smith paid 3.50 dollars. Wait... what?")
        ['Dr. Smith paid 3.50 dollars.', 'Wait... what?']
    """
    sentences: list[str] = []
    length = len(text)
    start = 0
    i = 0

    while i < length:
        char = text[i]
        if char not in TERMINATORS:
            i += 1
            continue

        next_char = text[i + 1] if i + 1 < length else ""

        # R: 1. Ellipsis
        if char == "." and text.startswith("..", i + 1):
            i += 3
            continue

        punct_at = i

        # R: 2. Closing quote belongs to this sentence
        if next_char in CLOSING_QUOTES:
            i += 1

        if char == ".":
            # R: 3. Abbreviation
            if _ends_with_abbreviation(text, start, punct_at, abbreviations):
                i += 1
                continue
            # R: 4. Decimal number
            if punct_at > 0 and _is_ascii_digit(text[punct_at - 1]) and _is_ascii_digit(next_char):
                i += 1
                continue

        # R: 5. Boundary confirmation
        if _is_boundary(text, i):
            sentence = text[start : i + 1].strip()
            if sentence:
                sentences.append(sentence)
            start = i + 1

        i += 1

    tail = text[start:].strip()
    if tail:
        sentences.append(tail)

    return sentences
