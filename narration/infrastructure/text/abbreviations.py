"""
Name: Abbreviation Set

Responsibilities:
  - Hold the tokens whose trailing period never ends a sentence
  - Normalize a token before lookup

Collaborators:
  - infrastructure.text.sentences: consults the set at every "."

Constraints:
  - Process-wide, read-only (frozenset built once at import)
  - Tokens are lowercase with the trailing period removed

Notes:
  - Covers the supported narration locales: en-US, pt-PT, es-ES, fr-FR, de-DE
"""

from typing import AbstractSet, Final

ABBREVIATIONS: Final[frozenset[str]] = frozenset(
    {
        # English titles
        "mr", "mrs", "ms", "dr", "prof", "sr", "jr", "st",
        # Generic
        "vs", "etc", "inc", "ltd", "co", "corp",
        # Units and measures
        "ft", "in", "lb", "oz", "pt", "qt", "gal", "mi", "km", "kg", "mg", "ml",
        # References
        "no", "vol", "ch", "pg", "pp", "ed", "rev",
        # Portuguese/Spanish/French honorifics
        "sra", "srta", "dn", "dna", "dra",
        # German
        "hr", "fr",
        # Time
        "a.m", "p.m", "am", "pm",
    }
)

# R: Characters that may precede a token without being part of it ("(Dr." / "“Mr.")
_LEADING_PUNCTUATION = "\"'“‘([{"


def normalize_token(word: str) -> str:
    """R: Strip opening punctuation and one trailing period, then lowercase."""
    word = word.lstrip(_LEADING_PUNCTUATION)
    if word.endswith("."):
        word = word[:-1]
    return word.lower()


def is_abbreviation(word: str, abbreviations: AbstractSet[str] = ABBREVIATIONS) -> bool:
    """
    R: Check whether a word ending with a period is a known abbreviation.

    Args:
        word: Last whitespace-delimited token before the period
        abbreviations: Token set to consult (default: ABBREVIATIONS)
    """
    token = normalize_token(word)
    return bool(token) and token in abbreviations
