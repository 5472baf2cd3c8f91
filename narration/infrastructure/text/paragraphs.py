"""Paragraph splitting on blank-line boundaries."""

import re
from typing import Final

PARAGRAPH_BREAK: Final[re.Pattern] = re.compile(r"\n\s*\n")


def split_by_paragraphs(text: str) -> list[str]:
    """
    Split text into paragraphs on one or more blank lines.

    Returns:
        Stripped, non-empty paragraphs in original order
    """
    return [p.strip() for p in PARAGRAPH_BREAK.split(text) if p.strip()]
