"""
Sentence segmentation for interleaved display.

Splits at whitespace that follows a sentence-ending mark (. ! ?).
The mark stays attached to the sentence before the split.
No abbreviation handling: "Dr. Who" is two sentences.
"""

import re

SENTENCE_BREAK = re.compile(r"(?<=[.!?])\s+")


def split_sentences(text: str) -> list[str]:
    """
    Split text into sentences.

    Example:
        "Hallo. Wie geht es?" -> ["Hallo.", "Wie geht es?"]

    Args:
        text: Raw text block

    Returns:
        Ordered list of non-empty sentences (empty list for empty input)
    """
    if not text:
        return []

    return [s for s in SENTENCE_BREAK.split(text) if s.strip()]
