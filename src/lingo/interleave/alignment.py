"""
Positional sentence alignment.

Sentence i of the source is paired with sentence i of the translation.
When the counts differ, the extra sentences on the longer side are dropped.
"""

from typing import NamedTuple

from .segmentation import split_sentences


class SentencePair(NamedTuple):
    source: str
    target: str


def _non_empty_count(sentences: list[str]) -> int:
    return sum(1 for s in sentences if s.strip())


def align_sentences(source: list[str], target: list[str]) -> list[SentencePair]:
    """
    Pair source and target sentences by index.

    Args:
        source: Source-language sentences
        target: Translated sentences

    Returns:
        min(non-empty source, non-empty target) pairs, in order
    """
    count = min(_non_empty_count(source), _non_empty_count(target))
    return [SentencePair(source[i], target[i]) for i in range(count)]


def interleave(original_text: str, translation: str) -> list[SentencePair]:
    """Segment both texts and align them."""
    return align_sentences(split_sentences(original_text), split_sentences(translation))
