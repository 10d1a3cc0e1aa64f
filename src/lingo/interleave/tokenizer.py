"""
Word tokenizer for hoverable sentences.
"""

from dataclasses import dataclass

# Terminal marks plus straight and typographic double quotes
LOOKUP_STRIP_CHARS = '.,!?;:"“”„'

_STRIP_TABLE = str.maketrans("", "", LOOKUP_STRIP_CHARS)


@dataclass(frozen=True)
class Token:
    display: str  # original piece + trailing space
    lookup_key: str  # piece without punctuation
    hoverable: bool = False


def lookup_key(piece: str) -> str:
    """Strip punctuation to get the dictionary key for a word."""
    return piece.translate(_STRIP_TABLE)


def tokenize(sentence: str, hoverable: bool = True) -> list[Token]:
    """
    Split a sentence on single spaces into display tokens.

    Joining every token's display gives back the sentence plus one
    trailing space.

    Args:
        sentence: Sentence to split
        hoverable: True for source-language sentences, False for translations

    Returns:
        Ordered tokens
    """
    tokens = []
    for piece in sentence.split(" "):
        key = lookup_key(piece)
        tokens.append(Token(
            display=piece + " ",
            lookup_key=key,
            hoverable=hoverable and bool(key),
        ))
    return tokens
