"""
Bilingual sentence alignment and hover word lookup
"""

from .segmentation import split_sentences
from .alignment import SentencePair, align_sentences, interleave
from .tokenizer import Token, tokenize
from .lookup import LookupController, LookupState
from .popup import Popup, PopupPosition, popup_position
from .view import InterleavedRow, InterleaveView

__all__ = [
    "split_sentences",
    "SentencePair",
    "align_sentences",
    "interleave",
    "Token",
    "tokenize",
    "LookupController",
    "LookupState",
    "Popup",
    "PopupPosition",
    "popup_position",
    "InterleavedRow",
    "InterleaveView",
]
