"""
Interleaved sentence view for one translation record.

Source sentences get hoverable tokens, translated sentences plain ones.
"""

from dataclasses import dataclass

from .alignment import SentencePair, interleave
from .lookup import FetchDefinitions, LookupController
from .popup import Popup
from .tokenizer import Token, tokenize


@dataclass
class InterleavedRow:
    pair: SentencePair
    source_tokens: list[Token]
    target_tokens: list[Token]


class InterleaveView:
    def __init__(self, original_text: str, translated_text: str, fetch_definitions: FetchDefinitions):
        self.original_text = original_text
        self.translated_text = translated_text
        self.lookup = LookupController(fetch_definitions)
        self.rows = [
            InterleavedRow(
                pair=pair,
                source_tokens=tokenize(pair.source, hoverable=True),
                target_tokens=tokenize(pair.target, hoverable=False),
            )
            for pair in interleave(original_text, translated_text)
        ]

    @property
    def popup(self) -> Popup | None:
        return self.lookup.popup

    async def hover(self, token: Token, client_x: float, client_y: float, scroll_y: float = 0) -> None:
        """Forward a hover-enter; plain tokens are ignored."""
        if not token.hoverable:
            return
        await self.lookup.hover_enter(token.lookup_key, client_x, client_y, scroll_y)

    def leave(self, token: Token) -> None:
        if not token.hoverable:
            return
        self.lookup.hover_leave()
