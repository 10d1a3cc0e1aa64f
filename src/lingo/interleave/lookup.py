"""
Hover-driven word lookup.

Tracks the single word currently hovered and its meanings.

States:
- IDLE:    nothing hovered, or nothing to show
- PENDING: definition request in flight for the hovered word
- SHOWN:   meanings available and displayed

Every hover-enter and hover-leave bumps a request generation. A response
that arrives for an older generation is discarded, so a slow lookup for a
previous word can never overwrite the current popup.
"""

from enum import Enum
from typing import Awaitable, Callable

from lingo.config import POPUP_VERTICAL_GAP
from lingo.errors import NetworkFailure

from .popup import Popup, PopupPosition, popup_position

FetchDefinitions = Callable[[str], Awaitable[list[str]]]


class LookupState(str, Enum):
    IDLE = "idle"
    PENDING = "pending"
    SHOWN = "shown"


class LookupController:
    """
    Owns the hovered-word / active-result slot.

    Key insight: only the newest hover session may write the slot.
    Requests are never cancelled, their results are just ignored once stale.
    """

    def __init__(self, fetch_definitions: FetchDefinitions, vertical_gap: float = POPUP_VERTICAL_GAP):
        """
        Args:
            fetch_definitions: async callable returning meanings for a lookup key
            vertical_gap: distance between pointer and popup
        """
        self.fetch_definitions = fetch_definitions
        self.vertical_gap = vertical_gap

        self.state = LookupState.IDLE
        self.hovered_word: str | None = None
        self.meanings: list[str] = []
        self.position = PopupPosition(0, 0)

        self.generation = 0  # Monotonic hover session counter

    @property
    def popup(self) -> Popup | None:
        """Popup to render, or None when nothing should be shown."""
        if self.hovered_word is None or not self.meanings:
            return None
        return Popup(
            word=self.hovered_word,
            meanings=list(self.meanings),
            x=self.position.x,
            y=self.position.y,
        )

    async def hover_enter(
        self,
        word: str,
        client_x: float,
        client_y: float,
        scroll_y: float = 0,
    ) -> None:
        """
        Start a hover session and fetch definitions for the word.

        Args:
            word: Lookup key of the hovered token
            client_x: Pointer x at hover-enter
            client_y: Pointer y at hover-enter
            scroll_y: Page scroll offset at hover-enter
        """
        if not word:
            return

        self.generation += 1
        generation = self.generation

        self.hovered_word = word
        self.meanings = []
        self.position = popup_position(client_x, client_y, scroll_y, self.vertical_gap)
        self.state = LookupState.PENDING

        try:
            meanings = list(await self.fetch_definitions(word) or [])
        except NetworkFailure as e:
            print(f"❌ Failed to get word definitions for '{word}': {e}")
            meanings = []

        if generation != self.generation:
            print(f"🗑️  Stale lookup for '{word}' discarded")
            return

        self.meanings = meanings
        self.state = LookupState.SHOWN if meanings else LookupState.IDLE

    def hover_leave(self) -> None:
        """End the hover session; any pending response becomes stale."""
        self.generation += 1
        self.hovered_word = None
        self.meanings = []
        self.state = LookupState.IDLE
