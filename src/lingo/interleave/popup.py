from dataclasses import dataclass, field
from typing import NamedTuple

from lingo.config import POPUP_VERTICAL_GAP


class PopupPosition(NamedTuple):
    x: float
    y: float


@dataclass
class Popup:
    """Definition popup, horizontally centred on x by the renderer."""

    word: str
    meanings: list[str] = field(default_factory=list)
    x: float = 0
    y: float = 0


def popup_position(
    client_x: float,
    client_y: float,
    scroll_y: float = 0,
    gap: float = POPUP_VERTICAL_GAP,
) -> PopupPosition:
    """
    Anchor the popup just below the hovered word.

    Args:
        client_x: Pointer x in viewport coordinates
        client_y: Pointer y in viewport coordinates
        scroll_y: Current vertical page scroll offset
        gap: Vertical distance between pointer and popup

    Returns:
        Page coordinates of the popup anchor
    """
    return PopupPosition(x=client_x, y=client_y + scroll_y + gap)
