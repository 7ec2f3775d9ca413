"""
Editor state and the transitions applied to it by UI events.

All mutable editor state lives in one EditorState value. Each event
handler is a plain function of (state, event payload) so every
transition can be exercised without a view.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from PIL import Image
from loguru import logger

from .results import PickResult


TOP_DEFAULT_TEXT = "TOP"
BOTTOM_DEFAULT_TEXT = "BOTTOM"


class Caption(str, Enum):
    TOP = "top"
    BOTTOM = "bottom"


@dataclass
class EditorState:
    """Mutable state of the meme editor screen."""

    original_image: Optional[Image.Image] = None
    top_text: str = TOP_DEFAULT_TEXT
    bottom_text: str = BOTTOM_DEFAULT_TEXT
    top_default: str = TOP_DEFAULT_TEXT
    bottom_default: str = BOTTOM_DEFAULT_TEXT
    focused: Optional[Caption] = None
    view_offset: float = 0.0  # Vertical shift of the view, 0 when not shifted
    share_enabled: bool = False
    camera_enabled: bool = False

    @property
    def shifted(self) -> bool:
        return self.view_offset != 0

    def text_of(self, caption: Caption) -> str:
        return self.top_text if caption is Caption.TOP else self.bottom_text

    def default_of(self, caption: Caption) -> str:
        return self.top_default if caption is Caption.TOP else self.bottom_default


def reset_captions(state: EditorState) -> None:
    """Put the default placeholder text back into both captions."""
    state.top_text = state.top_default
    state.bottom_text = state.bottom_default


def apply_pick(state: EditorState, result: PickResult) -> bool:
    """
    Store a picked image and enable sharing.

    Cancelled or failed picks leave the state untouched.

    Returns:
        True if the state changed
    """
    if not result.ok:
        return False

    state.original_image = result.image
    state.share_enabled = True
    return True


def begin_editing(state: EditorState, caption: Caption) -> None:
    """Focus a caption, clearing it if it still shows its placeholder."""
    state.focused = caption
    if state.text_of(caption) == state.default_of(caption):
        update_text(state, caption, "")


def update_text(state: EditorState, caption: Caption, text: str) -> None:
    if caption is Caption.TOP:
        state.top_text = text
    else:
        state.bottom_text = text


def end_editing(state: EditorState) -> None:
    """Drop caption focus. Any text, including empty, is accepted."""
    state.focused = None


def keyboard_will_show(state: EditorState, height: float) -> bool:
    """
    Shift the view up by the keyboard height.

    Only the bottom caption is covered by the keyboard, and the view is
    shifted at most once until the keyboard hides again.

    Returns:
        True if the view was shifted
    """
    if state.focused is not Caption.BOTTOM or state.shifted:
        return False

    state.view_offset = -float(height)
    logger.debug(f"View shifted by {height} for keyboard")
    return True


def keyboard_will_hide(state: EditorState) -> None:
    state.view_offset = 0.0
