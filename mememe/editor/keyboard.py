"""
Keyboard event source for the editor screen.

The editor subscribes while it is visible and unsubscribes when it is
not. Events posted with no subscriber are dropped.
"""

from dataclasses import dataclass
from typing import Callable, Optional

from loguru import logger


@dataclass(frozen=True)
class KeyboardFrame:
    """Geometry reported with a keyboard-will-show event."""

    height: float

    def __post_init__(self):
        if self.height < 0:
            raise ValueError(f"Keyboard height must be non-negative, got {self.height}")


ShowHandler = Callable[[KeyboardFrame], None]
HideHandler = Callable[[], None]


class KeyboardEvents:
    """Channel delivering keyboard will-show / will-hide events."""

    def __init__(self):
        self._on_show: Optional[ShowHandler] = None
        self._on_hide: Optional[HideHandler] = None

    @property
    def subscribed(self) -> bool:
        return self._on_show is not None or self._on_hide is not None

    def subscribe(self, on_show: ShowHandler, on_hide: HideHandler) -> None:
        if self.subscribed:
            logger.debug("Replacing existing keyboard subscriber")
        self._on_show = on_show
        self._on_hide = on_hide

    def unsubscribe(self) -> None:
        self._on_show = None
        self._on_hide = None

    def post_will_show(self, frame: KeyboardFrame) -> None:
        if self._on_show is None:
            logger.debug("Keyboard will-show dropped: no subscriber")
            return
        self._on_show(frame)

    def post_will_hide(self) -> None:
        if self._on_hide is None:
            logger.debug("Keyboard will-hide dropped: no subscriber")
            return
        self._on_hide()
