"""
Meme editor controller.

Connects the editor state, the view, the image picker, the keyboard
event source and a share service into the single editing screen.
"""

from dataclasses import dataclass
from typing import Optional

from PIL import Image
from loguru import logger

from ..meme.record import MemeRecord
from . import state as transitions
from .keyboard import KeyboardEvents, KeyboardFrame
from .picker import ImagePicker, Selection
from .results import ImageSource, Outcome, PickResult
from .share_sheet import ShareService
from .state import Caption, EditorState, TOP_DEFAULT_TEXT, BOTTOM_DEFAULT_TEXT
from .view import EditorView


@dataclass
class EditorConfig:
    """Configuration for the editor screen."""

    top_default_text: str = TOP_DEFAULT_TEXT
    bottom_default_text: str = BOTTOM_DEFAULT_TEXT


class MemeEditorController:
    """
    Controller for the meme editor screen.

    Lifecycle:
    1. load() puts placeholder captions in place and disables sharing
    2. appear() / disappear() bracket keyboard subscriptions
    3. select_image() stores a photo and enables sharing
    4. begin_editing() / type_text() / submit() edit the captions
    5. share_current_meme() composes, shares and builds a MemeRecord
    """

    def __init__(
        self,
        picker: ImagePicker,
        share_service: ShareService,
        view: Optional[EditorView] = None,
        keyboard: Optional[KeyboardEvents] = None,
        config: Optional[EditorConfig] = None
    ):
        self.config = config or EditorConfig()
        self.picker = picker
        self.share_service = share_service
        self.view = view or EditorView()
        self.keyboard = keyboard or KeyboardEvents()
        self.state = EditorState(
            top_text=self.config.top_default_text,
            bottom_text=self.config.bottom_default_text,
            top_default=self.config.top_default_text,
            bottom_default=self.config.bottom_default_text,
        )

    # Screen lifecycle

    def load(self) -> None:
        """Initial configuration of the caption fields and share button."""
        transitions.reset_captions(self.state)
        self.state.share_enabled = False

    def appear(self) -> None:
        """Enable the camera if one exists and start listening to the keyboard."""
        self.state.camera_enabled = self.picker.is_source_available(ImageSource.CAMERA)
        self.keyboard.subscribe(self.keyboard_will_show, self.keyboard_will_hide)

    def disappear(self) -> None:
        self.keyboard.unsubscribe()

    # Image selection

    def select_image(self, source: ImageSource, selection: Selection = None) -> PickResult:
        """
        Ask the picker for a photo and keep it if one was returned.

        Args:
            source: Library or camera
            selection: Library photo name, index or path

        Returns:
            The picker's result
        """
        if source is ImageSource.CAMERA and not self.state.camera_enabled:
            logger.warning("Camera source is disabled")
            return PickResult.cancelled()

        result = self.picker.pick(source, selection)

        if transitions.apply_pick(self.state, result):
            logger.info(f"Photo selected from {source.value} ({result.image.size[0]}x{result.image.size[1]})")
        elif result.outcome is Outcome.FAILED:
            logger.warning(f"No photo returned from {source.value}: {result.error}")
        else:
            logger.info(f"Photo selection from {source.value} cancelled")

        return result

    # Caption editing

    def begin_editing(self, caption: Caption) -> None:
        transitions.begin_editing(self.state, caption)

    def type_text(self, caption: Caption, text: str) -> None:
        """Replace the caption's text, as typed into the field."""
        if self.state.focused is not caption:
            self.begin_editing(caption)
        transitions.update_text(self.state, caption, text)

    def submit(self) -> bool:
        """Return key: stop editing. Always accepted."""
        transitions.end_editing(self.state)
        return True

    # Keyboard avoidance

    def keyboard_will_show(self, frame: KeyboardFrame) -> None:
        transitions.keyboard_will_show(self.state, frame.height)

    def keyboard_will_hide(self) -> None:
        transitions.keyboard_will_hide(self.state)

    # Composition and sharing

    def compose_image(self) -> Image.Image:
        """
        Render the meme as it appears on screen, without the chrome.

        The toolbar and share button are hidden for the snapshot and put
        back to their previous visibility afterwards.
        """
        chrome = self.view.chrome
        previous = [widget.hidden for widget in chrome]

        for widget in chrome:
            widget.hidden = True
        try:
            return self.view.snapshot(self.state)
        finally:
            for widget, hidden in zip(chrome, previous):
                widget.hidden = hidden

    def share_current_meme(self) -> Optional[MemeRecord]:
        """
        Compose the meme and hand it to the share service.

        Returns:
            The MemeRecord built after a completed share, None if the
            share was cancelled or failed

        Raises:
            RuntimeError: if sharing is still disabled (no photo selected)
        """
        if not self.state.share_enabled or self.state.original_image is None:
            raise RuntimeError("Share is disabled until a photo is selected")

        composed = self.compose_image()
        result = self.share_service.share(composed)

        if result.outcome is Outcome.SUCCESS:
            return self._save(composed)

        if result.outcome is Outcome.FAILED:
            logger.error(f"Error while sharing: {result.error}")
        else:
            logger.info("Share cancelled")
        return None

    def _save(self, composed: Image.Image) -> MemeRecord:
        meme = MemeRecord(
            top_text=self.state.top_text,
            bottom_text=self.state.bottom_text,
            original_image=self.state.original_image,
            composed_image=composed,
        )
        logger.info(f"Created {meme}")
        return meme
