"""
Editor module for the single meme editing screen.

This module provides:
- Editor state and its event transitions
- Keyboard event source
- View hierarchy and rasterizer
- Image picker and share services
- The controller wiring them together
"""

from .controller import MemeEditorController, EditorConfig
from .keyboard import KeyboardEvents, KeyboardFrame
from .picker import ImagePicker
from .results import ImageSource, Outcome, PickResult, ShareResult
from .share_sheet import (
    ShareService,
    ShareConfig,
    FileShareService,
    PreviewConfig,
    PreviewShareSheet,
)
from .state import Caption, EditorState, TOP_DEFAULT_TEXT, BOTTOM_DEFAULT_TEXT
from .view import EditorView, ViewConfig, Widget

__all__ = [
    # Controller
    "MemeEditorController",
    "EditorConfig",
    # State
    "Caption",
    "EditorState",
    "TOP_DEFAULT_TEXT",
    "BOTTOM_DEFAULT_TEXT",
    # Events and results
    "KeyboardEvents",
    "KeyboardFrame",
    "ImageSource",
    "Outcome",
    "PickResult",
    "ShareResult",
    # Services
    "ImagePicker",
    "ShareService",
    "ShareConfig",
    "FileShareService",
    "PreviewConfig",
    "PreviewShareSheet",
    # View
    "EditorView",
    "ViewConfig",
    "Widget",
]
