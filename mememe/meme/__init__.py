"""
Meme module: caption drawing and the meme record.
"""

from .composer import (
    MemeComposer,
    MemeConfig,
    TextStyle,
    TextPosition,
)
from .record import MemeRecord

__all__ = [
    "MemeComposer",
    "MemeConfig",
    "TextStyle",
    "TextPosition",
    "MemeRecord",
]
