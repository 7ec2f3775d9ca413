"""
Result values returned by the image picker and share services.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional

from PIL import Image


class ImageSource(str, Enum):
    """Where the picker should get a photo from."""

    LIBRARY = "library"
    CAMERA = "camera"


class Outcome(str, Enum):
    SUCCESS = "success"
    CANCELLED = "cancelled"
    FAILED = "failed"


@dataclass
class PickResult:
    """Outcome of one image selection attempt."""

    outcome: Outcome
    image: Optional[Image.Image] = None
    error: Optional[BaseException] = None

    @classmethod
    def succeeded(cls, image: Image.Image) -> "PickResult":
        return cls(Outcome.SUCCESS, image=image)

    @classmethod
    def cancelled(cls) -> "PickResult":
        return cls(Outcome.CANCELLED)

    @classmethod
    def failed(cls, error: BaseException) -> "PickResult":
        return cls(Outcome.FAILED, error=error)

    @property
    def ok(self) -> bool:
        if self.outcome is not Outcome.SUCCESS or self.image is None:
            return False
        width, height = self.image.size
        return width > 0 and height > 0


@dataclass
class ShareResult:
    """Outcome of handing a bitmap to a share service."""

    outcome: Outcome
    error: Optional[BaseException] = None
    destination: Optional[Path] = None  # Where the bitmap ended up, if anywhere

    @classmethod
    def succeeded(cls, destination: Optional[Path] = None) -> "ShareResult":
        return cls(Outcome.SUCCESS, destination=destination)

    @classmethod
    def cancelled(cls) -> "ShareResult":
        return cls(Outcome.CANCELLED)

    @classmethod
    def failed(cls, error: BaseException) -> "ShareResult":
        return cls(Outcome.FAILED, error=error)
