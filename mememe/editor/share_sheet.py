"""
Share services for the composed meme.

Provides a file-writing share target and an OpenCV preview sheet that
asks the user to confirm before sharing.
"""

import time
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Protocol

import cv2
import numpy as np
from PIL import Image
from loguru import logger

from .results import ShareResult


class ShareService(Protocol):
    """Anything that accepts one bitmap and reports how sharing went."""

    def share(self, image: Image.Image) -> ShareResult:
        ...


@dataclass
class ShareConfig:
    """Configuration for file sharing."""

    output_dir: str = "output"
    image_format: str = "PNG"
    filename_prefix: str = "meme"
    quality: int = 95  # Only used by lossy formats


class FileShareService:
    """Shares a meme by writing it into an output directory."""

    def __init__(self, config: Optional[ShareConfig] = None):
        self.config = config or ShareConfig()

    def _next_path(self) -> Path:
        output_dir = Path(self.config.output_dir)
        stamp = time.strftime("%Y%m%d-%H%M%S")
        suffix = "jpg" if self.config.image_format.upper() == "JPEG" else self.config.image_format.lower()

        path = output_dir / f"{self.config.filename_prefix}-{stamp}.{suffix}"
        counter = 1
        while path.exists():
            path = output_dir / f"{self.config.filename_prefix}-{stamp}-{counter}.{suffix}"
            counter += 1
        return path

    def share(self, image: Image.Image) -> ShareResult:
        try:
            Path(self.config.output_dir).mkdir(parents=True, exist_ok=True)
            path = self._next_path()
            image.save(str(path), format=self.config.image_format, quality=self.config.quality)
        except (OSError, ValueError) as e:
            return ShareResult.failed(e)

        logger.info(f"Saved meme to: {path}")
        return ShareResult.succeeded(path)


@dataclass
class PreviewConfig:
    """Configuration for the preview share sheet."""

    window_name: str = "Share Meme"
    window_width: int = 800
    window_height: int = 600
    timeout: Optional[float] = None  # Seconds before the sheet cancels itself


class PreviewShareSheet:
    """
    OpenCV window that previews the meme before sharing.

    Keyboard controls: Enter or S shares, ESC or Q cancels. Closing the
    window also cancels.
    """

    CONFIRM_KEYS = {13, 10, ord('s'), ord('S')}
    CANCEL_KEYS = {27, ord('q'), ord('Q')}

    def __init__(
        self,
        target: Optional[FileShareService] = None,
        config: Optional[PreviewConfig] = None
    ):
        self.target = target or FileShareService()
        self.config = config or PreviewConfig()

    def _resize_for_display(self, image: np.ndarray) -> np.ndarray:
        """Resize image to fit display window while maintaining aspect ratio."""
        h, w = image.shape[:2]
        scale = min(self.config.window_width / w, self.config.window_height / h)

        if scale < 1.0:
            image = cv2.resize(image, (int(w * scale), int(h * scale)), interpolation=cv2.INTER_AREA)

        return image

    def _wait_for_choice(self) -> Optional[bool]:
        """Block until the user confirms (True) or cancels (False/None)."""
        start = time.time()
        while True:
            if self.config.timeout is not None and time.time() - start >= self.config.timeout:
                return None

            key = cv2.waitKey(33) & 0xFF
            if key in self.CONFIRM_KEYS:
                return True
            if key in self.CANCEL_KEYS:
                return False
            if cv2.getWindowProperty(self.config.window_name, cv2.WND_PROP_VISIBLE) < 1:
                return False

    def share(self, image: Image.Image) -> ShareResult:
        frame = cv2.cvtColor(np.array(image.convert('RGB')), cv2.COLOR_RGB2BGR)
        frame = self._resize_for_display(frame)

        try:
            cv2.namedWindow(self.config.window_name, cv2.WINDOW_AUTOSIZE)
            cv2.imshow(self.config.window_name, frame)
            choice = self._wait_for_choice()
        except cv2.error as e:
            return ShareResult.failed(e)
        finally:
            if self._window_exists():
                cv2.destroyWindow(self.config.window_name)

        if not choice:
            return ShareResult.cancelled()
        return self.target.share(image)

    def _window_exists(self) -> bool:
        try:
            return cv2.getWindowProperty(self.config.window_name, cv2.WND_PROP_VISIBLE) >= 0
        except cv2.error:
            return False

