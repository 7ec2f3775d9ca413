"""
Camera capture module for the "take a photo" image source.

Grabs a single still frame from an OpenCV capture device.
"""

from pathlib import Path
from dataclasses import dataclass
from typing import Optional

import cv2
import numpy as np
from PIL import Image
from loguru import logger


@dataclass
class CaptureConfig:
    """Configuration for camera capture."""
    device_id: int = 0  # Camera device index
    width: int = 1280
    height: int = 720
    warmup_frames: int = 5  # Frames to discard so exposure settles
    fallback_video: Optional[str] = None  # Video file to read when no camera is attached


class CameraCapture:
    """
    Still-photo capture from a camera.

    Features:
    - Availability check for enabling the camera source
    - Warmup frames discarded before the still
    - Fallback to a video file (for headless testing)
    - Context manager support
    """

    def __init__(self, config: Optional[CaptureConfig] = None):
        """
        Initialize camera capture.

        Args:
            config: Capture configuration, uses defaults if None
        """
        self.config = config or CaptureConfig()
        self._cap: Optional[cv2.VideoCapture] = None
        self._last_error: Optional[str] = None

    def _create_capture(self) -> Optional[cv2.VideoCapture]:
        """Create and configure VideoCapture object."""
        self._last_error = None
        cap = cv2.VideoCapture(self.config.device_id)

        if not cap.isOpened():
            logger.warning(f"Camera {self.config.device_id} not available")

            if self.config.fallback_video:
                fallback_path = Path(self.config.fallback_video)
                if fallback_path.exists():
                    logger.info(f"Using fallback video: {fallback_path}")
                    cap = cv2.VideoCapture(str(fallback_path))

            if not cap.isOpened():
                self._last_error = "No camera or fallback video available"
                return None

        cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.width)
        cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.height)

        return cap

    def open(self) -> bool:
        """Open the capture device. Returns False if nothing could be opened."""
        if self._cap is None:
            self._cap = self._create_capture()
        return self._cap is not None

    def close(self) -> None:
        """Release the capture device."""
        if self._cap is not None:
            self._cap.release()
            self._cap = None

    def is_available(self) -> bool:
        """Check whether a camera (or fallback video) can be opened."""
        if self._cap is not None:
            return True
        opened = self.open()
        self.close()
        return opened

    def capture_still(self) -> Optional[Image.Image]:
        """
        Capture one frame as an RGB PIL image.

        Returns:
            The captured photo, or None if no frame could be read
        """
        opened_here = self._cap is None
        if not self.open():
            return None

        try:
            frame = None
            for _ in range(self.config.warmup_frames + 1):
                ret, current = self._cap.read()
                if ret:
                    frame = current

            if frame is None:
                self._last_error = "Failed to read frame from camera"
                logger.warning(self._last_error)
                return None

            return self._to_image(frame)
        finally:
            if opened_here:
                self.close()

    @staticmethod
    def _to_image(frame: np.ndarray) -> Image.Image:
        """Convert an OpenCV BGR frame to a PIL RGB image."""
        rgb = cv2.cvtColor(frame, cv2.COLOR_BGR2RGB)
        return Image.fromarray(rgb)

    @property
    def last_error(self) -> Optional[str]:
        """Get the last error message."""
        return self._last_error

    def __enter__(self):
        self.open()
        return self

    def __exit__(self, *args):
        self.close()
