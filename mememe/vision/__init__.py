"""
Vision module for capturing photos from a camera.
"""

from .camera import CameraCapture, CaptureConfig

__all__ = [
    "CameraCapture",
    "CaptureConfig",
]
