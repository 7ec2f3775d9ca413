import numpy as np
import pytest

from mememe.vision import CameraCapture, CaptureConfig
from mememe.vision import camera as camera_module


class FakeVideoCapture:
    """Stands in for cv2.VideoCapture; returns a blue BGR frame."""

    instances = []

    def __init__(self, source, opened=True, frames=True):
        self.source = source
        self.opened = opened
        self.frames = frames
        self.released = False
        FakeVideoCapture.instances.append(self)

    def isOpened(self):
        return self.opened

    def set(self, prop, value):
        return True

    def read(self):
        if not self.frames:
            return False, None
        frame = np.zeros((4, 6, 3), dtype=np.uint8)
        frame[:, :, 0] = 255
        return True, frame

    def release(self):
        self.released = True


@pytest.fixture(autouse=True)
def reset_instances():
    FakeVideoCapture.instances = []


def test_capture_still_converts_to_rgb(monkeypatch):
    monkeypatch.setattr(camera_module.cv2, "VideoCapture", FakeVideoCapture)

    image = CameraCapture(CaptureConfig(warmup_frames=2)).capture_still()

    assert image.size == (6, 4)
    assert image.getpixel((0, 0)) == (0, 0, 255)
    assert all(cap.released for cap in FakeVideoCapture.instances)


def test_no_frame_returns_none(monkeypatch):
    monkeypatch.setattr(
        camera_module.cv2, "VideoCapture", lambda source: FakeVideoCapture(source, frames=False)
    )

    capture = CameraCapture()
    assert capture.capture_still() is None
    assert capture.last_error == "Failed to read frame from camera"


def test_unavailable_camera(monkeypatch):
    monkeypatch.setattr(
        camera_module.cv2, "VideoCapture", lambda source: FakeVideoCapture(source, opened=False)
    )

    capture = CameraCapture()
    assert not capture.is_available()
    assert capture.capture_still() is None
    assert capture.last_error == "No camera or fallback video available"


def test_fallback_video(monkeypatch, tmp_path):
    video = tmp_path / "clip.mp4"
    video.write_bytes(b"")
    monkeypatch.setattr(
        camera_module.cv2, "VideoCapture", lambda source: FakeVideoCapture(source, opened=isinstance(source, str))
    )

    capture = CameraCapture(CaptureConfig(fallback_video=str(video)))
    with capture:
        assert capture.capture_still() is not None
    assert [cap.source for cap in FakeVideoCapture.instances] == [0, str(video)]
    assert capture.last_error is None
