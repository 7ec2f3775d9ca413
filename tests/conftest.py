"""Shared fixtures for the meme editor tests.

Photos are generated in memory or written to pytest's tmp_path, and the
picker/share services are replaced by small fakes so the controller can
be driven without a camera or a window.
"""

from typing import List, Optional

import pytest
from PIL import Image
from loguru import logger

from mememe.data import ImageLibrary
from mememe.editor import (
    EditorView,
    ImagePicker,
    ImageSource,
    KeyboardEvents,
    MemeEditorController,
    PickResult,
    ShareResult,
    ViewConfig,
)


class FakePicker:
    """Picker returning queued results, one per pick."""

    def __init__(self, *results: PickResult, camera: bool = False):
        self.results = list(results)
        self.camera = camera
        self.calls = []

    def is_source_available(self, source: ImageSource) -> bool:
        return self.camera if source is ImageSource.CAMERA else True

    def pick(self, source, selection=None) -> PickResult:
        self.calls.append((source, selection))
        return self.results.pop(0) if self.results else PickResult.cancelled()


class RecordingShare:
    """Share service that records what it was given."""

    def __init__(self, result: Optional[ShareResult] = None):
        self.result = result or ShareResult.succeeded()
        self.shared: List[Image.Image] = []

    def share(self, image: Image.Image) -> ShareResult:
        self.shared.append(image)
        return self.result


@pytest.fixture
def photo():
    return Image.new("RGB", (400, 300), color=(200, 30, 30))


@pytest.fixture
def library_dir(tmp_path):
    directory = tmp_path / "library"
    (directory / "nested").mkdir(parents=True)
    Image.new("RGB", (64, 48), color=(0, 128, 0)).save(directory / "green.png")
    Image.new("RGB", (32, 32), color=(0, 0, 255)).save(directory / "nested" / "blue.JPG", format="JPEG")
    (directory / "notes.txt").write_text("not a photo")
    return directory


@pytest.fixture
def library(library_dir):
    return ImageLibrary(library_dir)


@pytest.fixture
def view():
    return EditorView(ViewConfig(width=200, height=360))


@pytest.fixture
def share():
    return RecordingShare()


@pytest.fixture
def make_controller(view, share):
    """Build a loaded, visible controller around the given picker."""
    def _make(picker, share_service=None, keyboard=None):
        controller = MemeEditorController(
            picker,
            share_service or share,
            view=view,
            keyboard=keyboard or KeyboardEvents(),
        )
        controller.load()
        controller.appear()
        return controller
    return _make


@pytest.fixture
def library_controller(make_controller, library):
    return make_controller(ImagePicker(library=library))


@pytest.fixture
def log_messages():
    """Collect loguru messages emitted during a test."""
    messages = []
    handler_id = logger.add(lambda message: messages.append(message.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
