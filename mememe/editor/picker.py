"""
Image picker service: returns a photo from the library or the camera.
"""

from pathlib import Path
from typing import Optional, Union

from loguru import logger

from ..data.image_library import ImageLibrary, LibraryImage, UNREADABLE_PHOTO_ERRORS
from ..vision.camera import CameraCapture
from .results import ImageSource, PickResult


Selection = Union[str, int, Path, None]


class ImagePicker:
    """
    Picks a photo from one of two sources.

    Library selections are a photo name, a library index or a file path;
    a missing selection means the user dismissed the picker.
    """

    def __init__(
        self,
        library: Optional[ImageLibrary] = None,
        camera: Optional[CameraCapture] = None
    ):
        self.library = library
        self.camera = camera

    def is_source_available(self, source: ImageSource) -> bool:
        if source is ImageSource.CAMERA:
            return self.camera is not None and self.camera.is_available()
        return True

    def pick(self, source: ImageSource, selection: Selection = None) -> PickResult:
        """
        Ask the given source for a photo.

        Args:
            source: Library or camera
            selection: Which library photo to return (ignored for camera)

        Returns:
            PickResult with the photo, a cancellation, or the failure
        """
        if source is ImageSource.CAMERA:
            return self._pick_from_camera()
        return self._pick_from_library(selection)

    def _pick_from_camera(self) -> PickResult:
        if not self.is_source_available(ImageSource.CAMERA):
            reason = self.camera.last_error if self.camera is not None else None
            return PickResult.failed(RuntimeError(reason or "Camera not available"))

        image = self.camera.capture_still()
        if image is None:
            logger.info(f"Camera returned no photo: {self.camera.last_error}")
            return PickResult.cancelled()
        return PickResult.succeeded(image)

    def _pick_from_library(self, selection: Selection) -> PickResult:
        if selection is None:
            return PickResult.cancelled()

        photo = self._resolve(selection)
        if photo is None:
            logger.info(f"No photo matches selection {selection!r}")
            return PickResult.cancelled()

        try:
            image = photo.load_image()
        except UNREADABLE_PHOTO_ERRORS as e:
            logger.warning(f"Failed to open photo {photo.path}: {e}")
            return PickResult.failed(e)

        logger.debug(f"Picked photo {photo.path}")
        return PickResult.succeeded(image)

    def _resolve(self, selection: Selection) -> Optional[LibraryImage]:
        """Map a selection to a library photo or a photo file."""
        if isinstance(selection, int):
            if self.library is None:
                return None
            try:
                return self.library.get_by_index(selection)
            except IndexError:
                return None

        if isinstance(selection, str) and self.library is not None:
            match = self.library.get_by_name(selection)
            if match is not None:
                return match

        path = Path(selection)
        return LibraryImage(path) if path.is_file() else None
