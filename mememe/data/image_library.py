"""
Photo library backing the "pick from library" image source.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from PIL import Image
from loguru import logger


# Errors Pillow raises for files it will not decode
UNREADABLE_PHOTO_ERRORS = (OSError, Image.DecompressionBombError)


@dataclass
class LibraryImage:
    """A photo file; size is filled in when the library scans it."""

    path: Path
    width: int = 0
    height: int = 0

    @property
    def name(self) -> str:
        return self.path.stem

    def load_image(self) -> Image.Image:
        """Decode the photo fully into memory as RGB."""
        with Image.open(self.path) as img:
            return img.convert('RGB')


class ImageLibrary:
    """
    Directory of photos the user can pick from.

    The directory is scanned once, on first access. Files Pillow cannot
    read are skipped with a warning.
    """

    SUPPORTED_FORMATS = {'.jpg', '.jpeg', '.png', '.gif', '.webp', '.bmp'}

    def __init__(self, library_dir: Union[str, Path] = "data/library"):
        self.library_dir = Path(library_dir)
        self._images: Optional[List[LibraryImage]] = None

        if not self.library_dir.exists():
            logger.warning(f"Library directory does not exist: {self.library_dir}")

    @property
    def images(self) -> List[LibraryImage]:
        if self._images is None:
            self._images = self._scan()
        return self._images

    def _scan(self) -> List[LibraryImage]:
        found = []
        if not self.library_dir.exists():
            return found

        for path in sorted(self.library_dir.rglob("*")):
            if not path.is_file() or path.suffix.lower() not in self.SUPPORTED_FORMATS:
                continue
            try:
                with Image.open(path) as img:
                    width, height = img.size
            except UNREADABLE_PHOTO_ERRORS as e:
                logger.warning(f"Skipping unreadable photo {path.name}: {e}")
                continue
            found.append(LibraryImage(path, width, height))

        logger.info(f"Found {len(found)} photos in {self.library_dir}")
        return found

    def get_by_name(self, name: str) -> Optional[LibraryImage]:
        """Photo whose filename without extension is name."""
        return next((image for image in self.images if image.name == name), None)

    def get_by_index(self, index: int) -> LibraryImage:
        return self.images[index]
