from .image_library import ImageLibrary, LibraryImage

__all__ = [
    "ImageLibrary",
    "LibraryImage",
]
