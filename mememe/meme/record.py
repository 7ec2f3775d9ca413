"""
Meme record: the captions and both bitmaps of one composed meme.
"""

from dataclasses import dataclass

from PIL import Image


def _is_empty(image: Image.Image) -> bool:
    return image is None or image.size[0] <= 0 or image.size[1] <= 0


@dataclass(frozen=True)
class MemeRecord:
    """
    A meme is made up of four parts:

    - the caption at the top of the image
    - the caption at the bottom of the image
    - the original photo without any text applied
    - the composed image of the captions drawn over the photo
    """

    top_text: str
    bottom_text: str
    original_image: Image.Image
    composed_image: Image.Image

    def __post_init__(self):
        if _is_empty(self.original_image):
            raise ValueError("MemeRecord requires a non-empty original image")
        if _is_empty(self.composed_image):
            raise ValueError("MemeRecord requires a non-empty composed image")

    def __repr__(self) -> str:
        return (
            f"MemeRecord(top='{self.top_text}', bottom='{self.bottom_text}', "
            f"{self.composed_image.size[0]}x{self.composed_image.size[1]})"
        )
