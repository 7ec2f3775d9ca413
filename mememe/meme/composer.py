"""
Meme composer module for drawing image-macro captions.

Provides PIL-based outlined text rendering used by the editor view and
for headless composition.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, List, Tuple, Union

from PIL import Image, ImageDraw, ImageFont
from loguru import logger


Box = Tuple[int, int, int, int]


@dataclass
class TextStyle:
    """Configuration for meme caption styling."""

    font_path: Optional[str] = None  # Path to TTF font, None for system search
    font_names: Tuple[str, ...] = (
        "HelveticaNeue-CondensedBlack",
        "Impact",
        "DejaVuSansCondensed-Bold",
        "DejaVuSans-Bold",
        "FreeSansBold",
    )
    font_size: int = 40
    font_color: Tuple[int, int, int] = (255, 255, 255)  # White
    stroke_color: Tuple[int, int, int] = (0, 0, 0)  # Black outline
    stroke_width: int = 4
    uppercase: bool = True
    max_width_ratio: float = 0.9  # Max text width as ratio of box width
    padding: int = 12  # Padding from box edges
    line_spacing: int = 5
    min_font_size: int = 12


class TextPosition:
    """Vertical anchor of a caption inside its box."""

    TOP = "top"
    BOTTOM = "bottom"
    CENTER = "center"


@dataclass
class MemeConfig:
    """Configuration for headless meme composition."""

    top_text_style: TextStyle = field(default_factory=TextStyle)
    bottom_text_style: TextStyle = field(default_factory=TextStyle)
    caption_band_ratio: float = 0.25  # Max share of image height per caption
    max_output_size: Tuple[int, int] = (1920, 1080)


class MemeComposer:
    """
    Draws meme captions onto images.

    Features:
    - Outlined text (white fill, black stroke)
    - Word wrapping and font shrinking to fit a box
    - Top and bottom caption bands
    """

    def __init__(self, config: Optional[MemeConfig] = None):
        """
        Initialize the meme composer.

        Args:
            config: Meme composition configuration
        """
        self.config = config or MemeConfig()
        self._font_cache: dict = {}

    def _get_font(self, style: TextStyle, size: Optional[int] = None) -> ImageFont.ImageFont:
        """Get or create a font with caching."""
        font_size = size or style.font_size
        cache_key = (style.font_path, style.font_names, font_size)

        if cache_key not in self._font_cache:
            font = None
            if style.font_path and Path(style.font_path).exists():
                try:
                    font = ImageFont.truetype(style.font_path, font_size)
                except OSError as e:
                    logger.warning(f"Font loading failed for {style.font_path}: {e}")

            if font is None:
                for font_name in style.font_names:
                    try:
                        font = ImageFont.truetype(font_name, font_size)
                        break
                    except OSError:
                        continue
                else:
                    font = ImageFont.load_default(size=font_size)
                    logger.debug("Using default font - consider installing a condensed bold font")

            self._font_cache[cache_key] = font

        return self._font_cache[cache_key]

    @staticmethod
    def _text_size(font: ImageFont.ImageFont, text: str) -> Tuple[int, int]:
        bbox = font.getbbox(text)
        return bbox[2] - bbox[0], bbox[3] - bbox[1]

    def _wrap_text(
        self,
        text: str,
        font: ImageFont.ImageFont,
        max_width: int
    ) -> List[str]:
        """Wrap text to fit within max_width."""
        words = text.split()
        lines = []
        current_line = []

        for word in words:
            test_line = ' '.join(current_line + [word])
            line_width, _ = self._text_size(font, test_line)

            if line_width <= max_width:
                current_line.append(word)
            else:
                if current_line:
                    lines.append(' '.join(current_line))
                current_line = [word]

        if current_line:
            lines.append(' '.join(current_line))

        return lines if lines else [text]

    def _block_height(self, lines: List[str], font: ImageFont.ImageFont, style: TextStyle) -> int:
        heights = [self._text_size(font, line)[1] for line in lines]
        return sum(heights) + (len(lines) - 1) * style.line_spacing

    def _calculate_font_size(
        self,
        text: str,
        style: TextStyle,
        max_width: int,
        max_height: int
    ) -> int:
        """Calculate the largest font size at which text fits."""
        font_size = style.font_size

        while font_size > style.min_font_size:
            font = self._get_font(style, font_size)
            lines = self._wrap_text(text, font, max_width)
            widest = max(self._text_size(font, line)[0] for line in lines)

            if widest <= max_width and self._block_height(lines, font, style) <= max_height:
                return font_size

            font_size -= 2

        return style.min_font_size

    def _draw_text_with_outline(
        self,
        draw: ImageDraw.ImageDraw,
        position: Tuple[int, int],
        text: str,
        font: ImageFont.ImageFont,
        style: TextStyle
    ) -> None:
        """Draw text with outline/stroke effect."""
        x, y = position

        # Outline
        for dx in range(-style.stroke_width, style.stroke_width + 1):
            for dy in range(-style.stroke_width, style.stroke_width + 1):
                if dx != 0 or dy != 0:
                    draw.text(
                        (x + dx, y + dy),
                        text,
                        font=font,
                        fill=style.stroke_color
                    )

        draw.text(position, text, font=font, fill=style.font_color)

    def draw_caption(
        self,
        image: Image.Image,
        text: str,
        style: TextStyle,
        box: Box,
        position: str = TextPosition.BOTTOM
    ) -> None:
        """
        Draw a caption in place, centered horizontally inside box.

        Args:
            image: Image to draw on (modified in place)
            text: Caption text; empty or whitespace draws nothing
            style: Caption styling
            box: (left, top, right, bottom) area the caption must fit in
            position: Vertical anchor inside the box (top, center, bottom)
        """
        if not text or not text.strip():
            return

        if style.uppercase:
            text = text.upper()

        left, top, right, bottom = box
        box_width = right - left
        max_width = max(1, int(box_width * style.max_width_ratio))
        max_height = max(1, bottom - top - 2 * style.padding)

        font_size = self._calculate_font_size(text, style, max_width, max_height)
        font = self._get_font(style, font_size)
        lines = self._wrap_text(text, font, max_width)
        total_height = self._block_height(lines, font, style)

        if position == TextPosition.TOP:
            y = top + style.padding
        elif position == TextPosition.CENTER:
            y = top + (bottom - top - total_height) // 2
        else:
            y = bottom - total_height - style.padding

        draw = ImageDraw.Draw(image)
        for line in lines:
            line_width, line_height = self._text_size(font, line)
            bbox_top = font.getbbox(line)[1]
            x = left + (box_width - line_width) // 2
            self._draw_text_with_outline(draw, (x, y - bbox_top), line, font, style)
            y += line_height + style.line_spacing

    def compose(
        self,
        template: Union[Image.Image, Path, str],
        top_text: Optional[str] = None,
        bottom_text: Optional[str] = None
    ) -> Image.Image:
        """
        Compose a meme from an image and captions without an editor view.

        Args:
            template: PIL Image or path to an image
            top_text: Text for top of meme
            bottom_text: Text for bottom of meme

        Returns:
            New RGB image with the captions drawn
        """
        if isinstance(template, (str, Path)):
            with Image.open(template) as opened:
                img = opened.convert('RGB')
        else:
            img = template.convert('RGB')

        if img.size[0] > self.config.max_output_size[0] or img.size[1] > self.config.max_output_size[1]:
            img.thumbnail(self.config.max_output_size, Image.Resampling.LANCZOS)

        width, height = img.size
        band = int(height * self.config.caption_band_ratio)

        if top_text:
            self.draw_caption(img, top_text, self.config.top_text_style, (0, 0, width, band), TextPosition.TOP)
        if bottom_text:
            self.draw_caption(
                img, bottom_text, self.config.bottom_text_style, (0, height - band, width, height), TextPosition.BOTTOM
            )

        return img
