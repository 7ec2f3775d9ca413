"""
Editor view hierarchy and rasterizer.

The view lays out the photo, the two caption fields and the chrome
(toolbar and share button), and renders whatever is visible into a
bitmap the size of the view bounds.
"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

from PIL import Image, ImageDraw, ImageFont

from ..meme.composer import MemeComposer, TextStyle, TextPosition, Box
from .state import EditorState


@dataclass
class ViewConfig:
    """Geometry and colors of the editor screen."""

    width: int = 375
    height: int = 667
    background: Tuple[int, int, int] = (0, 0, 0)
    toolbar_height: int = 44
    toolbar_color: Tuple[int, int, int] = (247, 247, 247)
    share_button_box: Box = (8, 8, 80, 40)
    share_button_color: Tuple[int, int, int] = (0, 122, 255)
    disabled_color: Tuple[int, int, int] = (142, 142, 147)
    caption_top_margin: int = 48  # Keeps the top caption clear of the share button
    caption_band_ratio: float = 0.2  # Caption field height as share of view height
    caption_style: TextStyle = field(default_factory=TextStyle)


@dataclass
class Widget:
    """A rectangular element of the view that can be hidden."""

    name: str
    box: Box
    hidden: bool = False


class EditorView:
    """
    View hierarchy of the meme editor.

    Widgets:
    - image view: the photo, aspect-fit
    - top / bottom caption fields
    - toolbar (album and camera buttons) and share button (chrome)
    """

    def __init__(
        self,
        config: Optional[ViewConfig] = None,
        composer: Optional[MemeComposer] = None
    ):
        self.config = config or ViewConfig()
        self.composer = composer or MemeComposer()

        w, h = self.config.width, self.config.height
        if w <= 0 or h <= 0:
            raise ValueError(f"View size must be positive, got {w}x{h}")

        toolbar_top = h - self.config.toolbar_height
        band = int(h * self.config.caption_band_ratio)
        top_margin = self.config.caption_top_margin

        self.image_view = Widget("image_view", (0, 0, w, toolbar_top))
        self.top_field = Widget("top_field", (0, top_margin, w, top_margin + band))
        self.bottom_field = Widget("bottom_field", (0, toolbar_top - band, w, toolbar_top))
        self.toolbar = Widget("toolbar", (0, toolbar_top, w, h))
        self.share_button = Widget("share_button", self.config.share_button_box)

    @property
    def size(self) -> Tuple[int, int]:
        return self.config.width, self.config.height

    @property
    def chrome(self) -> Tuple[Widget, Widget]:
        return self.toolbar, self.share_button

    def snapshot(self, state: EditorState) -> Image.Image:
        """
        Rasterize the visible view hierarchy.

        Args:
            state: Editor state providing the photo, captions and enabled flags

        Returns:
            New RGB image sized to the view bounds
        """
        canvas = Image.new('RGB', self.size, self.config.background)

        if state.original_image is not None and not self.image_view.hidden:
            self._draw_photo(canvas, state.original_image)

        style = self.config.caption_style
        if not self.top_field.hidden:
            self.composer.draw_caption(canvas, state.top_text, style, self.top_field.box, TextPosition.TOP)
        if not self.bottom_field.hidden:
            self.composer.draw_caption(canvas, state.bottom_text, style, self.bottom_field.box, TextPosition.BOTTOM)

        draw = ImageDraw.Draw(canvas)
        if not self.toolbar.hidden:
            self._draw_toolbar(draw, state.camera_enabled)
        if not self.share_button.hidden:
            self._draw_share_button(draw, state.share_enabled)

        return canvas

    def _draw_photo(self, canvas: Image.Image, photo: Image.Image) -> None:
        """Paste the photo aspect-fit and centered in the image view."""
        left, top, right, bottom = self.image_view.box
        area_w, area_h = right - left, bottom - top
        photo_w, photo_h = photo.size

        scale = min(area_w / photo_w, area_h / photo_h)
        fit_w = max(1, int(photo_w * scale))
        fit_h = max(1, int(photo_h * scale))

        fitted = photo.convert('RGB').resize((fit_w, fit_h), Image.Resampling.LANCZOS)
        canvas.paste(fitted, (left + (area_w - fit_w) // 2, top + (area_h - fit_h) // 2))

    def _draw_label(self, draw: ImageDraw.ImageDraw, box: Box, text: str, color) -> None:
        font = ImageFont.load_default()
        bbox = draw.textbbox((0, 0), text, font=font)
        text_w, text_h = bbox[2] - bbox[0], bbox[3] - bbox[1]
        left, top, right, bottom = box
        draw.text(
            (left + (right - left - text_w) // 2, top + (bottom - top - text_h) // 2 - bbox[1]),
            text,
            font=font,
            fill=color
        )

    def _draw_toolbar(self, draw: ImageDraw.ImageDraw, camera_enabled: bool) -> None:
        left, top, right, bottom = self.toolbar.box
        draw.rectangle(self.toolbar.box, fill=self.config.toolbar_color)

        middle = (left + right) // 2
        camera_color = self.config.share_button_color if camera_enabled else self.config.disabled_color
        self._draw_label(draw, (left, top, middle, bottom), "Album", self.config.share_button_color)
        self._draw_label(draw, (middle, top, right, bottom), "Camera", camera_color)

    def _draw_share_button(self, draw: ImageDraw.ImageDraw, enabled: bool) -> None:
        color = self.config.share_button_color if enabled else self.config.disabled_color
        draw.rounded_rectangle(self.share_button.box, radius=6, outline=color, width=2)
        self._draw_label(draw, self.share_button.box, "Share", color)
