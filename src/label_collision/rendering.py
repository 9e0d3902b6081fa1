"""Drawing surfaces for resolved label layouts.

The scene is expressed as a handful of primitives (filled rectangle, outline
rectangle, text) so any surface implementing :class:`Renderer` can display
it. Pillow is the bundled backend.
"""

from __future__ import annotations

from typing import Dict, Iterable, Protocol, Tuple, runtime_checkable

import numpy as np
from PIL import Image, ImageDraw, ImageFont

from .config import (
    BACKGROUND_COLOR,
    BORDER_COLOR,
    DEFAULT_CANVAS_SIZE,
    GLYPH_HEIGHT,
    HITBOX_COLOR,
    LABEL_COLOR,
    MARKER_COLOR,
    OVERLAY_COLOR,
    TITLE_COLOR,
    Color,
)
from .core import Label, Rect, combined_hitbox, label_box, marker_rect
from .state import AppMode, AppState

OVERLAY_ORIGIN = (10, 10)
OVERLAY_SCALE = 3


@runtime_checkable
class Renderer(Protocol):
    """Protocol implemented by drawing surfaces."""

    name: str

    def clear(self, color: Color) -> None:
        """Fill the whole surface with ``color``."""

    def fill_rect(self, rect: Rect, color: Color) -> None:
        """Paint the ``rect.width x rect.height`` area starting at the rect origin."""

    def draw_rect(self, rect: Rect, color: Color) -> None:
        """Outline the rectangle."""

    def draw_text(self, xy: Tuple[int, int], text: str, color: Color, scale: int = 1) -> None:
        """Draw ``text`` with its top-left corner at ``xy``."""


class PillowRenderer:
    """Renderer that rasterizes primitives onto an RGB Pillow image."""

    name = "pillow"

    def __init__(self, canvas_size: Tuple[int, int] = DEFAULT_CANVAS_SIZE) -> None:
        width, height = canvas_size
        if width <= 0 or height <= 0:
            raise ValueError("canvas_size must be positive in both dimensions")
        self.canvas_size = (int(width), int(height))
        self._image = Image.new("RGB", self.canvas_size, color=BACKGROUND_COLOR)
        self._draw = ImageDraw.Draw(self._image)
        self._fonts: Dict[int, ImageFont.ImageFont | ImageFont.FreeTypeFont] = {}

    @property
    def image(self) -> Image.Image:
        return self._image

    def _font(self, scale: int):
        if scale not in self._fonts:
            self._fonts[scale] = ImageFont.load_default(size=GLYPH_HEIGHT * scale)
        return self._fonts[scale]

    def clear(self, color: Color) -> None:
        self._draw.rectangle((0, 0, self.canvas_size[0], self.canvas_size[1]), fill=color)

    def fill_rect(self, rect: Rect, color: Color) -> None:
        if rect.width <= 0 or rect.height <= 0:
            return
        self._draw.rectangle(
            (rect.x, rect.y, rect.x + rect.width - 1, rect.y + rect.height - 1),
            fill=color,
        )

    def draw_rect(self, rect: Rect, color: Color) -> None:
        if rect.width <= 0 or rect.height <= 0:
            return
        self._draw.rectangle(
            (rect.x, rect.y, rect.x + rect.width - 1, rect.y + rect.height - 1),
            outline=color,
        )

    def draw_text(self, xy: Tuple[int, int], text: str, color: Color, scale: int = 1) -> None:
        self._draw.text(xy, text, fill=color, font=self._font(max(int(scale), 1)))

    def to_array(self) -> np.ndarray:
        """Return the frame as a ``(H, W, 3)`` uint8 array."""

        return np.array(self._image, dtype=np.uint8)


def get_renderer(
    preferred: str | None = None,
    canvas_size: Tuple[int, int] = DEFAULT_CANVAS_SIZE,
) -> Renderer:
    normalized = (preferred or "").strip().lower()
    if normalized not in {"", "pillow"}:
        raise ValueError(f"Unknown renderer '{preferred}'")
    return PillowRenderer(canvas_size)


def overlay_text(state: AppState) -> str:
    if state.mode is AppMode.SEED_ENTRY:
        return f"Seed: {state.seed_buffer}|"
    return f"Seed: {state.seed}"


def draw_labels(renderer: Renderer, labels: Iterable[Label]) -> None:
    for label in labels:
        renderer.fill_rect(marker_rect(label.marker), MARKER_COLOR)
        if not label.hidden:
            box = label_box(label)
            renderer.draw_rect(box, LABEL_COLOR)
            renderer.draw_text(box.position, label.marker.title, TITLE_COLOR)
        renderer.draw_rect(combined_hitbox(label), HITBOX_COLOR)


def draw_scene(renderer: Renderer, labels: Iterable[Label], state: AppState) -> None:
    """Draw markers, visible labels, every hitbox, and the seed overlay."""

    renderer.clear(BACKGROUND_COLOR)
    draw_labels(renderer, labels)
    renderer.draw_text(OVERLAY_ORIGIN, overlay_text(state), OVERLAY_COLOR, scale=OVERLAY_SCALE)

    canvas_size = getattr(renderer, "canvas_size", None)
    if canvas_size is not None:
        renderer.draw_rect(Rect(0, 0, canvas_size[0], canvas_size[1]), BORDER_COLOR)


__all__ = [
    "Renderer",
    "PillowRenderer",
    "get_renderer",
    "overlay_text",
    "draw_labels",
    "draw_scene",
]
