"""Declared constants and the layout configuration record."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

Size = Tuple[int, int]
Color = Tuple[int, int, int]

DEFAULT_CANVAS_SIZE: Size = (800, 600)
MARKER_COUNT = 20
MARKER_DIMENSIONS: Size = (24, 44)

# Fixed text metrics, pixels per character and line height.
GLYPH_WIDTH = 8
GLYPH_HEIGHT = 8

BACKGROUND_COLOR: Color = (0, 0, 0)
MARKER_COLOR: Color = (255, 0, 0)
LABEL_COLOR: Color = (255, 255, 255)
TITLE_COLOR: Color = (255, 255, 0)
HITBOX_COLOR: Color = (0, 255, 0)
BORDER_COLOR: Color = (0, 0, 139)
OVERLAY_COLOR: Color = (255, 255, 0)


@dataclass(frozen=True)
class LayoutConfig:
    """Parameters describing how markers are laid out on the canvas."""

    canvas_size: Size = DEFAULT_CANVAS_SIZE
    marker_count: int = MARKER_COUNT
    marker_dimensions: Size = MARKER_DIMENSIONS

    def __post_init__(self) -> None:
        width, height = self.canvas_size
        if width <= 0 or height <= 0:
            raise ValueError("canvas_size must be positive in both dimensions")
        if self.marker_count <= 0:
            raise ValueError("marker_count must be positive")
        marker_w, marker_h = self.marker_dimensions
        if marker_w <= 0 or marker_h <= 0:
            raise ValueError("marker_dimensions must be positive")

    def with_canvas(self, canvas_size: Size) -> "LayoutConfig":
        return LayoutConfig(
            canvas_size=(int(canvas_size[0]), int(canvas_size[1])),
            marker_count=self.marker_count,
            marker_dimensions=self.marker_dimensions,
        )


DEFAULT_CONFIG = LayoutConfig()
