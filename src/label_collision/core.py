from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from .config import GLYPH_HEIGHT, GLYPH_WIDTH

logger = logging.getLogger(__name__)

Point = Tuple[int, int]
Size = Tuple[int, int]


class AnchorDirection(enum.Enum):
    """Side of the marker the label extends toward."""

    WEST = "west"
    EAST = "east"


@dataclass(frozen=True)
class Rect:
    x: int
    y: int
    width: int
    height: int

    @property
    def position(self) -> Point:
        return (self.x, self.y)

    @property
    def dimensions(self) -> Size:
        return (self.width, self.height)

    def collides_with(self, other: Rect) -> bool:
        """Strict overlap test; rectangles that only share an edge do not collide."""

        return (
            self.x + self.width > other.x
            and self.y + self.height > other.y
            and self.x < other.x + other.width
            and self.y < other.y + other.height
        )


@dataclass(frozen=True)
class Marker:
    position: Point
    dimensions: Size
    title: str


@dataclass
class Label:
    """Text annotation for one marker.

    ``resolved`` is only meaningful while :func:`resolve_collisions` runs: it
    flips to ``True`` once the label has finished its own comparison pass.
    """

    marker: Marker
    direction: AnchorDirection
    hidden: bool = False
    resolved: bool = False

    @property
    def dimensions(self) -> Size:
        return (len(self.marker.title) * GLYPH_WIDTH, GLYPH_HEIGHT)

    @property
    def position(self) -> Point:
        mx, my = self.marker.position
        mw, mh = self.marker.dimensions
        lw, lh = self.dimensions
        if self.direction is AnchorDirection.WEST:
            x = mx - lw
        else:
            x = mx + mw
        return (x, my + mh // 2 - lh // 2)


def marker_rect(marker: Marker) -> Rect:
    x, y = marker.position
    w, h = marker.dimensions
    return Rect(x, y, w, h)


def label_box(label: Label) -> Rect:
    """Return the rectangle occupied by the label text."""

    x, y = label.position
    w, h = label.dimensions
    return Rect(x, y, w, h)


def combined_hitbox(label: Label) -> Rect:
    """Return the rectangle used for overlap testing.

    A hidden label contributes nothing, so its hitbox is the marker alone. A
    visible label spans marker plus label width at marker height, anchored at
    the label's x when it extends west.
    """

    marker = label.marker
    if label.hidden:
        return marker_rect(marker)
    mx, my = marker.position
    mw, mh = marker.dimensions
    lw, _ = label.dimensions
    x = label.position[0] if label.direction is AnchorDirection.WEST else mx
    return Rect(x, my, lw + mw, mh)


def build_labels(
    markers: Iterable[Marker],
    direction: AnchorDirection,
    *,
    hide_all: bool = False,
) -> List[Label]:
    return [Label(marker=marker, direction=direction, hidden=hide_all) for marker in markers]


def resolve_collisions(labels: Iterable[Label]) -> List[Label]:
    """Hide labels that overlap an earlier, already resolved label.

    Labels are processed in order and each one is compared against the whole
    sequence; only partners that already finished their own pass can hide it,
    so earlier labels win. Two hitboxes that compare equal are treated as the
    same label and skipped, which also skips distinct labels that happen to
    share an identical rectangle.

    The input labels are not modified; copies with updated ``hidden`` flags
    are returned in the same order.
    """

    resolved = [replace(label, resolved=False) for label in labels]

    for a in resolved:
        for b in resolved:
            a_box = combined_hitbox(a)
            b_box = combined_hitbox(b)

            if a_box == b_box:
                continue

            if a_box.collides_with(b_box) and b.resolved:
                a.hidden = True

        a.resolved = True

    if logger.isEnabledFor(logging.DEBUG):
        hidden = sum(1 for label in resolved if label.hidden)
        logger.debug("Resolved %d labels, %d hidden", len(resolved), hidden)
    return resolved


__all__ = [
    "AnchorDirection",
    "Rect",
    "Marker",
    "Label",
    "marker_rect",
    "label_box",
    "combined_hitbox",
    "build_labels",
    "resolve_collisions",
]
