"""Deterministic marker generation for the collision visualizer."""

from __future__ import annotations

import logging
import random
from typing import List, Sequence, Tuple

from .config import MARKER_COUNT, MARKER_DIMENSIONS
from .core import AnchorDirection, Marker

logger = logging.getLogger(__name__)

US_STATES: Tuple[str, ...] = (
    "Alabama", "Alaska", "Arizona", "Arkansas", "California",
    "Colorado", "Connecticut", "Delaware", "Florida", "Georgia",
    "Hawaii", "Idaho", "Illinois", "Indiana", "Iowa",
    "Kansas", "Kentucky", "Louisiana", "Maine", "Maryland",
    "Massachusetts", "Michigan", "Minnesota", "Mississippi", "Missouri",
    "Montana", "Nebraska", "Nevada", "New Hampshire", "New Jersey",
    "New Mexico", "New York", "North Carolina", "North Dakota", "Ohio",
    "Oklahoma", "Oregon", "Pennsylvania", "Rhode Island", "South Carolina",
    "South Dakota", "Tennessee", "Texas", "Utah", "Vermont",
    "Virginia", "Washington", "West Virginia", "Wisconsin", "Wyoming",
)


def anchor_direction_for_seed(seed: int) -> AnchorDirection:
    """Odd seeds anchor labels to the west, even seeds to the east."""

    return AnchorDirection.WEST if seed & 1 else AnchorDirection.EAST


def generate_markers(
    seed: int,
    canvas_size: Tuple[int, int],
    name_pool: Sequence[str] = US_STATES,
    *,
    count: int = MARKER_COUNT,
    marker_size: Tuple[int, int] = MARKER_DIMENSIONS,
) -> Tuple[List[Marker], AnchorDirection]:
    """Place ``count`` markers uniformly inside the canvas.

    The layout is a pure function of the arguments: a private generator is
    seeded with ``seed`` and each marker draws its x then its y, marker 0
    first. Titles cycle through ``name_pool`` by index.
    """

    if seed < 1:
        raise ValueError("seed must be >= 1")
    if count <= 0:
        raise ValueError("count must be positive")
    if not name_pool:
        raise ValueError("name_pool must not be empty")

    width, height = canvas_size
    marker_w, marker_h = marker_size
    if marker_w <= 0 or marker_h <= 0:
        raise ValueError("marker_size must be positive")
    max_x = width - marker_w
    max_y = height - marker_h
    if max_x < 0 or max_y < 0:
        raise ValueError("canvas_size must be at least as large as marker_size")

    rng = random.Random(seed)
    markers: List[Marker] = []
    for i in range(count):
        x = rng.randint(0, max_x)
        y = rng.randint(0, max_y)
        markers.append(
            Marker(
                position=(x, y),
                dimensions=(marker_w, marker_h),
                title=name_pool[i % len(name_pool)],
            )
        )

    direction = anchor_direction_for_seed(seed)
    logger.debug("Generated %d markers for seed %d (%s)", len(markers), seed, direction.value)
    return markers, direction


__all__ = ["US_STATES", "anchor_direction_for_seed", "generate_markers"]
