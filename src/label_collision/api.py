"""High-level API for exporting resolved layouts as images plus a JSON summary."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Sequence

from .config import DEFAULT_CONFIG, LayoutConfig
from .core import Label, Rect, combined_hitbox, label_box, marker_rect
from .rendering import draw_scene, get_renderer
from .state import AppState, clamp_seed, recompute

logger = logging.getLogger(__name__)


def render_seed_snapshots(
    prj_id: str,
    seeds: Sequence[int],
    *,
    output_root: Path | str = "output",
    hide_all: bool = False,
    config: LayoutConfig = DEFAULT_CONFIG,
    renderer_name: str | None = None,
) -> dict[str, Any]:
    """Render one frame per seed and emit a ``snapshots.json`` summary.

    Parameters
    ----------
    prj_id:
        Identifier used to create ``output_root / prj_id`` to store artifacts.
    seeds:
        Seeds to render. Values below 1 are clamped to 1, as the viewer does.
    output_root:
        Directory under which project-specific folders are created.
    hide_all:
        Apply the global-hide flag before resolving collisions.
    config:
        Canvas size, marker count and marker dimensions.
    renderer_name:
        Optional renderer backend name; ``None`` picks the default.
    """

    if not prj_id:
        raise ValueError("prj_id must be non-empty")
    if not seeds:
        raise ValueError("seeds must not be empty")

    project_dir = Path(output_root) / prj_id
    project_dir.mkdir(parents=True, exist_ok=True)

    summary: dict[str, Any] = {
        "project_id": prj_id,
        "canvas_size": list(config.canvas_size),
        "marker_count": config.marker_count,
        "hide_all": hide_all,
        "output_dir": str(project_dir),
        "snapshots": [],
    }

    for raw_seed in seeds:
        seed = clamp_seed(int(raw_seed))
        labels = recompute(seed, hide_all=hide_all, config=config)
        renderer = get_renderer(renderer_name, canvas_size=config.canvas_size)
        draw_scene(renderer, labels, AppState(seed=seed, hide_all=hide_all))

        image_path = project_dir / f"seed_{seed}.png"
        renderer.image.save(image_path)

        summary["snapshots"].append(
            {
                "seed": seed,
                "direction": labels[0].direction.value if labels else None,
                "hidden_count": sum(1 for label in labels if label.hidden),
                "image_path": str(image_path),
                "labels": [_serialize_label(label) for label in labels],
            }
        )
        logger.info("Rendered seed %d to %s", seed, image_path)

    summary_path = project_dir / "snapshots.json"
    summary["summary_path"] = str(summary_path)
    summary_path.write_text(json.dumps(summary, ensure_ascii=False, indent=2), encoding="utf-8")
    return summary


def _serialize_rect(rect: Rect) -> dict[str, int]:
    return {"x": rect.x, "y": rect.y, "w": rect.width, "h": rect.height}


def _serialize_label(label: Label) -> dict[str, Any]:
    return {
        "title": label.marker.title,
        "marker": _serialize_rect(marker_rect(label.marker)),
        "label": _serialize_rect(label_box(label)),
        "hitbox": _serialize_rect(combined_hitbox(label)),
        "hidden": label.hidden,
    }


__all__ = ["render_seed_snapshots"]
