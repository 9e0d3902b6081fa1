"""CLI helper to render a range of seeds to PNG frames plus a JSON summary."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from label_collision import LayoutConfig, render_seed_snapshots
from label_collision.logging_config import setup_logging


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("prj_id", help="Name of the folder created under --output-root.")
    parser.add_argument("--start", type=int, default=1, help="First seed (default: 1).")
    parser.add_argument("--stop", type=int, default=10, help="Last seed, inclusive (default: 10).")
    parser.add_argument(
        "--output-root",
        type=Path,
        default=Path("output"),
        help="Root directory for generated frames (default: output/).",
    )
    parser.add_argument(
        "--hide",
        action="store_true",
        help="Render with every label hidden.",
    )
    parser.add_argument(
        "--canvas",
        type=int,
        nargs=2,
        metavar=("WIDTH", "HEIGHT"),
        default=(800, 600),
        help="Canvas size in pixels (default: 800 600).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    setup_logging(logging.INFO)
    summary = render_seed_snapshots(
        args.prj_id,
        list(range(args.start, args.stop + 1)),
        output_root=args.output_root,
        hide_all=args.hide,
        config=LayoutConfig(canvas_size=tuple(args.canvas)),
    )
    overview = {
        snapshot["seed"]: snapshot["hidden_count"] for snapshot in summary["snapshots"]
    }
    print(json.dumps({"summary_path": summary["summary_path"], "hidden": overview}, indent=2))


if __name__ == "__main__":
    main()
