"""Command-line entry point: open the viewer or render a single frame."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Sequence

from .config import DEFAULT_CANVAS_SIZE, LayoutConfig
from .logging_config import setup_logging
from .rendering import PillowRenderer, draw_scene
from .state import AppState, clamp_seed, recompute

logger = logging.getLogger(__name__)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="label_collision", description=__doc__)
    parser.add_argument("--seed", type=int, default=1, help="Initial seed (default: 1).")
    parser.add_argument("--hide", action="store_true", help="Start with every label hidden.")
    parser.add_argument(
        "--width",
        type=int,
        default=DEFAULT_CANVAS_SIZE[0],
        help=f"Canvas width in pixels (default: {DEFAULT_CANVAS_SIZE[0]}).",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=DEFAULT_CANVAS_SIZE[1],
        help=f"Canvas height in pixels (default: {DEFAULT_CANVAS_SIZE[1]}).",
    )
    parser.add_argument(
        "--snapshot",
        type=Path,
        default=None,
        help="Write the frame for --seed to this PNG instead of opening a window.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO).",
    )
    parser.add_argument("--log-file", default=None, help="Optional file to mirror logs into.")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(getattr(logging, args.log_level), args.log_file)

    config = LayoutConfig(canvas_size=(args.width, args.height))
    seed = clamp_seed(args.seed)

    if args.snapshot is not None:
        labels = recompute(seed, hide_all=args.hide, config=config)
        renderer = PillowRenderer(config.canvas_size)
        draw_scene(renderer, labels, AppState(seed=seed, hide_all=args.hide))
        renderer.image.save(args.snapshot)
        logger.info("Saved seed %d to %s", seed, args.snapshot)
        return 0

    from .viewer import run_viewer

    run_viewer(seed, hide_all=args.hide, config=config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
