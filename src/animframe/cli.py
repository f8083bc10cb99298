"""Command-line interface for the animframe demos.

``animframe ripples`` opens the circle ripples example in a window.
``--headless`` runs it without a window (SDL dummy driver) in play mode
for a fixed number of frames, optionally recording each frame as PNG.
"""

from __future__ import annotations

import argparse
import logging
import os

from animframe import __version__
from animframe.config import make_runtime_config
from animframe.errors import WindowClosed
from animframe.examples import DEMOS
from animframe.frame import AnimationFrame

logger = logging.getLogger(__name__)

HEADLESS_DEFAULT_FRAMES = 30


def _size(s: str) -> tuple[int, int]:
    try:
        w, h = (int(v) for v in s.lower().split("x"))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected WIDTHxHEIGHT, got {s!r}") from None
    if w <= 0 or h <= 0:
        raise argparse.ArgumentTypeError("width and height must be > 0")
    return w, h


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments.

    When ``argv`` is None the values are read from ``sys.argv`` as usual.
    Accepting an ``argv`` list makes the parser testable programmatically.
    """
    p = argparse.ArgumentParser(
        prog="animframe", description="Frame-by-frame drawing demos"
    )
    p.add_argument(
        "demo",
        nargs="?",
        default="ripples",
        choices=sorted(DEMOS),
        help="Demo program to run (default: ripples)",
    )
    p.add_argument(
        "--headless",
        action="store_true",
        help="Run without a window (implies --play and a frame limit)",
    )
    p.add_argument(
        "--play",
        action="store_true",
        help="Start playing instead of waiting at the first frame",
    )
    p.add_argument(
        "--frames",
        type=int,
        default=None,
        help=(
            "Stop after this many frames "
            f"(default: unlimited, {HEADLESS_DEFAULT_FRAMES} when headless)"
        ),
    )
    p.add_argument(
        "--size",
        type=_size,
        default=None,
        help="Drawing area as WIDTHxHEIGHT (default from settings, 500x500)",
    )
    p.add_argument(
        "--record",
        type=str,
        default=None,
        help="Directory to save every frame into as PNG",
    )
    p.add_argument(
        "--log-level",
        dest="log_level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    p.add_argument("--version", action="store_true", help="Print version and exit")
    args = p.parse_args(argv)
    if args.frames is not None and args.frames < 0:
        p.error("--frames must be >= 0")
    if args.headless and args.frames is None:
        args.frames = HEADLESS_DEFAULT_FRAMES
    return args


def run(args: argparse.Namespace) -> int:
    """Run the selected demo; returns the number of frames painted."""
    if args.headless:
        os.environ["SDL_VIDEODRIVER"] = "dummy"
    cfg = make_runtime_config(args=args)
    demo = DEMOS[args.demo]
    with AnimationFrame(config=cfg, record_dir=args.record) as af:
        painted = demo(af, frames=args.frames)
    logger.info("%s: painted %d frames", args.demo, painted)
    return painted


def main(argv: list[str] | None = None) -> None:
    """Synchronous entrypoint for the animframe CLI."""
    args = parse_args(argv)

    if args.version:
        print(f"animframe {__version__}")
        return

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        run(args)
    except (KeyboardInterrupt, WindowClosed):
        # Closing the window or Ctrl+C ends the demo quietly
        pass


if __name__ == "__main__":
    main()
