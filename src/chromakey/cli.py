#!/usr/bin/env python3
"""
chromakey command line entry point

Run with:
    chromakey input.mp4 background.jpg output.mp4

Preview only, no output file:
    chromakey input.mp4 background.mp4

Headless, key color sampled at pixel (10, 10) of the first frame:
    chromakey input.png background.png out.png --pick 10,10 --no-preview
"""

import argparse
import logging
import sys
from typing import List, Optional

from chromakey import __version__
from chromakey.core import ChromaKeyError, KeyColor
from chromakey.interactive import ColorPicker, KeyPicker, StaticPicker
from chromakey.pipeline import KeyingSession
from chromakey.utils.config import ChromaKeyConfig, load_config

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1


def _int_pair(text: str) -> tuple[int, ...]:
    try:
        values = tuple(int(part) for part in text.split(","))
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected comma-separated integers, got {text!r}")
    return values


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="chromakey",
        description="Replace a solid-colored background in an image or video",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("foreground", help="image or video with the green screen")
    parser.add_argument("background", help="replacement background image or video")
    parser.add_argument(
        "output", nargs="?", default=None,
        help="output file; omit to preview only",
    )
    parser.add_argument("--config", default=None, help="path to a YAML config file")
    parser.add_argument("--tolerance", type=int, help="hue tolerance, 0..100")
    parser.add_argument("--softness", type=int, help="edge softness radius, >= 0")
    parser.add_argument("--defringe", type=int, help="saturation/value floor, 0..100")

    key = parser.add_mutually_exclusive_group()
    key.add_argument(
        "--color", type=_int_pair, metavar="B,G,R",
        help="key color; skips interactive picking",
    )
    key.add_argument(
        "--pick", type=_int_pair, metavar="X,Y",
        help="sample the key color at this pixel of the first frame",
    )

    parser.add_argument("--no-preview", action="store_true", help="do not open a preview window")
    parser.add_argument("--log-level", default=None, help="DEBUG, INFO, WARNING, ...")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args(argv)
    if args.color is not None and len(args.color) != 3:
        parser.error("--color needs three values: B,G,R")
    if args.pick is not None and len(args.pick) != 2:
        parser.error("--pick needs two values: X,Y")
    return args


def build_config(args: argparse.Namespace) -> ChromaKeyConfig:
    overrides = {}
    for name in ("tolerance", "softness", "defringe"):
        value = getattr(args, name)
        if value is not None:
            overrides[f"keying.{name}"] = value
    if args.no_preview:
        overrides["preview.enabled"] = False
    if args.log_level:
        overrides["logging.level"] = args.log_level
    return load_config(args.config, overrides)


def build_picker(args: argparse.Namespace, config: ChromaKeyConfig) -> KeyPicker:
    parameters = config.keying.to_parameters()
    if args.color is not None:
        return StaticPicker(parameters, color=KeyColor(*args.color))
    if args.pick is not None:
        return StaticPicker(parameters, point=tuple(args.pick))
    return ColorPicker(
        window_name=config.preview.window_name,
        defaults=parameters,
        softness_max=config.keying.softness_slider_max,
        delay_ms=config.preview.frame_delay_ms,
        cancel_key=config.preview.cancel_key,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    # Console logging with defaults until the real config has loaded
    ChromaKeyConfig().setup_logging()

    try:
        config = build_config(args)
        config.setup_logging()
        session = KeyingSession(args.foreground, args.background, args.output, config)
        results = session.run_interactive(build_picker(args, config))
    except (ChromaKeyError, ValueError) as e:
        # pydantic ValidationError is a ValueError
        logger.error("%s", e)
        return EXIT_FAILURE

    total = sum(result.frames_processed for result in results)
    logger.info("Done: %d pass(es), %d frames", len(results), total)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
