"""Command line entry point: print a computed timeline layout as JSON."""

import argparse
import json
import sys
from typing import List, Optional

import structlog

from horizontal_timeline.config import load_default_config
from horizontal_timeline.core import TimelineError
from horizontal_timeline.models import TimelineSettings
from horizontal_timeline.services import TimelineLayoutService
from horizontal_timeline.ui.styles import StyleRegistry
from horizontal_timeline.utils.logging_setup import (
    setup_logging,
    setup_logging_from_config,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="horizontal-timeline",
        description="Compute the layout of a horizontal timeline",
    )
    parser.add_argument("dates", nargs="+", help="Event dates in ascending order")
    parser.add_argument(
        "--names", nargs="+", help="Event names, one per date (defaults to 'Event N')"
    )
    parser.add_argument("--width", type=float, default=800, help="Container width")
    parser.add_argument("--height", type=float, default=100, help="Container height")
    parser.add_argument("--index", type=int, default=0, help="Selected event")
    parser.add_argument("--label-width", type=float)
    parser.add_argument("--min-padding", type=float)
    parser.add_argument("--max-padding", type=float)
    parser.add_argument("--line-padding", type=float)
    parser.add_argument("--theme", help="Name of a configured colour theme")
    parser.add_argument(
        "--closed-beginning",
        action="store_true",
        help="Pin the first event to the left edge",
    )
    parser.add_argument(
        "--closed-ending",
        action="store_true",
        help="Pin the last event to the right edge",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    # stdout carries only the JSON layout
    setup_logging(stream=sys.stderr)
    config = load_default_config()
    setup_logging_from_config(config, sys.stderr)
    logger = structlog.get_logger().bind(module="cli", function="main")

    settings = TimelineSettings.from_config(config)
    overrides = {
        "label_width": args.label_width,
        "min_event_padding": args.min_padding,
        "max_event_padding": args.max_padding,
        "line_padding": args.line_padding,
    }
    overrides = {key: value for key, value in overrides.items() if value is not None}
    if args.closed_beginning:
        overrides["is_open_beginning"] = False
    if args.closed_ending:
        overrides["is_open_ending"] = False

    names = args.names or [f"Event {i + 1}" for i in range(len(args.dates))]

    try:
        if args.theme:
            overrides["styles"] = StyleRegistry.from_config(config).get_style(args.theme)
        props = TimelineLayoutService().layout(
            args.width,
            args.height,
            args.dates,
            names,
            settings.with_overrides(**overrides),
            args.index,
        )
    except (TimelineError, ValueError, IndexError) as e:
        logger.error("layout_failed", error=str(e))
        print(f"error: {e}", file=sys.stderr)
        return 2

    print(json.dumps(props.to_dict() if props else None, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
