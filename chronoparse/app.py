from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional, Sequence

from .config import load_config
from .logging_config import configure_logging
from .units import Resolution
from .util.timeformat import format_duration
from .util.timeparse import DurationParser, MalformedInput

LOGGER = logging.getLogger(__name__)


def _resolution(value: str) -> Resolution:
    try:
        return Resolution.from_name(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chronoparse",
        description="Convert compound durations such as 1h33m7s into tick counts",
    )
    parser.add_argument("durations", nargs="+", metavar="TEXT", help="Duration strings to parse")
    parser.add_argument(
        "-r",
        "--resolution",
        type=_resolution,
        default=None,
        help="Tick resolution: ns, us, ms, s, m or h (default: CHRONOPARSE_RESOLUTION or ns)",
    )
    parser.add_argument(
        "--format",
        action="store_true",
        help="Print the normalised duration string instead of the tick count",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    config = load_config()
    configure_logging(config.logging.level, json=config.logging.json)

    resolution = args.resolution or config.parser.resolution
    duration_parser = DurationParser(resolution)
    status = 0
    for text in args.durations:
        try:
            duration = duration_parser.parse(text)
        except MalformedInput as exc:
            LOGGER.error(
                "Malformed duration",
                extra={"duration_text": exc.text, "position": exc.position, "reason": exc.reason},
            )
            status = 1
            continue
        print(format_duration(duration) if args.format else duration.count)
    return status


if __name__ == "__main__":
    sys.exit(main())
