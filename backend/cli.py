#!/usr/bin/env python3
"""Analyze a YouTube watch history and print career recommendations.

Usage:
    watchpath path/to/watch-history.json --top-n 3
    watchpath --demo
"""

import argparse
import logging
import sys

from config import settings
from services.demo_history import DEMO_WATCH_HISTORY
from services.pipeline.orchestrator import analyze_watch_history
from services.takeout_parser import TakeoutFormatError, load_takeout_file

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Infer career recommendations from watch history")
    parser.add_argument("file", nargs="?", help="Google Takeout watch-history.json")
    parser.add_argument("--demo", action="store_true", help="Use the built-in demo history")
    parser.add_argument("--top-n", type=int, default=settings.default_top_n)
    parser.add_argument("--limit", type=int, default=settings.max_history_items,
                        help="Keep only the most recent N entries")
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(message)s")

    if args.demo:
        videos = list(DEMO_WATCH_HISTORY)
    elif args.file:
        try:
            videos = load_takeout_file(args.file, limit=args.limit)
        except TakeoutFormatError as e:
            logger.error("%s", e)
            return 1
        if not videos:
            logger.error("No videos found in %s", args.file)
            return 1
    else:
        parser.print_usage(sys.stderr)
        return 2

    report = analyze_watch_history(videos, top_n=args.top_n)
    print(report.model_dump_json(indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
