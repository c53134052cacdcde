"""
Command line entry point: analyze Amharic text.

Usage:
    amharic-analyze "የእነሱ ሀዲስ ዓለማየሁ"
    echo "ሰላም ዓለም" | amharic-analyze
    amharic-analyze --normalize-only "ሠላም"
"""

import argparse
import logging
import sys
from typing import List, Optional

from .analysis import AmharicAnalyzer
from .config import get_settings, load_environment
from .logging_config import setup_logging

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="amharic-analyze",
        description="Normalize and stem Amharic text into index terms.",
    )
    parser.add_argument("text", nargs="*", help="Text to analyze (default: read stdin)")
    parser.add_argument(
        "--normalize-only",
        action="store_true",
        help="Print the normalized text instead of stemmed terms",
    )
    parser.add_argument(
        "--no-log-file",
        action="store_true",
        help="Log to the console only",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    load_environment()
    try:
        settings = get_settings()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 2

    setup_logging(
        log_file=None if args.no_log_file else settings.log_file,
        console_level=settings.console_level,
    )

    text = " ".join(args.text) if args.text else sys.stdin.read()
    analyzer = AmharicAnalyzer.from_settings(settings)

    if args.normalize_only:
        print(analyzer.normalize(text))
        return 0

    terms = analyzer.analyze(text)
    logger.debug(f"Analyzed {len(text)} characters into {len(terms)} terms")
    for term in terms:
        print(term)
    return 0


if __name__ == "__main__":
    sys.exit(main())
