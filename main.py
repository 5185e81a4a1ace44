r"""Command line entry point for the stream exercises.

Usage:
    python main.py pipeline --seed 0 --json
    python main.py words "$(printf 'dog\nbird\ndog')"
    python main.py chessboard
"""
from __future__ import annotations

import argparse
import json
import logging
from typing import List, Optional

from exercises import chessboard_value, count_words
from stream_pipeline import PipelineConfig, run_pipeline

logger = logging.getLogger(__name__)


def setup_logging(level=logging.INFO):
    """Setup basic logging configuration"""
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )
    return logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    defaults = PipelineConfig()
    parser = argparse.ArgumentParser(description="Stream processing exercises")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    pipeline = sub.add_parser("pipeline", help="Run the seeded random pipeline")
    pipeline.add_argument("--seed", type=int, default=defaults.seed, help="Seed for both generators")
    pipeline.add_argument("--count", type=int, default=defaults.count, help="Values drawn per generator")
    pipeline.add_argument("--skip", type=int, default=defaults.skip, help="Sorted values to skip")
    pipeline.add_argument("--limit", type=int, default=defaults.limit, help="Values kept after skipping")
    pipeline.add_argument("--modulus", type=int, default=defaults.modulus, help="Final modulo")
    pipeline.add_argument(
        "--width",
        type=int,
        choices=[32, 64],
        default=defaults.width,
        help="Integer width of the 64-bit source after narrowing (default: 64)",
    )
    pipeline.add_argument("--json", action="store_true", help="Output as a JSON object")

    words = sub.add_parser("words", help="Count words in a separated string")
    words.add_argument("text")
    words.add_argument("--separator", default="\n", help="Separator pattern (default: newline)")

    sub.add_parser("chessboard", help="Sum the values of all chessboard squares")
    return parser


def run(argv: Optional[List[str]] = None) -> str:
    args = _build_parser().parse_args(argv)
    setup_logging(getattr(logging, args.log_level))

    if args.command == "pipeline":
        config = PipelineConfig(
            seed=args.seed,
            count=args.count,
            skip=args.skip,
            limit=args.limit,
            modulus=args.modulus,
            width=args.width,
        )
        numbers = run_pipeline(config)
        logger.info("Pipeline produced %d numbers", len(numbers))
        if args.json:
            return json.dumps({"numbers": numbers})
        return "\n".join(str(n) for n in numbers)

    if args.command == "words":
        return "\n".join(count_words(args.text, args.separator))

    return str(chessboard_value())


def main() -> None:
    print(run())


if __name__ == "__main__":
    main()
