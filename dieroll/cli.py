"""Command-line entry point: evaluate one dice expression and print it."""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from dieroll.config import LOG_LEVELS, Settings, load_settings
from dieroll.errors import ExpressionError
from dieroll.evaluator import roll
from dieroll.rng import make_random_source

logger = logging.getLogger(__name__)


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dieroll",
        description="Evaluate a dice expression such as '2d6 + 3' and print the result.",
        epilog="Options must come before the expression. All remaining arguments "
        "are joined without separators, so '2d6 + 3' and 2d6+3 are the same.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=settings.seed,
        help="seed the dice for a reproducible result (env: DIEROLL_SEED)",
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=settings.log_level,
        help="logging verbosity on stderr (env: DIEROLL_LOG_LEVEL)",
    )
    parser.add_argument("expression", nargs=argparse.REMAINDER, help="expression terms")
    return parser


def main(argv: list[str] | None = None) -> int:
    try:
        settings = load_settings()
    except ValidationError as exc:
        print(f"dieroll: error: invalid configuration: {exc}", file=sys.stderr)
        return 1

    args = _build_parser(settings).parse_args(argv)
    logging.basicConfig(level=args.log_level, format="%(levelname)s:%(name)s:%(message)s")

    parts = args.expression
    if parts and parts[0] == "--":
        parts = parts[1:]
    source = "".join(parts)

    try:
        result = roll(source, make_random_source(args.seed))
    except ExpressionError as exc:
        logger.debug("Failed to evaluate %r", source, exc_info=True)
        print(f"dieroll: error: {exc}", file=sys.stderr)
        return 1

    print(result)
    return 0
