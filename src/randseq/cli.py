"""Command-line entry point: ``randseq``."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from randseq.config import ConfigLoadError, load_config, resolve_params
from randseq.display import display_random_numbers

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"
EXIT_USAGE = 2


def configure_logging(level: str = "WARNING") -> None:
    """Configure root logging for CLI runs."""
    logging.basicConfig(level=getattr(logging, level.upper(), logging.WARNING), format=LOG_FORMAT)


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate a sequence of random integers.")
    parser.add_argument("--config", default=None, help="YAML/JSON parameter file")
    parser.add_argument("--amount", type=int, default=None, help="how many numbers to generate")
    parser.add_argument("--min", type=int, default=None, help="lower bound (inclusive)")
    parser.add_argument("--max", type=int, default=None, help="upper bound (inclusive)")
    parser.add_argument(
        "--unique",
        dest="is_unique",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="forbid repeated numbers",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--log-level", default="WARNING", help="logging level")
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(argv)
    configure_logging(args.log_level)

    try:
        base = load_config(args.config) if args.config else None
        params = resolve_params(
            {
                "amount": args.amount,
                "min": args.min,
                "max": args.max,
                "is_unique": args.is_unique,
                "seed": args.seed,
            },
            base=base,
        )
    except (FileNotFoundError, ConfigLoadError, ValidationError) as exc:
        print(f"Invalid configuration: {exc}", file=sys.stderr)
        return EXIT_USAGE

    result = display_random_numbers(params)
    return 0 if result.ok else EXIT_USAGE


if __name__ == "__main__":
    sys.exit(main())
