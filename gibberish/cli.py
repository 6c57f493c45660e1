"""
Command-line front end.

Reads text lines from stdin, learns token transitions and writes one line of
gibberish to stdout. With --print-model the ranked neighbor table is dumped
instead and no generation happens.

    cat corpus.txt | gibberish --threshold 0.8 --word-count 50
"""
from __future__ import annotations

import argparse
import random
import sys
from typing import List, Optional, TextIO

from gibberish.config import settings
from gibberish.services.gibberish import generate, render, train_from_lines
from gibberish.services.transitions import GranularityMode
from gibberish.utils.logger import setup_logger

logger = setup_logger(__name__)


def _unsigned_int(value: str) -> int:
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid unsigned integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value!r}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gibberish",
        description="Generate locally-plausible gibberish from text on stdin",
    )
    parser.add_argument("--threshold", type=float, default=settings.DEFAULT_THRESHOLD,
                        help="Rejection bias in [0, 1]; out-of-range values fall back to 0.75")
    parser.add_argument("--word-count", type=_unsigned_int, default=settings.DEFAULT_WORD_COUNT,
                        help="Number of tokens to generate")
    parser.add_argument("--print-model", action="store_true",
                        help="Dump the ranked neighbor table instead of generating")
    parser.add_argument("--mode", choices=[m.value for m in GranularityMode],
                        default=settings.DEFAULT_MODE, help="Token granularity")
    parser.add_argument("--seed-token", type=str, default=settings.DEFAULT_SEED_TOKEN,
                        help="Token the walk starts from (never emitted itself)")
    parser.add_argument("--random-seed", type=int, default=None,
                        help="Seed for reproducible output")
    parser.add_argument("--stubbornness", type=_unsigned_int, default=settings.DEFAULT_STUBBORNNESS,
                        help="Picks to reject before accepting one (capped below the retry ceiling)")
    return parser


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    return build_parser().parse_args(argv)


def run(args: argparse.Namespace, stdin: TextIO, stdout: TextIO):
    """Ingest ``stdin`` and write either the model dump or one generated line."""
    mode = GranularityMode(args.mode)
    ranked = train_from_lines(stdin, mode)

    if args.print_model:
        logger.debug("[CLI] Dumping model, generation skipped")
        stdout.write(ranked.to_json())
        stdout.write("\n")
        stdout.flush()
        return

    rng = random.Random(args.random_seed)
    tokens = generate(
        ranked,
        args.seed_token,
        args.word_count,
        threshold=args.threshold,
        mode=mode,
        rng=rng,
        stubbornness=args.stubbornness,
    )
    stdout.write(render(tokens, mode))
    stdout.write("\n")
    stdout.flush()
    logger.debug(f"[CLI] Wrote {len(tokens)} tokens")


def main(argv: Optional[List[str]] = None, stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    args = parse_args(argv)

    try:
        run(args, stdin if stdin is not None else sys.stdin, stdout if stdout is not None else sys.stdout)
    except (OSError, UnicodeError) as e:
        logger.error(f"[ERR] I/O failure: {e}")
        raise
    return 0


if __name__ == "__main__":
    sys.exit(main())
