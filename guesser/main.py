#!/usr/bin/env python3
"""Decode calldata without an ABI and print the guessed layout."""

import argparse
import sys

from guesser.errors import DecodeError
from guesser.parser import decode_calldata
from guesser.report import format_decoded_lines
from utils.config import Config
from utils.logging import get_logger, set_level

_logger = get_logger("guesser")


def read_calldata(source: str) -> str:
    """Return the calldata argument, or stdin when it is "-"."""
    if source == "-":
        return sys.stdin.read().strip()
    return source.strip()


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Guess selectors, words and nested calls in raw calldata.")
    parser.add_argument("calldata", help="Hex calldata (0x prefix optional), or - to read stdin")
    parser.add_argument("--resolve", action="store_true", help="Show known function signatures for selectors")
    parser.add_argument(
        "--remote",
        action=argparse.BooleanOptionalAction,
        default=Config.get_remote_lookup(),
        help="Look up unknown selectors on the Sourcify 4byte API (implies --resolve)",
    )
    parser.add_argument(
        "--regions",
        action=argparse.BooleanOptionalAction,
        default=Config.get_resolve_dynamic_regions(),
        help="Run the dynamic-region check over offset candidates",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=Config.get_env("LOG_LEVEL", "WARNING"),
        help="Logging level (DEBUG, INFO, WARNING, ERROR).",
    )
    args = parser.parse_args(argv)
    for name in ("guesser", "guesser.parser", "guesser.editor", "guesser.regions", "guesser.resolver"):
        set_level(get_logger(name), args.log_level)

    try:
        decoded = decode_calldata(read_calldata(args.calldata), resolve_regions=args.regions)
    except DecodeError as e:
        _logger.error("Failed to decode calldata: %s", e)
        print(f"error: {e}", file=sys.stderr)
        return 1

    for line in format_decoded_lines(decoded, resolve=args.resolve or args.remote, remote=args.remote):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
