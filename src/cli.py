#!/usr/bin/env python3
"""
cli.py - Command Line Interface for StegoUTF8

This module provides the command-line front end for hiding text inside text.
It supports three workflows:

    1. ENCODE: Hide a string inside a host string or file
    2. DECODE: Recover the hidden string
    3. CLEAN:  Strip all hidden glyphs, restoring the visible text

Usage Examples:
    # Hide "meet at noon" in every 3rd line of a file
    $ stego-utf8 encode -f letter.txt -t "meet at noon" -p nthlines -k 3 -o letter_out.txt

    # Read it back
    $ stego-utf8 decode -f letter_out.txt

    # Remove every hidden glyph
    $ stego-utf8 clean -f letter_out.txt -o letter_clean.txt

The result is written to stdout, or to the file given with -o. Status and
error messages always go to stderr so the output can be piped safely.
"""

import argparse
import logging
import os
import random
import sys
from typing import TYPE_CHECKING, Callable, List, Optional, cast

# Local imports (when run as module)
if TYPE_CHECKING:
    from . import __version__
    from .embed_strategies import EmbedPosition, StegoError
    from .stego_engine import StegoEngine
else:
    try:
        from . import __version__
        from .embed_strategies import EmbedPosition, StegoError
        from .stego_engine import StegoEngine
    except ImportError:
        # Direct script execution
        from embed_strategies import EmbedPosition, StegoError
        from stego_engine import StegoEngine

        __version__ = "1.0.0"


# ═══════════════════════════════════════════════════════════════════════════════
# CLI OUTPUT FORMATTING
# ═══════════════════════════════════════════════════════════════════════════════


class ConsoleOutput:
    """Handles formatted status output on stderr with optional color support."""

    # ANSI color codes (disabled if not TTY)
    COLORS_ENABLED = sys.stderr.isatty()

    RESET = "\033[0m" if COLORS_ENABLED else ""
    BOLD = "\033[1m" if COLORS_ENABLED else ""
    GREEN = "\033[92m" if COLORS_ENABLED else ""
    RED = "\033[91m" if COLORS_ENABLED else ""
    CYAN = "\033[96m" if COLORS_ENABLED else ""

    @classmethod
    def banner(cls) -> None:
        """Print the application banner."""
        print(
            f"{cls.CYAN}{cls.BOLD}StegoUTF8{cls.RESET}{cls.CYAN} {__version__}"
            f" | zero-width text steganography{cls.RESET}",
            file=sys.stderr,
        )

    @classmethod
    def success(cls, message: str) -> None:
        """Print a success message."""
        print(f"{cls.GREEN}✓ {message}{cls.RESET}", file=sys.stderr)

    @classmethod
    def error(cls, message: str) -> None:
        """Print an error message."""
        print(f"{cls.RED}✗ {message}{cls.RESET}", file=sys.stderr)


# ═══════════════════════════════════════════════════════════════════════════════
# ARGUMENT TYPES
# ═══════════════════════════════════════════════════════════════════════════════


def embed_position(value: str) -> EmbedPosition:
    """argparse type: position by name (case-insensitive) or number 0-4."""
    return EmbedPosition.parse(value)


def positive_int(value: str) -> int:
    """argparse type: integer >= 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


# ═══════════════════════════════════════════════════════════════════════════════
# COMMAND HANDLERS
# ═══════════════════════════════════════════════════════════════════════════════


def _make_engine(args: argparse.Namespace) -> StegoEngine:
    seed = getattr(args, "seed", None)
    rng = random.Random(seed) if seed is not None else None
    return StegoEngine(rng=rng)


def _emit(args: argparse.Namespace, result: str, what: str) -> int:
    """Print the result, or write it to the output path if one was given."""
    if not args.output_path:
        print(result)
        return 0

    try:
        with open(args.output_path, "w", encoding="utf-8", newline="") as f:
            f.write(result)
    except OSError as e:
        ConsoleOutput.error(f"Failed to write output file: {e}")
        return 1

    ConsoleOutput.success(f"{what} written to {args.output_path}")
    return 0


def cmd_encode(args: argparse.Namespace) -> int:
    """
    Handle the 'encode' command - hide a string inside host text.

    The host comes from --clear-source or --file-source; the payload from
    --to-hide.
    """
    engine = _make_engine(args)

    if args.file_source is not None:
        encoded = engine.encode_file(args.file_source, args.to_hide, args.position, args.k)
    else:
        encoded = engine.encode(args.clear_source, args.to_hide, args.position, args.k)

    return _emit(args, encoded, "Encoded text")


def cmd_decode(args: argparse.Namespace) -> int:
    """Handle the 'decode' command - recover the hidden string."""
    engine = _make_engine(args)

    if args.file_source is not None:
        decoded = engine.decode_file(args.file_source)
    else:
        decoded = engine.decode(args.clear_source)

    return _emit(args, decoded, "Decoded text")


def cmd_clean(args: argparse.Namespace) -> int:
    """Handle the 'clean' command - strip every hidden glyph."""
    engine = _make_engine(args)

    if args.file_source is not None:
        cleaned = engine.clean_file(args.file_source)
    else:
        cleaned = engine.clean(args.clear_source)

    return _emit(args, cleaned, "Cleaned text")


# ═══════════════════════════════════════════════════════════════════════════════
# MAIN ENTRY POINT
# ═══════════════════════════════════════════════════════════════════════════════


def _add_source_arguments(parser: argparse.ArgumentParser) -> None:
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("-c", "--clear-source", help="Source text given on the command line")
    source.add_argument("-f", "--file-source", help="Source file, read as UTF-8")
    parser.add_argument(
        "-o", "--output-path", help="Write the result to this file instead of stdout"
    )


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for all sub-commands."""
    parser = argparse.ArgumentParser(
        prog="stego-utf8",
        description="Hide text inside text using invisible Unicode characters",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Positions:
  0 top           before the whole text
  1 bottom        after the whole text
  2 random        k times at random places
  3 nthlines      at the end of lines k-1, 2k-1, ... (default)
  4 randominline  at a random place in lines 0, k, 2k, ...

Lines are counted from 0.

Examples:
  %(prog)s encode -c "Dear Bob," -t secret -p top      Hide "secret" at the top
  %(prog)s decode -f letter_out.txt                    Recover the hidden text
  %(prog)s clean -f letter_out.txt -o letter.txt       Strip hidden characters
        """,
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Show debug logging on stderr"
    )

    subparsers = parser.add_subparsers(
        dest="command", title="commands", description="Available operations"
    )

    # ─────────────────────────────────────────────────────────────────────────
    # ENCODE command
    # ─────────────────────────────────────────────────────────────────────────
    encode_parser = subparsers.add_parser(
        "encode",
        help="Hide a string inside text",
        description="Embed a string as invisible characters into a text or file.",
    )
    _add_source_arguments(encode_parser)
    encode_parser.add_argument("-t", "--to-hide", required=True, help="String to hide")
    encode_parser.add_argument(
        "-p",
        "--position",
        type=embed_position,
        default=EmbedPosition.NTHLINES,
        help="Embed position, by name or number (default: nthlines)",
    )
    encode_parser.add_argument(
        "-k",
        "--position-k",
        dest="k",
        type=positive_int,
        default=1,
        help="Repeat count for random, line stride for nthlines/randominline (default: 1)",
    )
    encode_parser.add_argument(
        "--seed", type=int, help="Seed the random positions for reproducible output"
    )
    encode_parser.set_defaults(func=cmd_encode)

    # ─────────────────────────────────────────────────────────────────────────
    # DECODE command
    # ─────────────────────────────────────────────────────────────────────────
    decode_parser = subparsers.add_parser(
        "decode",
        help="Recover a hidden string",
        description="Extract the string hidden in a text or file.",
    )
    _add_source_arguments(decode_parser)
    decode_parser.set_defaults(func=cmd_decode)

    # ─────────────────────────────────────────────────────────────────────────
    # CLEAN command
    # ─────────────────────────────────────────────────────────────────────────
    clean_parser = subparsers.add_parser(
        "clean",
        help="Strip all hidden characters",
        description="Remove every hidden character from a text or file.",
    )
    _add_source_arguments(clean_parser)
    clean_parser.set_defaults(func=cmd_clean)

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command is None:
        parser.print_help()
        return 0

    if args.verbose:
        ConsoleOutput.banner()

    try:
        func = cast(Callable[[argparse.Namespace], int], args.func)
        return func(args)
    except KeyboardInterrupt:
        print("\nOperation cancelled.", file=sys.stderr)
        return 130
    except StegoError as e:
        ConsoleOutput.error(str(e))
        return 1
    except ValueError as e:
        ConsoleOutput.error(f"Invalid value: {e}")
        return 1
    except Exception as e:
        ConsoleOutput.error(f"Unexpected error: {e}")
        if os.environ.get("DEBUG"):
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
