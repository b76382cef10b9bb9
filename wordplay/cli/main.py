"""
wordplay CLI — unscramble words and solve word searches.

Commands:
    wordplay unscramble [WORD ...]   — Print dictionary anagrams of each word
    wordplay search [WORD ...]       — Print where each word starts in the grid
    wordplay show                    — Print the grid

Without WORD arguments, unscramble and search prompt for one word per
line until an empty line. Results go to stdout, log records to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
from functools import partial
from typing import Optional

from ..config import (
    DEFAULT_GRID,
    DEFAULT_WORDLIST,
    LOG_FORMAT,
    SEARCH_PROMPT,
    UNSCRAMBLE_PROMPT,
    Settings,
)
from ..errors import WordplayError
from ..index.dictionary import DictionaryIndex
from ..search.grid import WordSearch
from .session import format_grid, prompt_loop, search_lines, unscramble_lines

logger = logging.getLogger(__name__)


def configure_logging(level: int) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT, stream=sys.stderr)


# =============================================================================
# CLI COMMANDS
# =============================================================================

def cmd_unscramble(args: argparse.Namespace) -> int:
    """Load the word list and unscramble words."""
    settings = Settings.from_args(args)

    logger.info("Loading %s...", settings.wordlist)
    try:
        index = DictionaryIndex.build(settings.wordlist)
    except OSError as e:
        print(f"Failed: {e}")
        return 1

    handle = partial(unscramble_lines, index, mode=settings.mode)

    words = getattr(args, "words", None)
    if words:
        for word in words:
            for line in handle(word):
                print(line)
        return 0

    prompt_loop(UNSCRAMBLE_PROMPT, handle)
    return 0


def _load_grid(settings: Settings) -> Optional[WordSearch]:
    try:
        return WordSearch.load(settings.grid)
    except (OSError, WordplayError) as e:
        print(f"Error: {e}")
        return None


def cmd_search(args: argparse.Namespace) -> int:
    """Load the grid and search for words."""
    settings = Settings.from_args(args)

    puzzle = _load_grid(settings)
    if puzzle is None:
        return 1

    handle = partial(search_lines, puzzle)

    words = getattr(args, "words", None)
    if words:
        for word in words:
            for line in handle(word):
                print(line)
        return 0

    prompt_loop(SEARCH_PROMPT, handle)
    return 0


def cmd_show(args: argparse.Namespace) -> int:
    """Print the grid."""
    settings = Settings.from_args(args)

    puzzle = _load_grid(settings)
    if puzzle is None:
        return 1

    print(format_grid(puzzle))
    return 0


# =============================================================================
# MAIN ENTRY POINT
# =============================================================================

def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="wordplay",
        description="Unscramble words against a dictionary and solve word searches",
    )

    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Log debug output",
    )
    verbosity.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Only log warnings and errors",
    )

    subparsers = parser.add_subparsers(
        title="commands",
        description="Available commands",
        dest="command",
    )

    # Unscramble command
    unscramble_parser = subparsers.add_parser(
        "unscramble",
        help="Find dictionary words that unscramble an input",
    )
    unscramble_parser.add_argument(
        "words",
        nargs="*",
        help="Words to unscramble (prompts when omitted)",
    )
    unscramble_parser.add_argument(
        "--wordlist",
        default=DEFAULT_WORDLIST,
        help=f"Whitespace delimited word list (default: {DEFAULT_WORDLIST})",
    )
    unscramble_parser.add_argument(
        "--strict",
        action="store_true",
        help="Require matching letter counts, not just matching letters",
    )
    unscramble_parser.set_defaults(func=cmd_unscramble)

    # Search command
    search_parser = subparsers.add_parser(
        "search",
        help="Find where a word starts in a word search grid",
    )
    search_parser.add_argument(
        "words",
        nargs="*",
        help="Words to find (prompts when omitted)",
    )
    search_parser.add_argument(
        "--grid",
        default=DEFAULT_GRID,
        help=f"Grid file (default: {DEFAULT_GRID})",
    )
    search_parser.set_defaults(func=cmd_search)

    # Show command
    show_parser = subparsers.add_parser(
        "show",
        help="Print the word search grid",
    )
    show_parser.add_argument(
        "--grid",
        default=DEFAULT_GRID,
        help=f"Grid file (default: {DEFAULT_GRID})",
    )
    show_parser.set_defaults(func=cmd_show)

    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    configure_logging(Settings.from_args(args).log_level)
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
