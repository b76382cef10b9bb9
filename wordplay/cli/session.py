"""
Interactive prompt loops for the wordplay CLI.

Each loop reads one line at a time until an empty line or end of input,
hands the line to a handler and prints whatever lines it returns.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from ..domain import GridMatch, MatchMode
from ..errors import WordplayError
from ..index.dictionary import DictionaryIndex
from ..search.grid import WordSearch

logger = logging.getLogger(__name__)


# =============================================================================
# FORMATTING
# =============================================================================

def format_match(match: Optional[GridMatch]) -> str:
    """Format a word search result the way the prompt loop prints it."""
    if match is None:
        return "Word not found"
    x, y = match.start
    return f"Word found at ({x},{y})"


def format_grid(puzzle: WordSearch) -> str:
    return "\n".join("\t".join(row) for row in puzzle.rows())


# =============================================================================
# HANDLERS
# =============================================================================

def unscramble_lines(index: DictionaryIndex, word: str, mode: MatchMode) -> list[str]:
    """One output line per matching dictionary word."""
    return index.unscramble(word, mode)


def search_lines(puzzle: WordSearch, word: str) -> list[str]:
    """
    A single output line for a word search query.

    Bad input is reported as a line instead of ending the session.
    """
    try:
        return [format_match(puzzle.find(word))]
    except WordplayError as e:
        logger.debug("rejected search input %r: %s", word, e)
        return [f"Error: {e}"]


# =============================================================================
# PROMPT LOOP
# =============================================================================

def prompt_loop(
    prompt: str,
    handle: Callable[[str], list[str]],
    read: Callable[[str], str] = input,
    write: Callable[[str], None] = print,
) -> int:
    """
    Prompt until an empty line or EOF.

    Returns:
        Number of queries handled
    """
    handled = 0
    while True:
        try:
            line = read(prompt)
        except EOFError:
            break
        if not line:
            break

        for out in handle(line):
            write(out)
        handled += 1

    logger.debug("session ended after %d queries", handled)
    return handled
