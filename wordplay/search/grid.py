"""
Word Search — locate a word in a grid of symbols.

A grid file holds one row per line with symbols separated by spaces or
tabs. Symbols are usually single letters but any token works. A word is
found when its symbols appear in consecutive cells along one of the 8
compass directions.
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from ..config import MIN_SEARCH_SYMBOLS
from ..domain import GridMatch
from ..errors import GridFormatError, GridLoadError, SearchInputError

logger = logging.getLogger(__name__)


# Scan order for directions: dy outer, dx inner, (0, 0) excluded
DIRECTIONS: tuple[tuple[int, int], ...] = tuple(
    (dx, dy)
    for dy in (-1, 0, 1)
    for dx in (-1, 0, 1)
    if not (dx == 0 and dy == 0)
)


# =============================================================================
# PARSING
# =============================================================================

def parse_grid(text: str) -> list[list[str]]:
    """
    Split grid text into rows of symbols.

    Leading and trailing blank lines are dropped. Every remaining row
    must have as many symbols as the first one.

    Raises:
        GridFormatError: if a row has a different number of symbols
    """
    rows = [line.split() for line in text.splitlines()]
    while rows and not rows[-1]:
        rows.pop()
    while rows and not rows[0]:
        rows.pop(0)

    if not rows:
        return []

    width = len(rows[0])
    for number, row in enumerate(rows):
        if len(row) != width:
            raise GridFormatError(number, width, len(row))
    return rows


def split_symbols(word: str, single_char: bool) -> list[str]:
    """
    Turn query text into the symbols to search for.

    "c a t" is three symbols. On a grid of single characters "cat" is
    also three symbols.
    """
    symbols = word.split()
    if len(symbols) == 1 and single_char:
        return list(symbols[0])
    return symbols


# =============================================================================
# WORD SEARCH
# =============================================================================

class WordSearch:
    """Read-only word search grid, stored row-major."""

    def __init__(self, rows: Sequence[Sequence[str]]):
        self.height = len(rows)
        self.width = len(rows[0]) if rows else 0
        self._values: tuple[str, ...] = tuple(
            symbol for row in rows for symbol in row
        )
        self._single_char = all(len(symbol) == 1 for symbol in self._values)

    @classmethod
    def from_text(cls, text: str) -> WordSearch:
        return cls(parse_grid(text))

    @classmethod
    def load(cls, path: str) -> WordSearch:
        """
        Load a grid file.

        Raises:
            GridLoadError: if the file cannot be opened
            GridFormatError: if the rows are ragged
        """
        logger.debug("Opening grid %s", path)
        try:
            with open(path, "r", encoding="ascii", errors="replace") as fh:
                text = fh.read()
        except OSError as e:
            raise GridLoadError(path, e.strerror) from e

        puzzle = cls.from_text(text)
        logger.info("Loaded %dx%d grid from %s", puzzle.width, puzzle.height, path)
        return puzzle

    # -------------------------------------------------------------------------
    # Cells
    # -------------------------------------------------------------------------

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def at(self, x: int, y: int) -> str:
        return self._values[y * self.width + x]

    def rows(self) -> list[list[str]]:
        return [
            list(self._values[y * self.width:(y + 1) * self.width])
            for y in range(self.height)
        ]

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def _check_word(self, symbols: Sequence[str], x: int, y: int, dx: int, dy: int) -> bool:
        for i in range(1, len(symbols)):
            cx, cy = x + i * dx, y + i * dy
            if not self.in_bounds(cx, cy):
                return False
            if self.at(cx, cy) != symbols[i]:
                return False
        return True

    def _match_at(self, symbols: Sequence[str], x: int, y: int) -> Optional[GridMatch]:
        if self.at(x, y) != symbols[0]:
            return None
        for dx, dy in DIRECTIONS:
            if self._check_word(symbols, x, y, dx, dy):
                return GridMatch(x=x, y=y, dx=dx, dy=dy)
        return None

    def find(self, word: str) -> Optional[GridMatch]:
        """
        Find where word starts in the grid.

        Start cells are scanned column by column (x outer, y inner) and
        the first match wins.

        Args:
            word: Symbols separated by whitespace, or a plain word on a
                  grid of single characters

        Returns:
            GridMatch for the first occurrence, or None

        Raises:
            SearchInputError: if word has fewer than two symbols
        """
        symbols = split_symbols(word, self._single_char)
        if len(symbols) < MIN_SEARCH_SYMBOLS:
            raise SearchInputError(
                f"input needs to contain at least {MIN_SEARCH_SYMBOLS} characters"
            )

        for x in range(self.width):
            for y in range(self.height):
                match = self._match_at(symbols, x, y)
                if match is not None:
                    logger.debug("found %r at (%d,%d)", word, x, y)
                    return match

        logger.debug("%r not found", word)
        return None

    def contains(self, word: str) -> bool:
        return self.find(word) is not None
