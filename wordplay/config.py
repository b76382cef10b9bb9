"""
Defaults for the wordplay command line.

There are no config files and no environment variables. Everything
here can be overridden by a CLI flag.
"""

from __future__ import annotations

import argparse
import logging
from dataclasses import dataclass

from .domain import MatchMode


# =============================================================================
# DEFAULTS
# =============================================================================

DEFAULT_WORDLIST = "wordlistv2"
DEFAULT_GRID = "wordsearch.txt"

UNSCRAMBLE_PROMPT = "Next word: "
SEARCH_PROMPT = "Enter word: "

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"

# Minimum number of symbols a word search query needs
MIN_SEARCH_SYMBOLS = 2


# =============================================================================
# SETTINGS
# =============================================================================

@dataclass(frozen=True)
class Settings:
    """Resolved options for one CLI invocation."""
    wordlist: str = DEFAULT_WORDLIST
    grid: str = DEFAULT_GRID
    mode: MatchMode = MatchMode.CHARSET
    log_level: int = logging.INFO

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> Settings:
        """Build settings from parsed arguments, falling back to defaults."""
        if getattr(args, "verbose", False):
            level = logging.DEBUG
        elif getattr(args, "quiet", False):
            level = logging.WARNING
        else:
            level = logging.INFO

        mode = MatchMode.STRICT if getattr(args, "strict", False) else MatchMode.CHARSET

        return cls(
            wordlist=getattr(args, "wordlist", None) or DEFAULT_WORDLIST,
            grid=getattr(args, "grid", None) or DEFAULT_GRID,
            mode=mode,
            log_level=level,
        )
