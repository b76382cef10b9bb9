# wordplay — word list and letter grid puzzle solvers

"""
Two small solvers behind one command line:

    DictionaryIndex — finds the dictionary words a scrambled input unscrambles to
    WordSearch      — finds where a word starts in an 8-directional letter grid
"""

from .errors import (
    WordplayError,
    DictionaryLoadError,
    GridLoadError,
    GridFormatError,
    SearchInputError,
)
from .domain import DictionaryEntry, GridMatch, MatchMode
from .index.dictionary import DictionaryIndex
from .search.grid import WordSearch

__all__ = [
    "WordplayError",
    "DictionaryLoadError",
    "GridLoadError",
    "GridFormatError",
    "SearchInputError",
    "DictionaryEntry",
    "GridMatch",
    "MatchMode",
    "DictionaryIndex",
    "WordSearch",
]

__version__ = "0.1.0"
