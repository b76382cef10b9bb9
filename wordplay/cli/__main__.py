"""
wordplay CLI entry point.

Usage:
    python -m wordplay.cli unscramble
    python -m wordplay.cli search
    python -m wordplay.cli show
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
