"""
Entry point for running notepdf as a module.

Usage:
    python -m notepdf print note.md
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
