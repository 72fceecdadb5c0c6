"""
Entry point for the consolecmd demo shell.

Usage:
    python -m consolecmd
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
