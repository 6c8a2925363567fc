"""
CLI entry point for the gridbot command.

This module provides the command-line interface for running one robot session.
"""

import sys

from gridbot.session import main


def main_entry():
    """Entry point for the gridbot command."""
    sys.exit(main())


if __name__ == "__main__":
    main_entry()
