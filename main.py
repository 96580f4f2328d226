"""Main entry point for the HTTP load tester."""

import sys

from src.loadtester.cli import main


if __name__ == "__main__":
    sys.exit(main())
