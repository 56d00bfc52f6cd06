"""
Entry point for running csvstats as a module.

Usage:
    python -m csvstats -f data.csv
"""

import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
