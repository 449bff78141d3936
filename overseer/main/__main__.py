"""
Main module entry point.

This allows running the ingestion worker as: python -m overseer.main
"""

import sys

from .worker import main

if __name__ == "__main__":
    sys.exit(main())
