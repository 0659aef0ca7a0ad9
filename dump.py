#!/usr/bin/python3

"""
Entry point script for hexshim.
"""

import sys

from src.hexshim.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
