#!/usr/bin/env python3
"""Entry point for Parameter Shell."""
import sys
import os

sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from param_shell.cli import main


if __name__ == "__main__":
    sys.exit(main())
