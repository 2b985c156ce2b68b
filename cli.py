#!/usr/bin/env python
"""
PatternBench CLI entry point.

Usage:
    python cli.py list                    # List the catalogue
    python cli.py run --all               # Run every example
    python cli.py run --name Strategy     # Run one example
    python cli.py describe Visitor        # Show intent and expected output
"""

import sys
from pathlib import Path

# Make the src/ layout importable without installing the package
sys.path.insert(0, str(Path(__file__).parent / "src"))

from patternbench.cli.app import main

if __name__ == "__main__":
    main()
