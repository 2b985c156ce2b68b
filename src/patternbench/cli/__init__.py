"""
PatternBench CLI.

Commands:
- list      registered examples and their category
- run       one example (--name) or the whole catalogue (--all)
- describe  an example's intent and expected outcome
"""

from .app import main

__all__ = ["main"]
