"""
PatternBench - uniform harness for Gang-of-Four pattern demonstrations.

This package replaces per-pattern ``main`` programs with:
- A single contract every pattern example implements
- A registry of examples keyed by pattern name
- A runner that isolates failures and normalizes outcomes
- Stable text, JSON and Markdown reporters
- A catalogue of the 23 GoF patterns
"""

from .core import (
    ExampleRegistry,
    ExampleRunner,
    PatternExample,
)
from .models.example_models import (
    ExampleDefinition,
    PatternCategory,
    RunResult,
    RunStatus,
)

__version__ = "0.1.0"

__all__ = [
    "ExampleDefinition",
    "ExampleRegistry",
    "ExampleRunner",
    "PatternCategory",
    "PatternExample",
    "RunResult",
    "RunStatus",
]
