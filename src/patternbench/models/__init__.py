"""Data models for PatternBench."""

from .example_models import (
    ExampleDefinition,
    ExampleDescription,
    PatternCategory,
    RunPhase,
    RunResult,
    RunStatus,
    RunSummary,
)

__all__ = [
    "ExampleDefinition",
    "ExampleDescription",
    "PatternCategory",
    "RunPhase",
    "RunResult",
    "RunStatus",
    "RunSummary",
]
