"""Shared fixtures for PatternBench tests."""

import sys
from pathlib import Path
from typing import Callable, List, Optional, Sequence

import pytest

# Import the package from the src/ layout without installing it
sys.path.insert(0, str(Path(__file__).parent.parent))

from patternbench.core.contract import PatternExample
from patternbench.core.exceptions import SetupError
from patternbench.core.registry import ExampleRegistry
from patternbench.models.example_models import ExampleDefinition, PatternCategory


class ScriptedExample(PatternExample):
    """Example whose output is fixed at construction time."""

    category = PatternCategory.BEHAVIORAL

    def __init__(self, lines: Sequence[str], fail_setup: bool = False, raise_in_run: Optional[Exception] = None):
        self.lines = list(lines)
        self.fail_setup = fail_setup
        self.raise_in_run = raise_in_run
        self.setup_calls = 0

    def setup(self) -> None:
        self.setup_calls += 1
        if self.fail_setup:
            raise SetupError("payment gateway unavailable", collaborator="gateway")

    def run(self) -> List[str]:
        if self.raise_in_run is not None:
            raise self.raise_in_run
        return list(self.lines)


@pytest.fixture
def make_definition() -> Callable[..., ExampleDefinition]:
    """Build definitions around ScriptedExample."""

    def _make(
        name: str,
        lines: Sequence[str] = ("ok",),
        expected: Optional[Sequence[str]] = None,
        category: PatternCategory = PatternCategory.BEHAVIORAL,
        fail_setup: bool = False,
        raise_in_run: Optional[Exception] = None,
    ) -> ExampleDefinition:
        return ExampleDefinition(
            name=name,
            category=category,
            factory=lambda: ScriptedExample(lines, fail_setup, raise_in_run),
            expected_outcome=tuple(expected) if expected is not None else None,
        )

    return _make


@pytest.fixture
def registry() -> ExampleRegistry:
    """Create an empty registry."""
    return ExampleRegistry()
