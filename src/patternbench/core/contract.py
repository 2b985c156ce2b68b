"""Uniform contract implemented by every pattern example."""

from abc import ABC, abstractmethod
from typing import ClassVar, List, Optional, Sequence

from ..models.example_models import ExampleDescription, PatternCategory


class PatternExample(ABC):
    """
    Base class for runnable pattern demonstrations.

    PATTERN: One capability interface, independent implementations
    CRITICAL: setup() must be idempotent and run() deterministic
    GOTCHA: Examples needing randomness take an injected source

    Subclasses declare their metadata as class attributes so the registry
    can describe them without constructing an instance.
    """

    name: ClassVar[str] = ""
    category: ClassVar[PatternCategory]
    intent: ClassVar[str] = ""
    expected_outcome: ClassVar[Optional[Sequence[str]]] = None

    @abstractmethod
    def setup(self) -> None:
        """
        Construct and wire the collaborators the scenario needs.

        Calling it twice has the same effect as calling it once.

        Raises:
            SetupError: If a required collaborator cannot be constructed
        """
        pass

    @abstractmethod
    def run(self) -> List[str]:
        """
        Execute the scenario end to end.

        Returns:
            Ordered human-readable lines produced by the scenario
        """
        pass

    def describe(self) -> ExampleDescription:
        """
        Describe the example for reporting.

        Returns:
            Pattern name and one-line intent
        """
        return ExampleDescription(
            name=self.name or type(self).__name__,
            intent=self.intent,
        )
