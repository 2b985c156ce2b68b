"""Registry of pattern examples keyed by name."""

import logging
from typing import Dict, Iterator, List, Optional

from ..models.example_models import ExampleDefinition, PatternCategory
from .exceptions import DuplicateNameError, NotFoundError, RegistrySealedError

logger = logging.getLogger(__name__)


class ExampleRegistry:
    """
    Catalogue of pattern examples.

    PATTERN: Insertion-ordered registry with a one-time registration gate
    CRITICAL: Names are unique; a rejected registration leaves no trace
    GOTCHA: seal() before execution, later register() calls are refused

    Registration happens at startup. Once the runner starts a batch the
    registry is sealed and read-only, so execution never observes a
    partially built catalogue.
    """

    def __init__(self):
        """Initialize empty registry."""
        self._examples: Dict[str, ExampleDefinition] = {}
        self._sealed = False

    def register(self, definition: ExampleDefinition) -> None:
        """
        Register an example.

        Args:
            definition: Example definition to add

        Raises:
            DuplicateNameError: If the name is already registered
            RegistrySealedError: If the registry has been sealed
        """
        if self._sealed:
            raise RegistrySealedError(definition.name)
        if definition.name in self._examples:
            raise DuplicateNameError(definition.name)

        self._examples[definition.name] = definition
        logger.debug(
            f"Registered example {definition.name} ({definition.category.value})"
        )

    def lookup(self, name: str) -> ExampleDefinition:
        """
        Get an example by name.

        Args:
            name: Registered example name

        Returns:
            Example definition

        Raises:
            NotFoundError: If no example has that name
        """
        try:
            return self._examples[name]
        except KeyError:
            raise NotFoundError(name) from None

    def all(self) -> Iterator[ExampleDefinition]:
        """
        Iterate examples in registration order.

        Each call returns a fresh iterator starting from the first example.

        Returns:
            Iterator over example definitions
        """
        yield from list(self._examples.values())

    def by_category(self, category: PatternCategory) -> List[ExampleDefinition]:
        """
        List examples of one pattern family, in registration order.

        Args:
            category: Pattern family

        Returns:
            Matching example definitions
        """
        return [d for d in self._examples.values() if d.category == category]

    def names(self) -> List[str]:
        """Registered names in registration order."""
        return list(self._examples.keys())

    def seal(self) -> None:
        """Close the registration phase."""
        if not self._sealed:
            logger.debug(f"Sealing registry with {len(self._examples)} examples")
        self._sealed = True

    @property
    def is_sealed(self) -> bool:
        return self._sealed

    def get(self, name: str) -> Optional[ExampleDefinition]:
        """Get an example by name, or None when unregistered."""
        return self._examples.get(name)

    def __len__(self) -> int:
        return len(self._examples)

    def __contains__(self, name: object) -> bool:
        return name in self._examples
