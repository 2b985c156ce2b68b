"""Catalogue of the 23 Gang-of-Four pattern examples.

Examples are registered family by family (creational, structural,
behavioral) and alphabetically within a family, which fixes the order of
``list`` and ``run --all`` output.
"""

import logging
import threading
from typing import List, Optional, Type

from ..core.contract import PatternExample
from ..core.registry import ExampleRegistry
from ..models.example_models import ExampleDefinition
from . import behavioral, creational, structural

logger = logging.getLogger(__name__)

ALL_EXAMPLES: List[Type[PatternExample]] = (
    creational.EXAMPLES + structural.EXAMPLES + behavioral.EXAMPLES
)

_default_registry: Optional[ExampleRegistry] = None
_default_registry_lock = threading.Lock()


def register_builtin_examples(registry: ExampleRegistry) -> ExampleRegistry:
    """
    Register every catalogue example.

    Args:
        registry: Registry to populate

    Returns:
        The same registry, for chaining

    Raises:
        DuplicateNameError: If the registry already holds one of the names
    """
    for example_class in ALL_EXAMPLES:
        registry.register(ExampleDefinition.from_class(example_class))

    logger.debug(f"Registered {len(ALL_EXAMPLES)} catalogue examples")
    return registry


def build_default_registry() -> ExampleRegistry:
    """Build a fresh registry holding the whole catalogue."""
    return register_builtin_examples(ExampleRegistry())


def get_default_registry() -> ExampleRegistry:
    """
    Get the process-wide catalogue registry.

    Built on first access; concurrent first calls still build it once.

    Returns:
        Shared registry instance
    """
    global _default_registry
    if _default_registry is None:
        with _default_registry_lock:
            if _default_registry is None:
                _default_registry = build_default_registry()
    return _default_registry


__all__ = [
    "ALL_EXAMPLES",
    "build_default_registry",
    "get_default_registry",
    "register_builtin_examples",
]
