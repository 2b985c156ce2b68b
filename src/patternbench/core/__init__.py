"""Harness core: contract, registry, lifecycle and runner."""

from .contract import PatternExample
from .exceptions import (
    DuplicateNameError,
    ExampleTimeoutError,
    FailureMismatch,
    HarnessError,
    InvalidPhaseTransitionError,
    NotFoundError,
    RegistrySealedError,
    SetupError,
)
from .lifecycle import RunLifecycle
from .registry import ExampleRegistry
from .runner import ExampleRunner, find_first_mismatch

__all__ = [
    "PatternExample",
    "ExampleRegistry",
    "ExampleRunner",
    "RunLifecycle",
    "find_first_mismatch",
    # Errors
    "HarnessError",
    "DuplicateNameError",
    "NotFoundError",
    "RegistrySealedError",
    "SetupError",
    "FailureMismatch",
    "ExampleTimeoutError",
    "InvalidPhaseTransitionError",
]
