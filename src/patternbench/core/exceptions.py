"""Exception hierarchy for the pattern harness.

Registry errors (duplicate or unknown names, late registration) stop a
command before any example executes. Example errors (setup failures,
output mismatches, time-budget overruns) are captured by the runner and
turned into run results.
"""

from typing import Optional


class HarnessError(Exception):
    """Base exception for all harness errors."""

    pass


class DuplicateNameError(HarnessError):
    """Raised when registering a name that is already registered."""

    def __init__(self, name: str):
        super().__init__(f"Example '{name}' is already registered")
        self.name = name


class NotFoundError(HarnessError):
    """Raised when looking up an unregistered example name."""

    def __init__(self, name: str):
        super().__init__(f"Example '{name}' not found")
        self.name = name


class RegistrySealedError(HarnessError):
    """Raised when registering after the registration phase has closed."""

    def __init__(self, name: str):
        super().__init__(
            f"Cannot register '{name}': registry is sealed for execution"
        )
        self.name = name


class SetupError(HarnessError):
    """Raised by ``setup()`` when a required collaborator is unavailable."""

    def __init__(self, message: str, collaborator: Optional[str] = None):
        super().__init__(message)
        self.collaborator = collaborator


class FailureMismatch(HarnessError):
    """Output of ``run()`` differs from the declared expected outcome."""

    MISSING = "<missing>"

    def __init__(self, line_number: int, expected: str, actual: str):
        super().__init__(
            f"line {line_number}: expected {expected!r}, got {actual!r}"
        )
        self.line_number = line_number
        self.expected = expected
        self.actual = actual


class ExampleTimeoutError(HarnessError):
    """Raised when a run exceeds its soft time budget."""

    def __init__(self, name: str, elapsed: float, budget: float):
        super().__init__(
            f"Example '{name}' took {elapsed:.3f}s, over its {budget:.3f}s budget"
        )
        self.name = name
        self.elapsed = elapsed
        self.budget = budget


class InvalidPhaseTransitionError(HarnessError):
    """Raised when a run lifecycle transition happens out of order."""

    def __init__(self, current_phase: str, attempted_phase: str):
        super().__init__(
            f"Cannot transition from {current_phase} to {attempted_phase}"
        )
        self.current_phase = current_phase
        self.attempted_phase = attempted_phase
