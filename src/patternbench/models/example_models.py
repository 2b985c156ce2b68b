"""Data models for pattern examples and their run outcomes.

This module contains the Pydantic models shared by the registry, the runner
and the reporters: example definitions, run results and batch summaries.
"""

from enum import Enum
from typing import Any, Callable, Iterable, Optional, Tuple

from pydantic import BaseModel, Field, field_validator, model_validator


class PatternCategory(str, Enum):
    """Gang-of-Four pattern families."""

    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"


class RunStatus(str, Enum):
    """Final status of one example run."""

    SUCCESS = "success"
    FAILED = "failed"
    ERRORED = "errored"


class RunPhase(str, Enum):
    """Lifecycle phases of one example run."""

    PENDING = "pending"
    SETUP = "setup"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"
    ERRORED = "errored"


class ExampleDescription(BaseModel):
    """Name and one-line intent reported by ``PatternExample.describe()``."""

    name: str = Field(description="Pattern name")
    intent: str = Field(default="", description="One-line intent")

    class Config:
        """Pydantic configuration."""

        frozen = True


class ExampleDefinition(BaseModel):
    """
    Registered pattern example.

    PATTERN: Immutable record owned by the registry
    CRITICAL: ``factory`` must be callable with no arguments
    GOTCHA: Constructing the example is deferred to the runner
    """

    name: str = Field(min_length=1, description="Unique pattern name")
    category: PatternCategory = Field(description="Pattern family")
    factory: Callable[[], Any] = Field(
        description="Zero-argument constructor producing a runnable example"
    )
    expected_outcome: Optional[Tuple[str, ...]] = Field(
        default=None,
        description="Expected output lines, compared when present",
    )
    intent: str = Field(default="", description="One-line intent")

    class Config:
        """Pydantic configuration."""

        frozen = True

    @field_validator("name")
    @classmethod
    def _strip_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("example name must not be blank")
        return value

    @classmethod
    def from_class(cls, example_class: type, **overrides: Any) -> "ExampleDefinition":
        """
        Build a definition from an example class's declared attributes.

        Args:
            example_class: Class with ``name``, ``category``, ``intent`` and
                ``expected_outcome`` class attributes
            **overrides: Field values replacing the declared ones

        Returns:
            Example definition using the class itself as factory
        """
        expected = getattr(example_class, "expected_outcome", None)
        values = {
            "name": getattr(example_class, "name", "") or example_class.__name__,
            "category": getattr(example_class, "category"),
            "factory": example_class,
            "expected_outcome": tuple(expected) if expected is not None else None,
            "intent": getattr(example_class, "intent", ""),
        }
        values.update(overrides)
        return cls(**values)


class RunResult(BaseModel):
    """Outcome of executing one example."""

    name: str = Field(description="Example name")
    status: RunStatus = Field(description="Final status")
    output: Tuple[str, ...] = Field(
        default=(),
        description="Output lines produced by run()",
    )
    failure_reason: Optional[str] = Field(
        default=None,
        description="Why the run did not succeed",
    )

    # Lifecycle trace and timing
    phases: Tuple[RunPhase, ...] = Field(default=())
    duration_seconds: float = Field(default=0.0, ge=0)

    class Config:
        """Pydantic configuration."""

        frozen = True

    @model_validator(mode="after")
    def _check_failure_reason(self) -> "RunResult":
        if self.status == RunStatus.SUCCESS and self.failure_reason is not None:
            raise ValueError("successful run must not carry a failure reason")
        if self.status != RunStatus.SUCCESS and not self.failure_reason:
            raise ValueError(f"{self.status.value} run requires a failure reason")
        return self

    @property
    def succeeded(self) -> bool:
        return self.status == RunStatus.SUCCESS


class RunSummary(BaseModel):
    """Counts by status over a batch of results."""

    total: int = Field(default=0, ge=0)
    succeeded: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    errored: int = Field(default=0, ge=0)

    @property
    def passed(self) -> bool:
        """Whether every attempted example succeeded."""
        return self.succeeded == self.total

    @classmethod
    def from_results(cls, results: Iterable[RunResult]) -> "RunSummary":
        """
        Count results by status.

        Args:
            results: Run results to summarize

        Returns:
            Summary of the batch
        """
        counts = {status: 0 for status in RunStatus}
        total = 0
        for result in results:
            counts[result.status] += 1
            total += 1

        return cls(
            total=total,
            succeeded=counts[RunStatus.SUCCESS],
            failed=counts[RunStatus.FAILED],
            errored=counts[RunStatus.ERRORED],
        )
