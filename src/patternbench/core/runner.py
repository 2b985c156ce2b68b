"""Runner executing registered examples and normalizing their outcomes.

PATTERN: Failure isolation at the runner boundary
CRITICAL: One broken example must never abort the batch
GOTCHA: The time budget is soft, an overrun is detected after run() returns
"""

import logging
import time
from collections.abc import Sequence as SequenceABC
from typing import Any, Callable, List, Optional, Sequence, Tuple

from ..models.example_models import (
    ExampleDefinition,
    PatternCategory,
    RunPhase,
    RunResult,
    RunSummary,
)
from .exceptions import ExampleTimeoutError, FailureMismatch, SetupError
from .lifecycle import RunLifecycle
from .registry import ExampleRegistry

logger = logging.getLogger(__name__)

DEFAULT_TIME_BUDGET_SECONDS = 5.0


def find_first_mismatch(
    expected: Optional[Sequence[str]],
    actual: Sequence[str],
) -> Optional[FailureMismatch]:
    """
    Compare output lines against an expected outcome.

    Args:
        expected: Expected lines, or None when the example declares none
        actual: Lines produced by run()

    Returns:
        Mismatch naming the first differing line (1-based), or None
    """
    if expected is None:
        return None

    for index, (want, got) in enumerate(zip(expected, actual)):
        if want != got:
            return FailureMismatch(index + 1, want, got)

    if len(expected) != len(actual):
        shared = min(len(expected), len(actual))
        want = expected[shared] if shared < len(expected) else FailureMismatch.MISSING
        got = actual[shared] if shared < len(actual) else FailureMismatch.MISSING
        return FailureMismatch(shared + 1, want, got)

    return None


def _normalize_output(output: Any) -> Tuple[str, ...]:
    """Validate that run() produced a sequence of strings."""
    if isinstance(output, (str, bytes)) or not isinstance(output, SequenceABC):
        raise TypeError(
            f"run() must return a sequence of strings, got {type(output).__name__}"
        )

    for line in output:
        if not isinstance(line, str):
            raise TypeError(
                f"run() must return a sequence of strings, found {type(line).__name__}"
            )

    return tuple(output)


class ExampleRunner:
    """
    Drives execution of one or all registered examples.

    Each run goes through Pending -> Setup -> Running and ends Succeeded,
    Failed (output mismatch) or Errored (setup failure, exception in run(),
    malformed output, time budget overrun). Per-example problems always come
    back as a RunResult; only an unknown name raises.
    """

    def __init__(
        self,
        registry: ExampleRegistry,
        time_budget_seconds: Optional[float] = DEFAULT_TIME_BUDGET_SECONDS,
        clock: Callable[[], float] = time.perf_counter,
    ):
        """
        Initialize runner.

        Args:
            registry: Registry to execute examples from
            time_budget_seconds: Soft per-example budget, None disables it
            clock: Monotonic clock returning seconds
        """
        self.registry = registry
        self.time_budget_seconds = time_budget_seconds
        self._clock = clock
        self.logger = logger

    def run_one(self, name: str) -> RunResult:
        """
        Run a single example by name.

        Args:
            name: Registered example name

        Returns:
            Normalized run result

        Raises:
            NotFoundError: If no example has that name
        """
        definition = self.registry.lookup(name)
        return self._execute(definition)

    def run_all(self, category: Optional[PatternCategory] = None) -> List[RunResult]:
        """
        Run every registered example sequentially, in registration order.

        Seals the registry first so no registration can interleave with the
        batch.

        Args:
            category: Optional pattern family filter

        Returns:
            One result per attempted example
        """
        self.registry.seal()

        results: List[RunResult] = []
        for definition in self.registry.all():
            if category is not None and definition.category != category:
                continue
            results.append(self._execute(definition))

        summary = RunSummary.from_results(results)
        self.logger.info(
            f"Batch finished: {summary.total} run, {summary.succeeded} succeeded, "
            f"{summary.failed} failed, {summary.errored} errored"
        )
        return results

    def _execute(self, definition: ExampleDefinition) -> RunResult:
        """Run one definition through its lifecycle."""
        lifecycle = RunLifecycle(definition.name)
        started = self._clock()

        lifecycle.advance(RunPhase.SETUP)
        try:
            example = definition.factory()
            example.setup()
        except SetupError as e:
            self.logger.warning(f"{definition.name}: setup failed: {e}")
            return self._finish(lifecycle, RunPhase.ERRORED, started, reason=f"SetupError: {e}")
        except Exception as e:
            self.logger.warning(f"{definition.name}: setup raised {type(e).__name__}: {e}")
            return self._finish(
                lifecycle,
                RunPhase.ERRORED,
                started,
                reason=f"SetupError: {type(e).__name__}: {e}",
            )

        lifecycle.advance(RunPhase.RUNNING)
        try:
            output = _normalize_output(example.run())
        except Exception as e:
            self.logger.warning(f"{definition.name}: run raised {type(e).__name__}: {e}")
            return self._finish(
                lifecycle,
                RunPhase.ERRORED,
                started,
                reason=f"{type(e).__name__}: {e}",
            )

        elapsed = self._clock() - started
        if self.time_budget_seconds is not None and elapsed > self.time_budget_seconds:
            overrun = ExampleTimeoutError(definition.name, elapsed, self.time_budget_seconds)
            self.logger.warning(str(overrun))
            return self._finish(
                lifecycle,
                RunPhase.ERRORED,
                started,
                output=output,
                reason=f"ExampleTimeoutError: {overrun}",
                elapsed=elapsed,
            )

        mismatch = find_first_mismatch(definition.expected_outcome, output)
        if mismatch is not None:
            self.logger.info(f"{definition.name}: output mismatch at line {mismatch.line_number}")
            return self._finish(
                lifecycle,
                RunPhase.FAILED,
                started,
                output=output,
                reason=f"FailureMismatch: {mismatch}",
                elapsed=elapsed,
            )

        return self._finish(
            lifecycle, RunPhase.SUCCEEDED, started, output=output, elapsed=elapsed
        )

    def _finish(
        self,
        lifecycle: RunLifecycle,
        phase: RunPhase,
        started: float,
        output: Tuple[str, ...] = (),
        reason: Optional[str] = None,
        elapsed: Optional[float] = None,
    ) -> RunResult:
        """Enter the terminal phase and build the immutable result."""
        lifecycle.advance(phase)
        if elapsed is None:
            elapsed = self._clock() - started

        result = RunResult(
            name=lifecycle.name,
            status=lifecycle.status,
            output=output,
            failure_reason=reason,
            phases=lifecycle.history,
            duration_seconds=max(elapsed, 0.0),
        )
        self.logger.debug(f"{result.name}: {result.status.value} in {result.duration_seconds:.4f}s")
        return result
