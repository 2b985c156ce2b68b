"""Per-run lifecycle state machine.

Pending -> Setup -> Running -> {Succeeded | Failed | Errored}

Errored is reachable from Setup or Running only. End states are terminal.
"""

import logging
from typing import Dict, FrozenSet, List, Tuple

from ..models.example_models import RunPhase, RunStatus
from .exceptions import InvalidPhaseTransitionError

logger = logging.getLogger(__name__)


ALLOWED_TRANSITIONS: Dict[RunPhase, FrozenSet[RunPhase]] = {
    RunPhase.PENDING: frozenset({RunPhase.SETUP}),
    RunPhase.SETUP: frozenset({RunPhase.RUNNING, RunPhase.ERRORED}),
    RunPhase.RUNNING: frozenset(
        {RunPhase.SUCCEEDED, RunPhase.FAILED, RunPhase.ERRORED}
    ),
    RunPhase.SUCCEEDED: frozenset(),
    RunPhase.FAILED: frozenset(),
    RunPhase.ERRORED: frozenset(),
}

TERMINAL_STATUS: Dict[RunPhase, RunStatus] = {
    RunPhase.SUCCEEDED: RunStatus.SUCCESS,
    RunPhase.FAILED: RunStatus.FAILED,
    RunPhase.ERRORED: RunStatus.ERRORED,
}


class RunLifecycle:
    """Tracks the phase of a single example run and rejects bad transitions."""

    def __init__(self, name: str):
        self.name = name
        self._history: List[RunPhase] = [RunPhase.PENDING]

    @property
    def phase(self) -> RunPhase:
        return self._history[-1]

    @property
    def history(self) -> Tuple[RunPhase, ...]:
        return tuple(self._history)

    @property
    def is_terminal(self) -> bool:
        return self.phase in TERMINAL_STATUS

    @property
    def status(self) -> RunStatus:
        """
        Final run status.

        Raises:
            InvalidPhaseTransitionError: If the run has not finished yet
        """
        if not self.is_terminal:
            raise InvalidPhaseTransitionError(self.phase.value, "a terminal phase")
        return TERMINAL_STATUS[self.phase]

    def advance(self, target: RunPhase) -> None:
        """
        Move to the next phase.

        Args:
            target: Phase to enter

        Raises:
            InvalidPhaseTransitionError: If target is not reachable from the
                current phase
        """
        if target not in ALLOWED_TRANSITIONS[self.phase]:
            raise InvalidPhaseTransitionError(self.phase.value, target.value)

        logger.debug(f"{self.name}: {self.phase.value} -> {target.value}")
        self._history.append(target)
