"""Tests for the run lifecycle state machine."""

import pytest

from patternbench.core.exceptions import InvalidPhaseTransitionError
from patternbench.core.lifecycle import RunLifecycle
from patternbench.models.example_models import RunPhase, RunStatus


class TestRunLifecycle:
    """Tests for RunLifecycle."""

    def test_starts_pending(self):
        """Test a new lifecycle is pending and not terminal."""
        lifecycle = RunLifecycle("Strategy")
        assert lifecycle.phase == RunPhase.PENDING
        assert not lifecycle.is_terminal

    @pytest.mark.parametrize(
        "path,status",
        [
            ([RunPhase.SETUP, RunPhase.RUNNING, RunPhase.SUCCEEDED], RunStatus.SUCCESS),
            ([RunPhase.SETUP, RunPhase.RUNNING, RunPhase.FAILED], RunStatus.FAILED),
            ([RunPhase.SETUP, RunPhase.RUNNING, RunPhase.ERRORED], RunStatus.ERRORED),
            ([RunPhase.SETUP, RunPhase.ERRORED], RunStatus.ERRORED),
        ],
    )
    def test_valid_paths(self, path, status):
        """Test every allowed path ends in the matching status."""
        lifecycle = RunLifecycle("Strategy")
        for phase in path:
            lifecycle.advance(phase)

        assert lifecycle.is_terminal
        assert lifecycle.status == status
        assert lifecycle.history == tuple([RunPhase.PENDING] + path)

    def test_cannot_skip_setup(self):
        """Test running straight from pending is rejected."""
        lifecycle = RunLifecycle("Strategy")
        with pytest.raises(InvalidPhaseTransitionError):
            lifecycle.advance(RunPhase.RUNNING)

    def test_errored_not_reachable_from_pending(self):
        """Test errored requires setup or running first."""
        lifecycle = RunLifecycle("Strategy")
        with pytest.raises(InvalidPhaseTransitionError):
            lifecycle.advance(RunPhase.ERRORED)

    def test_failed_not_reachable_from_setup(self):
        """Test a mismatch can only be recorded after running."""
        lifecycle = RunLifecycle("Strategy")
        lifecycle.advance(RunPhase.SETUP)
        with pytest.raises(InvalidPhaseTransitionError):
            lifecycle.advance(RunPhase.FAILED)

    def test_terminal_states_are_final(self):
        """Test no transition leaves a terminal state."""
        lifecycle = RunLifecycle("Strategy")
        lifecycle.advance(RunPhase.SETUP)
        lifecycle.advance(RunPhase.ERRORED)

        for phase in RunPhase:
            with pytest.raises(InvalidPhaseTransitionError):
                lifecycle.advance(phase)

    def test_status_before_terminal_raises(self):
        """Test asking for the status of an unfinished run."""
        lifecycle = RunLifecycle("Strategy")
        lifecycle.advance(RunPhase.SETUP)
        with pytest.raises(InvalidPhaseTransitionError):
            _ = lifecycle.status
