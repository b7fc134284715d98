"""Tests for step ordering and windowing."""

import pytest

from kiosk_provisioner.config import ConfigError
from kiosk_provisioner.pipeline import run_pipeline


class RecordingStep:
    def __init__(self, step_id, fail=False):
        self.step_id = step_id
        self.fail = fail

    def run(self, state):
        if self.fail:
            raise RuntimeError(f"{self.step_id} failed")
        state.setdefault("seen", []).append(self.step_id)
        return state


def _steps(*ids, failing=()):
    return [RecordingStep(i, fail=i in failing) for i in ids]


def test_runs_all_in_order():
    result = run_pipeline(state={}, steps=_steps("10_a", "20_b", "30_c"))

    assert result.ran_steps == ["10_a", "20_b", "30_c"]
    assert result.state["seen"] == ["10_a", "20_b", "30_c"]
    assert result.state["execution"]["current_step"] is None
    assert result.completed is True


def test_start_at_and_stop_after():
    result = run_pipeline(
        state={},
        steps=_steps("10_a", "20_b", "30_c", "40_d"),
        start_at="20_b",
        stop_after="30_c",
    )

    assert result.ran_steps == ["20_b", "30_c"]
    assert result.completed is False


def test_stop_after_last_step_is_complete():
    result = run_pipeline(state={}, steps=_steps("10_a", "20_b"), stop_after="20_b")

    assert result.completed is True


def test_unknown_step_id_rejected_before_running():
    state = {}
    with pytest.raises(ConfigError):
        run_pipeline(state=state, steps=_steps("10_a"), start_at="99_nope")
    assert "seen" not in state


def test_failure_aborts_remaining_steps():
    state = {}
    with pytest.raises(RuntimeError):
        run_pipeline(state=state, steps=_steps("10_a", "20_b", "30_c", failing={"20_b"}))

    assert state["seen"] == ["10_a"]
    assert state["execution"]["current_step"] == "20_b"
