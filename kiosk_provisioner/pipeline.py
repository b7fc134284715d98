from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Protocol, Sequence

from .config import ConfigError

logger = logging.getLogger(__name__)


class Step(Protocol):
    """A single idempotent step."""

    step_id: str

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]
    completed: bool


def check_window(steps: Sequence[Step], start_at: Optional[str], stop_after: Optional[str]) -> None:
    """Reject start_at/stop_after ids that name no step."""
    known = {s.step_id for s in steps}
    for flag, step_id in (("start_at", start_at), ("stop_after", stop_after)):
        if step_id is not None and step_id not in known:
            raise ConfigError(f"{flag}: unknown step id {step_id!r}")


def run_pipeline(
    *,
    state: Dict[str, Any],
    steps: Sequence[Step],
    start_at: Optional[str] = None,
    stop_after: Optional[str] = None,
) -> PipelineResult:
    """Run steps in order.

    Every step re-checks host state itself, so there is no skip-if-done
    bookkeeping here; start_at/stop_after only narrow the window.
    A failing step propagates and aborts the remaining steps.
    """

    check_window(steps, start_at, stop_after)

    ran: List[str] = []
    started = start_at is None
    completed = True

    for step in steps:
        if not started:
            if step.step_id == start_at:
                started = True
            else:
                continue

        state.setdefault("execution", {})["current_step"] = step.step_id
        logger.info("Running step %s", step.step_id)
        state = step.run(state)
        ran.append(step.step_id)

        if stop_after is not None and step.step_id == stop_after:
            logger.info("Stopping after %s", stop_after)
            completed = step is steps[-1]
            break

    state.setdefault("execution", {})["current_step"] = None
    state["execution"]["ran_steps"] = ran
    return PipelineResult(state=state, ran_steps=ran, completed=completed and start_at is None)
