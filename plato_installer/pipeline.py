from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Protocol, Sequence

from .errors import InstallerError

logger = logging.getLogger(__name__)

PHASE_START = "START"
PHASE_DONE = "DONE"
PHASE_FAILED = "FAILED"


class Step(Protocol):
    """A single idempotent step.

    `phase` is the state the install reaches once the step succeeds.
    """

    step_id: str
    phase: str

    def run(self, state: Dict[str, Any]) -> Dict[str, Any]:
        ...


@dataclass(frozen=True)
class PipelineResult:
    state: Dict[str, Any]
    ran_steps: List[str]


def run_pipeline(*, state: Dict[str, Any], steps: Sequence[Step]) -> PipelineResult:
    """Run steps in order, stopping at the first error.

    Completed steps are not rolled back. An InstallerError leaving a step
    is tagged with that step's id and the last phase reached.
    """

    ran: List[str] = []
    exe = state.setdefault("execution", {})
    exe["phase"] = PHASE_START

    for step in steps:
        exe["current_step"] = step.step_id
        logger.info("Running step %s", step.step_id)
        try:
            state = step.run(state)
        except InstallerError as e:
            reached = exe.get("phase")
            exe["failed_step"] = step.step_id
            exe["failed_after_phase"] = reached
            exe["phase"] = PHASE_FAILED
            if e.step_id is None:
                e.step_id = step.step_id
                e.phase = reached
            raise
        except Exception:
            exe["failed_step"] = step.step_id
            exe["phase"] = PHASE_FAILED
            raise
        exe["phase"] = step.phase
        ran.append(step.step_id)

    exe["current_step"] = None
    exe["phase"] = PHASE_DONE
    return PipelineResult(state=state, ran_steps=ran)
