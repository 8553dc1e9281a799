"""Guided-session state.

SessionState is an immutable snapshot; every transition produces a new one
via replace(). Once the step is COMPLETE the indices no longer change.
"""

from dataclasses import dataclass, replace
from enum import StrEnum


class SessionStep(StrEnum):
    READY = "ready"
    WORK = "work"
    REST = "rest"
    COMPLETE = "complete"


@dataclass(frozen=True)
class SessionState:
    """Cursor of an active guided session.

    Attributes:
        plan_id: Plan the day belongs to, if any
        day_index: Index of the day inside the plan
        exercise_index: Index of the current exercise (0-based)
        current_set: Current set of the current exercise (1-based)
        step: Current step
    """

    plan_id: str | None
    day_index: int
    exercise_index: int = 0
    current_set: int = 1
    step: SessionStep = SessionStep.READY

    @property
    def is_complete(self) -> bool:
        return self.step == SessionStep.COMPLETE

    def replace(self, **changes: object) -> "SessionState":
        """Create a new state instance with updated fields."""
        return replace(self, **changes)
