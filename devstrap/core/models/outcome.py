"""
Outcome models — what happened to each target, and to each phase.

A ``TargetResult`` is created once a target reaches a terminal state and
is never mutated afterwards.  Results accumulate into a ``PhaseSummary``
that lives for the duration of the process only.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


class TargetState(str, Enum):
    """Per-target lifecycle states walked by the step runner."""

    PENDING = "pending"
    PROBING = "probing"
    SKIPPED = "skipped"
    INSTALLING = "installing"
    VERIFIED = "verified"
    UNVERIFIED = "unverified"
    FAILED = "failed"
    DONE = "done"


class Outcome(str, Enum):
    """Terminal classification of one target."""

    SKIPPED = "skipped"
    VERIFIED = "verified"
    UNVERIFIED = "unverified"
    FAILED = "failed"

    @property
    def state(self) -> TargetState:
        return TargetState(self.value)


class TargetResult(BaseModel):
    """Result of processing one target."""

    model_config = ConfigDict(frozen=True)

    target_id: str
    outcome: Outcome
    message: str = ""
    hint: str = ""
    states: tuple[TargetState, ...] = ()
    duration_ms: int = 0

    @property
    def ok(self) -> bool:
        """Whether the target needs no further operator action."""
        return self.outcome in (Outcome.SKIPPED, Outcome.VERIFIED)

    def to_dict(self) -> dict[str, Any]:
        return {
            "target": self.target_id,
            "outcome": self.outcome.value,
            "message": self.message,
            "hint": self.hint,
            "duration_ms": self.duration_ms,
        }


class PhaseSummary(BaseModel):
    """All target results of one phase."""

    phase: str
    title: str = ""
    results: list[TargetResult] = Field(default_factory=list)
    aborted: str | None = None    # missing phase prerequisite, if any

    def add(self, result: TargetResult) -> None:
        if any(r.target_id == result.target_id for r in self.results):
            raise ValueError(f"Outcome already recorded for '{result.target_id}'")
        self.results.append(result)

    def get(self, target_id: str) -> TargetResult | None:
        for result in self.results:
            if result.target_id == target_id:
                return result
        return None

    def count(self, outcome: Outcome) -> int:
        return sum(1 for r in self.results if r.outcome == outcome)

    @property
    def total(self) -> int:
        return len(self.results)

    @property
    def status(self) -> Literal["ok", "partial", "failed"]:
        """``ok`` when nothing failed, ``failed`` when nothing succeeded."""
        failed = self.count(Outcome.FAILED)
        if failed == 0:
            return "ok"
        if failed == self.total:
            return "failed"
        return "partial"

    def to_dict(self) -> dict[str, Any]:
        return {
            "phase": self.phase,
            "status": self.status,
            "aborted": self.aborted,
            "counts": {o.value: self.count(o) for o in Outcome},
            "results": [r.to_dict() for r in self.results],
        }
