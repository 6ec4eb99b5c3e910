"""
Bootstrap result — what an entry point hands back to the CLI.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from devstrap.core.models.outcome import Outcome, PhaseSummary
from devstrap.core.observability.reporter import Reporter


@dataclass
class BootstrapResult:
    """Result of one bootstrap run.

    ``cancelled`` means the operator declined; nothing was touched.
    ``error`` means a hard prerequisite was missing; nothing was touched.
    Otherwise ``phases`` holds the per-target outcomes, which may
    include failures even though the run itself completed.
    """

    cancelled: bool = False
    phases: list[PhaseSummary] = field(default_factory=list)
    error: str | None = None
    hint: str = ""

    def count(self, outcome: Outcome) -> int:
        return sum(p.count(outcome) for p in self.phases)

    @property
    def total(self) -> int:
        return sum(p.total for p in self.phases)

    @property
    def needs_attention(self) -> int:
        """Targets that failed or could not be verified."""
        return self.count(Outcome.FAILED) + self.count(Outcome.UNVERIFIED)

    def to_dict(self) -> dict:
        result: dict = {}
        if self.error:
            result["error"] = self.error
            if self.hint:
                result["hint"] = self.hint
            return result

        result["cancelled"] = self.cancelled
        result["phases"] = [p.to_dict() for p in self.phases]
        result["totals"] = {o.value: self.count(o) for o in Outcome}
        return result


def report_summary(reporter: Reporter, result: BootstrapResult) -> None:
    """Per-phase outcome counts, plus a warning if anything needs attention."""
    reporter.section("Summary")
    for phase in result.phases:
        counts = ", ".join(
            f"{phase.count(o)} {o.value}" for o in Outcome if phase.count(o)
        )
        line = f"{phase.phase}: {counts or 'nothing to do'}"
        if phase.aborted:
            line = f"{line} ({phase.aborted})"
        reporter.detail(line)

    if result.needs_attention:
        reporter.warning(
            f"{result.needs_attention} of {result.total} targets need attention; "
            "see the messages above."
        )
