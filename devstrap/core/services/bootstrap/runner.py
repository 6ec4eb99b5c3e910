"""
Step runner — probe, install, verify, one target at a time.

Each target walks::

    Pending → Probing → Skipped ──────────────────────────────┐
                      → Installing → Verified | Unverified | Failed → Done

and ends with exactly one ``Outcome``.  Failures are caught here,
per target, and recorded; the phase always moves on to the next target.

Targets run strictly in order.  PATH changes a target makes (its
``post_path``) are applied to the shared ``ProcessContext`` before the
next target is probed.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable

from devstrap.adapters.base import CommandRunner
from devstrap.adapters.registry import InstallerRegistry
from devstrap.adapters.shell.command import run_command
from devstrap.core.context import ProcessContext
from devstrap.core.errors import InstallError
from devstrap.core.models.outcome import Outcome, PhaseSummary, TargetResult, TargetState
from devstrap.core.models.target import InstallPhase, InstallTarget, MethodFamily, Prerequisite
from devstrap.core.observability.reporter import Reporter
from devstrap.core.services.bootstrap.probe import command_exists, missing_commands, probe

logger = logging.getLogger(__name__)

ConfirmFn = Callable[[str], bool]


def _never(_: str) -> bool:
    return False


class _Trace:
    """State trace of one target, turned into a result at the end."""

    def __init__(self, target: InstallTarget):
        self.target = target
        self.states: list[TargetState] = [TargetState.PENDING]
        self._start = time.monotonic()

    def enter(self, state: TargetState) -> None:
        logger.debug("%s: %s → %s", self.target.id, self.states[-1].value, state.value)
        self.states.append(state)

    def finish(self, outcome: Outcome, message: str = "", hint: str = "") -> TargetResult:
        if self.states[-1] != outcome.state:
            self.enter(outcome.state)
        self.enter(TargetState.DONE)
        return TargetResult(
            target_id=self.target.id,
            outcome=outcome,
            message=message,
            hint=hint,
            states=tuple(self.states),
            duration_ms=int((time.monotonic() - self._start) * 1000),
        )


class StepRunner:
    """Runs install phases against one process context.

    Args:
        registry: Method dispatcher.
        reporter: Progress output.
        ctx: Shared process context.
        confirm: Asks the operator a yes/no question.  Used only for
            optional updates of targets that are already present.
            Defaults to always answering no.
        run: Command runner used for version display.
    """

    def __init__(
        self,
        registry: InstallerRegistry,
        reporter: Reporter,
        ctx: ProcessContext,
        confirm: ConfirmFn | None = None,
        run: CommandRunner = run_command,
    ):
        self.registry = registry
        self.reporter = reporter
        self.ctx = ctx
        self.confirm = confirm or _never
        self._run = run

    # ── Phases ──────────────────────────────────────────────────

    def run_phase(self, phase: InstallPhase) -> PhaseSummary:
        """Process every target of ``phase`` in order."""
        self.reporter.section(phase.title)
        summary = PhaseSummary(phase=phase.name, title=phase.title)

        blocked = self._check_prerequisites(phase)
        missing = list(dict.fromkeys(p.tool for p in blocked.values()))
        if missing:
            summary.aborted = f"{', '.join(missing)} not installed"

        for target in phase.targets:
            prereq = blocked.get(target.id)
            if prereq is not None:
                result = self._blocked(target, prereq)
            else:
                result = self.run_target(target)
            summary.add(result)

        logger.info(
            "Phase %s: %s (%d targets)", phase.name, summary.status, summary.total,
        )
        return summary

    def _check_prerequisites(self, phase: InstallPhase) -> dict[str, Prerequisite]:
        """Map each target tied to a missing prerequisite to that prerequisite."""
        blocked: dict[str, Prerequisite] = {}
        for prereq in phase.prerequisites:
            if command_exists(prereq.tool, self.ctx):
                continue
            self.reporter.error(f"{prereq.tool} is not installed.")
            if prereq.hint:
                self.reporter.info(prereq.hint)
            for target in phase.targets:
                if prereq.applies_to(target):
                    blocked.setdefault(target.id, prereq)
        return blocked

    def _blocked(self, target: InstallTarget, prereq: Prerequisite) -> TargetResult:
        trace = _Trace(target)
        message = f"{target.label} not attempted: {prereq.tool} is not installed"
        self.reporter.info(message)
        return trace.finish(Outcome.FAILED, message, prereq.hint)

    # ── Targets ─────────────────────────────────────────────────

    def run_target(self, target: InstallTarget) -> TargetResult:
        """Probe, install and verify one target."""
        trace = _Trace(target)
        self.reporter.info(f"Installing {target.label}...")

        trace.enter(TargetState.PROBING)
        if probe(target, self.ctx):
            return self._present(target, trace)

        if (
            target.family == MethodFamily.ECOSYSTEM_INSTALLER
            and not self.registry.is_available(target, self.ctx)
        ):
            tool = self.registry.requirement(target) or target.method.value
            message = f"{tool} is not installed. Skipping {target.id} installation."
            self.reporter.warning(message)
            if target.hint:
                self.reporter.info(target.hint)
            return trace.finish(Outcome.SKIPPED, message, target.hint)

        trace.enter(TargetState.INSTALLING)
        try:
            self.registry.install(target, self.ctx)
        except InstallError as e:
            return self._failed(target, trace, e)
        except Exception as e:
            return self._failed(target, trace, self._unexpected(target, e))

        return self._verify(target, trace)

    def _present(self, target: InstallTarget, trace: _Trace) -> TargetResult:
        if target.path is not None:
            self.reporter.warning(f"{target.id} already exists at {self.ctx.expand(target.path)}")
        else:
            self.reporter.warning(f"{target.id} is already installed")
            self._show_version(target)

        if target.updatable and self.confirm(f"Do you want to update {target.id}?"):
            trace.enter(TargetState.INSTALLING)
            self.reporter.info(f"Updating {target.id}...")
            try:
                self.registry.update(target, self.ctx)
            except InstallError as e:
                return self._failed(target, trace, e)
            except Exception as e:
                return self._failed(target, trace, self._unexpected(target, e))
            self.reporter.success(f"{target.id} updated")
            return trace.finish(Outcome.VERIFIED, f"{target.id} updated")

        if target.updatable:
            self.reporter.info(f"Skipping {target.id} installation")
        return trace.finish(Outcome.SKIPPED, f"{target.id} is already installed")

    def _failed(self, target: InstallTarget, trace: _Trace, error: InstallError) -> TargetResult:
        message = f"{target.label} installation failed: {error}"
        hint = error.hint or target.hint
        self.reporter.error(message)
        if hint:
            self.reporter.info(hint)
        logger.debug("Install of %s failed", target.id, exc_info=error)
        return trace.finish(Outcome.FAILED, message, hint)

    @staticmethod
    def _unexpected(target: InstallTarget, error: Exception) -> InstallError:
        """Wrap an error no installer anticipated, keeping the traceback in the log."""
        logger.error("Unexpected error installing %s", target.id, exc_info=error)
        wrapped = InstallError(f"{type(error).__name__}: {error}", target_id=target.id)
        wrapped.__cause__ = error
        return wrapped

    def _verify(self, target: InstallTarget, trace: _Trace) -> TargetResult:
        for entry in self.ctx.apply_post_path(target.post_path):
            logger.info("Added %s to PATH for subsequent steps", entry)

        if probe(target, self.ctx):
            for name in target.verify:
                self.reporter.success(f"{name} is now available")
            message = f"{target.description or target.id} installed successfully"
            self.reporter.success(message)
            return trace.finish(Outcome.VERIFIED, message)

        if target.path is not None:
            message = (
                f"{target.description or target.id} not found at "
                f"{self.ctx.expand(target.path)} after install."
            )
        else:
            missing = missing_commands(target, self.ctx)
            message = (
                f"{target.description or target.id} may not be in PATH yet "
                f"({', '.join(missing)} not found)."
            )
        self.reporter.warning(f"{message} {target.hint}".rstrip())
        return trace.finish(Outcome.UNVERIFIED, message, target.hint)

    def _show_version(self, target: InstallTarget) -> None:
        if not target.version_args:
            return
        for name in target.verify:
            result = self._run([name, *target.version_args], self.ctx, capture=True)
            if result["ok"] and result["stdout"].strip():
                self.reporter.detail(result["stdout"].strip().splitlines()[0])

    def run_phases(self, phases: list[InstallPhase]) -> list[PhaseSummary]:
        """Run ``phases`` strictly one after another."""
        return [self.run_phase(phase) for phase in phases]
