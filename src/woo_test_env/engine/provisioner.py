"""Provisioner - runs a Plan against WordPress.

IMPORTANT: the provisioner only EXECUTES. Which actions exist and what
they check is decided by the plan builders in woo_test_env.plans.

Guarantees:
- Phases, and actions within a phase, run strictly in declaration order.
- Each action runs at most once per run and is never retried.
- The first command failure stops the run. Nothing is rolled back;
  running setup again is the recovery path, and the gates make the
  already-finished work cheap to skip.
"""

import logging
from dataclasses import dataclass
from typing import Callable

from woo_test_env.connector.wpcli import CommandRunner
from woo_test_env.errors import CommandError, ConfigurationError, ExternalCommandError
from woo_test_env.model import command as wp
from woo_test_env.model.flags import FeatureFlags
from woo_test_env.model.plan import (
    Action,
    ActionOutcome,
    ActionRecord,
    Phase,
    Plan,
    RunContext,
    RunReport,
    RunState,
)
from woo_test_env.plans import build_setup_plan, build_teardown_plan

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ProgressEvent:
    """One progress line for a reporter.

    kind is one of: start, phase, applied, skipped, warning,
    not_implemented, failed, completed.
    """

    kind: str
    plan: str
    phase: str | None = None
    action: str | None = None
    detail: str = ""


def is_multisite(runner: CommandRunner) -> bool:
    """Check the target topology. Read-only; run before building flags."""
    return runner.run(wp.core_is_multisite(), fail_on_error=False).success


class Provisioner:
    """Execute setup and teardown plans through a CommandRunner.

    Example:
        >>> with LocalWPCLI(WPCLIConfig(path="/srv/http/shop.local")) as wp:
        ...     report = Provisioner(wp).setup(FeatureFlags(gutenberg=True))
    """

    def __init__(
        self,
        runner: CommandRunner,
        *,
        log_fn: Callable[[ProgressEvent], None] | None = None,
    ) -> None:
        self.runner = runner
        self.log_fn = log_fn
        self.report: RunReport | None = None

    @property
    def state(self) -> RunState:
        return self.report.state if self.report else RunState.NOT_STARTED

    def _emit(self, event: ProgressEvent) -> None:
        if self.log_fn:
            self.log_fn(event)

    def setup(self, flags: FeatureFlags) -> RunReport:
        """Provision the test environment.

        Raises:
            ConfigurationError: multisite target or unusable flags. No
                command has been run when this is raised.
            ExternalCommandError: a command failed; carries phase and action.
        """
        if flags.multisite:
            raise ConfigurationError("Multisite is not supported!")
        plan = build_setup_plan(flags)
        return self.execute(plan, RunContext(flags))

    def teardown(self, flags: FeatureFlags | None = None) -> RunReport:
        """Remove everything setup created, then empty the site."""
        flags = flags or FeatureFlags()
        return self.execute(build_teardown_plan(flags), RunContext(flags))

    def execute(self, plan: Plan, ctx: RunContext) -> RunReport:
        report = RunReport(plan=plan.name, state=RunState.RUNNING)
        self.report = report
        self._emit(ProgressEvent("start", plan.name))

        for index, phase in enumerate(plan.phases):
            report.phase_index = index
            self._emit(ProgressEvent("phase", plan.name, phase.name))
            logger.info("%s: phase %d/%d %s", plan.name, index + 1, len(plan.phases), phase.name)
            ctx = self.run_phase(plan, phase, ctx)

        report.state = RunState.COMPLETED
        report.context = ctx
        self._emit(ProgressEvent("completed", plan.name))
        return report

    def run_phase(self, plan: Plan, phase: Phase, ctx: RunContext) -> RunContext:
        """Run every action of a phase and hand the updated context back."""
        for action in phase.actions:
            try:
                ctx = self._run_action(plan, phase, action, ctx)
            except CommandError as e:
                error = ExternalCommandError(phase.name, action.label, e)
                self.report.state = RunState.FAILED
                self.report.failed_phase = phase.name
                self.report.failed_action = action.label
                self.report.context = ctx
                logger.error("%s", error)
                self._emit(ProgressEvent("failed", plan.name, phase.name, action.label, str(e)))
                raise error from e
        return ctx

    def _run_action(self, plan: Plan, phase: Phase, action: Action, ctx: RunContext) -> RunContext:
        if not action.implemented:
            self._record(plan, phase, action, ActionOutcome.NOT_IMPLEMENTED, "not implemented")
            return ctx

        if action.precondition is not None:
            skip = action.precondition(self.runner, ctx)
            if skip is not None:
                self._record(plan, phase, action, ActionOutcome.SKIPPED, skip.reason, warn=skip.warn)
                return ctx

        updated = action.effect(self.runner, ctx)
        self._record(plan, phase, action, ActionOutcome.APPLIED)
        return updated if updated is not None else ctx

    def _record(
        self,
        plan: Plan,
        phase: Phase,
        action: Action,
        outcome: ActionOutcome,
        detail: str = "",
        warn: bool = False,
    ) -> None:
        self.report.records.append(ActionRecord(phase.name, action.label, outcome, detail))
        if warn:
            logger.warning("%s: %s skipped: %s", phase.name, action.label, detail)
            kind = "warning"
        else:
            logger.debug("%s: %s %s %s", phase.name, action.label, outcome.value, detail)
            kind = outcome.value
        self._emit(ProgressEvent(kind, plan.name, phase.name, action.label, detail))
