"""Plain Text Reporter Implementation."""

from woo_test_env.actions.reporters.base import BaseReporter
from woo_test_env.engine.provisioner import ProgressEvent
from woo_test_env.errors import ExternalCommandError, ProvisioningError
from woo_test_env.model.plan import ActionOutcome, RunReport


class PlainReporter(BaseReporter):
    """Generates clean, text-only output for logs and CI."""

    def on_event(self, event: ProgressEvent) -> None:
        if event.kind == "start":
            self.console.print(f"{event.plan.upper()} WooCommerce Blocks Testing Environment", markup=False)
        elif event.kind == "phase":
            self.console.print(f"PHASE: {event.phase}", markup=False)
        elif event.kind == "applied":
            self.console.print(f"PASS: {event.phase}: {event.action}", markup=False)
        elif event.kind == "skipped":
            self.console.print(f"SKIP: {event.phase}: {event.action} ({event.detail})", markup=False)
        elif event.kind == "warning":
            self.console.print(f"WARN: {event.phase}: {event.action} skipped: {event.detail}", markup=False)
        elif event.kind == "not_implemented":
            self.console.print(f"NOT IMPLEMENTED: {event.phase}: {event.action}", markup=False)
        elif event.kind == "failed":
            self.console.print(f"FAIL: {event.phase}: {event.action}", markup=False)

    def report_summary(self, report: RunReport) -> None:
        if self.verbose:
            counts = ", ".join(f"{report.count(o)} {o.value}" for o in ActionOutcome)
            self.console.print(f"Summary: {counts}", markup=False)
        self.console.print(f"Success: {report.plan} completed.", markup=False)

    def report_error(self, error: ProvisioningError) -> None:
        if isinstance(error, ExternalCommandError):
            self.console.print(
                f"Error: phase={error.phase} action={error.action}: {error.cause}", markup=False
            )
            return
        self.console.print(f"Error: {error}", markup=False)
