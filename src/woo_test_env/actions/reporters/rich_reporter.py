"""Rich Reporter Implementation."""

from rich.markup import escape
from rich.table import Table

from woo_test_env.actions.reporters.base import BaseReporter
from woo_test_env.engine.provisioner import ProgressEvent
from woo_test_env.errors import ExternalCommandError, ProvisioningError
from woo_test_env.model.plan import ActionOutcome, RunReport

TITLES = {
    "setup": "Set up WooCommerce Blocks Testing Environment ...",
    "teardown": "Tear down WooCommerce Blocks Testing Environment ...",
}


class RichReporter(BaseReporter):
    """Coloured terminal output using Rich."""

    def on_event(self, event: ProgressEvent) -> None:
        if event.kind == "start":
            self.console.print(f"[bold]{TITLES.get(event.plan, event.plan)}[/]")
        elif event.kind == "phase":
            self.console.print(f"\n[bold cyan]▸ {escape(event.phase or '')}[/]")
        elif event.kind == "applied":
            self.console.print(f"   [green]✓[/] {escape(event.action or '')}")
        elif event.kind == "skipped":
            self.console.print(f"   [dim]- {escape(event.action or '')} (skipped: {escape(event.detail)})[/]")
        elif event.kind == "warning":
            self.console.print(f"   [bold yellow]! {escape(event.action or '')} skipped:[/] {escape(event.detail)}")
        elif event.kind == "not_implemented":
            self.console.print(f"   [dim]· {escape(event.action or '')} (not implemented)[/]")
        elif event.kind == "failed":
            self.console.print(f"   [bold red]✗ {escape(event.action or '')}[/]")

    def report_summary(self, report: RunReport) -> None:
        if self.verbose:
            self._print_counts(report)
        verb = "set up" if report.plan == "setup" else "torn down"
        self.console.print(
            f"\n[bold green]Success:[/] WooCommerce Blocks Testing Environment successfully {verb}."
        )

    def report_error(self, error: ProvisioningError) -> None:
        if isinstance(error, ExternalCommandError):
            self.console.print(
                f"\n[bold red]Error:[/] {escape(error.phase)} / {escape(error.action)}: {escape(str(error.cause))}"
            )
            return
        self.console.print(f"\n[bold red]Error:[/] {escape(str(error))}")

    def _print_counts(self, report: RunReport) -> None:
        table = Table(title=f"{report.plan} summary", show_header=True)
        table.add_column("Outcome")
        table.add_column("Actions", justify="right")
        for outcome in ActionOutcome:
            table.add_row(outcome.value, str(report.count(outcome)))
        self.console.print()
        self.console.print(table)
