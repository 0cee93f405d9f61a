"""Provision Actions - set up and tear down the test environment.

CONTRACT:
- read_only: False (MODIFIES WORDPRESS)
- requires_backup: False (the site is disposable)
- rollback_support: False (re-run to recover)
- prerequisites: ["wp-cli reachable", "single-site WordPress"]

⚠️  WARNING: both actions empty the target site!
"""

from dataclasses import dataclass

from woo_test_env.actions.reporters.base import BaseReporter
from woo_test_env.connector.wpcli import CommandRunner
from woo_test_env.engine.provisioner import Provisioner
from woo_test_env.errors import ProvisioningError
from woo_test_env.model.flags import FeatureFlags
from woo_test_env.model.plan import RunReport


@dataclass
class ActionContract:
    """Explicit contract for an action."""

    read_only: bool
    requires_backup: bool
    rollback_support: bool
    prerequisites: list[str]


class SetupAction:
    """Provision a WooCommerce Blocks test site."""

    CONTRACT = ActionContract(
        read_only=False,
        requires_backup=False,
        rollback_support=False,
        prerequisites=["wp-cli reachable", "single-site WordPress"],
    )

    def __init__(self, runner: CommandRunner, reporter: BaseReporter) -> None:
        self.reporter = reporter
        self.provisioner = Provisioner(runner, log_fn=reporter.on_event)

    def run(self, flags: FeatureFlags) -> RunReport | None:
        """Run setup. Returns None after reporting an error."""
        try:
            report = self.provisioner.setup(flags)
        except ProvisioningError as e:
            self.reporter.report_error(e)
            return None
        self.reporter.report_summary(report)
        return report


class TeardownAction:
    """Remove everything SetupAction created."""

    CONTRACT = ActionContract(
        read_only=False,
        requires_backup=False,
        rollback_support=False,
        prerequisites=["wp-cli reachable"],
    )

    def __init__(self, runner: CommandRunner, reporter: BaseReporter) -> None:
        self.reporter = reporter
        self.provisioner = Provisioner(runner, log_fn=reporter.on_event)

    def run(self, flags: FeatureFlags | None = None) -> RunReport | None:
        try:
            report = self.provisioner.teardown(flags)
        except ProvisioningError as e:
            self.reporter.report_error(e)
            return None
        self.reporter.report_summary(report)
        return report
