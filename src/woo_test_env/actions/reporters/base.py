"""Base Reporter Interface."""

from abc import ABC, abstractmethod

from rich.console import Console

from woo_test_env.engine.provisioner import ProgressEvent
from woo_test_env.errors import ProvisioningError
from woo_test_env.model.plan import RunReport


class BaseReporter(ABC):
    """Abstract base class for progress reporters."""

    def __init__(self, console: Console, verbose: bool = False) -> None:
        self.console = console
        self.verbose = verbose

    @abstractmethod
    def on_event(self, event: ProgressEvent) -> None:
        """Print one progress line. Passed to Provisioner as log_fn."""
        pass

    @abstractmethod
    def report_summary(self, report: RunReport) -> None:
        """Print the single success line for a finished run."""
        pass

    @abstractmethod
    def report_error(self, error: ProvisioningError) -> None:
        """Print the single error line for an aborted run."""
        pass
