"""Error taxonomy for woo-test-env.

ProvisioningError is what the CLI reports. CommandError is what runners
raise; the provisioner wraps it with phase/action context.
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from woo_test_env.connector.wpcli import CommandResult


class ProvisioningError(Exception):
    """Base class for every error that aborts a setup or teardown run."""


class ConfigurationError(ProvisioningError):
    """Unsupported target or invalid flags. Raised before any side effect."""


class CommandValidationError(ValueError):
    """A WPCommand failed validation before it was serialized."""


class CommandError(Exception):
    """A wp-cli call exited non-zero or the transport failed."""

    def __init__(self, message: str, result: "CommandResult | None" = None) -> None:
        super().__init__(message)
        self.result = result


class ResourceNotFoundError(CommandError):
    """A title lookup returned nothing."""


class ExternalCommandError(ProvisioningError):
    """A command failed inside a phase. Carries where it happened."""

    def __init__(self, phase: str, action: str, cause: Exception) -> None:
        self.phase = phase
        self.action = action
        self.cause = cause
        super().__init__(f"{phase}: {action} failed: {cause}")
