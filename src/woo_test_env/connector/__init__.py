"""Connector package - transports that run wp-cli commands."""

from woo_test_env.connector.wpcli import (
    BaseWPCLI,
    CommandResult,
    CommandRunner,
    LocalWPCLI,
    WPCLIConfig,
)

__all__ = ["BaseWPCLI", "CommandResult", "CommandRunner", "LocalWPCLI", "WPCLIConfig"]
