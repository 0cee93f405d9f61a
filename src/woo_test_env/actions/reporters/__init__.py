"""Reporters - progress and summary output for the CLI."""

from rich.console import Console

from woo_test_env.actions.reporters.base import BaseReporter
from woo_test_env.actions.reporters.plain_reporter import PlainReporter
from woo_test_env.actions.reporters.rich_reporter import RichReporter


def get_reporter(console: Console, fmt: str, verbose: bool = False) -> BaseReporter:
    """Pick a reporter for an output format ("rich" or "plain")."""
    if fmt == "plain":
        return PlainReporter(console, verbose=verbose)
    return RichReporter(console, verbose=verbose)


__all__ = ["BaseReporter", "PlainReporter", "RichReporter", "get_reporter"]
