"""Interactive prompts for values the operator did not pass as options."""

import click
from rich.console import Console


def prompt_stripe_keys(
    console: Console,
    publishable_key: str = "",
    secret_key: str = "",
) -> tuple[str, str]:
    """Ask for whichever Stripe key is still missing.

    An empty answer is allowed; setup then skips the gateway with a warning.
    Closed stdin (CI, piped runs) counts as an empty answer.
    """
    console.print("[bold]Stripe[/] needs API keys to enable the gateway.")
    try:
        if not publishable_key:
            publishable_key = click.prompt("Stripe publishable key", default="", show_default=False)
        if not secret_key:
            secret_key = click.prompt(
                "Stripe secret key", default="", show_default=False, hide_input=True
            )
    except click.exceptions.Abort as e:
        # Ctrl-C still cancels; only end-of-input falls through
        if not isinstance(e.__context__, EOFError):
            raise
        click.echo()
    return publishable_key.strip(), secret_key.strip()
