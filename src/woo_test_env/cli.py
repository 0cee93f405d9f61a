"""
Click-based CLI for woo-test-env.

IMPORTANT: This module only ORCHESTRATES. It never decides what to provision.
- Loads target profiles
- Checks the target topology
- Builds FeatureFlags from options
- Invokes actions and sets the exit code
"""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from woo_test_env import __version__
from woo_test_env.actions import SetupAction, TeardownAction
from woo_test_env.actions.reporters import get_reporter
from woo_test_env.config import ConfigManager, TargetProfile
from woo_test_env.connector.ssh import SSHConfig, SSHWPCLI
from woo_test_env.connector.wpcli import BaseWPCLI, LocalWPCLI, WPCLIConfig
from woo_test_env.engine import is_multisite
from woo_test_env.errors import ConfigurationError, ProvisioningError
from woo_test_env.model.flags import DEFAULT_THEME, FeatureFlags
from woo_test_env.prompts import prompt_stripe_keys

console = Console()


@click.group()
@click.version_option(version=__version__, prog_name="woo-test-env")
@click.option("--config", "-c", type=click.Path(), help="Path to config directory")
@click.pass_context
def main(ctx: click.Context, config: str | None) -> None:
    """🛒 woo-test-env: WooCommerce Blocks Testing Environment.

    Set up and tear down a disposable WooCommerce store through wp-cli.
    """
    ctx.ensure_object(dict)
    config_dir = Path(config) if config else None
    ctx.obj["config_mgr"] = ConfigManager(config_dir)


def _target_options(func):
    """Options shared by setup and teardown to locate the WordPress install."""
    options = [
        click.option("--profile", "-p", help="Stored target profile name"),
        click.option("--path", "wp_path", type=click.Path(), help="WordPress install path"),
        click.option("--wp", "wp_binary", default=None, help="wp-cli binary (default: wp)"),
        click.option("--url", help="Site URL passed to wp-cli"),
        click.option("--allow-root", is_flag=True, help="Pass --allow-root to wp-cli"),
        click.option("--ssh-host", help="Run wp-cli on this host over SSH"),
        click.option("--ssh-user", default=None, help="SSH username (default: root)"),
        click.option(
            "--format", "fmt", type=click.Choice(["rich", "plain"]), default=None, help="Output format"
        ),
        click.option("--verbose", "-v", is_flag=True, help="Log every wp-cli command"),
    ]
    for option in reversed(options):
        func = option(func)
    return func


def _resolve_target(
    ctx: click.Context,
    profile: str | None,
    wp_path: str | None,
    wp_binary: str | None,
    url: str | None,
    allow_root: bool,
    ssh_host: str | None,
    ssh_user: str | None,
) -> TargetProfile:
    """Merge a stored profile (if any) with options given on the command line."""
    if profile:
        target = ctx.obj["config_mgr"].get_profile(profile)
        if target is None:
            raise ConfigurationError(f"Profile {profile} not found.")
    else:
        target = TargetProfile(wp=WPCLIConfig())

    if wp_path:
        target.wp.path = wp_path
    if wp_binary:
        target.wp.wp_binary = wp_binary
    if url:
        target.wp.url = url
    if allow_root:
        target.wp.allow_root = True
    if ssh_host:
        target.ssh = SSHConfig(host=ssh_host, user=ssh_user or "root")
    elif ssh_user and target.ssh:
        target.ssh.user = ssh_user
    return target


def _make_runner(target: TargetProfile) -> BaseWPCLI:
    if target.ssh:
        return SSHWPCLI(target.ssh, target.wp)
    return LocalWPCLI(target.wp)


def _configure_logging(verbose: bool) -> None:
    if not verbose:
        return
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _pick_format(fmt: str | None) -> str:
    if fmt is None:
        fmt = "plain" if not sys.stdout.isatty() else "rich"
    return fmt


@main.command()
@click.option("--version", "blocks_version", help="WooCommerce Blocks release (X.Y.Z) or zip URL")
@click.option("--gutenberg", is_flag=True, help="Install and activate the Gutenberg plugin")
@click.option("--theme", help="Theme to install and activate")
@click.option("--stripe", is_flag=True, help="Configure the Stripe payment gateway")
@click.option(
    "--stripe-publishable-key",
    envvar="WOO_TEST_ENV_STRIPE_PUBLISHABLE_KEY",
    default="",
    help="Stripe publishable key",
)
@click.option(
    "--stripe-secret-key",
    envvar="WOO_TEST_ENV_STRIPE_SECRET_KEY",
    default="",
    help="Stripe secret key",
)
@_target_options
@click.pass_context
def setup(
    ctx: click.Context,
    blocks_version: str | None,
    gutenberg: bool,
    theme: str | None,
    stripe: bool,
    stripe_publishable_key: str,
    stripe_secret_key: str,
    profile: str | None,
    wp_path: str | None,
    wp_binary: str | None,
    url: str | None,
    allow_root: bool,
    ssh_host: str | None,
    ssh_user: str | None,
    fmt: str | None,
    verbose: bool,
) -> None:
    """Set up WooCommerce Blocks Testing Environment.

    Example: woo-test-env setup --path /srv/http/shop --version 7.3.0 --gutenberg
    """
    _configure_logging(verbose)
    reporter = get_reporter(console, _pick_format(fmt), verbose)

    try:
        target = _resolve_target(ctx, profile, wp_path, wp_binary, url, allow_root, ssh_host, ssh_user)
        with _make_runner(target) as runner:
            multisite = is_multisite(runner)
            if stripe and not multisite and not (stripe_publishable_key and stripe_secret_key):
                stripe_publishable_key, stripe_secret_key = prompt_stripe_keys(
                    console, stripe_publishable_key, stripe_secret_key
                )
            flags = FeatureFlags(
                blocks_version=blocks_version,
                gutenberg=gutenberg,
                theme=theme,
                stripe=stripe,
                stripe_publishable_key=stripe_publishable_key,
                stripe_secret_key=stripe_secret_key,
                multisite=multisite,
            )
            report = SetupAction(runner, reporter).run(flags)
    except ProvisioningError as e:
        reporter.report_error(e)
        sys.exit(1)
    except click.exceptions.Abort:
        raise
    except Exception as e:
        console.print(f"[bold red]Error:[/] {e}")
        sys.exit(1)

    if report is None:
        sys.exit(1)


@main.command()
@click.option(
    "--default-theme",
    default=DEFAULT_THEME,
    show_default=True,
    help="Theme to activate before the others are deleted",
)
@_target_options
@click.pass_context
def teardown(
    ctx: click.Context,
    default_theme: str,
    profile: str | None,
    wp_path: str | None,
    wp_binary: str | None,
    url: str | None,
    allow_root: bool,
    ssh_host: str | None,
    ssh_user: str | None,
    fmt: str | None,
    verbose: bool,
) -> None:
    """Tear down WooCommerce Blocks Testing Environment.

    ⚠️  Deactivates and uninstalls every plugin and empties the site.
    """
    _configure_logging(verbose)
    reporter = get_reporter(console, _pick_format(fmt), verbose)

    try:
        target = _resolve_target(ctx, profile, wp_path, wp_binary, url, allow_root, ssh_host, ssh_user)
        with _make_runner(target) as runner:
            report = TeardownAction(runner, reporter).run(FeatureFlags(default_theme=default_theme))
    except ProvisioningError as e:
        reporter.report_error(e)
        sys.exit(1)
    except Exception as e:
        console.print(f"[bold red]Error:[/] {e}")
        sys.exit(1)

    if report is None:
        sys.exit(1)


@main.group()
def profile() -> None:
    """Manage target WordPress profiles."""
    pass


@profile.command("add")
@click.argument("name")
@click.option("--path", "wp_path", required=True, help="WordPress install path")
@click.option("--wp", "wp_binary", default="wp", help="wp-cli binary")
@click.option("--url", help="Site URL passed to wp-cli")
@click.option("--allow-root", is_flag=True, help="Pass --allow-root to wp-cli")
@click.option("--ssh-host", help="Server hostname or IP for remote installs")
@click.option("--ssh-user", default="root", help="SSH username")
@click.option("--ssh-port", default=22, help="SSH port")
@click.option("--ssh-password", help="SSH password (stored in the OS keyring)")
@click.option("--ssh-key", type=click.Path(), help="Path to SSH private key")
@click.pass_context
def profile_add(
    ctx: click.Context,
    name: str,
    wp_path: str,
    wp_binary: str,
    url: str | None,
    allow_root: bool,
    ssh_host: str | None,
    ssh_user: str,
    ssh_port: int,
    ssh_password: str | None,
    ssh_key: str | None,
) -> None:
    """Add or update a target profile."""
    config_mgr = ctx.obj["config_mgr"]
    ssh = None
    if ssh_host:
        ssh = SSHConfig(host=ssh_host, user=ssh_user, port=ssh_port, password=ssh_password, key_path=ssh_key)
    wp = WPCLIConfig(path=wp_path, wp_binary=wp_binary, url=url, allow_root=allow_root)
    config_mgr.add_profile(name, TargetProfile(wp=wp, ssh=ssh))
    console.print(f"[bold green]✓ Added target profile:[/] {name}")


@profile.command("list")
@click.pass_context
def profile_list(ctx: click.Context) -> None:
    """List all target profiles."""
    config_mgr = ctx.obj["config_mgr"]
    profiles = config_mgr.list_profiles()
    if not profiles:
        console.print("[dim]No profiles configured yet.[/]")
        return

    for name, data in profiles.items():
        ssh = data.get("ssh")
        where = f"{ssh['user']}@{ssh['host']}:{data['path']}" if ssh else data["path"]
        console.print(f"[bold green]{name}[/]: {where}")


@profile.command("remove")
@click.argument("name")
@click.pass_context
def profile_remove(ctx: click.Context, name: str) -> None:
    """Remove a target profile."""
    config_mgr = ctx.obj["config_mgr"]
    if config_mgr.remove_profile(name):
        console.print(f"[bold green]✓ Removed profile:[/] {name}")
    else:
        console.print(f"[bold red]Error:[/] Profile {name} not found.")
        sys.exit(1)


if __name__ == "__main__":
    main()
