"""wp-cli Connector - the only boundary to WordPress.

All provisioning goes through CommandRunner.run(). Transports differ
(local subprocess here, SSH in connector/ssh.py) but share the
parse/fail semantics implemented in BaseWPCLI.
"""

import logging
import os
import subprocess
import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from woo_test_env.errors import CommandError
from woo_test_env.model.command import WPCommand
from woo_test_env.parser.wpcli_output import parse_output, strip_noise

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = int(os.environ.get("WOO_TEST_ENV_TIMEOUT", "600"))


@dataclass
class WPCLIConfig:
    """Where and how to invoke wp-cli."""

    path: str | None = None
    wp_binary: str = "wp"
    url: str | None = None
    allow_root: bool = False
    timeout: int = DEFAULT_TIMEOUT

    def base_argv(self) -> list[str]:
        argv = [self.wp_binary]
        if self.path:
            argv.append(f"--path={self.path}")
        if self.url:
            argv.append(f"--url={self.url}")
        if self.allow_root:
            argv.append("--allow-root")
        return argv


@dataclass
class CommandResult:
    """Result of a command execution."""

    command: str
    stdout: str
    stderr: str
    exit_code: int
    data: Any = None
    success: bool = field(init=False)

    def __post_init__(self) -> None:
        self.success = self.exit_code == 0


@runtime_checkable
class CommandRunner(Protocol):
    """What the provisioner needs from a transport."""

    def run(
        self,
        command: WPCommand,
        *,
        capture_output: bool = True,
        parse_json: bool = False,
        fail_on_error: bool = True,
    ) -> CommandResult: ...


class BaseWPCLI(ABC):
    """Shared run() semantics for every wp-cli transport."""

    def __init__(self, config: WPCLIConfig) -> None:
        self.config = config

    def __enter__(self) -> "BaseWPCLI":
        return self

    def __exit__(self, *args: object) -> None:
        pass

    @abstractmethod
    def _execute(self, argv: list[str], capture_output: bool) -> CommandResult:
        """Run the full argv (wp binary included) and return the raw result."""

    def run(
        self,
        command: WPCommand,
        *,
        capture_output: bool = True,
        parse_json: bool = False,
        fail_on_error: bool = True,
    ) -> CommandResult:
        """Execute a wp-cli command.

        Args:
            command: The validated command to run.
            capture_output: Capture stdout/stderr instead of streaming them.
            parse_json: Parse stdout into result.data.
            fail_on_error: Raise CommandError on a non-zero exit.

        Returns:
            CommandResult with exit code, raw output and optional data.
        """
        argv = self.config.base_argv() + command.argv()

        t0 = time.monotonic()
        result = self._execute(argv, capture_output)
        result.command = str(command)
        dt = time.monotonic() - t0

        if result.success:
            logger.debug("PASS: %s (%.1fs)", result.command, dt)
        elif command.is_read and not fail_on_error:
            # is-active / get checks signal "no" through the exit code
            logger.debug("NO: %s exit=%s", result.command, result.exit_code)
        else:
            logger.debug(
                "FAIL: %s exit=%s stderr=%s",
                result.command,
                result.exit_code,
                strip_noise(result.stderr),
            )

        if parse_json and result.success:
            result.data = parse_output(result.stdout)

        if fail_on_error and not result.success:
            detail = strip_noise(result.stderr) or strip_noise(result.stdout) or f"exit {result.exit_code}"
            raise CommandError(f"`{result.command}` exited {result.exit_code}: {detail}", result)
        return result


class LocalWPCLI(BaseWPCLI):
    """Run wp-cli on this machine via subprocess.

    Example:
        >>> wp = LocalWPCLI(WPCLIConfig(path="/srv/http/shop.local"))
        >>> wp.run(plugin_is_active("woocommerce"), fail_on_error=False).success
        True
    """

    def _execute(self, argv: list[str], capture_output: bool) -> CommandResult:
        env = os.environ.copy()
        env.setdefault("WP_CLI_DISABLE_AUTO_CHECK_UPDATE", "1")
        try:
            proc = subprocess.run(
                argv,
                text=True,
                capture_output=capture_output,
                cwd=self.config.path or None,
                timeout=self.config.timeout,
                env=env,
                encoding="utf-8",
                errors="replace",
            )
        except subprocess.TimeoutExpired:
            return CommandResult(
                command=" ".join(argv),
                stdout="",
                stderr=f"timeout after {self.config.timeout}s",
                exit_code=124,
            )
        except FileNotFoundError as e:
            return CommandResult(
                command=" ".join(argv),
                stdout="",
                stderr=f"wp-cli not found: {e}",
                exit_code=127,
            )

        return CommandResult(
            command=" ".join(argv),
            stdout=proc.stdout or "",
            stderr=proc.stderr or "",
            exit_code=proc.returncode,
        )
