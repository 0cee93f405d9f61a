"""SSH Connector - wp-cli on a remote WordPress host.

Runs the same wp-cli argv as LocalWPCLI, shell-quoted, over an SSH
channel. Used when a profile names an SSH host instead of a local path.
"""

import logging
import shlex
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import paramiko
from paramiko.ssh_exception import AuthenticationException, SSHException

from woo_test_env.connector.wpcli import BaseWPCLI, CommandResult, WPCLIConfig

logger = logging.getLogger(__name__)


@dataclass
class SSHConfig:
    """Where the WordPress host is and how to log in.

    key_path wins over password when both are set.
    """

    host: str
    user: str = "root"
    port: int = 22
    key_path: str | None = None
    password: str | None = None
    timeout: int = 30

    @property
    def target(self) -> str:
        return f"{self.user}@{self.host}:{self.port}"


class SSHWPCLI(BaseWPCLI):
    """wp-cli over SSH.

    Example:
        >>> ssh = SSHConfig(host="192.168.1.100", user="deploy")
        >>> with SSHWPCLI(ssh, WPCLIConfig(path="/var/www/shop")) as wp:
        ...     wp.run(site_empty())
    """

    def __init__(self, ssh_config: SSHConfig, config: WPCLIConfig) -> None:
        super().__init__(config)
        self.ssh_config = ssh_config
        self._client: paramiko.SSHClient | None = None

    def _login_kwargs(self) -> dict[str, Any]:
        cfg = self.ssh_config
        kwargs: dict[str, Any] = {
            "hostname": cfg.host,
            "port": cfg.port,
            "username": cfg.user,
            "timeout": cfg.timeout,
        }
        if cfg.key_path:
            key_file = Path(cfg.key_path).expanduser()
            if not key_file.exists():
                raise ConnectionError(f"SSH key not found: {key_file}")
            kwargs["key_filename"] = str(key_file)
        elif cfg.password:
            kwargs["password"] = cfg.password
        return kwargs

    def connect(self) -> None:
        """Open the SSH session used for every wp-cli call."""
        client = paramiko.SSHClient()
        client.set_missing_host_key_policy(paramiko.AutoAddPolicy())
        logger.debug("connecting to %s", self.ssh_config.target)
        try:
            client.connect(**self._login_kwargs())
        except AuthenticationException as e:
            raise ConnectionError(f"{self.ssh_config.target}: authentication failed: {e}") from e
        except SSHException as e:
            raise ConnectionError(f"{self.ssh_config.target}: {e}") from e
        self._client = client

    def disconnect(self) -> None:
        if self._client is not None:
            self._client.close()
        self._client = None

    def __enter__(self) -> "SSHWPCLI":
        self.connect()
        return self

    def __exit__(self, *args: object) -> None:
        self.disconnect()

    def _execute(self, argv: list[str], capture_output: bool) -> CommandResult:
        if self._client is None:
            raise RuntimeError("Not connected. Use 'with SSHWPCLI(...):' context.")

        line = shlex.join(argv)
        if self.config.path:
            # relative paths (sample data import) resolve against the WordPress root
            line = f"cd {shlex.quote(self.config.path)} && {line}"
        try:
            _, out, err = self._client.exec_command(line, timeout=self.config.timeout)
            code = out.channel.recv_exit_status()
            stdout = out.read().decode("utf-8", errors="replace")
            stderr = err.read().decode("utf-8", errors="replace")
        except (SSHException, OSError) as e:
            # channel errors and timeouts become a failed result; run() decides whether to raise
            return CommandResult(line, "", f"SSH channel error on {self.ssh_config.host}: {e}", 255)
        return CommandResult(line, stdout, stderr, code)
