"""Configuration management for woo-test-env target profiles."""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any

import keyring
import yaml

from woo_test_env.connector.ssh import SSHConfig
from woo_test_env.connector.wpcli import WPCLIConfig


@dataclass
class TargetProfile:
    """A WordPress install to provision: wp-cli settings plus optional SSH access."""

    wp: WPCLIConfig
    ssh: SSHConfig | None = None


class ConfigManager:
    """Manages target profiles stored in YAML format with secure keyring for passwords."""

    def __init__(self, config_dir: Path | None = None) -> None:
        if config_dir is None:
            # Check for environment variable override
            env_config = os.getenv("WOO_TEST_ENV_CONFIG")
            if env_config:
                config_dir = Path(env_config).expanduser().resolve()
            else:
                # Default to ~/.woo-test-env
                config_dir = Path.home() / ".woo-test-env"

        self.config_dir = config_dir
        self.profiles_file = config_dir / "profiles.yaml"
        self._ensure_config_dir()
        self.service_id = "woo-test-env"

    def _ensure_config_dir(self) -> None:
        """Create config directory if it doesn't exist."""
        self.config_dir.mkdir(parents=True, exist_ok=True)
        if not self.profiles_file.exists():
            self._save_profiles({})

    def _load_profiles(self) -> dict[str, Any]:
        """Load all profiles from the YAML file."""
        if not self.profiles_file.exists():
            return {}

        with open(self.profiles_file, "r") as f:
            return yaml.safe_load(f) or {}

    def _save_profiles(self, profiles: dict[str, Any]) -> None:
        """Save profiles to the YAML file with proper permissions."""
        self.profiles_file.touch(mode=0o600)
        with open(self.profiles_file, "w") as f:
            yaml.safe_dump(profiles, f)

    def add_profile(self, name: str, profile: TargetProfile) -> None:
        """Add or update a target profile."""
        profiles = self._load_profiles()

        data: dict[str, Any] = {
            "path": profile.wp.path,
            "wp_binary": profile.wp.wp_binary,
            "url": profile.wp.url,
            "allow_root": profile.wp.allow_root,
        }

        ssh = profile.ssh
        if ssh:
            # Handle password via keyring
            password_ref = None
            if ssh.password:
                try:
                    keyring.set_password(self.service_id, name, ssh.password)
                    password_ref = "__keyring__"
                except keyring.errors.KeyringError:
                    # Fallback to plain text if keyring fails (e.g. headless without backend)
                    password_ref = ssh.password
            data["ssh"] = {
                "host": ssh.host,
                "user": ssh.user,
                "port": ssh.port,
                "key_path": ssh.key_path,
                "password": password_ref,
            }

        profiles[name] = data
        self._save_profiles(profiles)

    def get_profile(self, name: str) -> TargetProfile | None:
        """Get a TargetProfile by name."""
        profiles = self._load_profiles()
        data = profiles.get(name)
        if not data:
            return None

        wp = WPCLIConfig(
            path=data.get("path"),
            wp_binary=data.get("wp_binary", "wp"),
            url=data.get("url"),
            allow_root=data.get("allow_root", False),
        )

        ssh = None
        ssh_data = data.get("ssh")
        if ssh_data:
            # Resolve password from keyring if needed
            password = ssh_data.get("password")
            if password == "__keyring__":
                try:
                    password = keyring.get_password(self.service_id, name)
                except keyring.errors.KeyringError:
                    password = None
            ssh = SSHConfig(
                host=ssh_data["host"],
                user=ssh_data.get("user", "root"),
                port=ssh_data.get("port", 22),
                key_path=ssh_data.get("key_path"),
                password=password,
            )

        return TargetProfile(wp=wp, ssh=ssh)

    def list_profiles(self) -> dict[str, Any]:
        """List all available profiles."""
        return self._load_profiles()

    def remove_profile(self, name: str) -> bool:
        """Remove a target profile."""
        profiles = self._load_profiles()
        if name not in profiles:
            return False

        # Clean up keyring
        ssh_data = profiles[name].get("ssh") or {}
        if ssh_data.get("password") == "__keyring__":
            try:
                keyring.delete_password(self.service_id, name)
            except keyring.errors.KeyringError:
                pass

        del profiles[name]
        self._save_profiles(profiles)
        return True
