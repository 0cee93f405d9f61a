"""FeatureFlags - the operator's choices for one run."""

import re
from dataclasses import dataclass

from woo_test_env.errors import ConfigurationError

BLOCKS_RELEASE_URL = (
    "https://github.com/woocommerce/woocommerce-gutenberg-products-block"
    "/releases/download/v{version}/woo-gutenberg-products-block.zip"
)
DEFAULT_THEME = "twentytwentyfour"

_RELEASE_RE = re.compile(r"^\d+\.\d+\.\d+$")


def is_release_version(value: str) -> bool:
    """True for X.Y.Z release numbers such as 7.3.0."""
    return bool(_RELEASE_RE.match(value.strip()))


def is_url(value: str) -> bool:
    return value.startswith(("http://", "https://"))


@dataclass(frozen=True)
class FeatureFlags:
    """Read-only inputs supplied once at the start of a run.

    Attributes:
        blocks_version: WooCommerce Blocks release (X.Y.Z) or a zip URL.
        gutenberg: Install and activate the Gutenberg plugin.
        theme: Theme to install and activate.
        stripe: Configure the Stripe gateway with live credentials.
        stripe_publishable_key: Publishable key (may be empty).
        stripe_secret_key: Secret key (may be empty).
        multisite: Target is a network install; setup refuses to run.
        default_theme: Theme teardown falls back to before deleting the rest.
    """

    blocks_version: str | None = None
    gutenberg: bool = False
    theme: str | None = None
    stripe: bool = False
    stripe_publishable_key: str = ""
    stripe_secret_key: str = ""
    multisite: bool = False
    default_theme: str = DEFAULT_THEME

    def blocks_source(self) -> str | None:
        """Install source for the requested Blocks release, or None.

        Raises:
            ConfigurationError: value is neither a release number nor a URL.
        """
        if not self.blocks_version:
            return None
        value = self.blocks_version.strip()
        if is_url(value):
            return value
        if is_release_version(value):
            return BLOCKS_RELEASE_URL.format(version=value)
        raise ConfigurationError(
            f"WooCommerce Blocks release '{value}' is neither a version (X.Y.Z) nor a URL"
        )

    @property
    def stripe_keys_present(self) -> bool:
        return bool(self.stripe_publishable_key.strip() and self.stripe_secret_key.strip())
