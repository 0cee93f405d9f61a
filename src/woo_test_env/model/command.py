"""WPCommand - typed wp-cli invocations.

Every call into WordPress is built here as a value object and validated
before it is serialized into an argv list. Callers never glue strings
together, so titles and block markup with quotes or spaces survive both
the local subprocess transport and the SSH transport unchanged.
"""

import json
import re
import shlex
from dataclasses import dataclass, field
from typing import Any

from woo_test_env.errors import CommandValidationError

# WooCommerce REST-backed CLI commands need a user with manage_woocommerce.
WC_USER = "1"

_WORD_RE = re.compile(r"^[a-z][a-z0-9_-]*$")
_OPTION_RE = re.compile(r"^[a-z][a-z0-9_-]*$")


@dataclass(frozen=True)
class WPCommand:
    """A single wp-cli command.

    Attributes:
        words: Command path, e.g. ("plugin", "install").
        args: Positional arguments after the command path.
        options: Associative arguments rendered as --key=value.
        flags: Bare switches rendered as --flag.
    """

    words: tuple[str, ...]
    args: tuple[str, ...] = ()
    options: dict[str, str] = field(default_factory=dict)
    flags: tuple[str, ...] = ()

    def validate(self) -> None:
        """Raise CommandValidationError if the command cannot be serialized."""
        if not self.words:
            raise CommandValidationError("wp-cli command path is empty")
        for word in self.words:
            if not isinstance(word, str) or not _WORD_RE.match(word):
                raise CommandValidationError(f"Invalid command word: {word!r}")
        for arg in self.args:
            if not isinstance(arg, str) or arg == "":
                raise CommandValidationError(
                    f"Empty or non-string positional argument in '{' '.join(self.words)}'"
                )
        for key, value in self.options.items():
            if not _OPTION_RE.match(key):
                raise CommandValidationError(f"Invalid option name: {key!r}")
            if not isinstance(value, str):
                raise CommandValidationError(
                    f"Option --{key} must be a string, got {type(value).__name__}"
                )
        for flag in self.flags:
            if not _OPTION_RE.match(flag):
                raise CommandValidationError(f"Invalid flag name: {flag!r}")

    def argv(self) -> list[str]:
        """Validated argv, without the wp binary itself."""
        self.validate()
        parts = list(self.words) + list(self.args)
        parts += [f"--{key}={value}" for key, value in self.options.items()]
        parts += [f"--{flag}" for flag in self.flags]
        return parts

    @property
    def is_read(self) -> bool:
        """True for commands that only inspect state."""
        return self.words[-1] in ("list", "get", "is-active", "is-installed")

    def __str__(self) -> str:
        return "wp " + shlex.join(self.argv())


def _opts(**kwargs: Any) -> dict[str, str]:
    """Drop None values, stringify the rest."""
    return {key: str(value) for key, value in kwargs.items() if value is not None}


# =========================================================================
# Core / plugins / themes
# =========================================================================


def core_is_multisite() -> WPCommand:
    """Exit code 0 means the install is a network (multisite) install."""
    return WPCommand(("core", "is-installed"), flags=("network",))


def plugin_install(source: str, activate: bool = True) -> WPCommand:
    return WPCommand(("plugin", "install"), (source,), flags=("activate",) if activate else ())


def plugin_is_active(slug: str) -> WPCommand:
    return WPCommand(("plugin", "is-active"), (slug,))


def plugin_deactivate_all(uninstall: bool = True) -> WPCommand:
    flags = ("all", "uninstall") if uninstall else ("all",)
    return WPCommand(("plugin", "deactivate"), flags=flags)


def theme_install(slug: str, activate: bool = True) -> WPCommand:
    return WPCommand(("theme", "install"), (slug,), flags=("activate",) if activate else ())


def theme_is_active(slug: str) -> WPCommand:
    return WPCommand(("theme", "is-active"), (slug,))


def theme_delete_all() -> WPCommand:
    """wp-cli never deletes the active theme, even with --all."""
    return WPCommand(("theme", "delete"), flags=("all",))


# =========================================================================
# Content
# =========================================================================


def site_empty() -> WPCommand:
    return WPCommand(("site", "empty"), flags=("yes",))


def import_file(path: str, authors: str = "skip") -> WPCommand:
    return WPCommand(("import",), (path,), _opts(authors=authors))


def post_create(
    title: str,
    *,
    post_type: str = "post",
    content: str | None = None,
    menu_order: int | None = None,
    parent: int | None = None,
    status: str = "publish",
) -> WPCommand:
    if not title:
        raise CommandValidationError("Post title is required")
    return WPCommand(
        ("post", "create"),
        options=_opts(
            post_type=post_type,
            post_status=status,
            post_title=title,
            post_content=content,
            menu_order=menu_order,
            post_parent=parent,
        ),
        flags=("porcelain",),
    )


def post_list_by_title(title: str, post_type: str = "page") -> WPCommand:
    return WPCommand(
        ("post", "list"),
        options=_opts(title=title, post_type=post_type, fields="ID", format="json"),
    )


def widget_reset_all() -> WPCommand:
    return WPCommand(("widget", "reset"), flags=("all",))


def widget_add_block(sidebar: str, content: str) -> WPCommand:
    return WPCommand(("widget", "add"), ("block", sidebar), _opts(content=content))


# =========================================================================
# Options
# =========================================================================


def option_get(name: str) -> WPCommand:
    return WPCommand(("option", "get"), (name,))


def option_update(name: str, value: str | int) -> WPCommand:
    return WPCommand(("option", "update"), (name, str(value)))


def option_update_json(name: str, value: dict | list) -> WPCommand:
    """Store a structured option. Serialized here so the payload is always valid JSON."""
    return WPCommand(("option", "update"), (name, json.dumps(value)), _opts(format="json"))


def option_delete(name: str) -> WPCommand:
    return WPCommand(("option", "delete"), (name,))


def rewrite_structure(structure: str) -> WPCommand:
    return WPCommand(("rewrite", "structure"), (structure,))


def rewrite_flush() -> WPCommand:
    return WPCommand(("rewrite", "flush"))


# =========================================================================
# WooCommerce (wc ...) commands
# =========================================================================


def shipping_zone_method_create(zone: int, method_id: str, order: int, settings: dict) -> WPCommand:
    return WPCommand(
        ("wc", "shipping_zone_method", "create"),
        (str(zone),),
        _opts(
            order=order,
            enabled="true",
            settings=json.dumps(settings),
            method_id=method_id,
            user=WC_USER,
        ),
    )


def shipping_zone_method_list(zone: int) -> WPCommand:
    return WPCommand(
        ("wc", "shipping_zone_method", "list"),
        (str(zone),),
        _opts(fields="instance_id,method_id", format="json", user=WC_USER),
    )


def shipping_zone_method_delete(zone: int, instance_id: int) -> WPCommand:
    return WPCommand(
        ("wc", "shipping_zone_method", "delete"),
        (str(zone), str(instance_id)),
        _opts(force="true", user=WC_USER),
    )


def tax_create(rate: str, tax_class: str) -> WPCommand:
    return WPCommand(("wc", "tax", "create"), options=_opts(rate=rate, **{"class": tax_class}, user=WC_USER))


def tax_list() -> WPCommand:
    return WPCommand(
        ("wc", "tax", "list"),
        options=_opts(fields="id,class,rate", per_page=100, format="json", user=WC_USER),
    )


def tax_delete(rate_id: int) -> WPCommand:
    return WPCommand(("wc", "tax", "delete"), (str(rate_id),), _opts(force="true", user=WC_USER))


def coupon_create(code: str, amount: str, discount_type: str) -> WPCommand:
    return WPCommand(
        ("wc", "shop_coupon", "create"),
        options=_opts(code=code, amount=amount, discount_type=discount_type, user=WC_USER),
    )


def coupon_list(code: str) -> WPCommand:
    return WPCommand(
        ("wc", "shop_coupon", "list"),
        options=_opts(code=code, fields="id,code", format="json", user=WC_USER),
    )
