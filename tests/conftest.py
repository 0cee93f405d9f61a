"""Pytest configuration and fixtures for woo-test-env tests."""

import json
from typing import Callable

import pytest

from woo_test_env.connector.wpcli import BaseWPCLI, CommandResult, WPCLIConfig
from woo_test_env.model.command import WPCommand
from woo_test_env.model.flags import DEFAULT_THEME

BLOCKS_ZIP_SLUG = "woo-gutenberg-products-block"


class FakeWPCLI(BaseWPCLI):
    """In-memory WordPress answering wp-cli commands.

    Records every WPCommand it is asked to run. Only models the state the
    setup and teardown plans read back: plugins, themes, posts, options,
    tax rates, zone-0 shipping methods and coupons.
    """

    def __init__(self, multisite: bool = False) -> None:
        super().__init__(WPCLIConfig(path="/srv/http/shop.local"))
        self.multisite = multisite
        self.commands: list[WPCommand] = []
        self.fail_when: Callable[[WPCommand], bool] | None = None

        self.active_plugins: set[str] = set()
        self.active_theme = DEFAULT_THEME
        self.installed_themes: set[str] = {DEFAULT_THEME, "twentytwentythree"}
        self.posts: list[dict] = []
        self.options: dict[str, str] = {}
        self.tax_rates: list[dict] = []
        self.shipping_methods: list[dict] = []
        self.coupons: list[dict] = []
        self._next_id = 100
        self._pending: WPCommand | None = None

    # -- recording ---------------------------------------------------------

    def run(self, command, *, capture_output=True, parse_json=False, fail_on_error=True):
        self.commands.append(command)
        self._pending = command
        return super().run(
            command,
            capture_output=capture_output,
            parse_json=parse_json,
            fail_on_error=fail_on_error,
        )

    def writes(self) -> list[WPCommand]:
        return [c for c in self.commands if not c.is_read]

    def find(self, *words: str) -> list[WPCommand]:
        return [c for c in self.commands if c.words == words]

    # -- state -------------------------------------------------------------

    def _id(self) -> int:
        self._next_id += 1
        return self._next_id

    def add_post(self, title: str, post_type: str = "page", parent: int | None = None) -> int:
        post_id = self._id()
        self.posts.append({"ID": post_id, "title": title, "type": post_type, "parent": parent})
        return post_id

    def _execute(self, argv, capture_output):
        cmd = self._pending
        if self.fail_when and self.fail_when(cmd):
            return CommandResult(" ".join(argv), "", "Error: simulated failure", 1)
        exit_code, stdout = self._answer(cmd)
        stderr = "" if exit_code == 0 else "Error: command failed"
        return CommandResult(" ".join(argv), stdout, stderr, exit_code)

    def _answer(self, cmd: WPCommand) -> tuple[int, str]:
        words, args, opts = cmd.words, cmd.args, cmd.options

        if words[0] == "wc" and "woocommerce" not in self.active_plugins:
            return 1, ""

        if words == ("core", "is-installed"):
            return (0 if self.multisite else 1), ""

        if words == ("plugin", "install"):
            slug = BLOCKS_ZIP_SLUG if args[0].startswith("http") else args[0]
            if "activate" in cmd.flags:
                self.active_plugins.add(slug)
            return 0, "Success: Installed 1 of 1 plugins."
        if words == ("plugin", "is-active"):
            return (0 if args[0] in self.active_plugins else 1), ""
        if words == ("plugin", "deactivate"):
            self.active_plugins.clear()
            return 0, "Success: Deactivated plugins."

        if words == ("theme", "install"):
            self.installed_themes.add(args[0])
            if "activate" in cmd.flags:
                self.active_theme = args[0]
            return 0, ""
        if words == ("theme", "is-active"):
            return (0 if args[0] == self.active_theme else 1), ""
        if words == ("theme", "delete"):
            self.installed_themes = {self.active_theme}
            return 0, ""

        if words == ("site", "empty"):
            self.posts.clear()
            self.coupons.clear()
            return 0, ""

        if words == ("post", "create"):
            parent = opts.get("post_parent")
            post_id = self.add_post(
                opts["post_title"], opts.get("post_type", "post"), int(parent) if parent else None
            )
            return 0, str(post_id)
        if words == ("post", "list"):
            rows = [
                {"ID": p["ID"]}
                for p in self.posts
                if p["title"] == opts.get("title") and p["type"] == opts.get("post_type")
            ]
            return 0, json.dumps(rows)

        if words[0] == "option":
            name = args[0]
            if words[1] == "get":
                if name not in self.options:
                    return 1, ""
                return 0, self.options[name]
            if words[1] == "update":
                self.options[name] = args[1]
                return 0, f"Success: Updated '{name}' option."
            if words[1] == "delete":
                if self.options.pop(name, None) is None:
                    return 1, ""
                return 0, ""

        if words[:2] == ("wc", "shipping_zone_method"):
            if words[2] == "create":
                instance_id = self._id()
                self.shipping_methods.append({"instance_id": instance_id, "method_id": opts["method_id"]})
                return 0, f"Success: Created shipping_zone_method {instance_id}."
            if words[2] == "list":
                return 0, json.dumps(self.shipping_methods)
            if words[2] == "delete":
                self.shipping_methods = [m for m in self.shipping_methods if str(m["instance_id"]) != args[1]]
                return 0, ""

        if words[:2] == ("wc", "tax"):
            if words[2] == "create":
                self.tax_rates.append({"id": self._id(), "class": opts["class"], "rate": opts["rate"]})
                return 0, ""
            if words[2] == "list":
                return 0, json.dumps(self.tax_rates[: int(opts.get("per_page", 10))])
            if words[2] == "delete":
                self.tax_rates = [t for t in self.tax_rates if str(t["id"]) != args[0]]
                return 0, ""

        if words[:2] == ("wc", "shop_coupon"):
            if words[2] == "create":
                self.coupons.append({"id": self._id(), "code": opts["code"]})
                return 0, ""
            if words[2] == "list":
                return 0, json.dumps([c for c in self.coupons if c["code"] == opts.get("code")])

        # import, widget, rewrite
        return 0, ""


@pytest.fixture
def make_wp():
    """Factory for FakeWPCLI, for tests that need more than one site or a multisite one."""
    return FakeWPCLI


@pytest.fixture
def fake_wp():
    """A fresh single-site WordPress with no plugins."""
    return FakeWPCLI()


@pytest.fixture
def events():
    """Collects ProgressEvents passed to a Provisioner log_fn."""
    return []
