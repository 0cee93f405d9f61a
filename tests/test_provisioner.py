"""Tests for the Provisioner.

Verifies:
1. Phases run strictly in order and the reviews step is not_implemented.
2. Running setup twice does not install, activate or create anything twice.
3. Teardown followed by setup behaves like a fresh setup.
4. Enumerate-then-delete on an empty collection succeeds with zero deletions.
5. Multisite and invalid flags fail before any command runs.
6. A command failure stops the run and names the phase and action.
"""

from unittest.mock import MagicMock

import pytest

from woo_test_env.engine import Provisioner, is_multisite
from woo_test_env.connector.wpcli import CommandResult
from woo_test_env.errors import CommandError, ConfigurationError, ExternalCommandError
from woo_test_env.model import command as wp
from woo_test_env.model.flags import FeatureFlags
from woo_test_env.model.plan import ActionOutcome, Plan, RunContext, RunState
from woo_test_env.plans import build_setup_plan
from woo_test_env.plans.setup import COUPON_CODE
from woo_test_env.plans.steps import delete_each

FULL_FLAGS = FeatureFlags(blocks_version="7.3.0", gutenberg=True, theme="storefront")

SETUP_PHASES = [
    "plugins",
    "themes",
    "reset-site",
    "products",
    "pages",
    "posts",
    "sidebar",
    "shipping",
    "payments",
    "tax",
    "coupons",
    "reviews",
    "permalinks",
]


def _outcomes(report):
    return [(r.phase, r.action, r.outcome) for r in report.records]


def _record(report, label):
    return next(r for r in report.records if r.action == label)


def test_setup_runs_every_phase_in_order(fake_wp):
    provisioner = Provisioner(fake_wp)
    assert provisioner.state == RunState.NOT_STARTED

    report = provisioner.setup(FULL_FLAGS)

    assert provisioner.state == RunState.COMPLETED
    assert report.phases_run == SETUP_PHASES
    assert "woocommerce" in fake_wp.active_plugins
    assert "gutenberg" in fake_wp.active_plugins
    assert fake_wp.active_theme == "storefront"


def test_reviews_is_reported_not_implemented(fake_wp):
    report = Provisioner(fake_wp).setup(FeatureFlags())

    record = _record(report, "add product reviews")
    assert record.phase == "reviews"
    assert record.outcome == ActionOutcome.NOT_IMPLEMENTED
    assert report.count(ActionOutcome.NOT_IMPLEMENTED) == 1


def test_blocks_pages_created_only_when_blocks_active(fake_wp):
    Provisioner(fake_wp).setup(FULL_FLAGS)

    titles = {p["title"] for p in fake_wp.posts if p["type"] == "page"}
    assert {"Shop", "Classic Shop", "Cart", "Checkout", "Classic Cart", "Classic Checkout"} <= titles

    pages = {p["title"]: p for p in fake_wp.posts if p["type"] == "page"}
    assert pages["Classic Cart"]["parent"] == pages["Cart"]["ID"]
    assert fake_wp.options["woocommerce_cart_page_id"] == str(pages["Cart"]["ID"])
    assert fake_wp.options["woocommerce_shop_page_id"] == str(pages["Classic Shop"]["ID"])


def test_without_blocks_cart_and_checkout_are_skipped(fake_wp):
    report = Provisioner(fake_wp).setup(FeatureFlags())

    assert _record(report, "create Cart page").outcome == ActionOutcome.SKIPPED
    assert _record(report, "set checkout page").outcome == ActionOutcome.SKIPPED
    assert "woocommerce_cart_page_id" not in fake_wp.options
    # Classic pages still exist, at the top level
    classic = next(p for p in fake_wp.posts if p["title"] == "Classic Cart")
    assert classic["parent"] is None


def test_setup_twice_has_no_duplicates(fake_wp):
    provisioner = Provisioner(fake_wp)
    provisioner.setup(FULL_FLAGS)
    first_installs = len(fake_wp.find("plugin", "install"))

    second = provisioner.setup(FULL_FLAGS)

    assert len(fake_wp.find("plugin", "install")) == first_installs
    assert len(fake_wp.find("theme", "install")) == 1
    assert len(fake_wp.find("wc", "tax", "create")) == 3
    assert len(fake_wp.tax_rates) == 3
    assert len(fake_wp.find("wc", "shipping_zone_method", "create")) == 2
    assert [c["code"] for c in fake_wp.coupons] == [COUPON_CODE]
    assert _record(second, "install WooCommerce").outcome == ActionOutcome.SKIPPED
    assert _record(second, "add standard tax rate").outcome == ActionOutcome.SKIPPED
    assert _record(second, "enable local pickup").outcome == ActionOutcome.SKIPPED


def test_teardown_then_setup_equals_fresh_setup(make_wp):
    fresh = make_wp()
    fresh_report = Provisioner(fresh).setup(FULL_FLAGS)

    reused = make_wp()
    provisioner = Provisioner(reused)
    provisioner.setup(FULL_FLAGS)
    provisioner.teardown()
    reused.commands.clear()
    reused_report = provisioner.setup(FULL_FLAGS)

    assert _outcomes(reused_report) == _outcomes(fresh_report)
    assert [c.words for c in reused.commands] == [c.words for c in fresh.commands]


def test_teardown_removes_woocommerce_data(fake_wp):
    provisioner = Provisioner(fake_wp)
    provisioner.setup(FULL_FLAGS)

    report = provisioner.teardown()

    assert report.phases_run == ["tax", "shipping", "plugins", "themes", "reset-site"]
    assert fake_wp.tax_rates == []
    assert fake_wp.shipping_methods == []
    assert "woocommerce_pickup_location_settings" not in fake_wp.options
    assert fake_wp.active_plugins == set()
    assert fake_wp.active_theme == "twentytwentyfour"
    assert fake_wp.installed_themes == {"twentytwentyfour"}
    assert fake_wp.posts == []
    assert report.context.fact("deleted_tax_rates") == 3
    assert report.context.fact("deleted_shipping_methods") == 2


def test_enumerate_then_delete_on_empty_collection(fake_wp):
    fake_wp.active_plugins.add("woocommerce")

    report = Provisioner(fake_wp).teardown()

    assert report.state == RunState.COMPLETED
    assert _record(report, "delete tax rates").outcome == ActionOutcome.APPLIED
    assert report.context.fact("deleted_tax_rates") == 0
    assert fake_wp.find("wc", "tax", "delete") == []
    assert fake_wp.find("wc", "shipping_zone_method", "delete") == []


def test_teardown_on_bare_site_skips_woocommerce_steps(fake_wp):
    report = Provisioner(fake_wp).teardown()

    assert report.state == RunState.COMPLETED
    assert _record(report, "delete tax rates").outcome == ActionOutcome.SKIPPED
    assert _record(report, "remove pickup locations").outcome == ActionOutcome.SKIPPED
    assert _record(report, "activate twentytwentyfour").outcome == ActionOutcome.SKIPPED


def test_multisite_fails_before_any_command(make_wp):
    fake_wp = make_wp(multisite=True)
    assert is_multisite(fake_wp) is True
    fake_wp.commands.clear()

    provisioner = Provisioner(fake_wp)
    with pytest.raises(ConfigurationError, match="Multisite is not supported"):
        provisioner.setup(FeatureFlags(multisite=True))

    assert fake_wp.commands == []
    assert provisioner.state == RunState.NOT_STARTED


def test_invalid_blocks_release_fails_before_any_command(fake_wp):
    with pytest.raises(ConfigurationError, match="neither a version"):
        Provisioner(fake_wp).setup(FeatureFlags(blocks_version="latest"))
    assert fake_wp.commands == []


def test_stripe_with_empty_key_is_skipped_with_warning(fake_wp, events):
    flags = FeatureFlags(stripe=True, stripe_publishable_key="", stripe_secret_key="sk_x")

    report = Provisioner(fake_wp, log_fn=events.append).setup(flags)

    assert report.state == RunState.COMPLETED
    record = _record(report, "configure Stripe gateway")
    assert record.outcome == ActionOutcome.SKIPPED
    assert "woocommerce_stripe_settings" not in fake_wp.options
    assert not any(c.args[:1] == ("woocommerce_stripe_settings",) for c in fake_wp.commands)
    warnings = [e for e in events if e.kind == "warning"]
    assert [e.action for e in warnings] == ["configure Stripe gateway"]


def test_stripe_with_both_keys_writes_settings(fake_wp):
    flags = FeatureFlags(stripe=True, stripe_publishable_key="pk_test_1", stripe_secret_key="sk_test_1")

    Provisioner(fake_wp).setup(flags)

    assert "woocommerce-gateway-stripe" in fake_wp.active_plugins
    assert '"test_publishable_key": "pk_test_1"' in fake_wp.options["woocommerce_stripe_settings"]


def test_failure_in_pages_stops_the_run(fake_wp):
    fake_wp.fail_when = lambda cmd: (
        cmd.words == ("post", "create") and cmd.options.get("post_title") == "Cart"
    )
    provisioner = Provisioner(fake_wp)

    with pytest.raises(ExternalCommandError) as exc_info:
        provisioner.setup(FULL_FLAGS)

    err = exc_info.value
    assert err.phase == "pages"
    assert err.action == "create Cart page"
    assert "simulated failure" in str(err.cause)
    assert provisioner.state == RunState.FAILED
    assert provisioner.report.failed_phase == "pages"
    assert provisioner.report.failed_action == "create Cart page"
    assert "posts" not in provisioner.report.phases_run
    assert not any(c.options.get("post_type") == "post" for c in fake_wp.find("post", "create"))
    assert fake_wp.find("rewrite", "flush") == []


def test_progress_events_follow_the_plan(fake_wp, events):
    Provisioner(fake_wp, log_fn=events.append).setup(FeatureFlags())

    assert events[0].kind == "start"
    assert events[-1].kind == "completed"
    phases = [e.phase for e in events if e.kind == "phase"]
    assert phases == SETUP_PHASES


def test_sample_import_skipped_without_importer(fake_wp):
    flags = FeatureFlags()
    products = build_setup_plan(flags).phase("products")

    report = Provisioner(fake_wp).execute(Plan("setup", (products,)), RunContext(flags))

    assert _record(report, "import sample products").outcome == ActionOutcome.SKIPPED
    assert fake_wp.find("import") == []

    fake_wp.active_plugins.add("wordpress-importer")
    report = Provisioner(fake_wp).execute(Plan("setup", (products,)), RunContext(flags))

    assert _record(report, "import sample products").outcome == ActionOutcome.APPLIED
    assert len(fake_wp.find("import")) == 1


def test_privacy_page_shares_menu_order_with_my_account(fake_wp):
    Provisioner(fake_wp).setup(FeatureFlags())

    orders = {c.options["post_title"]: c.options.get("menu_order") for c in fake_wp.find("post", "create")}
    assert orders["Privacy"] == "3"
    assert orders["My Account"] == "3"
    assert orders["Terms"] == "4"


def test_teardown_deletes_tax_rates_past_one_page(fake_wp):
    fake_wp.active_plugins.add("woocommerce")
    fake_wp.tax_rates = [{"id": i, "class": "standard", "rate": "10"} for i in range(1, 151)]

    report = Provisioner(fake_wp).teardown()

    assert fake_wp.tax_rates == []
    assert report.context.fact("deleted_tax_rates") == 150
    assert len(fake_wp.find("wc", "tax", "list")) == 3


def test_delete_that_does_not_stick_raises():
    runner = MagicMock()
    runner.run.return_value = CommandResult("wp wc tax list", '[{"id": 7}]', "", 0, data=[{"id": 7}])
    effect = delete_each(wp.tax_list(), wp.tax_delete, "id", "deleted_tax_rates")

    with pytest.raises(CommandError, match="7 is still listed"):
        effect(runner, RunContext(FeatureFlags()))
