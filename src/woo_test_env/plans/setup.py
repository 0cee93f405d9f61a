"""Setup plan - everything a WooCommerce Blocks test site needs.

Phase order matters: pages need WooCommerce active, page options need the
pages, tax and shipping need the wc command that WooCommerce registers.
"""

from woo_test_env.connector.wpcli import CommandRunner
from woo_test_env.model import command as wp
from woo_test_env.model.flags import FeatureFlags
from woo_test_env.model.plan import Action, Phase, Plan, Precondition, RunContext, Skip
from woo_test_env.plans import content
from woo_test_env.plans.steps import (
    BLOCKS_ACTIVE,
    all_of,
    create_page,
    detect_plugin,
    query,
    run,
    set_page_option,
    skip_if_option_exists,
    skip_if_plugin_active,
    skip_if_post_exists,
    skip_if_theme_active,
    skip_unless_fact,
    skip_unless_plugin_active,
)

BLOCKS_SLUG = "woo-gutenberg-products-block"
STRIPE_SLUG = "woocommerce-gateway-stripe"
IMPORTER_SLUG = "wordpress-importer"
SAMPLE_PRODUCTS = "wp-content/plugins/woocommerce/sample-data/sample_products.xml"
SHIPPING_ZONE = 0  # "Locations not covered by your other zones"

PAYMENT_SETTINGS = {
    "woocommerce_cod_settings": {
        "enabled": "yes",
        "title": "Cash on delivery",
        "description": "Cash on delivery description",
        "instructions": "Cash on delivery instructions",
    },
    "woocommerce_bacs_settings": {
        "enabled": "yes",
        "title": "Direct bank transfer",
        "description": "Direct bank transfer description",
        "instructions": "Direct bank transfer instructions",
    },
    "woocommerce_cheque_settings": {
        "enabled": "yes",
        "title": "Check payments",
        "description": "Check payments description",
        "instructions": "Check payments instructions",
    },
}

PICKUP_SETTINGS_OPTION = "woocommerce_pickup_location_settings"
PICKUP_LOCATIONS_OPTION = "pickup_location_pickup_locations"
PICKUP_SETTINGS = {"enabled": "yes", "title": "Local Pickup", "tax_status": "taxable", "cost": ""}
PICKUP_LOCATIONS = [
    {
        "name": "Automattic, Inc.",
        "address": {
            "address_1": "60 29th Street Suite 343",
            "city": "San Francisco",
            "state": "CA",
            "postcode": "94110",
            "country": "US",
        },
        "details": "",
        "enabled": True,
    }
]

# (class slug, rate)
TAX_RATES = (("standard", "10"), ("reduced-rate", "5"), ("zero-rate", "0"))
COUPON_CODE = "coupon"

NEEDS_BLOCKS = skip_unless_fact(BLOCKS_ACTIVE, "WooCommerce Blocks is not active")


def _skip_if_shipping_method(method_id: str) -> Precondition:
    def check(runner: CommandRunner, ctx: RunContext) -> Skip | None:
        for row in query(runner, wp.shipping_zone_method_list(SHIPPING_ZONE)):
            if isinstance(row, dict) and row.get("method_id") == method_id:
                return Skip(f"{method_id} already on zone {SHIPPING_ZONE}")
        return None

    return check


def _skip_if_tax_rate(tax_class: str) -> Precondition:
    def check(runner: CommandRunner, ctx: RunContext) -> Skip | None:
        for row in query(runner, wp.tax_list()):
            if isinstance(row, dict) and row.get("class") == tax_class:
                return Skip(f"{tax_class} tax rate already exists")
        return None

    return check


def _skip_if_coupon(code: str) -> Precondition:
    def check(runner: CommandRunner, ctx: RunContext) -> Skip | None:
        for row in query(runner, wp.coupon_list(code)):
            if isinstance(row, dict) and str(row.get("code", "")).lower() == code.lower():
                return Skip(f"coupon '{code}' already exists")
        return None

    return check


def _stripe_keys(runner: CommandRunner, ctx: RunContext) -> Skip | None:
    if not ctx.flags.stripe_keys_present:
        return Skip("Stripe publishable or secret key is empty, gateway left unconfigured", warn=True)
    return None


def _configure_stripe(runner: CommandRunner, ctx: RunContext) -> None:
    flags = ctx.flags
    runner.run(
        wp.option_update_json(
            "woocommerce_stripe_settings",
            {
                "enabled": "yes",
                "title": "Credit Card (Stripe)",
                "testmode": "yes",
                "test_publishable_key": flags.stripe_publishable_key.strip(),
                "test_secret_key": flags.stripe_secret_key.strip(),
            },
        )
    )


def _install_plugin(label: str, source: str, slug: str) -> Action:
    return Action(label, run(wp.plugin_install(source)), skip_if_plugin_active(slug))


def plugins_phase(flags: FeatureFlags) -> Phase:
    actions = []
    blocks_source = flags.blocks_source()
    if blocks_source:
        actions.append(
            _install_plugin(f"install WooCommerce Blocks {flags.blocks_version}", blocks_source, BLOCKS_SLUG)
        )
    if flags.gutenberg:
        actions.append(_install_plugin("install Gutenberg", "gutenberg", "gutenberg"))
    actions.append(_install_plugin("install WooCommerce", "woocommerce", "woocommerce"))
    actions.append(_install_plugin("install WordPress Importer", IMPORTER_SLUG, IMPORTER_SLUG))
    if flags.stripe:
        actions.append(_install_plugin("install Stripe gateway", STRIPE_SLUG, STRIPE_SLUG))
    actions.append(Action("detect WooCommerce Blocks", detect_plugin(BLOCKS_SLUG, BLOCKS_ACTIVE)))
    return Phase("plugins", tuple(actions))


def themes_phase(flags: FeatureFlags) -> Phase:
    if not flags.theme:
        return Phase("themes", ())
    return Phase(
        "themes",
        (Action(f"install theme {flags.theme}", run(wp.theme_install(flags.theme)), skip_if_theme_active(flags.theme)),),
    )


def pages_phase() -> Phase:
    def page(title: str, **kwargs) -> Action:
        return Action(f"create {title} page", create_page(title, **kwargs), skip_if_post_exists(title))

    return Phase(
        "pages",
        (
            page("Shop", content=content.SHOP_PAGE, menu_order=0),
            page("Classic Shop", parent_title="Shop"),
            Action("set shop page", set_page_option("woocommerce_shop_page_id", "Classic Shop")),
            Action(
                "create Cart page",
                create_page("Cart", content=content.CART_PAGE, menu_order=1),
                all_of(NEEDS_BLOCKS, skip_if_post_exists("Cart")),
            ),
            Action("set cart page", set_page_option("woocommerce_cart_page_id", "Cart"), NEEDS_BLOCKS),
            Action(
                "create Checkout page",
                create_page("Checkout", content=content.CHECKOUT_PAGE, menu_order=2),
                all_of(NEEDS_BLOCKS, skip_if_post_exists("Checkout")),
            ),
            Action("set checkout page", set_page_option("woocommerce_checkout_page_id", "Checkout"), NEEDS_BLOCKS),
            page("Classic Cart", content=content.CLASSIC_CART_PAGE, parent_title="Cart"),
            page("Classic Checkout", content=content.CLASSIC_CHECKOUT_PAGE, parent_title="Checkout"),
            page("My Account", content=content.MY_ACCOUNT_PAGE, menu_order=3),
            Action("set my account page", set_page_option("woocommerce_myaccount_page_id", "My Account")),
            page("Terms", menu_order=4),
            Action("set terms page", set_page_option("woocommerce_terms_page_id", "Terms")),
            page("Privacy", menu_order=3),
            Action("set privacy page", set_page_option("wp_page_for_privacy_policy", "Privacy")),
        ),
    )


def posts_phase() -> Phase:
    return Phase(
        "posts",
        tuple(
            Action(
                f"create {title} post",
                run(wp.post_create(title, post_type="post", content=markup)),
                skip_if_post_exists(title, post_type="post"),
            )
            for title, markup in content.BLOCK_POSTS
        ),
    )


def shipping_phase() -> Phase:
    return Phase(
        "shipping",
        (
            Action(
                "add flat rate shipping",
                run(
                    wp.shipping_zone_method_create(
                        SHIPPING_ZONE, "flat_rate", 1, {"title": "Flat rate shipping", "cost": "10"}
                    )
                ),
                _skip_if_shipping_method("flat_rate"),
            ),
            Action(
                "add free shipping",
                run(wp.shipping_zone_method_create(SHIPPING_ZONE, "free_shipping", 2, {"title": "Free shipping"})),
                _skip_if_shipping_method("free_shipping"),
            ),
            Action(
                "enable local pickup",
                run(wp.option_update_json(PICKUP_SETTINGS_OPTION, PICKUP_SETTINGS)),
                skip_if_option_exists(PICKUP_SETTINGS_OPTION),
            ),
            Action(
                "add pickup location",
                run(wp.option_update_json(PICKUP_LOCATIONS_OPTION, PICKUP_LOCATIONS)),
                skip_if_option_exists(PICKUP_LOCATIONS_OPTION),
            ),
        ),
    )


def payments_phase(flags: FeatureFlags) -> Phase:
    actions = [
        Action(f"configure {settings['title']}", run(wp.option_update_json(option, settings)))
        for option, settings in PAYMENT_SETTINGS.items()
    ]
    if flags.stripe:
        actions.append(Action("configure Stripe gateway", _configure_stripe, _stripe_keys))
    return Phase("payments", tuple(actions))


def tax_phase() -> Phase:
    actions = [Action("enable taxes", run(wp.option_update("woocommerce_calc_taxes", "yes")))]
    for tax_class, rate in TAX_RATES:
        actions.append(
            Action(f"add {tax_class} tax rate", run(wp.tax_create(rate, tax_class)), _skip_if_tax_rate(tax_class))
        )
    return Phase("tax", tuple(actions))


def build_setup_plan(flags: FeatureFlags) -> Plan:
    """Build the full setup plan.

    Raises:
        ConfigurationError: flags cannot be turned into a plan.
    """
    return Plan(
        "setup",
        (
            plugins_phase(flags),
            themes_phase(flags),
            Phase("reset-site", (Action("empty site", run(wp.site_empty())),)),
            Phase(
                "products",
                (
                    Action(
                        "import sample products",
                        run(wp.import_file(SAMPLE_PRODUCTS)),
                        skip_unless_plugin_active(IMPORTER_SLUG),
                    ),
                ),
            ),
            pages_phase(),
            posts_phase(),
            Phase(
                "sidebar",
                (
                    Action("reset widgets", run(wp.widget_reset_all())),
                    Action(
                        "add latest posts widget",
                        run(wp.widget_add_block("sidebar-1", content.LATEST_POSTS_WIDGET)),
                    ),
                ),
            ),
            shipping_phase(),
            payments_phase(flags),
            tax_phase(),
            Phase(
                "coupons",
                (
                    Action(
                        f"create coupon '{COUPON_CODE}'",
                        run(wp.coupon_create(COUPON_CODE, "10", "percent")),
                        _skip_if_coupon(COUPON_CODE),
                    ),
                ),
            ),
            # reviews are not seeded; the action reports not_implemented
            Phase("reviews", (Action("add product reviews", None),)),
            Phase(
                "permalinks",
                (
                    Action("set permalink structure", run(wp.rewrite_structure("/%postname%/"))),
                    Action("flush rewrite rules", run(wp.rewrite_flush())),
                ),
            ),
        ),
    )
