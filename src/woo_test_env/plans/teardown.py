"""Teardown plan - return the site to a bare WordPress install.

Not derived from the setup plan: content has no per-item delete here,
the final site reset removes it wholesale. WooCommerce data that lives
outside posts (tax rates, shipping methods) is removed while the wc
command is still registered, i.e. before plugins are uninstalled.
"""

from woo_test_env.model import command as wp
from woo_test_env.model.flags import FeatureFlags
from woo_test_env.model.plan import Action, Phase, Plan
from woo_test_env.plans.setup import PICKUP_LOCATIONS_OPTION, PICKUP_SETTINGS_OPTION, SHIPPING_ZONE
from woo_test_env.plans.steps import (
    delete_each,
    run,
    skip_if_theme_active,
    skip_unless_option_exists,
    skip_unless_plugin_active,
)

NEEDS_WOOCOMMERCE = skip_unless_plugin_active("woocommerce")


def build_teardown_plan(flags: FeatureFlags | None = None) -> Plan:
    flags = flags or FeatureFlags()
    return Plan(
        "teardown",
        (
            Phase(
                "tax",
                (
                    Action(
                        "delete tax rates",
                        delete_each(wp.tax_list(), wp.tax_delete, "id", "deleted_tax_rates"),
                        NEEDS_WOOCOMMERCE,
                    ),
                ),
            ),
            Phase(
                "shipping",
                (
                    Action(
                        "delete shipping zone methods",
                        delete_each(
                            wp.shipping_zone_method_list(SHIPPING_ZONE),
                            lambda instance_id: wp.shipping_zone_method_delete(SHIPPING_ZONE, instance_id),
                            "instance_id",
                            "deleted_shipping_methods",
                        ),
                        NEEDS_WOOCOMMERCE,
                    ),
                    Action(
                        "remove local pickup settings",
                        run(wp.option_delete(PICKUP_SETTINGS_OPTION)),
                        skip_unless_option_exists(PICKUP_SETTINGS_OPTION),
                    ),
                    Action(
                        "remove pickup locations",
                        run(wp.option_delete(PICKUP_LOCATIONS_OPTION)),
                        skip_unless_option_exists(PICKUP_LOCATIONS_OPTION),
                    ),
                ),
            ),
            Phase(
                "plugins",
                (Action("deactivate and uninstall all plugins", run(wp.plugin_deactivate_all())),),
            ),
            Phase(
                "themes",
                (
                    Action(
                        f"activate {flags.default_theme}",
                        run(wp.theme_install(flags.default_theme)),
                        skip_if_theme_active(flags.default_theme),
                    ),
                    Action("delete other themes", run(wp.theme_delete_all())),
                ),
            ),
            Phase("reset-site", (Action("empty site", run(wp.site_empty())),)),
        ),
    )
