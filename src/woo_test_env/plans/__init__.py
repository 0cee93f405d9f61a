"""Plans package - the ordered setup and teardown sequences."""

from woo_test_env.plans.setup import build_setup_plan
from woo_test_env.plans.teardown import build_teardown_plan

__all__ = ["build_setup_plan", "build_teardown_plan"]
