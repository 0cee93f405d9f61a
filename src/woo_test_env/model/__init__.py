"""Model package - Core data structures for woo-test-env."""

from woo_test_env.model.command import WPCommand
from woo_test_env.model.flags import FeatureFlags
from woo_test_env.model.plan import (
    Action,
    ActionOutcome,
    ActionRecord,
    Phase,
    Plan,
    RunContext,
    RunReport,
    RunState,
    Skip,
)

__all__ = [
    "Action",
    "ActionOutcome",
    "ActionRecord",
    "FeatureFlags",
    "Phase",
    "Plan",
    "RunContext",
    "RunReport",
    "RunState",
    "Skip",
    "WPCommand",
]
