"""Actions package - Action layer with explicit contracts.

Each action declares:
- read_only: Whether it modifies WordPress
- requires_backup: Whether backup is mandatory
- rollback_support: Whether it can undo changes
- prerequisites: What must hold before the action runs
"""

from woo_test_env.actions.provision import ActionContract, SetupAction, TeardownAction

__all__ = ["ActionContract", "SetupAction", "TeardownAction"]
