"""Engine package - plan execution."""

from woo_test_env.engine.provisioner import ProgressEvent, Provisioner, is_multisite

__all__ = ["ProgressEvent", "Provisioner", "is_multisite"]
