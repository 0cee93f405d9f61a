"""woo-test-env: provision and tear down a WooCommerce Blocks test site through wp-cli."""

import logging

__version__ = "0.1.0"

# Progress goes through reporters; log records only show up with --verbose.
logging.getLogger(__name__).addHandler(logging.NullHandler())
