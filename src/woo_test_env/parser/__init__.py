"""Parser package - Converts raw wp-cli output into Python data.

Parsers do NOT run commands - they structure data handed over by connectors.
"""

from woo_test_env.parser.wpcli_output import extract_json_blob, parse_output, strip_noise

__all__ = ["extract_json_blob", "parse_output", "strip_noise"]
