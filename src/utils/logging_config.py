"""Logging setup - all log records go to stderr so stdout stays clean for findings and MCP."""

import logging
import sys


def setup_logging(verbose: bool = False):
    """Setup logging to stderr. ERROR level by default (diagnostics only), INFO when verbose."""
    level = logging.INFO if verbose else logging.ERROR
    logging.basicConfig(level=level, format="%(message)s", stream=sys.stderr, force=True)
