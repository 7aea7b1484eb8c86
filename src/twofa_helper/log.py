"""Stderr logger for the command-line shell.

Stdout carries the codes and URIs that scripts read, so logging goes to stderr.
"""

import logging
import sys

_handler = logging.StreamHandler(sys.stderr)
_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))

logger = logging.getLogger("twofa_helper")
logger.addHandler(_handler)
logger.setLevel(logging.WARNING)


def set_verbose(verbose: bool) -> None:
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
