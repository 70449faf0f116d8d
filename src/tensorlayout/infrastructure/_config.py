"""
Environment-driven configuration.

Settings are read from ``os.environ`` at call time, so tests and host
applications can toggle them without reloading the package.

Variables
---------
TENSORLAYOUT_DEBUG
    Opt-in strict mode (default OFF). When enabled, `convert` validates
    int32 input for NaN before truncating it. Any value other than ``0``,
    the empty string, or a spelling of ``false`` enables it.
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

DEBUG_ENV_VAR = "TENSORLAYOUT_DEBUG"

_FALSY = ("0", "", "false", "False", "FALSE")


def is_debug_mode() -> bool:
    """Return True if strict (debug) conversion checks are enabled."""
    enabled = os.environ.get(DEBUG_ENV_VAR, "0") not in _FALSY
    logger.debug("%s resolved to debug_mode=%s", DEBUG_ENV_VAR, enabled)
    return enabled
