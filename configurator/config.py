"""Runtime configuration defaults for the configurator app."""

from __future__ import annotations

import os

from configurator.constant import ADDITIVE_CATEGORY, BASE_CATEGORY, FILLING_CATEGORY

DEFAULT_SIZE = "small"
DEFAULT_FILLING = "сыр"

# Upper bound for a single additive target entered in the UI.
MAX_ADDITIVE_QUANTITY = 99

RENDER_CATEGORY_ORDER: tuple[str, ...] = (BASE_CATEGORY, FILLING_CATEGORY, ADDITIVE_CATEGORY)

DEBUG_LOG_PATH = "/tmp/burger-configurator-debug.log"
_DEBUG_LOG_ENV = "BURGER_DEBUG_LOG_PATH"


def resolve_debug_log_path() -> str:
    """Debug log path, overridable through BURGER_DEBUG_LOG_PATH."""
    env_override = os.environ.get(_DEBUG_LOG_ENV, "").strip()
    return env_override or DEBUG_LOG_PATH
