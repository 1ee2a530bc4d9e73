"""Epicboard constants: filesystem layout, exit codes, and limits."""

from __future__ import annotations

from enum import IntEnum

# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------


class ExitCode(IntEnum):
    SUCCESS = 0
    ERROR = 1
    CONFIG_ERROR = 2
    STORAGE_ERROR = 3


# ---------------------------------------------------------------------------
# Filesystem layout
# ---------------------------------------------------------------------------

EPICBOARD_DIR_NAME = ".epicboard"
CONFIG_FILENAME = "config.toml"
DB_FILENAME = "db.json"
LOG_FILENAME = "epicboard.log"

# ---------------------------------------------------------------------------
# Limits
# ---------------------------------------------------------------------------

MAX_NAME_LENGTH = 55  # names at or above this length are rejected by prompts
MAX_DESCRIPTION_LENGTH = 75  # wrap width for descriptions in tables
