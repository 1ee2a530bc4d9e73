"""
Log file setup.

The terminal belongs to the interactive UI, so log records go to
``~/.epicboard/epicboard.log`` rather than stderr. ``logging.format`` in the
config selects plain text or one JSON object per line.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from pathlib import Path

from epicboard.core.config import EpicboardConfig

_TEXT_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"
_HANDLER_NAME = "epicboard-file"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "ts": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exc"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(config: EpicboardConfig, log_path: Path | None = None) -> Path:
    """
    Attach a file handler to the ``epicboard`` logger. Safe to call twice;
    the previous handler is replaced.

    Returns:
        The log file path in use.
    """
    path = log_path or config.log_path
    path.parent.mkdir(mode=0o700, parents=True, exist_ok=True)

    root = logging.getLogger("epicboard")
    for handler in list(root.handlers):
        if handler.get_name() == _HANDLER_NAME:
            root.removeHandler(handler)
            handler.close()

    handler = logging.FileHandler(path, encoding="utf-8")
    handler.set_name(_HANDLER_NAME)
    if config.logging.format == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(_TEXT_FORMAT))

    root.addHandler(handler)
    root.setLevel(config.logging.level)
    return path
