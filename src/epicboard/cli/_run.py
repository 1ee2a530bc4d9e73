"""epicboard run — the interactive tracker."""

from __future__ import annotations

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from epicboard.core.constants import ExitCode
from epicboard.core.exceptions import ConfigError, StorageError


def cmd_run(db_path: str, config_path: str, console: Console) -> None:
    from epicboard.core.config import load_config
    from epicboard.core.logging import configure_logging
    from epicboard.core.store import JSONFileStorage, TrackerDatabase
    from epicboard.ui.app import TrackerApp

    try:
        config = load_config(Path(config_path) if config_path else None)
    except ConfigError as exc:
        console.print(f"[red]Config error:[/red] {escape(str(exc))}")
        sys.exit(ExitCode.CONFIG_ERROR)

    configure_logging(config)

    storage = JSONFileStorage(Path(db_path).expanduser() if db_path else config.db_path)
    try:
        storage.ensure_initialized()
    except StorageError as exc:
        console.print(f"[red]Failed to load database:[/red] {escape(str(exc))}")
        sys.exit(ExitCode.STORAGE_ERROR)

    TrackerApp(TrackerDatabase(storage), config, console).run()
