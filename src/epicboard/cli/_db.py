"""Database inspection CLI commands."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from epicboard.core.constants import ExitCode

console = Console()


def _resolve_db_path(db_path: str) -> Path:
    if db_path:
        return Path(db_path).expanduser()

    from epicboard.core.config import load_config
    from epicboard.core.exceptions import ConfigError

    try:
        return load_config().db_path
    except ConfigError as exc:
        console.print(f"[red]Config error:[/red] {escape(str(exc))}")
        sys.exit(ExitCode.CONFIG_ERROR)


@click.group("db")
def db_group() -> None:
    """Database inspection."""


@db_group.command("info")
@click.option("--db", "db_path", default="", help="Path to the database file")
@click.option("--json", "as_json", is_flag=True, default=False)
def db_info(db_path: str, as_json: bool) -> None:
    """Show database path, size, last id, and record counts."""
    from epicboard.core.exceptions import StorageError
    from epicboard.core.store import JSONFileStorage

    path = _resolve_db_path(db_path)

    if not path.exists():
        if as_json:
            click.echo(json.dumps({"exists": False, "path": str(path)}))
        else:
            console.print(f"Database does not exist yet: {path}")
            console.print("It will be created on the first [cyan]epicboard run[/cyan].")
        return

    try:
        state = JSONFileStorage(path).read()
    except StorageError as exc:
        console.print(f"[red]Cannot read database:[/red] {escape(str(exc))}")
        sys.exit(ExitCode.STORAGE_ERROR)

    referenced = {sid for epic in state.epics.values() for sid in epic.story_ids}
    orphans = sorted(set(state.stories) - referenced)
    dangling = sorted(referenced - set(state.stories))
    size_kb = path.stat().st_size / 1024

    if as_json:
        click.echo(
            json.dumps(
                {
                    "exists": True,
                    "path": str(path),
                    "size_kb": round(size_kb, 1),
                    "last_item_id": state.last_item_id,
                    "epics": len(state.epics),
                    "stories": len(state.stories),
                    "orphan_stories": orphans,
                    "dangling_story_ids": dangling,
                },
                indent=2,
            )
        )
        return

    console.print(f"[bold]Database[/bold]: {path}")
    console.print(f"Size: {size_kb:.1f} KB")
    console.print(f"Last item id: {state.last_item_id}")
    console.print(f"  {'epics':<16} {len(state.epics)}")
    console.print(f"  {'stories':<16} {len(state.stories)}")
    if orphans:
        console.print(f"[yellow]Stories not owned by any epic:[/yellow] {orphans}")
    if dangling:
        console.print(f"[yellow]Epic story ids with no story:[/yellow] {dangling}")
