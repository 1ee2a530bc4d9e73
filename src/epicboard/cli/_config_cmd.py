"""CLI commands: epicboard config show | init | path."""

from __future__ import annotations

import json
import sys

import click
from rich.console import Console
from rich.markup import escape

from epicboard.core.constants import ExitCode

console = Console()


@click.group("config")
def config_group() -> None:
    """View and create the Epicboard configuration."""


@config_group.command("show")
@click.option("--json", "as_json", is_flag=True, default=False, help="Output as JSON")
def config_show(as_json: bool) -> None:
    """Display the effective configuration (file + env + defaults)."""
    from epicboard.core.config import load_config
    from epicboard.core.exceptions import ConfigError

    try:
        cfg = load_config()
    except ConfigError as exc:
        console.print(f"[red]Config error:[/red] {escape(str(exc))}")
        sys.exit(ExitCode.CONFIG_ERROR)

    data = cfg.model_dump()
    data["_config_path"] = str(cfg.config_path)
    data["_db_path"] = str(cfg.db_path)

    if as_json:
        click.echo(json.dumps(data, indent=2))
    else:
        _print_config_rich(data, console)


@config_group.command("init")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file")
def config_init(force: bool) -> None:
    """Write a config file populated with the defaults."""
    from epicboard.core.config import _config_file_path, default_config_data, save_config
    from epicboard.core.exceptions import ConfigError

    cfg_path = _config_file_path()
    if cfg_path.exists() and not force:
        console.print(f"[yellow]Config already exists:[/yellow] {cfg_path}")
        console.print("Use [cyan]--force[/cyan] to overwrite.")
        sys.exit(ExitCode.ERROR)

    try:
        save_config(default_config_data(), cfg_path)
    except ConfigError as exc:
        console.print(f"[red]Failed to save config:[/red] {escape(str(exc))}")
        sys.exit(ExitCode.CONFIG_ERROR)
    console.print(f"[green]Config saved:[/green] {cfg_path}")


@config_group.command("path")
def config_path() -> None:
    """Print the config file location."""
    from epicboard.core.config import _config_file_path

    click.echo(str(_config_file_path()))


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _print_config_rich(data, console):
    """Print config dict in a human-friendly format."""
    path = data.pop("_config_path", "unknown")
    db_path = data.pop("_db_path", "unknown")
    console.print(f"[bold]Epicboard Configuration[/bold]  ({path})\n")

    for section, values in data.items():
        if isinstance(values, dict):
            console.print(f"  [cyan]\\[{section}][/cyan]")
            for k, v in values.items():
                console.print(f"    {k} = {v!r}")
        else:
            console.print(f"  {section} = {values!r}")
    console.print(f"\n  database file: {db_path}")
    console.print()
