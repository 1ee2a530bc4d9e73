"""
Epicboard CLI entry point.

Commands:
  epicboard                 — same as `epicboard run`
  epicboard run             — open the interactive tracker
  epicboard db info         — database path, size, and record counts
  epicboard config show     — effective configuration
  epicboard config init     — write a default config file
  epicboard config path     — print the config file location
  epicboard version         — show version information
"""

from __future__ import annotations

import click
from rich.console import Console

from epicboard import __version__
from epicboard.cli._config_cmd import config_group
from epicboard.cli._db import db_group

console = Console()


# ---------------------------------------------------------------------------
# Root group
# ---------------------------------------------------------------------------


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
)
@click.version_option(__version__, "--version", "-V", message="epicboard %(version)s")
@click.pass_context
def cli(ctx: click.Context) -> None:
    """Epicboard — a terminal tracker for epics and stories."""
    if ctx.invoked_subcommand is None:
        ctx.invoke(run)


# ---------------------------------------------------------------------------
# run
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--db", "db_path", default="", help="Path to the database file")
@click.option("--config", "config_path", default="", help="Path to a config.toml")
def run(db_path: str, config_path: str) -> None:
    """Open the interactive tracker."""
    from epicboard.cli._run import cmd_run

    cmd_run(db_path=db_path, config_path=config_path, console=console)


cli.add_command(db_group)
cli.add_command(config_group)


# ---------------------------------------------------------------------------
# version
# ---------------------------------------------------------------------------


@cli.command()
@click.option("--json", "as_json", is_flag=True, default=False)
def version(as_json: bool) -> None:
    """Show version information."""
    import platform
    import sys as _sys

    if as_json:
        import json

        click.echo(
            json.dumps(
                {
                    "epicboard": __version__,
                    "python": _sys.version.split()[0],
                    "platform": _sys.platform,
                    "arch": platform.machine(),
                },
                indent=2,
            )
        )
    else:
        console.print(f"epicboard {__version__}")
        console.print(f"Python {_sys.version.split()[0]}")
        console.print(f"Platform: {_sys.platform} {platform.machine()}")


# ---------------------------------------------------------------------------
# Entry point
# ---------------------------------------------------------------------------


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
