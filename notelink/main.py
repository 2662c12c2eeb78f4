#!/usr/bin/env python3
"""
Main CLI entry point for notelink
"""

import os
from pathlib import Path
from typing import Optional

import typer

from notelink import __version__
from notelink.commands import entities, links, mentions
from notelink.commands._helpers import fail
from notelink.config.settings import get_log_level, validate_all_env_vars
from notelink.exceptions import ConfigurationError
from notelink.utils.logging import configure_logging

app = typer.Typer(
    name="notelink",
    help="Resolve @mentions in notes and keep the link graph in sync",
    no_args_is_help=True,
)

app.add_typer(entities.app, name="entity")

# parse/snippet/reconcile/links are flat top-level commands
for _module_app in (mentions.app, links.app):
    for _cmd in _module_app.registered_commands:
        app.registered_commands.append(_cmd)


@app.command()
def version():
    """Show notelink version"""
    typer.echo(f"notelink version {__version__}")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="Only log errors"),
    db: Optional[Path] = typer.Option(
        None, "--db", envvar="NOTELINK_DB", help="Path to the SQLite database"
    ),
):
    """
    notelink - @mention resolution for canvas notes

    [bold]Examples:[/bold]

    Create two entities:
        [cyan]notelink entity add Frodo --scope shire-campaign[/cyan]
        [cyan]notelink entity add Gandalf --scope shire-campaign[/cyan]

    Save Frodo's note and link its mentions:
        [cyan]notelink reconcile <frodo-id> "I met @Gandalf today"[/cyan]

    See what links to Gandalf:
        [cyan]notelink links <gandalf-id>[/cyan]
    """
    if verbose and quiet:
        typer.echo("Error: --verbose and --quiet are mutually exclusive", err=True)
        raise typer.Exit(1)

    if db is not None:
        os.environ["NOTELINK_DB"] = str(db)

    errors = validate_all_env_vars()
    if errors:
        fail(ConfigurationError("; ".join(errors)))

    if verbose:
        level = "DEBUG"
    elif quiet:
        level = "ERROR"
    else:
        level = get_log_level()
    configure_logging(level)


def run():
    """Console-script entry point."""
    app()


if __name__ == "__main__":
    run()
