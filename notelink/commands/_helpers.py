"""Helpers shared by the CLI command modules."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import NoReturn

import typer
from rich.markup import escape

from ..database import DatabaseConnection
from ..exceptions import NotelinkError
from ..utils.output import console


def open_database() -> DatabaseConnection:
    """Open the configured database with an up-to-date schema."""
    try:
        db = DatabaseConnection()
        db.ensure_schema()
    except NotelinkError as e:
        fail(e)
    return db


def fail(error: Exception | str) -> NoReturn:
    """Print an error and exit with status 1."""
    console.print(f"[red]Error: {escape(str(error))}[/red]", highlight=False)
    raise typer.Exit(1)


def read_content(content: str | None, file: Path | None) -> str:
    """Note content from an argument, a file, or stdin when given ``-``."""
    if file is not None:
        return file.read_text(encoding="utf-8")
    if content is None or content == "-":
        return sys.stdin.read()
    return content
