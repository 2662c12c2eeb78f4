"""
Mention inspection commands for notelink.

Both commands are pure: they never touch the database.
- `notelink parse` - Show the @mentions found in some text
- `notelink snippet` - Show the context snippet for a span of text
"""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..config.settings import get_snippet_words
from ..exceptions import NotelinkError
from ..services.mention_parser import parse_mentions, parse_mentions_with_positions
from ..services.snippet import extract_snippet
from ..utils.output import console, print_json
from ._helpers import fail, read_content

app = typer.Typer(help="Inspect @mentions without touching the database")


@app.command("parse")
def parse(
    content: Optional[str] = typer.Argument(None, help="Text to scan, or - for stdin"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read text from a file"),
    all_occurrences: bool = typer.Option(
        False, "--all", "-a", help="Show every occurrence, not just the first of each"
    ),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show the @mentions found in text.

    Examples:
        notelink parse "Met @[Gandalf the Grey] near @Bree"
        notelink parse --all --file session-3.md
    """
    text = read_content(content, file)

    if all_occurrences:
        rows = [
            {"kind": m.kind.value, "value": m.value, "start": m.start_index, "end": m.end_index}
            for m in parse_mentions_with_positions(text)
        ]
    else:
        rows = [{"kind": m.kind.value, "value": m.value} for m in parse_mentions(text)]

    if json_output:
        print_json(rows)
        return

    if not rows:
        console.print("[yellow]No mentions found[/yellow]")
        return

    table = Table(title="Mentions")
    table.add_column("Kind")
    table.add_column("Value")
    if all_occurrences:
        table.add_column("Span", justify="right")
    for row in rows:
        cells = [row["kind"], escape(row["value"])]
        if all_occurrences:
            cells.append(f"{row['start']}-{row['end']}")
        table.add_row(*cells)
    console.print(table)


@app.command("snippet")
def snippet(
    content: str = typer.Argument(..., help="Text containing the span"),
    start: int = typer.Argument(..., help="Start offset of the span"),
    end: int = typer.Argument(..., help="End offset of the span (exclusive)"),
    words: Optional[int] = typer.Option(
        None, "--words", "-w", help="Words of context on each side"
    ),
):
    """Print the context snippet for a span of text."""
    if words is not None:
        words_around = words
    else:
        try:
            words_around = get_snippet_words()
        except NotelinkError as e:
            fail(e)
    print(extract_snippet(content, start, end, words_around))
