"""
Link commands for notelink.

- `notelink reconcile` - Sync an entity's links with its note content
- `notelink links` - Show outgoing links and backlinks for an entity
"""

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..database import DatabaseConnection, SQLiteLinkStore, build_reconciler
from ..exceptions import NotelinkError
from ..utils.output import console, print_json
from ._helpers import fail, open_database, read_content

app = typer.Typer(help="Reconcile and inspect mention links")


@app.command("reconcile")
def reconcile(
    entity_id: str = typer.Argument(..., help="Entity whose note content is being saved"),
    content: Optional[str] = typer.Argument(None, help="Note content, or - for stdin"),
    file: Optional[Path] = typer.Option(None, "--file", "-f", help="Read content from a file"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Make the entity's outgoing links match the @mentions in its note.

    Unknown titles become new entities next to the source. Links for
    mentions no longer in the text are removed.

    Examples:
        notelink reconcile 3f2a... "Travelled with @Gandalf to @[The Shire]"
        cat note.md | notelink reconcile 3f2a... -
    """
    text = read_content(content, file)
    try:
        reconciler = build_reconciler(DatabaseConnection())
        results = reconciler.reconcile(entity_id, text)
    except NotelinkError as e:
        fail(e)

    stats = reconciler.last_stats

    if json_output:
        print_json(
            {
                "results": [
                    {"target_entity_id": r.target_entity_id, "title": r.title, "created": r.created}
                    for r in results
                ],
                "stale_removed": stats.stale_removed,
            }
        )
        return

    if results:
        table = Table(title="Mentioned")
        table.add_column("Target", style="dim", no_wrap=True)
        table.add_column("Title")
        table.add_column("New", justify="center")
        for result in results:
            table.add_row(
                result.target_entity_id,
                escape(result.title),
                "[green]yes[/green]" if result.created else "",
            )
        console.print(table)
    else:
        console.print("[yellow]No mentions resolved[/yellow]")

    console.print(
        f"{stats.links_written} link(s) written, {stats.stale_removed} stale removed, "
        f"{stats.stubs_created} new entit{'y' if stats.stubs_created == 1 else 'ies'}",
        highlight=False,
    )


@app.command("links")
def links(
    entity_id: str = typer.Argument(..., help="Entity ID"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Show outgoing links and backlinks for an entity, with snippets."""
    details = SQLiteLinkStore(open_database()).get_link_details(entity_id)

    if json_output:
        print_json(details)
        return

    if not details:
        console.print(f"[yellow]No links for {escape(entity_id)}[/yellow]")
        return

    table = Table(title="Links")
    table.add_column("Direction")
    table.add_column("Entity")
    table.add_column("Snippet")
    for detail in details:
        if detail["source_entity_id"] == entity_id:
            direction, other = "→", detail["target_title"]
        else:
            direction, other = "←", detail["source_title"]
        table.add_row(direction, escape(other), escape(detail["snippet"] or ""))
    console.print(table)
