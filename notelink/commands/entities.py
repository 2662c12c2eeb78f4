"""
Entity management commands for notelink.

Stand-ins for the canvas CRUD layer so mentions have something to resolve
against:
- `notelink entity add` - Create an entity in a scope
- `notelink entity list` - List entities
- `notelink entity delete` - Delete an entity and its links
"""

from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from ..config.constants import DEFAULT_LIST_LIMIT
from ..database import SQLiteEntityStore
from ..exceptions import NotelinkError
from ..models import EntityKind, Position
from ..utils.output import console, print_json
from ._helpers import fail, open_database

app = typer.Typer(help="Manage entities that notes can mention")


@app.command("add")
def add_entity(
    title: str = typer.Argument(..., help="Entity title"),
    scope: str = typer.Option(..., "--scope", "-s", help="Scope (canvas) the entity belongs to"),
    kind: str = typer.Option(
        EntityKind.PERSON.value,
        "--kind",
        "-k",
        help=f"Entity kind: {', '.join(k.value for k in EntityKind)}",
    ),
    x: float = typer.Option(0.0, "--x", help="Canvas x position"),
    y: float = typer.Option(0.0, "--y", help="Canvas y position"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """Create an entity."""
    store = SQLiteEntityStore(open_database())
    try:
        entity = store.create(scope, title, kind, Position(x, y))
    except NotelinkError as e:
        fail(e)

    if json_output:
        print_json(
            {
                "id": entity.id,
                "title": entity.title,
                "kind": entity.kind.value,
                "scope_id": entity.scope_id,
            }
        )
        return

    console.print(
        f"[green]Created {entity.kind.value}[/green] {escape(entity.title)} [dim]{entity.id}[/dim]"
    )


@app.command("list")
def list_entities(
    scope: Optional[str] = typer.Option(None, "--scope", "-s", help="Only list this scope"),
    limit: int = typer.Option(DEFAULT_LIST_LIMIT, "--limit", "-l", help="Max entities to show"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """List entities, oldest first."""
    entities = SQLiteEntityStore(open_database()).list_entities(scope, limit)

    if json_output:
        print_json(
            [
                {
                    "id": e.id,
                    "title": e.title,
                    "kind": e.kind.value,
                    "scope_id": e.scope_id,
                    "x": e.position.x,
                    "y": e.position.y,
                }
                for e in entities
            ]
        )
        return

    if not entities:
        console.print("[yellow]No entities found[/yellow]")
        return

    table = Table(title="Entities")
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Title")
    table.add_column("Kind")
    table.add_column("Scope")
    for entity in entities:
        table.add_row(entity.id, escape(entity.title), entity.kind.value, escape(entity.scope_id))
    console.print(table)


@app.command("delete")
def delete_entity(
    entity_id: str = typer.Argument(..., help="Entity ID"),
):
    """Delete an entity. Links to and from it are removed too."""
    if not SQLiteEntityStore(open_database()).delete(entity_id):
        fail(f"Entity not found: {entity_id}")
    console.print(f"[green]Deleted[/green] {escape(entity_id)}")
