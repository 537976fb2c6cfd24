"""Rich console output for the starred list and the catalog."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape
from rich.table import Table

console = Console()


def display_starred(records: list[dict]) -> None:
    """Render flattened starred records as a table."""
    if not records:
        console.print("[yellow]No starred restaurants yet.[/yellow]")
        return

    table = Table(title="Starred Restaurants")
    table.add_column("ID", style="dim")
    table.add_column("Restaurant", style="bold")
    table.add_column("Comment")

    for record in records:
        comment = record.get("comment")
        table.add_row(
            escape(str(record["id"])),
            escape(str(record.get("name", ""))),
            escape(comment) if comment is not None else "[dim]-[/dim]",
        )

    console.print(table)


def display_restaurants(restaurants: list[dict]) -> None:
    if not restaurants:
        console.print("[yellow]Catalog is empty.[/yellow]")
        return

    table = Table(title="Restaurants")
    table.add_column("ID", style="dim")
    table.add_column("Name", style="bold")
    for r in restaurants:
        table.add_row(escape(str(r["id"])), escape(str(r.get("name", ""))))

    console.print(table)
