"""Summary command: grouped counts and quantities over filtered entries."""

from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from slat_inventory.catalog import Category, Color, ProductionStep
from slat_inventory.summary import filter_records, summarize

from .shared import STORE_OPTION_HELP, build_filter, console, logger, open_repository, records_table


def summary(
    category: Optional[Category] = typer.Option(None, "--category", "-c"),
    color: Optional[Color] = typer.Option(None, "--color"),
    step: Optional[ProductionStep] = typer.Option(None, "--step"),
    date_from: Optional[str] = typer.Option(None, "--from", help="YYYY-MM-DD (inclusive)"),
    date_to: Optional[str] = typer.Option(None, "--to", help="YYYY-MM-DD (inclusive)"),
    details: bool = typer.Option(False, "--details", "-d", help="Also list the entries of each group"),
    store: Optional[Path] = typer.Option(None, "--store", "-s", help=STORE_OPTION_HELP),
) -> None:
    """Group entries by category, color, length, position and step."""
    criteria = build_filter(category, color, step, date_from, date_to)
    records = filter_records(open_repository(store).list_records(), criteria)
    groups = summarize(records)
    logger.debug("summary.done", records=len(records), groups=len(groups))
    if not groups:
        console.print("[yellow]No entries match.[/yellow]")
        return

    table = Table(title="Inventory summary")
    table.add_column("Category", style="green")
    table.add_column("Color")
    table.add_column("Length", justify="right")
    table.add_column("Position", style="yellow")
    table.add_column("Step", style="magenta")
    table.add_column("Entries", justify="right", style="dim")
    table.add_column("Total qty", justify="right", style="bold")
    for key, group in groups.items():
        table.add_row(
            key.category.value,
            key.color.value,
            str(key.length),
            key.position_type.value,
            key.production_step.value,
            str(group.count),
            str(group.total_quantity),
        )
    console.print(table)
    total = sum(g.total_quantity for g in groups.values())
    console.print(f"[bold]Groups: {len(groups)}  Entries: {len(records)}  Total quantity: {total}[/bold]")

    if details:
        for number, (key, group) in enumerate(groups.items(), start=1):
            title = (
                f"Group {number}: {key.category.value} {key.color.value} {key.length} mm, "
                f"{key.position_type.value}, {key.production_step.value}"
            )
            console.print(records_table(group.members, title=title))
