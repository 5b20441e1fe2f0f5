"""Shared CLI helpers: console, logger, repository selection, filter parsing, tables."""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from slat_inventory.catalog import Category, Color, ProductionStep
from slat_inventory.models.inventory import InventoryFilter, InventoryRecord
from slat_inventory.storage import JsonFileStorage, get_repository
from slat_inventory.storage.repository import InventoryRepository
from slat_inventory.summary import record_date
from slat_inventory.utils.logger import get_logger

console = Console()
logger = get_logger("slat_inventory.cli")

STORE_OPTION_HELP = "Local storage JSON file (overrides the configured backend)"


def open_repository(store: Optional[Path] = None) -> InventoryRepository:
    """Repository over --store when given, else over the configured backend."""
    if store is not None:
        return InventoryRepository(JsonFileStorage(store))
    return get_repository()


def build_filter(
    category: Optional[Category],
    color: Optional[Color],
    step: Optional[ProductionStep],
    date_from: Optional[str],
    date_to: Optional[str],
) -> InventoryFilter:
    """Build the filter; bad dates print an error and exit 1."""
    try:
        return InventoryFilter(
            category=category,
            color=color,
            production_step=step,
            date_from=date_from,
            date_to=date_to,
        )
    except ValidationError as e:
        print_validation_error(e)
        raise typer.Exit(1) from e


def print_validation_error(error: ValidationError) -> None:
    console.print("[red]Rejected:[/red]")
    for item in error.errors(include_url=False):
        loc = ".".join(str(part) for part in item.get("loc", ())) or "entry"
        console.print(f"  [red]{escape(loc)}: {escape(str(item.get('msg')))}[/red]")


def records_table(records: list[InventoryRecord], title: str = "Inventory") -> Table:
    table = Table(title=title)
    table.add_column("ID", style="dim", no_wrap=True)
    table.add_column("Date", style="cyan")
    table.add_column("Category", style="green")
    table.add_column("Color")
    table.add_column("Length", justify="right")
    table.add_column("Position", style="yellow")
    table.add_column("Step", style="magenta")
    table.add_column("Qty", justify="right")
    table.add_column("Pallet")
    table.add_column("Photo", justify="center")
    for r in records:
        table.add_row(
            r.id[:8],
            record_date(r).isoformat(),
            r.category.value,
            r.color.value,
            str(r.length),
            r.position_type.value,
            r.production_step.value,
            str(r.quantity),
            r.pallet_id or "",
            "yes" if r.photo_url else "",
        )
    return table


def print_record(record: InventoryRecord) -> None:
    """Print one record's fields."""
    console.print(f"  ID: {record.id}")
    console.print(f"  Date: {record_date(record).isoformat()}")
    console.print(f"  {record.category.value} / {record.color.value} / {record.length} mm")
    console.print(f"  Position: {record.position_type.value}  Step: {record.production_step.value}")
    console.print(f"  Quantity: {record.quantity}")
    if record.pallet_id:
        console.print(f"  Pallet: {record.pallet_id}")
    if record.photo_url:
        console.print(f"  Photo: attached ({len(record.photo_url)} chars)")
