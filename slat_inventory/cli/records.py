"""Record commands: add (the entry form), list, delete."""

from pathlib import Path
from typing import Optional

import typer
from pydantic import ValidationError
from rich.markup import escape

from slat_inventory.catalog import Category, Color, PositionType, ProductionStep
from slat_inventory.photos import encode_photo
from slat_inventory.summary import filter_records

from .shared import (
    STORE_OPTION_HELP,
    build_filter,
    console,
    logger,
    open_repository,
    print_record,
    print_validation_error,
    records_table,
)


def add(
    category: Category = typer.Option(..., "--category", "-c", help="Slat category"),
    color: Color = typer.Option(..., "--color", help="Slat color"),
    length: int = typer.Option(..., "--length", "-l", help="Cut length in mm"),
    position: PositionType = typer.Option(..., "--position", "-p", help="Position label"),
    step: ProductionStep = typer.Option(..., "--step", help="Production step"),
    quantity: int = typer.Option(..., "--quantity", "-q", help="Number of slats (> 0)"),
    pallet: Optional[str] = typer.Option(None, "--pallet", help="Pallet id or location"),
    photo: Optional[Path] = typer.Option(None, "--photo", exists=True, dir_okay=False, help="Image file (max 5 MB)"),
    store: Optional[Path] = typer.Option(None, "--store", "-s", help=STORE_OPTION_HELP),
) -> None:
    """Record a production entry."""
    photo_url = None
    if photo is not None:
        try:
            photo_url = encode_photo(photo)
        except ValueError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            logger.warning("add.photo_rejected", path=str(photo), error=str(e))
            raise typer.Exit(1) from e
    fields = {
        "category": category,
        "color": color,
        "length": length,
        "position_type": position,
        "production_step": step,
        "quantity": quantity,
        "pallet_id": pallet,
        "photo_url": photo_url,
    }
    repository = open_repository(store)
    try:
        record = repository.create_record(fields)
    except ValidationError as e:
        print_validation_error(e)
        logger.info("add.rejected", errors=e.error_count())
        raise typer.Exit(1) from e
    except Exception as e:
        console.print(f"[red]Save failed: {escape(str(e))}[/red]")
        logger.exception("add.save_failed")
        raise typer.Exit(1) from e
    console.print("[green]Entry saved.[/green]")
    print_record(record)


def list_records(
    category: Optional[Category] = typer.Option(None, "--category", "-c"),
    color: Optional[Color] = typer.Option(None, "--color"),
    step: Optional[ProductionStep] = typer.Option(None, "--step"),
    date_from: Optional[str] = typer.Option(None, "--from", help="YYYY-MM-DD (inclusive)"),
    date_to: Optional[str] = typer.Option(None, "--to", help="YYYY-MM-DD (inclusive)"),
    store: Optional[Path] = typer.Option(None, "--store", "-s", help=STORE_OPTION_HELP),
) -> None:
    """List stored entries, optionally filtered."""
    criteria = build_filter(category, color, step, date_from, date_to)
    records = filter_records(open_repository(store).list_records(), criteria)
    logger.debug("list.done", matched=len(records))
    if not records:
        console.print("[yellow]No entries match.[/yellow]")
        return
    console.print(records_table(records))
    console.print(f"[bold]{len(records)} entries[/bold]")



def delete(
    record_id: str = typer.Argument(..., help="Record id, or a unique prefix of one (as shown by list)"),
    store: Optional[Path] = typer.Option(None, "--store", "-s", help=STORE_OPTION_HELP),
) -> None:
    """Delete an entry by id or id prefix. Unknown ids leave the store unchanged."""
    repository = open_repository(store)
    ids = [r.id for r in repository.list_records()]
    if record_id in ids:
        matches = [record_id]
    else:
        matches = [i for i in ids if i.startswith(record_id)]
    if not matches:
        console.print(f"[yellow]No entry with id {escape(record_id)}.[/yellow]")
        return
    if len(matches) > 1:
        console.print(f"[red]Id prefix '{escape(record_id)}' matches {len(matches)} entries:[/red]")
        for match in matches:
            console.print(f"  {match}")
        raise typer.Exit(1)
    try:
        removed = repository.delete_record(matches[0])
    except Exception as e:
        console.print(f"[red]Save failed: {escape(str(e))}[/red]")
        logger.exception("delete.save_failed", record_id=matches[0])
        raise typer.Exit(1) from e
    if removed:
        console.print(f"[green]Deleted {matches[0]}.[/green]")
    else:
        console.print(f"[yellow]No entry with id {escape(record_id)}.[/yellow]")
