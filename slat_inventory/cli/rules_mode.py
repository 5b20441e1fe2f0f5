"""Rule table lookups: lengths per category, positions per (category, length, step)."""

import typer

from slat_inventory.catalog import Category, ProductionStep
from slat_inventory.rules import available_lengths, is_side_length, positions_for

from .shared import console


def lengths(
    category: Category = typer.Argument(..., help="Slat category"),
) -> None:
    """Show the cut lengths of a category, front/back first."""
    for length in available_lengths(category):
        kind = "side" if is_side_length(category, length) else "front/back"
        console.print(f"{length}\t[dim]{kind}[/dim]")


def positions(
    category: Category = typer.Argument(..., help="Slat category"),
    length: int = typer.Argument(..., help="Cut length in mm"),
    step: ProductionStep = typer.Argument(..., help="Production step"),
) -> None:
    """Show the positions a slat may be recorded with at a step."""
    if length not in available_lengths(category):
        console.print(
            f"[red]Length {length} is not configured for {category.value}. "
            f"Valid: {', '.join(str(x) for x in available_lengths(category))}[/red]"
        )
        raise typer.Exit(1)
    for position in positions_for(category, length, step):
        console.print(position.value)
