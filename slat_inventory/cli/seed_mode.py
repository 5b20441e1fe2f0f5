"""Seed command: load sample entries into an empty store."""

from pathlib import Path
from typing import Optional

import typer

from slat_inventory.seed import seed_sample_data

from .shared import STORE_OPTION_HELP, console, logger, open_repository, records_table


def seed(
    store: Optional[Path] = typer.Option(None, "--store", "-s", help=STORE_OPTION_HELP),
) -> None:
    """Add sample entries if the store is empty."""
    created = seed_sample_data(open_repository(store))
    logger.info("seed.command_done", created=len(created))
    if not created:
        console.print("[yellow]Store is not empty; nothing seeded.[/yellow]")
        return
    console.print(records_table(created, title="Sample entries"))
