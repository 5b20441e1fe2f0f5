"""Serve mode: run the inventory HTTP API."""

import sys
from pathlib import Path
from typing import Optional

import typer
import uvicorn

from slat_inventory.api.server import create_app
from slat_inventory.config import API_HOST, API_PORT

from .shared import STORE_OPTION_HELP, console, logger, open_repository


def serve(
    port: int = typer.Option(API_PORT, "--port", "-p", help="Port for the API server"),
    host: str = typer.Option(API_HOST, "--host", "-h", help="Bind host"),
    store: Optional[Path] = typer.Option(None, "--store", "-s", help=STORE_OPTION_HELP),
) -> None:
    """Start the HTTP API over the record store."""
    log = logger.bind(port=port)
    log.info("serve.start")
    app = create_app(open_repository(store))
    console.print(f"[green]Starting inventory API on http://{host}:{port}[/green]")
    console.print("[dim]Endpoints: /records, /summary, /rules/lengths/{category}, /rules/positions, /health[/dim]")
    try:
        uvicorn.run(app, host=host, port=port, log_level="info")
    except KeyboardInterrupt:
        console.print("\n[dim]Shutting down...[/dim]")
        sys.exit(0)
