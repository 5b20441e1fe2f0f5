"""CLI commands: one module per area (records, summary, rules, seed, serve)."""

import typer
from typer import Typer

from slat_inventory.cli import records, rules_mode, seed_mode, serve_mode, summary_mode
from slat_inventory.utils.logger import bind_context, clear_context

app = Typer(help="Factory-floor slat inventory")


@app.callback()
def main(ctx: typer.Context) -> None:
    """Tag every log entry of the invoked command with its name."""
    bind_context(command=ctx.invoked_subcommand)
    ctx.call_on_close(clear_context)


def register_commands() -> None:
    """Register all CLI commands on the global app."""
    app.command()(records.add)
    app.command(name="list")(records.list_records)
    app.command()(records.delete)
    app.command()(summary_mode.summary)
    app.command()(rules_mode.lengths)
    app.command()(rules_mode.positions)
    app.command()(seed_mode.seed)
    app.command()(serve_mode.serve)


register_commands()
