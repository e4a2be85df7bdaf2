"""Passes command - list the fixup pipeline."""

from __future__ import annotations

import click
from rich.console import Console
from rich.table import Table

from svg_fixup.config import Config
from svg_fixup.fixup import PASSES

console = Console()


@click.command()
@click.pass_context
def passes(ctx: click.Context) -> None:
    """List fixup passes in the order they run."""
    config = ctx.obj.get("config", Config.load())

    table = Table(title="Fixup passes")
    table.add_column("#", style="dim")
    table.add_column("Name", style="cyan")
    table.add_column("Enabled", style="green")
    table.add_column("Description")

    for index, fixup_pass in enumerate(PASSES, start=1):
        enabled = "yes" if fixup_pass.name in config.enabled_passes else "[red]no[/red]"
        table.add_row(str(index), fixup_pass.name, enabled, fixup_pass.description)

    console.print(table)
