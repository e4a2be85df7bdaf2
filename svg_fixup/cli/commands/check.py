"""Check command - report what fixup would change in an SVG file."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from svg_fixup.exceptions import SVGParseError
from svg_fixup.fixup import PASSES, fixup_with_passes
from svg_fixup.svg.parser import find_prefixed_elements, is_well_formed

console = Console()


@click.command()
@click.argument("svg_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--strict", is_flag=True, help="Exit with status 1 if any fix would apply")
def check(svg_file: Path, strict: bool) -> None:
    """Report the fixes an SVG file needs without writing anything."""
    with open(svg_file, encoding="utf-8", newline="") as f:
        original = f.read()

    fixed, applied = fixup_with_passes(original)

    table = Table(title=f"Fixup passes for {svg_file.name}")
    table.add_column("Pass", style="cyan")
    table.add_column("Result")
    for fixup_pass in PASSES:
        if fixup_pass.name in applied:
            table.add_row(fixup_pass.name, "[yellow]would change[/yellow]")
        else:
            table.add_row(fixup_pass.name, "[dim]ok[/dim]")
    console.print(table)

    def _status(ok: bool) -> str:
        return "[green]yes[/green]" if ok else "[red]no[/red]"

    fixed_ok = is_well_formed(fixed)
    console.print(f"[bold]Original parses:[/bold] {_status(is_well_formed(original))}")
    console.print(f"[bold]Fixed parses:[/bold] {_status(fixed_ok)}")

    if fixed_ok:
        try:
            leftover = find_prefixed_elements(fixed, "svg")
        except SVGParseError:
            leftover = []
        if leftover:
            console.print(f"[yellow]Elements still prefixed with svg:[/yellow] {', '.join(leftover)}")

    if not fixed_ok or (strict and applied):
        raise SystemExit(1)
