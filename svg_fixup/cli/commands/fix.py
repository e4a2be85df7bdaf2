"""Fix command - repair a single SVG file."""

from __future__ import annotations

from typing import BinaryIO

import click
from rich.console import Console

from svg_fixup import SVGFixer
from svg_fixup.config import Config
from svg_fixup.exceptions import SVGFixupError
from svg_fixup.fixup import PASS_NAMES

console = Console(stderr=True)


@click.command()
@click.argument("input_file", type=click.File("rb"))
@click.option(
    "--output",
    "-o",
    type=click.File("wb"),
    default="-",
    help="Output file (default: stdout)",
)
@click.option("--verify/--no-verify", default=None, help="Check that the output parses")
@click.option(
    "--disable",
    "disabled",
    multiple=True,
    type=click.Choice(PASS_NAMES),
    help="Skip a fixup pass (repeatable)",
)
@click.pass_context
def fix(
    ctx: click.Context,
    input_file: BinaryIO,
    output: BinaryIO,
    verify: bool | None,
    disabled: tuple[str, ...],
) -> None:
    """Fix one SVG file.

    INPUT_FILE: Path to the SVG file, or - to read standard input.
    """
    config = ctx.obj.get("config", Config.load())
    log_level = ctx.obj.get("log_level", "WARNING")

    passes = [name for name in config.enabled_passes if name not in disabled]

    try:
        fixer = SVGFixer(passes=passes, verify=verify, log_level=log_level, config=config)
        result = fixer.fix_string(input_file.read().decode("utf-8"))
    except UnicodeDecodeError as e:
        console.print(f"[red]Error:[/red] input is not UTF-8: {e}")
        raise SystemExit(1) from e
    except SVGFixupError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    # Binary streams keep line endings exactly as they were read
    output.write((result.output or "").encode("utf-8"))

    if result.applied:
        console.print(f"[green]Applied:[/green] {', '.join(result.applied)}")
    else:
        console.print("[dim]No fixes needed[/dim]")
