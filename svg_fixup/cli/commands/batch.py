"""Batch command - fix multiple SVG files."""

from __future__ import annotations

import concurrent.futures
from pathlib import Path

import click
from rich.console import Console
from rich.progress import Progress

from svg_fixup import FixupResult, SVGFixer
from svg_fixup.config import Config
from svg_fixup.exceptions import SVGFixupError

console = Console(stderr=True)


def read_batch_file(batch_file: Path) -> list[Path]:
    """Read input paths from a file, one per line; blank lines and # comments are skipped."""
    paths: list[Path] = []
    with open(batch_file, encoding="utf-8") as f:
        for line in f:
            line = line.strip()
            if line and not line.startswith("#"):
                paths.append(Path(line))
    return paths


@click.command()
@click.argument("inputs", nargs=-1, type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output-dir", "-o", type=click.Path(file_okay=False, path_type=Path), required=True, help="Output directory")
@click.option("--batch-file", type=click.Path(exists=True, dir_okay=False, path_type=Path), help="File containing list of inputs")
@click.option("--suffix", default=None, help="Output filename suffix (default from config, else _fixed)")
@click.option("-j", "--jobs", type=click.IntRange(min=1), default=None, help="Parallel jobs")
@click.option("--verify/--no-verify", default=None, help="Check that each output parses")
@click.option("--continue-on-error", is_flag=True, help="Continue processing on errors")
@click.pass_context
def batch(
    ctx: click.Context,
    inputs: tuple[Path, ...],
    output_dir: Path,
    batch_file: Path | None,
    suffix: str | None,
    jobs: int | None,
    verify: bool | None,
    continue_on_error: bool,
) -> None:
    """Fix multiple SVG files.

    INPUTS: Paths to SVG files (supports glob patterns via shell).
    """
    config = ctx.obj.get("config", Config.load())
    log_level = ctx.obj.get("log_level", "WARNING")
    suffix = config.suffix if suffix is None else suffix
    jobs = jobs or config.jobs

    # Collect all input files
    all_inputs: list[Path] = list(inputs)
    if batch_file:
        all_inputs.extend(read_batch_file(batch_file))

    if not all_inputs:
        console.print("[red]Error:[/red] No input files specified")
        raise SystemExit(1)

    output_dir.mkdir(parents=True, exist_ok=True)

    try:
        fixer = SVGFixer(verify=verify, log_level=log_level, config=config)
    except SVGFixupError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise SystemExit(1) from e

    results: list[FixupResult] = []
    success_count = 0
    changed_count = 0
    error_count = 0

    def process_file(input_path: Path) -> FixupResult:
        output_path = output_dir / f"{input_path.stem}{suffix}.svg"
        return fixer.fix_file(input_path, output_path)

    with Progress(console=console) as progress:
        task = progress.add_task("[green]Fixing...", total=len(all_inputs))

        with concurrent.futures.ThreadPoolExecutor(max_workers=jobs) as executor:
            future_to_path = {executor.submit(process_file, p): p for p in all_inputs}

            for future in concurrent.futures.as_completed(future_to_path):
                input_path = future_to_path[future]
                try:
                    result = future.result()
                finally:
                    progress.advance(task)

                results.append(result)
                if result.success:
                    success_count += 1
                    if result.changed:
                        changed_count += 1
                    continue

                error_count += 1
                console.print(f"[red]Error in {input_path}:[/red] {'; '.join(result.errors)}")
                if not continue_on_error:
                    for pending in future_to_path:
                        pending.cancel()
                    break

    # Summary
    console.print()
    console.print("[bold]Batch complete:[/bold]")
    console.print(f"  [green]Success:[/green] {success_count}")
    console.print(f"  [yellow]Changed:[/yellow] {changed_count}")
    console.print(f"  [red]Failed:[/red] {error_count}")
    console.print(f"  [blue]Output:[/blue] {output_dir}")

    if error_count > 0 and not continue_on_error:
        raise SystemExit(1)
