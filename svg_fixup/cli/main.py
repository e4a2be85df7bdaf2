"""svg-fixup CLI entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler

from svg_fixup import __version__
from svg_fixup.cli.commands import batch, check, fix, passes
from svg_fixup.config import LOG_LEVELS, Config
from svg_fixup.exceptions import ConfigError

console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__, prog_name="svg-fixup")
@click.option(
    "--log-level",
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (default from config, else WARNING).",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="YAML config file. Also set via SVG_FIXUP_CONFIG.",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None, config_path: Path | None) -> None:
    """Repair SVG files exported by browsers and design tools.

    Fixes reserved namespace bindings, svg: tag prefixes, script and
    metadata bodies, invalid image MIME types and external hrefs.
    """
    ctx.ensure_object(dict)

    try:
        config = Config.load(config_path)
    except ConfigError as e:
        console.print(f"[red]Config error:[/red] {e} ({e.path})")
        raise SystemExit(1) from e

    level = (log_level or config.log_level).upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )

    ctx.obj["config"] = config
    ctx.obj["log_level"] = level


cli.add_command(fix)
cli.add_command(batch)
cli.add_command(check)
cli.add_command(passes)


if __name__ == "__main__":
    cli()
