"""CLI commands for svg-fixup."""

from svg_fixup.cli.commands.batch import batch
from svg_fixup.cli.commands.check import check
from svg_fixup.cli.commands.fix import fix
from svg_fixup.cli.commands.passes import passes

__all__ = ["fix", "batch", "check", "passes"]
