"""Command-line interface for svg-fixup."""

from svg_fixup.cli.main import cli

__all__ = ["cli"]
