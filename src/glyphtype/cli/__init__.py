"""Command line interface for glyphtype."""

from glyphtype.cli.commands import cli

__all__ = ["cli"]
