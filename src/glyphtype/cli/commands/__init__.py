"""glyphtype CLI commands."""

from .root import cli

__all__ = ["cli"]
