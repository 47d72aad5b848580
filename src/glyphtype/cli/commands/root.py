"""Root CLI command registration."""

from __future__ import annotations

import click

from glyphtype.version import get_glyphtype_version

from .animate import demo, type_cmd
from .config import config_group


@click.group(invoke_without_command=True)
@click.option("--version", is_flag=True, help="Show version and exit")
@click.pass_context
def cli(ctx: click.Context, version: bool) -> None:
    """Terminal typing animation with a Braille shimmer."""
    if version:
        click.echo(f"glyphtype {get_glyphtype_version()}")
        ctx.exit(0)

    if ctx.invoked_subcommand is None:
        ctx.invoke(demo)


cli.add_command(demo)
cli.add_command(type_cmd)
cli.add_command(config_group)
