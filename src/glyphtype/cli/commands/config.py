"""Commands for inspecting and creating the settings file."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from glyphtype.config import AnimationConfig, ConfigurationError
from glyphtype.paths import get_config_path


@click.group(name="config")
def config_group() -> None:
    """Manage glyphtype settings."""


@config_group.command()
@click.option(
    "-p",
    "--path",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Where to write the file (defaults to the user config location)",
)
@click.option("--force", is_flag=True, help="Overwrite an existing file")
def init(config_path: Path | None, force: bool) -> None:
    """Write a config file holding every default setting."""
    path = config_path or get_config_path()
    if path.exists() and not force:
        click.secho(f"{path} already exists (use --force to overwrite)", fg="yellow")
        sys.exit(1)
    AnimationConfig().save(path)
    click.secho(f"Wrote default settings to {path}", fg="green")


@config_group.command()
@click.option(
    "-c",
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Settings file to read (defaults to the user config)",
)
def show(config_path: Path | None) -> None:
    """Print the effective settings as TOML."""
    try:
        config = AnimationConfig.load(config_path)
    except ConfigurationError as exc:
        click.secho(f"Configuration error: {exc}", fg="red", err=True)
        sys.exit(2)
    click.echo(f"# {config_path or get_config_path()}")
    click.echo(config.to_toml(), nl=False)
