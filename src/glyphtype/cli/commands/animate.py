"""Commands that play the typing animation."""

from __future__ import annotations

import logging
import random
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from glyphtype.config import AnimationConfig, ConfigurationError
from glyphtype.debug_log import export_logs_to_file, setup_debug_logging
from glyphtype.driver import run
from glyphtype.limits import DEBUG_BUILD
from glyphtype.terminal import RecordingTerminal, Terminal

if TYPE_CHECKING:
    from collections.abc import Callable

DEMO_TEXT = "Hello, this is a typing effect demo!"


def parse_overrides(pairs: tuple[str, ...]) -> dict[str, str]:
    """Turn repeated ``KEY=VALUE`` options into a mapping.

    Dashes in keys are accepted as underscores so ``base-delay=5`` works.
    """
    overrides: dict[str, str] = {}
    for pair in pairs:
        key, sep, value = pair.partition("=")
        if not sep or not key.strip():
            raise click.BadParameter(f"expected KEY=VALUE, got {pair!r}", param_hint="--set")
        overrides[key.strip().replace("-", "_")] = value.strip()
    return overrides


_ANIMATION_OPTIONS = (
    click.option(
        "-c",
        "--config",
        "config_path",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Read settings from this TOML file instead of the user config",
    ),
    click.option(
        "-s",
        "--set",
        "overrides",
        multiple=True,
        metavar="KEY=VALUE",
        help="Override one setting, e.g. --set base_delay=35 (repeatable)",
    ),
    click.option(
        "--seed", type=int, default=None, help="Seed the random source for a repeatable run"
    ),
    click.option(
        "--dump-frames",
        is_flag=True,
        help="Print every frame as plain text instead of animating",
    ),
    click.option(
        "--width",
        type=click.IntRange(min=1),
        default=None,
        help="Display width used with --dump-frames (defaults to the terminal width)",
    ),
    click.option(
        "--debug-log",
        "debug_log",
        type=click.Path(dir_okay=False, path_type=Path),
        default=None,
        help="Write captured log records to this file when the run ends",
    ),
)


def animation_options(func: Callable[..., Any]) -> Callable[..., Any]:
    """Attach the options shared by every command that plays the animation."""
    for option in reversed(_ANIMATION_OPTIONS):
        func = option(func)
    return func


def play(
    text: str,
    *,
    config_path: Path | None,
    overrides: tuple[str, ...],
    seed: int | None,
    dump_frames: bool,
    width: int | None,
    debug_log: Path | None,
) -> None:
    setup_debug_logging(logging.DEBUG if DEBUG_BUILD or debug_log else logging.INFO)
    try:
        config = AnimationConfig.load(config_path, **parse_overrides(overrides))
    except ConfigurationError as exc:
        click.secho(f"Configuration error: {exc}", fg="red", err=True)
        sys.exit(2)

    rng = random.Random(seed)
    try:
        if dump_frames:
            recorder = RecordingTerminal(width or Terminal().query_display_width())
            run(text, config, recorder, rng=rng, sleep=lambda _seconds: None)
            for frame in recorder.plain_frames:
                click.echo(frame.rstrip())
        else:
            run(text, config, Terminal(), rng=rng)
    except ValueError as exc:
        click.secho(f"Cannot animate: {exc}", fg="red", err=True)
        sys.exit(2)
    finally:
        if debug_log is not None:
            count = export_logs_to_file(debug_log)
            click.echo(f"Wrote {count} log entries to {debug_log}", err=True)


@click.command()
@animation_options
def demo(**options: Any) -> None:
    """Play the animation on a fixed sample sentence."""
    play(DEMO_TEXT, **options)


@click.command(name="type")
@click.argument("text", required=False, default=None)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(exists=True, dir_okay=False, readable=True, path_type=Path),
    default=None,
    help="Read the text from a file",
)
@animation_options
def type_cmd(text: str | None, file_path: Path | None, **options: Any) -> None:
    """Type TEXT (or a file, or stdin) with the Braille shimmer effect.

    \b
    Examples:
        glyphtype type "Hello there"
        glyphtype type --file motd.txt --set overshoot=8
        echo "piped text" | glyphtype type
    """
    if text is not None and file_path is not None:
        raise click.UsageError("Pass TEXT or --file, not both")
    if file_path is not None:
        text = file_path.read_text(encoding="utf-8")
    elif text is None:
        stdin = click.get_text_stream("stdin")
        if stdin.isatty():
            raise click.UsageError("No text given: pass TEXT, --file, or pipe into stdin")
        text = stdin.read()

    # Line breaks would defeat the carriage-return redraw, so lines are joined.
    text = " ".join(part.strip() for part in text.splitlines() if part.strip())
    if not text:
        raise click.UsageError("Nothing to type")
    play(text, **options)
