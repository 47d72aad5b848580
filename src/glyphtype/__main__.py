"""CLI entry point for glyphtype."""

from __future__ import annotations

import signal

from glyphtype.cli import cli


def _exit_on_sigterm(signum: int, frame: object) -> None:
    # SystemExit unwinds through the driver, which shows the cursor again.
    raise SystemExit(128 + signum)


def main() -> None:
    signal.signal(signal.SIGTERM, _exit_on_sigterm)
    cli()


if __name__ == "__main__":
    main()
