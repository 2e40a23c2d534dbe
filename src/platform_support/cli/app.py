# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI entry point invoked by mdBook."""

from __future__ import annotations

import sys
from typing import Annotated, Final

import typer

from ..catalog.provider import BundledTargetCatalog
from ..errors import PlatformSupportError, UnknownArgumentError
from ..preprocessor import run_pass
from .shared import build_cli_logger
from .typer_ext import TyperAppConfig, create_typer

SUPPORTS_MODE: Final[str] = "supports"

app = create_typer(
    config=TyperAppConfig(
        name="mdbook-platform-support",
        help_text="mdBook preprocessor generating platform-support target tables.",
    ),
)


@app.command(
    help=(
        "Rewrite the platform-support chapter of the book read from stdin. "
        "mdBook first calls 'supports RENDERER' to ask whether a renderer is "
        "supported; every renderer is."
    ),
)
def main(
    mode: Annotated[
        str | None,
        typer.Argument(help="Either omitted (run the preprocessor) or 'supports'.", show_default=False),
    ] = None,
    renderer: Annotated[
        str | None,
        typer.Argument(help="Renderer name passed by mdBook along with 'supports'.", show_default=False),
    ] = None,
    debug: Annotated[bool, typer.Option("--debug", help="Print debug diagnostics on stderr.")] = False,
    emoji: Annotated[bool, typer.Option("--emoji/--no-emoji", help="Prefix diagnostics with emoji.")] = True,
    no_color: Annotated[bool, typer.Option("--no-color", help="Disable coloured diagnostics.")] = False,
) -> None:
    """Dispatch on ``mode`` and run the preprocessor pass when it is omitted.

    Raises:
        typer.Exit: Raised with a non-zero code when the pass fails.
    """

    logger = build_cli_logger(emoji=emoji, debug=debug, no_color=no_color)
    if mode == SUPPORTS_MODE:
        logger.debug(f"renderer={renderer or '<unset>'} supported=true")
        return
    try:
        if mode is not None:
            raise UnknownArgumentError(mode)
        raw = sys.stdin.buffer.read()
        payload = run_pass(raw, catalog=BundledTargetCatalog(), logger=logger)
    except PlatformSupportError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    typer.echo(payload.encode("utf-8"), nl=False)


__all__ = ["SUPPORTS_MODE", "app", "main"]
