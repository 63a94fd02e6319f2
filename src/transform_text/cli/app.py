# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning
"""CLI application entry point wiring commands and shared services."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .. import __version__
from ..config import Config
from .apply import read_input, run_apply
from .interactive import run_interactive
from .shared import CLIError, CLILogger, build_cli_logger, resolve_catalog, resolve_config
from .tools import run_tools

app = typer.Typer(
    name="transform-text",
    help="Escape newlines, convert case and title-case text.",
    no_args_is_help=True,
    add_completion=False,
)

RootOption = Annotated[
    Path | None,
    typer.Option("--root", help="Project directory holding pyproject.toml.", file_okay=False),
]
CatalogOption = Annotated[
    Path | None,
    typer.Option("--catalog", help="Catalog JSON document to use instead of the bundled one.", dir_okay=False),
]
SeedOption = Annotated[int | None, typer.Option("--seed", help="Seed for randomised tools.")]
NoEmojiOption = Annotated[bool, typer.Option("--no-emoji", help="Disable emoji in messages.")]
NoColorOption = Annotated[bool, typer.Option("--no-color", help="Disable coloured output.")]
DebugOption = Annotated[bool, typer.Option("--debug", help="Print debug details.")]


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"transform-text {__version__}")
        raise typer.Exit()


def _configure(
    root: Path | None,
    *,
    catalog_path: Path | None,
    seed: int | None = None,
    no_emoji: bool,
    no_color: bool,
    debug: bool = False,
) -> tuple[Config, CLILogger]:
    """Resolve configuration and a logger honouring it, exiting on configuration errors."""

    try:
        config = resolve_config(root, catalog_path=catalog_path, seed=seed, no_emoji=no_emoji, no_color=no_color)
    except CLIError as exc:
        build_cli_logger(emoji=not no_emoji, color=not no_color).fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    return config, build_cli_logger(emoji=config.use_emoji, color=config.use_color, debug=debug)


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option("--version", callback=_version_callback, is_eager=True, help="Show the version and exit."),
    ] = False,
) -> None:
    """Transform text with the tools listed by ``transform-text tools``."""


@app.command("tools")
def tools_command(
    root: RootOption = None,
    catalog: CatalogOption = None,
    no_emoji: NoEmojiOption = False,
    no_color: NoColorOption = False,
) -> None:
    """List the available tools and their selection keys."""

    config, logger = _configure(root, catalog_path=catalog, no_emoji=no_emoji, no_color=no_color)
    try:
        exit_code = run_tools(catalog=resolve_catalog(config), logger=logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=exit_code)


@app.command("apply")
def apply_command(
    selection_key: Annotated[str, typer.Argument(metavar="KEY", help="Selection key of the tool to run.")],
    text: Annotated[
        str | None,
        typer.Argument(metavar="[TEXT]", help="Text to transform; read from --file or stdin when omitted."),
    ] = None,
    file: Annotated[
        Path | None,
        typer.Option("--file", "-f", help="Read the text to transform from a file.", dir_okay=False),
    ] = None,
    seed: SeedOption = None,
    root: RootOption = None,
    catalog: CatalogOption = None,
    no_emoji: NoEmojiOption = False,
    no_color: NoColorOption = False,
    debug: DebugOption = False,
) -> None:
    """Apply one tool and print the transformed text."""

    config, logger = _configure(
        root,
        catalog_path=catalog,
        seed=seed,
        no_emoji=no_emoji,
        no_color=no_color,
        debug=debug,
    )
    try:
        exit_code = run_apply(
            selection_key,
            read_input(text, file),
            catalog=resolve_catalog(config),
            config=config,
            logger=logger,
        )
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    raise typer.Exit(code=exit_code)


@app.command("interactive")
def interactive_command(
    seed: SeedOption = None,
    root: RootOption = None,
    catalog: CatalogOption = None,
    no_emoji: NoEmojiOption = False,
    no_color: NoColorOption = False,
) -> None:
    """Enter text once, then try tools one after another."""

    config, logger = _configure(root, catalog_path=catalog, seed=seed, no_emoji=no_emoji, no_color=no_color)
    try:
        run_interactive(catalog=resolve_catalog(config), config=config, logger=logger)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc


__all__ = ["app"]
