# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Shared utilities for CLI commands (logging, errors, configuration)."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import typer
from rich.console import Console
from rich.text import Text

from ..catalog import CatalogIntegrityError, CatalogValidationError, ToolCatalog, load_catalog
from ..config import Config, ConfigError, load_config
from ..logging import FAIL, INFO, OK, WARN, MessageKind, build_console, emit
from ..logging import section as print_section


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji and colour settings."""

    console: Console
    use_emoji: bool
    use_color: bool = True
    debug_enabled: bool = False

    def _emit(self, message: str, kind: MessageKind) -> None:
        emit(self.console, message, kind, use_emoji=self.use_emoji, use_color=self.use_color)

    def fail(self, message: str) -> None:
        """Log a failure message."""

        self._emit(message, FAIL)

    def warn(self, message: str) -> None:
        """Log a warning message."""

        self._emit(message, WARN)

    def ok(self, message: str) -> None:
        """Log a success message."""

        self._emit(message, OK)

    def info(self, message: str) -> None:
        """Log an informational message."""

        self._emit(message, INFO)

    def section(self, title: str) -> None:
        """Render a section header."""

        print_section(self.console, title, use_color=self.use_color)

    def echo(self, message: str) -> None:
        """Write ``message`` to stdout verbatim using Typer's echo helper.

        Args:
            message: Text written to standard output.
        """

        typer.echo(message)

    def debug(self, message: str) -> None:
        """Emit a dimmed debug message when debug logging is enabled."""

        if self.debug_enabled:
            self.console.print(Text(f"[debug] {message}", style="dim"))


def build_cli_logger(*, emoji: bool, color: bool = True, debug: bool = False) -> CLILogger:
    """Return a ``CLILogger`` configured for the provided presentation flags.

    Args:
        emoji: Whether log output may include emoji glyphs.
        color: Whether terminal colour output is allowed.
        debug: Whether debug logging should be enabled.

    Returns:
        CLILogger: Logger instance bound to a dedicated Rich console.
    """

    console = build_console(color=color, emoji=emoji)
    return CLILogger(console=console, use_emoji=emoji, use_color=color, debug_enabled=debug)


def resolve_config(
    root: Path | None,
    *,
    catalog_path: Path | None = None,
    seed: int | None = None,
    no_emoji: bool = False,
    no_color: bool = False,
) -> Config:
    """Load configuration for ``root`` and apply CLI overrides.

    Args:
        root: Project directory holding ``pyproject.toml``.
        catalog_path: ``--catalog`` override.
        seed: ``--seed`` override.
        no_emoji: ``--no-emoji`` flag.
        no_color: ``--no-color`` flag.

    Returns:
        Config: Effective configuration.

    Raises:
        CLIError: If configuration sources are invalid.
    """

    try:
        config = load_config(root)
        return config.with_overrides(
            catalog_path=catalog_path,
            seed=seed,
            use_emoji=False if no_emoji else None,
            use_color=False if no_color else None,
        )
    except ConfigError as exc:
        raise CLIError(str(exc)) from exc


def resolve_catalog(config: Config) -> ToolCatalog:
    """Return the catalog selected by ``config``.

    Args:
        config: Effective configuration.

    Returns:
        ToolCatalog: Bundled catalog, or the document named by ``catalog_path``.

    Raises:
        CLIError: If the catalog document is missing or invalid.
    """

    try:
        return load_catalog(config.catalog_path)
    except FileNotFoundError as exc:
        raise CLIError(f"Catalog not found: {exc}") from exc
    except (CatalogIntegrityError, CatalogValidationError) as exc:
        raise CLIError(str(exc)) from exc


__all__ = ["CLIError", "CLILogger", "build_cli_logger", "resolve_catalog", "resolve_config"]
