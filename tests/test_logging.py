# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Karl Horning

"""Tests for the user-facing status message helpers."""

from __future__ import annotations

from io import StringIO

import pytest
from rich.console import Console

from transform_text.cli.shared import CLILogger, build_cli_logger
from transform_text.logging import FAIL, INFO, OK, WARN, build_console, emit, render_message, section


def _console() -> tuple[Console, StringIO]:
    buffer = StringIO()
    return Console(file=buffer, no_color=True, highlight=False, width=120), buffer


def test_messages_without_emoji() -> None:
    console, buffer = _console()
    for message, kind in (("starting", INFO), ("saved", OK), ("careful", WARN), ("broken", FAIL)):
        emit(console, message, kind, use_emoji=False, use_color=False)
    assert buffer.getvalue().splitlines() == ["starting", "saved", "careful", "broken"]


def test_messages_with_emoji_prefix() -> None:
    console, buffer = _console()
    emit(console, "saved", OK, use_emoji=True, use_color=False)
    emit(console, "broken", FAIL, use_emoji=True, use_color=False)
    assert buffer.getvalue().splitlines() == ["✅ saved", "❌ broken"]


def test_render_message_styles_only_with_color() -> None:
    plain = render_message("careful", WARN, use_emoji=False, use_color=False)
    coloured = render_message("careful", WARN, use_emoji=False, use_color=True)
    assert plain.plain == coloured.plain == "careful"
    assert not plain.spans
    assert [str(span.style) for span in coloured.spans] == ["yellow"]


def test_markup_in_messages_is_printed_verbatim() -> None:
    console, buffer = _console()
    emit(console, "[bold]not markup[/bold]", INFO, use_emoji=False, use_color=False)
    assert buffer.getvalue() == "[bold]not markup[/bold]\n"


def test_plain_section_header() -> None:
    console, buffer = _console()
    section(console, "Results", use_color=False)
    assert buffer.getvalue() == "\n--- Results ---\n"


def test_coloured_section_uses_rule() -> None:
    console, buffer = _console()
    section(console, "Results", use_color=True)
    lines = buffer.getvalue().splitlines()
    assert lines[0] == ""
    assert "Results" in lines[1]
    assert "─" in lines[1]


@pytest.mark.parametrize(("color", "emoji"), [(True, True), (False, False)])
def test_build_console_flags(color: bool, emoji: bool) -> None:
    console = build_console(color=color, emoji=emoji)
    assert console.no_color is not color
    assert console.soft_wrap is True


def test_cli_logger_routes_kinds() -> None:
    console, buffer = _console()
    logger = CLILogger(console=console, use_emoji=True, use_color=False)
    logger.info("hint")
    logger.ok("done")
    logger.warn("careful")
    logger.fail("broken")
    logger.section("Preview")
    assert buffer.getvalue().splitlines() == ["ℹ️ hint", "✅ done", "⚠️ careful", "❌ broken", "", "--- Preview ---"]


def test_cli_logger_debug_is_opt_in() -> None:
    console, buffer = _console()
    logger = build_cli_logger(emoji=False, color=False)
    logger.console = console
    logger.debug("hidden")
    logger.debug_enabled = True
    logger.debug("shown")
    assert buffer.getvalue() == "[debug] shown\n"
