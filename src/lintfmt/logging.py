# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""User-facing operational messages written to the error stream."""

from __future__ import annotations

from rich.text import Text

from .console import detect_tty, get_console_manager


def _print_line(msg: str, *, style: str | None, use_color: bool | None = None) -> None:
    """Render ``msg`` on the stderr console using shared styling helpers.

    Args:
        msg: Message text to print. It is never parsed as Rich markup.
        style: Rich style name to apply when colour output is active.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    color_enabled = detect_tty() if use_color is None else use_color
    console = get_console_manager().get(color=color_enabled)
    text = Text(msg)
    if style and color_enabled:
        text.stylize(style)
    console.print(text)


def fail(msg: str, *, use_color: bool | None = None) -> None:
    """Emit an error message.

    Args:
        msg: Message text to display.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    _print_line(msg, style="red", use_color=use_color)


def info(msg: str, *, use_color: bool | None = None) -> None:
    """Emit an informational message.

    Args:
        msg: Message text to display.
        use_color: Optional explicit colour flag overriding TTY detection.
    """

    _print_line(msg, style="cyan", use_color=use_color)


def note(msg: str) -> None:
    """Emit an unstyled message such as help text."""

    _print_line(msg, style=None)


__all__ = ["fail", "info", "note"]
