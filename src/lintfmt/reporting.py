# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render normalised diagnostics as plain text, Markdown or a code fence."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Sequence
from typing import Final

from .config import OutputMode
from .models import Diagnostic, render_value
from .normalize import NormalizationResult

CODE_FENCE: Final[str] = "```"
MARKDOWN_HEADER: Final[tuple[str, str]] = (
    "| Line | Column | Code | Message |",
    "|------|--------|------|---------|",
)


def join_output(lines: Sequence[str]) -> str:
    """Join output lines for deterministic console rendering."""

    return "\n".join(lines)


def format_plain_line(diagnostic: Diagnostic) -> str:
    """Return ``[line, column](code) message`` for ``diagnostic``."""

    line = render_value(diagnostic.line)
    column = render_value(diagnostic.column)
    return f"[{line}, {column}]({diagnostic.display_code}) {diagnostic.display_message}"


def format_markdown_row(diagnostic: Diagnostic) -> str:
    """Return a Markdown table row for ``diagnostic``."""

    line = render_value(diagnostic.line)
    column = render_value(diagnostic.column)
    return f"| {line} | {column} | `{diagnostic.display_code}` | {diagnostic.display_message} |"


def render_plain(diagnostics: Iterable[Diagnostic]) -> list[str]:
    """Render one plain-text line per diagnostic."""

    return [format_plain_line(diagnostic) for diagnostic in diagnostics]


def render_markdown(diagnostics: Iterable[Diagnostic]) -> list[str]:
    """Render a Markdown table with a header row followed by one row per diagnostic."""

    return [*MARKDOWN_HEADER, *(format_markdown_row(diagnostic) for diagnostic in diagnostics)]


def render_fenced(diagnostics: Iterable[Diagnostic]) -> list[str]:
    """Render the plain-text lines wrapped in a single code fence.

    The result is one block whose inner lines are joined by newlines.
    """

    return [join_output([CODE_FENCE, *render_plain(diagnostics), CODE_FENCE])]


_RENDERERS: Final[dict[OutputMode, Callable[[Iterable[Diagnostic]], list[str]]]] = {
    OutputMode.PLAIN: render_plain,
    OutputMode.MARKDOWN: render_markdown,
    OutputMode.FENCED: render_fenced,
}


def render_diagnostics(diagnostics: Iterable[Diagnostic], mode: OutputMode) -> list[str]:
    """Render ``diagnostics`` in the layout selected by ``mode``.

    Args:
        diagnostics: Normalised diagnostics in output order.
        mode: Payload layout to produce.

    Returns:
        list[str]: Output blocks, each written to stdout followed by a newline.
    """

    return _RENDERERS[mode](diagnostics)


def format_summary(result: NormalizationResult) -> str:
    """Return the summary comparing unique diagnostics with raw entries."""

    return f"\nProcessed {result.unique} unique diagnostics from {result.total} total entries."


__all__ = [
    "CODE_FENCE",
    "MARKDOWN_HEADER",
    "format_markdown_row",
    "format_plain_line",
    "format_summary",
    "join_output",
    "render_diagnostics",
    "render_fenced",
    "render_markdown",
    "render_plain",
]
