# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for payload rendering."""

from __future__ import annotations

from lintfmt.config import OutputMode
from lintfmt.models import Diagnostic
from lintfmt.normalize import NormalizationResult
from lintfmt.reporting import format_summary, render_diagnostics


def _diagnostics() -> list[Diagnostic]:
    return [
        Diagnostic(line=1, column=1, code="E2", message="worse"),
        Diagnostic(line=2, column=5, code=" ", message="multi\nline\tmessage"),
    ]


def test_plain_rendering() -> None:
    assert render_diagnostics(_diagnostics(), OutputMode.PLAIN) == [
        "[1, 1](E2) worse",
        "[2, 5]( ) multi line message",
    ]


def test_markdown_rendering() -> None:
    assert render_diagnostics(_diagnostics(), OutputMode.MARKDOWN) == [
        "| Line | Column | Code | Message |",
        "|------|--------|------|---------|",
        "| 1 | 1 | `E2` | worse |",
        "| 2 | 5 | ` ` | multi line message |",
    ]


def test_fenced_rendering_is_a_single_block() -> None:
    assert render_diagnostics(_diagnostics(), OutputMode.FENCED) == [
        "```\n[1, 1](E2) worse\n[2, 5]( ) multi line message\n```",
    ]


def test_code_whitespace_is_cleaned() -> None:
    diagnostic = Diagnostic(line=3, column=4, code="E\r\n9", message=12)

    assert render_diagnostics([diagnostic], OutputMode.PLAIN) == ["[3, 4](E 9) 12"]


def test_summary_text() -> None:
    result = NormalizationResult(diagnostics=tuple(_diagnostics()), total=12)

    assert format_summary(result) == "\nProcessed 2 unique diagnostics from 12 total entries."
