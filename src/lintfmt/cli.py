# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Command-line entry point for formatting diagnostics files."""

from __future__ import annotations

from typing import Annotated, Final

import typer

from .config import FormatOptions
from .errors import DEFAULT_EXIT_CODE, LintFormatError, UsageError
from .loader import load_diagnostics
from .logging import fail, info, note
from .normalize import NormalizationResult, normalize_diagnostics
from .reporting import format_summary, render_diagnostics

PROG_NAME: Final[str] = "lint-format"
HELP_LINES: Final[tuple[str, ...]] = (
    f"Usage: {PROG_NAME} <json-file> [options]",
    f"Example: {PROG_NAME} diagnostics.json",
    "Options:",
    "  -h, --help      Show this help message",
    "  -s, --summary   Show summary output",
    "  -m, --markdown  Format output for Markdown",
    "  -c, --code      Enclose output in a plain text code fence",
    "                  (-m and -c are mutually exclusive)",
)

app = typer.Typer(
    name=PROG_NAME,
    help="Sort, deduplicate and format diagnostics stored in a JSON file.",
    add_completion=False,
    pretty_exceptions_enable=False,
)


def print_help() -> None:
    """Write the usage text to stderr."""

    for line in HELP_LINES:
        note(line)


def run(file_path: str, options: FormatOptions) -> NormalizationResult:
    """Load, normalise and print the diagnostics stored in ``file_path``.

    Args:
        file_path: Location of the diagnostics file.
        options: Flags selecting the payload layout and summary output.

    Returns:
        NormalizationResult: Diagnostics that were written to stdout.

    Raises:
        LintFormatError: If the file cannot be turned into diagnostics.
    """

    entries = load_diagnostics(file_path)
    result = normalize_diagnostics(entries)
    for block in render_diagnostics(result.diagnostics, options.output_mode):
        typer.echo(block)
    if options.summary:
        info(format_summary(result))
    return result


def _execute(file_path: str, options: FormatOptions) -> int:
    """Run the pipeline, converting every failure into an exit status."""

    try:
        run(file_path, options)
    except LintFormatError as exc:
        fail(str(exc))
        return exc.exit_code
    except Exception as exc:  # noqa: BLE001
        fail(f"Unexpected error: {exc}")
        return DEFAULT_EXIT_CODE
    return 0


@app.command(
    add_help_option=False,
    context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
)
def format_diagnostics(
    arguments: Annotated[
        list[str] | None,
        typer.Argument(
            metavar="<json-file> [options]",
            help="JSON file holding an array of diagnostics, followed by -s, -m, -c or -h.",
            show_default=False,
        ),
    ] = None,
) -> None:
    """Print diagnostics sorted by line and column with duplicates removed.

    Flags are matched against whole tokens, so every token reaches this
    command unparsed.

    Raises:
        typer.Exit: Always raised to terminate with the run's exit status.
    """

    options = FormatOptions.from_arguments(arguments or ())
    try:
        options.check_modes()
    except UsageError as exc:
        fail(str(exc))
        print_help()
        raise typer.Exit(code=exc.exit_code) from exc

    if options.file_path is None or options.show_help:
        print_help()
        raise typer.Exit(code=0 if options.file_path else DEFAULT_EXIT_CODE)

    raise typer.Exit(code=_execute(options.file_path, options))


def main() -> None:
    """Console-script entry point."""

    app(prog_name=PROG_NAME)


__all__ = ["app", "format_diagnostics", "main", "print_help", "run"]
