# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy mapping formatter failures onto exit statuses."""

from __future__ import annotations

from pathlib import Path
from typing import Final

__all__ = [
    "DEFAULT_EXIT_CODE",
    "DiagnosticsFileNotFoundError",
    "DiagnosticsReadError",
    "ExclusiveModesError",
    "InputError",
    "InvalidJsonError",
    "LintFormatError",
    "NoValidDiagnosticsError",
    "NotAnArrayError",
    "UsageError",
]

DEFAULT_EXIT_CODE: Final[int] = 1


class LintFormatError(RuntimeError):
    """Error raised when a run fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = DEFAULT_EXIT_CODE) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


class UsageError(LintFormatError):
    """Raised when the command-line flags cannot be combined."""


class ExclusiveModesError(UsageError):
    """Raised when Markdown and code-fence output are both requested."""

    def __init__(self) -> None:
        super().__init__("Error: -m/--markdown and -c/--code options are mutually exclusive.")


class InputError(LintFormatError):
    """Raised when the diagnostics file cannot be turned into records."""


class DiagnosticsFileNotFoundError(InputError):
    """Raised when the diagnostics file does not exist."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"Error: File '{path}' not found.")
        self.path = str(path)


class InvalidJsonError(InputError):
    """Raised when the diagnostics file is not valid JSON."""

    def __init__(self, path: str | Path, detail: str) -> None:
        super().__init__(f"Error: Invalid JSON in file '{path}'.\n{detail}")
        self.path = str(path)
        self.detail = detail


class NotAnArrayError(InputError):
    """Raised when the JSON document is not an array of diagnostics."""

    def __init__(self) -> None:
        super().__init__("Error: JSON file must contain an array of diagnostics.")


class DiagnosticsReadError(InputError):
    """Raised for any other failure while reading the diagnostics file."""

    def __init__(self, path: str | Path, detail: str) -> None:
        super().__init__(f"Error reading file '{path}': {detail}")
        self.path = str(path)
        self.detail = detail


class NoValidDiagnosticsError(InputError):
    """Raised when filtering leaves no complete diagnostic records."""

    def __init__(self) -> None:
        super().__init__("Error: No valid diagnostics found in file.")
