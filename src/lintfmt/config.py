# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Invocation options resolved from the command line."""

from __future__ import annotations

from collections.abc import Sequence
from enum import StrEnum
from typing import Final

from pydantic import BaseModel, ConfigDict

from .errors import ExclusiveModesError

OPTION_PREFIX: Final[str] = "-"
SUMMARY_FLAGS: Final[frozenset[str]] = frozenset({"-s", "--summary"})
MARKDOWN_FLAGS: Final[frozenset[str]] = frozenset({"-m", "--markdown"})
CODE_FENCE_FLAGS: Final[frozenset[str]] = frozenset({"-c", "--code"})
HELP_FLAGS: Final[frozenset[str]] = frozenset({"-h", "--help"})


class OutputMode(StrEnum):
    """Enumerate the payload layouts written to stdout."""

    PLAIN = "plain"
    MARKDOWN = "markdown"
    FENCED = "fenced"


def _has_flag(arguments: Sequence[str], names: frozenset[str]) -> bool:
    return any(arg in names for arg in arguments)


class FormatOptions(BaseModel):
    """Flags and input location for a single formatter run."""

    model_config = ConfigDict(frozen=True)

    file_path: str | None = None
    summary: bool = False
    markdown: bool = False
    code_fence: bool = False
    show_help: bool = False

    @classmethod
    def from_arguments(cls, arguments: Sequence[str]) -> FormatOptions:
        """Build options from raw command-line tokens.

        A flag is set only by a token equal to one of its spellings, so
        bundled forms such as ``-mc`` or valued forms such as ``--summary=yes``
        are ignored. The first token not starting with ``-`` is the file path.

        Args:
            arguments: Command-line tokens in invocation order.

        Returns:
            FormatOptions: Options describing the requested run.
        """

        file_path = next((arg for arg in arguments if not arg.startswith(OPTION_PREFIX)), None)
        return cls(
            file_path=file_path,
            summary=_has_flag(arguments, SUMMARY_FLAGS),
            markdown=_has_flag(arguments, MARKDOWN_FLAGS),
            code_fence=_has_flag(arguments, CODE_FENCE_FLAGS),
            show_help=_has_flag(arguments, HELP_FLAGS),
        )

    @property
    def conflicting_modes(self) -> bool:
        """Return ``True`` when both Markdown and code-fence output were requested."""

        return self.markdown and self.code_fence

    def check_modes(self) -> None:
        """Raise :class:`ExclusiveModesError` when the output modes conflict."""

        if self.conflicting_modes:
            raise ExclusiveModesError()

    @property
    def output_mode(self) -> OutputMode:
        """Return the payload layout selected by the flags."""

        if self.markdown:
            return OutputMode.MARKDOWN
        if self.code_fence:
            return OutputMode.FENCED
        return OutputMode.PLAIN


__all__ = [
    "CODE_FENCE_FLAGS",
    "FormatOptions",
    "HELP_FLAGS",
    "MARKDOWN_FLAGS",
    "OPTION_PREFIX",
    "OutputMode",
    "SUMMARY_FLAGS",
]
