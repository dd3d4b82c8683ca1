# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for invocation options."""

from __future__ import annotations

import pytest

from lintfmt.config import FormatOptions, OutputMode
from lintfmt.errors import ExclusiveModesError


def test_first_non_option_argument_is_the_file_path() -> None:
    options = FormatOptions.from_arguments(["--unknown", "a.json", "b.json"])
    assert options.file_path == "a.json"


def test_missing_file_path_is_none() -> None:
    assert FormatOptions.from_arguments(["-x"]).file_path is None


def test_flags_match_whole_tokens_only() -> None:
    options = FormatOptions.from_arguments(["a.json", "-s", "--markdown", "-h"])
    assert (options.summary, options.markdown, options.code_fence, options.show_help) == (True, True, False, True)

    bundled = FormatOptions.from_arguments(["a.json", "-mc", "-sx", "--summary=yes", "--help=1"])
    assert not (bundled.summary or bundled.markdown or bundled.code_fence or bundled.show_help)


def test_output_mode_resolution() -> None:
    assert FormatOptions().output_mode is OutputMode.PLAIN
    assert FormatOptions(markdown=True).output_mode is OutputMode.MARKDOWN
    assert FormatOptions(code_fence=True).output_mode is OutputMode.FENCED


def test_conflicting_modes_raise_usage_error() -> None:
    options = FormatOptions.from_arguments(["a.json", "-m", "--code"])
    assert options.conflicting_modes
    with pytest.raises(ExclusiveModesError) as excinfo:
        options.check_modes()
    assert excinfo.value.exit_code == 1

    FormatOptions(markdown=True, summary=True).check_modes()
