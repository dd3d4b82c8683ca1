# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import json
from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def diagnostics_file(tmp_path: Path) -> Callable[[object], Path]:
    """Return a factory writing a JSON document to a temporary file."""

    def _write(payload: object) -> Path:
        path = tmp_path / "diagnostics.json"
        path.write_text(json.dumps(payload), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def sample_entries() -> list[dict[str, object]]:
    """Return a small unsorted diagnostic list containing one duplicate."""

    return [
        {"startLineNumber": 2, "startColumn": 5, "message": "bad", "code": "E1"},
        {"startLineNumber": 1, "startColumn": 1, "message": "worse", "code": "E2"},
        {"startLineNumber": 2, "startColumn": 5, "message": "bad", "code": "E1"},
        {"startLineNumber": 3, "message": "no column"},
    ]
