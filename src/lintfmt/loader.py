# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read a diagnostics file and decode its JSON array."""

from __future__ import annotations

import json
from pathlib import Path
from typing import NoReturn

from .errors import DiagnosticsFileNotFoundError, DiagnosticsReadError, InvalidJsonError, NotAnArrayError
from .models import JsonValue


def _reject_constant(token: str) -> NoReturn:
    """Refuse the non-standard ``NaN``/``Infinity`` literals ``json`` accepts."""

    raise ValueError(f"Unexpected token {token} in JSON")


def load_diagnostics(path: str | Path) -> list[JsonValue]:
    """Return the raw diagnostic entries stored in ``path``.

    Args:
        path: Location of a UTF-8 JSON file holding an array of diagnostics.
            Undecodable bytes are replaced with U+FFFD.

    Returns:
        list[JsonValue]: Decoded array elements in file order.

    Raises:
        DiagnosticsFileNotFoundError: If ``path`` does not exist.
        InvalidJsonError: If the content is not valid JSON.
        NotAnArrayError: If the decoded document is not an array.
        DiagnosticsReadError: If the file exists but cannot be read.
    """

    file_path = Path(path)
    if not file_path.exists():
        raise DiagnosticsFileNotFoundError(path)

    try:
        content = file_path.read_text(encoding="utf-8", errors="replace")
    except OSError as exc:
        raise DiagnosticsReadError(path, str(exc)) from exc

    try:
        payload = json.loads(content, parse_constant=_reject_constant)
    except ValueError as exc:
        raise InvalidJsonError(path, str(exc)) from exc

    if not isinstance(payload, list):
        raise NotAnArrayError()
    return payload


__all__ = ["load_diagnostics"]
