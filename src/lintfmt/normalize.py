# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Filter, order and deduplicate raw diagnostic entries."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from .errors import NoValidDiagnosticsError
from .models import Diagnostic, IdentityKey, JsonValue, RawDiagnostic


@dataclass(frozen=True, slots=True)
class NormalizationResult:
    """Unique diagnostics in output order alongside the raw entry count."""

    diagnostics: tuple[Diagnostic, ...]
    total: int

    @property
    def unique(self) -> int:
        """Return the number of diagnostics that survived deduplication."""

        return len(self.diagnostics)


def _numeric_sort_value(value: JsonValue) -> float:
    """Coerce a position value into a number for ordering.

    Booleans count as ``0``/``1``, ``null`` as ``0`` and numeric strings as
    their value. Anything else orders after every number.
    """

    if isinstance(value, bool):
        return float(value)
    if isinstance(value, (int, float)):
        return float(value)
    if value is None:
        return 0.0
    if isinstance(value, str):
        stripped = value.strip()
        if not stripped:
            return 0.0
        try:
            number = float(stripped)
        except ValueError:
            return math.inf
        return math.inf if math.isnan(number) else number
    return math.inf


def _position_key(raw: RawDiagnostic) -> tuple[float, float]:
    return _numeric_sort_value(raw.start_line_number), _numeric_sort_value(raw.start_column)


def filter_complete(entries: Iterable[JsonValue]) -> list[RawDiagnostic]:
    """Return entries carrying line, column and message, in input order."""

    candidates = (RawDiagnostic.from_entry(entry) for entry in entries)
    return [raw for raw in candidates if raw.is_complete]


def sort_diagnostics(diagnostics: Iterable[RawDiagnostic]) -> list[RawDiagnostic]:
    """Order diagnostics by line then column, keeping input order for ties."""

    return sorted(diagnostics, key=_position_key)


def dedupe_diagnostics(diagnostics: Iterable[RawDiagnostic]) -> list[Diagnostic]:
    """Keep the first diagnostic for each identity key, preserving order."""

    seen: set[IdentityKey] = set()
    unique: list[Diagnostic] = []
    for raw in diagnostics:
        key = raw.identity_key
        if key in seen:
            continue
        seen.add(key)
        unique.append(Diagnostic.from_raw(raw))
    return unique


def normalize_diagnostics(entries: Sequence[JsonValue]) -> NormalizationResult:
    """Turn the decoded input array into ordered, unique diagnostics.

    Args:
        entries: Elements of the input JSON array.

    Returns:
        NormalizationResult: Deduplicated diagnostics sorted by position and
        the number of raw entries they were drawn from.

    Raises:
        NoValidDiagnosticsError: If no entry carries all required fields.
    """

    complete = filter_complete(entries)
    if not complete:
        raise NoValidDiagnosticsError()
    unique = dedupe_diagnostics(sort_diagnostics(complete))
    return NormalizationResult(diagnostics=tuple(unique), total=len(entries))


__all__ = [
    "NormalizationResult",
    "dedupe_diagnostics",
    "filter_complete",
    "normalize_diagnostics",
    "sort_diagnostics",
]
