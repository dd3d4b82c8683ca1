# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Data models for diagnostics read from JSON and their normalised form."""

from __future__ import annotations

import json
import math
import re
from collections.abc import Mapping
from typing import Final

from pydantic import BaseModel, ConfigDict, Field

type JsonScalar = str | int | float | bool | None
type JsonValue = JsonScalar | list[JsonValue] | dict[str, JsonValue]
type IdentityKey = tuple[str, str, str, str]

UNKNOWN_CODE: Final[str] = "unknown"
MISSING_CODE_PLACEHOLDER: Final[str] = " "
CODE_VALUE_KEY: Final[str] = "value"
REQUIRED_FIELDS: Final[frozenset[str]] = frozenset({"start_line_number", "start_column", "message"})

_CONTROL_WHITESPACE: Final[re.Pattern[str]] = re.compile(r"[\r\n\t\f\v]+")


def extract_code(value: JsonValue) -> str:
    """Resolve a diagnostic ``code`` field into its string form.

    Args:
        value: Code as emitted by the producing tool. Either a string, an
            object carrying a string ``value`` entry, or anything else.

    Returns:
        str: The code itself, the embedded ``value``, or ``"unknown"``.
    """

    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        embedded = value.get(CODE_VALUE_KEY)
        if isinstance(embedded, str):
            return embedded
    return UNKNOWN_CODE


def clean_whitespace[T](value: T) -> T | str:
    """Collapse runs of control whitespace in strings to a single space.

    Non-string values are returned unchanged.
    """

    if isinstance(value, str):
        return _CONTROL_WHITESPACE.sub(" ", value)
    return value


def render_value(value: JsonValue) -> str:
    """Return the text used when a JSON value is interpolated into output.

    Args:
        value: Decoded JSON value.

    Returns:
        str: Strings verbatim, integral numbers without a fractional part,
        booleans as ``true``/``false``, ``null`` as ``null`` and containers as
        compact JSON.
    """

    if isinstance(value, str):
        return value
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and math.isfinite(value) and value.is_integer():
        return str(int(value))
    if isinstance(value, (int, float)):
        return str(value)
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


class RawDiagnostic(BaseModel):
    """Capture a diagnostic entry exactly as it appeared in the input array.

    Every field is optional. Presence is tracked through ``model_fields_set``
    so that an explicit ``null`` counts as present while a missing key does not.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    start_line_number: JsonValue = Field(default=None, alias="startLineNumber")
    start_column: JsonValue = Field(default=None, alias="startColumn")
    message: JsonValue = None
    code: JsonValue = None

    @classmethod
    def from_entry(cls, entry: JsonValue) -> RawDiagnostic:
        """Build a raw diagnostic from one element of the input array.

        Args:
            entry: Decoded JSON element. Elements that are not objects carry
                no fields and therefore never qualify as complete.

        Returns:
            RawDiagnostic: Permissive model over ``entry``.
        """

        if not isinstance(entry, Mapping):
            return cls()
        return cls.model_validate(entry)

    @property
    def is_complete(self) -> bool:
        """Return ``True`` when line, column and message are all present."""

        return REQUIRED_FIELDS <= self.model_fields_set

    @property
    def has_code(self) -> bool:
        """Return ``True`` when the entry supplied a ``code`` key."""

        return "code" in self.model_fields_set

    @property
    def identity_key(self) -> IdentityKey:
        """Return the tuple that identifies duplicate diagnostics.

        The code is resolved and whitespace-cleaned; the message is kept as
        written, so messages differing only in control whitespace stay distinct.
        """

        return (
            render_value(self.start_line_number),
            render_value(self.start_column),
            clean_whitespace(extract_code(self.code)),
            render_value(self.message),
        )


class Diagnostic(BaseModel):
    """Normalised diagnostic ready for rendering."""

    model_config = ConfigDict(frozen=True)

    line: JsonValue
    column: JsonValue
    code: str
    message: JsonValue

    @classmethod
    def from_raw(cls, raw: RawDiagnostic) -> Diagnostic:
        """Return the normalised form of a complete ``raw`` diagnostic.

        An absent ``code`` becomes a single-space placeholder, unlike a present
        but unrecognised code which resolves to ``"unknown"``.
        """

        code = extract_code(raw.code) if raw.has_code else MISSING_CODE_PLACEHOLDER
        return cls(
            line=raw.start_line_number,
            column=raw.start_column,
            code=code,
            message=raw.message,
        )

    @property
    def display_code(self) -> str:
        """Return the code with control whitespace collapsed."""

        return clean_whitespace(self.code)

    @property
    def display_message(self) -> str:
        """Return the message text with control whitespace collapsed."""

        return clean_whitespace(render_value(self.message))


__all__ = [
    "CODE_VALUE_KEY",
    "Diagnostic",
    "IdentityKey",
    "JsonScalar",
    "JsonValue",
    "MISSING_CODE_PLACEHOLDER",
    "REQUIRED_FIELDS",
    "RawDiagnostic",
    "UNKNOWN_CODE",
    "clean_whitespace",
    "extract_code",
    "render_value",
]
