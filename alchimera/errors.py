"""Validation errors for data-driven definitions and references."""

from __future__ import annotations

import math


def _format_number(value: float) -> str:
    if math.isfinite(value) and float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class ValidationError(ValueError):
    """Base class for definition validation failures."""


class DuplicateIdError(ValidationError):
    """An identifier occurs more than once within a context."""

    def __init__(self, id: str, context: str) -> None:
        super().__init__(f"duplicate id {id} in {context}")
        self.id = id
        self.context = context


class MissingReferenceError(ValidationError):
    """A referenced identifier is not among the known identifiers."""

    def __init__(self, id: str, context: str) -> None:
        super().__init__(f"missing reference {id} in {context}")
        self.id = id
        self.context = context


class NumericOutOfRangeError(ValidationError):
    """A numeric field lies outside its inclusive range."""

    def __init__(self, field: str, value: float, min: float, max: float) -> None:
        super().__init__(
            f"numeric field {field}={_format_number(value)} is outside inclusive range "
            f"{_format_number(min)}..={_format_number(max)}"
        )
        self.field = field
        self.value = value
        self.min = min
        self.max = max