"""Shared validation helpers for data-driven definitions."""

from __future__ import annotations

import math
from collections.abc import Iterable

from alchimera.errors import DuplicateIdError, MissingReferenceError, NumericOutOfRangeError


def ensure_unique_ids(ids: Iterable[object], context: str) -> None:
    """Raise DuplicateIdError for the first identifier seen twice."""
    seen: set[str] = set()
    for identifier in map(str, ids):
        if identifier in seen:
            raise DuplicateIdError(identifier, str(context))
        seen.add(identifier)


def ensure_reference_exists(identifier: object, known_ids: Iterable[object], context: str) -> None:
    """Raise MissingReferenceError unless the identifier is among the known ones."""
    wanted = str(identifier)
    if not any(str(known) == wanted for known in known_ids):
        raise MissingReferenceError(wanted, str(context))


def ensure_f32_in_range(field: str, value: float, minimum: float, maximum: float) -> None:
    """Raise NumericOutOfRangeError when value is NaN or outside [minimum, maximum]."""
    if math.isnan(value) or value < minimum or value > maximum:
        raise NumericOutOfRangeError(str(field), value, minimum, maximum)