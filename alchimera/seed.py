"""World seeds and deterministic child-seed derivation."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

_MASK64 = (1 << 64) - 1
_I32_MIN = -(1 << 31)
_I32_MAX = (1 << 31) - 1

FNV_OFFSET_BASIS = 0xCBF2_9CE4_8422_2325
FNV_PRIME = 0x0000_0100_0000_01B3


def _mix_bytes(state: int, data: bytes) -> int:
    for byte in data:
        state ^= byte
        state = (state * FNV_PRIME) & _MASK64
    return state


def _mix_u64(state: int, value: int) -> int:
    return _mix_bytes(state, (value & _MASK64).to_bytes(8, "little"))


def _check_u64(name: str, value: int) -> None:
    if not 0 <= value <= _MASK64:
        raise ValueError(f"{name} must fit in an unsigned 64-bit integer, got {value}")


@dataclass(frozen=True)
class WorldSeed:
    """Root seed for deterministic world generation."""

    value: int

    def __post_init__(self) -> None:
        _check_u64("seed", self.value)

    def derive_child(self, label: str, coordinates: Iterable[int], index: int) -> WorldSeed:
        """Derive a stable child seed from a label, signed coordinates and an index.

        Uses an explicit FNV-1a style mixer so results are identical across
        processes and platforms.
        """
        coords = tuple(coordinates)
        for coordinate in coords:
            if not _I32_MIN <= coordinate <= _I32_MAX:
                raise ValueError(f"coordinate {coordinate} does not fit in a signed 32-bit integer")
        _check_u64("index", index)

        state = _mix_u64(FNV_OFFSET_BASIS, self.value)
        state = _mix_bytes(state, label.encode("utf-8"))
        state = _mix_u64(state, len(coords))
        for coordinate in coords:
            # Negative coordinates are sign-extended to 64 bits.
            state = _mix_u64(state, coordinate)
        state = _mix_u64(state, index)
        return WorldSeed(state)