"""Strongly typed stable identifiers for domain objects."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from alchimera.seed import WorldSeed


class IdError(ValueError):
    """Raised when a string identifier is empty or only whitespace."""

    def __init__(self, type_name: str) -> None:
        super().__init__(f"{type_name} cannot be empty")
        self.type_name = type_name


@dataclass(frozen=True, order=True)
class _StringId:
    value: str

    def __post_init__(self) -> None:
        if not self.value.strip():
            raise IdError(type(self).__name__)

    def __str__(self) -> str:
        return self.value


class PrototypeId(_StringId):
    """Identifier of an object prototype."""


class MaterialId(_StringId):
    """Identifier of a material definition."""


class ItemId(_StringId):
    """Identifier of an item definition."""


class RecipeId(_StringId):
    """Identifier of a crafting recipe."""


class ChunkId(_StringId):
    """Identifier of a world chunk."""


@dataclass(frozen=True, order=True)
class ObjectId:
    """Stable identifier for a generated object instance."""

    value: int

    @classmethod
    def from_seed_chunk_and_index(
        cls, seed: WorldSeed, chunk: Sequence[int], index: int
    ) -> ObjectId:
        """Derive an object ID from deterministic generation inputs."""
        return cls(seed.derive_child("object.instance", chunk, index).value)

    def __str__(self) -> str:
        return f"object.{self.value:016x}"