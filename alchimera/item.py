"""Item definitions and material classes."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from alchimera.ids import IdError, ItemId


class MaterialClass(enum.Enum):
    """Broad material class used by recipes that accept equivalent materials."""

    WOOD = "wood"
    STONE = "stone"
    METAL = "metal"
    FIBER = "fiber"
    PLANT = "plant"
    SOIL = "soil"
    CRYSTAL = "crystal"


class ItemDefinitionError(ValueError):
    """Raised for an invalid item id or stack limit."""


@dataclass(frozen=True)
class ItemDefinition:
    """Data definition for an item type."""

    id: ItemId
    display_name: str
    material_class: MaterialClass
    stack_limit: int

    def __init__(
        self,
        id: str | ItemId,
        display_name: str,
        material_class: MaterialClass,
        stack_limit: int,
    ) -> None:
        if stack_limit <= 0:
            raise ItemDefinitionError("item stack_limit must be greater than zero")
        if not isinstance(id, ItemId):
            try:
                id = ItemId(id)
            except IdError as error:
                raise ItemDefinitionError(f"invalid item id: {error}") from error
        object.__setattr__(self, "id", id)
        object.__setattr__(self, "display_name", str(display_name))
        object.__setattr__(self, "material_class", material_class)
        object.__setattr__(self, "stack_limit", stack_limit)