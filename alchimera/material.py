"""Material definitions and alchemical traits."""

from __future__ import annotations

import enum
import math
from collections.abc import Iterable
from dataclasses import dataclass

from alchimera.ids import IdError, MaterialId


class AlchemyTrait(enum.Enum):
    """Alchemical trait tags carried by materials."""

    GROWTH = "growth"
    HEAT = "heat"
    COLD = "cold"
    STABILITY = "stability"
    VOLATILITY = "volatility"
    CONDUCTIVE = "conductive"


class MaterialDefinitionError(ValueError):
    """Raised for an invalid material id or an out-of-range property."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.field = field

    @classmethod
    def out_of_range(cls, field: str) -> MaterialDefinitionError:
        return cls(f"material field {field} is out of range", field)


def _validate_non_negative(field: str, value: float) -> None:
    if math.isnan(value) or value < 0.0:
        raise MaterialDefinitionError.out_of_range(field)


@dataclass(frozen=True)
class MaterialProperties:
    """Numeric material properties used by gameplay rules."""

    hardness: float
    density: float
    flammability: float

    def validate(self) -> None:
        """Raise MaterialDefinitionError if any property is out of range."""
        _validate_non_negative("hardness", self.hardness)
        _validate_non_negative("density", self.density)
        if not 0.0 <= self.flammability <= 1.0:
            raise MaterialDefinitionError.out_of_range("flammability")


@dataclass(frozen=True)
class MaterialDefinition:
    """Data-driven material used by generation, crafting and alchemy."""

    id: MaterialId
    display_name: str
    properties: MaterialProperties
    traits: tuple[AlchemyTrait, ...] = ()

    def __init__(
        self,
        id: str | MaterialId,
        display_name: str,
        properties: MaterialProperties,
        traits: Iterable[AlchemyTrait] = (),
    ) -> None:
        properties.validate()
        if not isinstance(id, MaterialId):
            try:
                id = MaterialId(id)
            except IdError as error:
                raise MaterialDefinitionError(f"invalid material id: {error}") from error
        object.__setattr__(self, "id", id)
        object.__setattr__(self, "display_name", str(display_name))
        object.__setattr__(self, "properties", properties)
        object.__setattr__(self, "traits", tuple(traits))