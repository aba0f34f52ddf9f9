"""Recipe matching and craft result planning."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from alchimera.ids import IdError, ItemId, RecipeId
from alchimera.inventory import ItemStack
from alchimera.item import MaterialClass


class CraftingError(Exception):
    """Base class for crafting failures."""


class InvalidRecipeIdError(CraftingError, ValueError):
    """Raised when a recipe id is empty."""

    def __init__(self, error: IdError) -> None:
        super().__init__(f"invalid recipe id: {error}")
        self.error = error


class InvalidQuantityError(CraftingError, ValueError):
    """Raised when a recipe output quantity is zero."""

    def __init__(self) -> None:
        super().__init__("recipe quantities must be greater than zero")


class MissingInputError(CraftingError):
    """Raised when the available ingredients cannot cover a recipe input."""

    def __init__(self, input_index: int, required: int, available: int) -> None:
        super().__init__(
            f"missing recipe input {input_index}: required {required}, available {available}"
        )
        self.input_index = input_index
        self.required = required
        self.available = available

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, MissingInputError):
            return NotImplemented
        return (self.input_index, self.required, self.available) == (
            other.input_index,
            other.required,
            other.available,
        )

    def __hash__(self) -> int:
        return hash((self.input_index, self.required, self.available))


@dataclass(frozen=True)
class AvailableIngredient:
    """Available item quantity with its material class."""

    item_id: ItemId
    material_class: MaterialClass
    quantity: int


@dataclass(frozen=True)
class RecipeInput:
    """One required recipe input, selected by exact item or by material class."""

    selector: ItemId | MaterialClass
    quantity: int

    @classmethod
    def of_item(cls, item_id: ItemId, quantity: int) -> RecipeInput:
        return cls(item_id, quantity)

    @classmethod
    def of_class(cls, material_class: MaterialClass, quantity: int) -> RecipeInput:
        return cls(material_class, quantity)

    def matches(self, ingredient: AvailableIngredient) -> bool:
        if isinstance(self.selector, MaterialClass):
            return self.selector == ingredient.material_class
        return self.selector == ingredient.item_id


@dataclass(frozen=True)
class CraftInputConsumption:
    """Quantity to remove from a specific item as part of a craft."""

    item_id: ItemId
    quantity: int


@dataclass(frozen=True)
class CraftPlan:
    """Craft result plan: consume these inputs, then grant this output."""

    consumed: tuple[CraftInputConsumption, ...]
    output: ItemStack


@dataclass(frozen=True, init=False)
class Recipe:
    """A crafting recipe with inputs and one item output."""

    id: RecipeId
    inputs: tuple[RecipeInput, ...]
    output: ItemStack

    def __init__(
        self,
        id: str | RecipeId,
        inputs: Iterable[RecipeInput],
        output_item: ItemId,
        output_quantity: int,
    ) -> None:
        if output_quantity <= 0:
            raise InvalidQuantityError()
        if not isinstance(id, RecipeId):
            try:
                id = RecipeId(id)
            except IdError as error:
                raise InvalidRecipeIdError(error) from error
        object.__setattr__(self, "id", id)
        object.__setattr__(self, "inputs", tuple(inputs))
        object.__setattr__(self, "output", ItemStack(output_item, output_quantity))

    def match_inputs(self, available: Sequence[AvailableIngredient]) -> CraftPlan:
        """Plan which ingredients to consume; raise MissingInputError if one falls short."""
        remaining = [ingredient.quantity for ingredient in available]
        consumed: list[CraftInputConsumption] = []

        for input_index, recipe_input in enumerate(self.inputs):
            needed = recipe_input.quantity
            found = 0
            for position, ingredient in enumerate(available):
                if not recipe_input.matches(ingredient):
                    continue
                found += remaining[position]
                taken = min(needed, remaining[position])
                if taken == 0:
                    continue
                remaining[position] -= taken
                needed -= taken
                consumed.append(CraftInputConsumption(ingredient.item_id, taken))
                if needed == 0:
                    break
            if needed:
                raise MissingInputError(input_index, recipe_input.quantity, found)

        return CraftPlan(tuple(consumed), self.output)