"""Hand crafting against the player's inventory."""

from __future__ import annotations

from dataclasses import dataclass

from alchimera.crafting import AvailableIngredient, CraftingError, CraftPlan, Recipe
from alchimera.ids import ItemId
from alchimera.inventory import InventoryError
from alchimera.item import MaterialClass
from alchimera.player_inventory import PlayerInventory


@dataclass(frozen=True)
class ItemCraftingDefinition:
    """Item metadata needed to match and store crafted items."""

    item_id: ItemId
    material_class: MaterialClass
    stack_limit: int


class ItemCraftingDefinitions:
    """Registry mapping item IDs to their crafting metadata."""

    def __init__(self) -> None:
        self._definitions: dict[ItemId, ItemCraftingDefinition] = {}

    def insert(self, definition: ItemCraftingDefinition) -> None:
        self._definitions[definition.item_id] = definition

    def get(self, item_id: ItemId) -> ItemCraftingDefinition | None:
        return self._definitions.get(item_id)

    def __len__(self) -> int:
        return len(self._definitions)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._definitions


class HandCraftingFailure:
    """Base class for recorded hand crafting failures."""


@dataclass(frozen=True)
class MissingItemDefinition(HandCraftingFailure):
    item_id: ItemId


@dataclass(frozen=True)
class CraftingFailure(HandCraftingFailure):
    error: CraftingError


@dataclass(frozen=True)
class InventoryFailure(HandCraftingFailure):
    error: InventoryError


@dataclass(frozen=True)
class InventoryFull(HandCraftingFailure):
    item_id: ItemId
    overflow: int


class HandCraftingFailures:
    """Recent hand crafting failures, oldest first."""

    def __init__(self) -> None:
        self._failures: list[HandCraftingFailure] = []

    def push(self, failure: HandCraftingFailure) -> None:
        self._failures.append(failure)

    @property
    def failures(self) -> tuple[HandCraftingFailure, ...]:
        return tuple(self._failures)

    def is_empty(self) -> bool:
        return not self._failures

    def __len__(self) -> int:
        return len(self._failures)

    def __iter__(self):
        return iter(self._failures)


def _available_ingredients(
    inventory: PlayerInventory,
    definitions: ItemCraftingDefinitions,
    failures: HandCraftingFailures,
) -> list[AvailableIngredient] | None:
    available = []
    for stack in inventory.item_stacks():
        definition = definitions.get(stack.item_id)
        if definition is None:
            failures.push(MissingItemDefinition(stack.item_id))
            return None
        available.append(
            AvailableIngredient(stack.item_id, definition.material_class, stack.quantity)
        )
    return available


def craft_recipe(
    recipe: Recipe,
    inventory: PlayerInventory,
    definitions: ItemCraftingDefinitions,
    failures: HandCraftingFailures,
) -> CraftPlan | None:
    """Apply a recipe to the inventory, recording any failure.

    Returns the applied plan, or None when the craft could not start.
    """
    available = _available_ingredients(inventory, definitions, failures)
    if available is None:
        return None

    try:
        plan = recipe.match_inputs(available)
    except CraftingError as error:
        failures.push(CraftingFailure(error))
        return None

    output_definition = definitions.get(plan.output.item_id)
    if output_definition is None:
        failures.push(MissingItemDefinition(plan.output.item_id))
        return None

    for consumed in plan.consumed:
        try:
            inventory.remove_items(consumed.item_id, consumed.quantity)
        except InventoryError as error:
            failures.push(InventoryFailure(error))

    overflow = inventory.add_items(
        plan.output.item_id, plan.output.quantity, output_definition.stack_limit
    )
    if overflow > 0:
        failures.push(InventoryFull(plan.output.item_id, overflow))
    return plan