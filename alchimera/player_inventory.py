"""Player inventory used by gameplay systems."""

from __future__ import annotations

from collections.abc import Iterator

from alchimera.ids import ItemId
from alchimera.inventory import Inventory, ItemStack

DEFAULT_SLOT_COUNT = 24


class PlayerInventory:
    """The player's inventory: a fixed number of slots holding item stacks."""

    def __init__(self, slot_count: int = DEFAULT_SLOT_COUNT) -> None:
        self._inventory = Inventory(slot_count)

    def total_quantity(self, item_id: ItemId) -> int:
        return self._inventory.total_quantity(item_id)

    def add_items(self, item_id: ItemId, quantity: int, stack_limit: int) -> int:
        """Add items and return the quantity that did not fit.

        Raises InvalidStackLimitError for a stack limit of zero.
        """
        return self._inventory.add_items(item_id, quantity, stack_limit)

    def remove_items(self, item_id: ItemId, quantity: int) -> None:
        """Remove items; raises InsufficientQuantityError if too few are held."""
        self._inventory.remove_items(item_id, quantity)

    def item_stacks(self) -> Iterator[ItemStack]:
        """Yield the occupied stacks in slot order."""
        return (stack for stack in self._inventory.slots if stack is not None)

    def slot_count(self) -> int:
        return len(self._inventory.slots)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PlayerInventory):
            return NotImplemented
        return self._inventory == other._inventory

    def __repr__(self) -> str:
        return f"PlayerInventory({self._inventory!r})"