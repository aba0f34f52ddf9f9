"""Inventory slots and item stacks."""

from __future__ import annotations

from dataclasses import dataclass, replace

from alchimera.ids import ItemId


class InventoryError(Exception):
    """Base class for inventory operation failures."""


class InvalidStackLimitError(InventoryError, ValueError):
    """Raised when a stack limit of zero is given."""

    def __init__(self) -> None:
        super().__init__("stack_limit must be greater than zero")


class InsufficientQuantityError(InventoryError):
    """Raised when more items are requested than the inventory holds."""

    def __init__(self, available: int, requested: int) -> None:
        super().__init__(f"insufficient quantity: available {available}, requested {requested}")
        self.available = available
        self.requested = requested


@dataclass(frozen=True)
class ItemStack:
    """A stack of identical items in one slot."""

    item_id: ItemId
    quantity: int


class Inventory:
    """Fixed-size inventory made of optional item stacks."""

    def __init__(self, slot_count: int) -> None:
        self._slots: list[ItemStack | None] = [None] * slot_count

    @property
    def slots(self) -> tuple[ItemStack | None, ...]:
        return tuple(self._slots)

    def add_items(self, item_id: ItemId, quantity: int, stack_limit: int) -> int:
        """Add items, topping up matching stacks before opening new ones.

        Returns the quantity that did not fit.
        """
        if stack_limit <= 0:
            raise InvalidStackLimitError()

        remaining = quantity
        for position, stack in enumerate(self._slots):
            if stack is None or stack.item_id != item_id:
                continue
            added = min(remaining, max(stack_limit - stack.quantity, 0))
            self._slots[position] = replace(stack, quantity=stack.quantity + added)
            remaining -= added
            if remaining == 0:
                return 0

        for position, stack in enumerate(self._slots):
            if stack is not None:
                continue
            inserted = min(remaining, stack_limit)
            self._slots[position] = ItemStack(item_id, inserted)
            remaining -= inserted
            if remaining == 0:
                return 0

        return remaining

    def remove_items(self, item_id: ItemId, quantity: int) -> None:
        """Remove items across stacks, freeing slots that become empty."""
        available = self.total_quantity(item_id)
        if available < quantity:
            raise InsufficientQuantityError(available, quantity)

        remaining = quantity
        for position, stack in enumerate(self._slots):
            if stack is None or stack.item_id != item_id:
                continue
            removed = min(remaining, stack.quantity)
            left = stack.quantity - removed
            self._slots[position] = replace(stack, quantity=left) if left else None
            remaining -= removed
            if remaining == 0:
                return

    def total_quantity(self, item_id: ItemId) -> int:
        return sum(
            stack.quantity for stack in self._slots if stack is not None and stack.item_id == item_id
        )

    def occupied_slot_count(self) -> int:
        return sum(1 for stack in self._slots if stack is not None)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Inventory):
            return NotImplemented
        return self._slots == other._slots

    def __repr__(self) -> str:
        return f"Inventory(slots={self._slots!r})"