"""Inventory and hotbar UI state."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from alchimera.inventory import Inventory


class HotbarSelectionMode(enum.Enum):
    """Selection behaviour at the ends of the hotbar."""

    WRAP = "wrap"
    CLAMP = "clamp"


class HotbarSelection:
    """Current hotbar selection state."""

    def __init__(
        self,
        selected_slot: int = 0,
        slot_count: int = 8,
        mode: HotbarSelectionMode = HotbarSelectionMode.WRAP,
    ) -> None:
        self._slot_count = max(slot_count, 1)
        self._mode = mode
        self._selected_slot = 0
        self.select_slot(selected_slot)

    @property
    def selected_slot(self) -> int:
        return self._selected_slot

    @property
    def slot_count(self) -> int:
        return self._slot_count

    @property
    def mode(self) -> HotbarSelectionMode:
        return self._mode

    def select_next(self) -> None:
        self.select_slot(self._selected_slot + 1)

    def select_previous(self) -> None:
        if self._selected_slot > 0:
            self._selected_slot -= 1
        elif self._mode is HotbarSelectionMode.WRAP:
            self._selected_slot = self._slot_count - 1

    def select_slot(self, slot: int) -> None:
        """Select a slot, wrapping or clamping it into range."""
        if slot < 0:
            raise ValueError("hotbar slot cannot be negative")
        if self._mode is HotbarSelectionMode.WRAP:
            self._selected_slot = slot % self._slot_count
        else:
            self._selected_slot = min(slot, self._slot_count - 1)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, HotbarSelection):
            return NotImplemented
        return (self._selected_slot, self._slot_count, self._mode) == (
            other._selected_slot,
            other._slot_count,
            other._mode,
        )

    def __repr__(self) -> str:
        return (
            f"HotbarSelection(selected_slot={self._selected_slot}, "
            f"slot_count={self._slot_count}, mode={self._mode})"
        )


@dataclass
class InventoryUiState:
    """Inventory and hotbar model shown by the UI."""

    inventory: Inventory = field(default_factory=lambda: Inventory(24))
    hotbar: HotbarSelection = field(default_factory=HotbarSelection)

    @classmethod
    def with_slot_counts(cls, inventory_slots: int, hotbar_slots: int) -> InventoryUiState:
        return cls(
            Inventory(inventory_slots),
            HotbarSelection(0, hotbar_slots, HotbarSelectionMode.WRAP),
        )