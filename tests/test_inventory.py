import pytest

from alchimera.ids import ItemId
from alchimera.inventory import (
    InsufficientQuantityError,
    InvalidStackLimitError,
    Inventory,
    ItemStack,
)

LOG = ItemId("item.log")


def test_adding_same_item_merges_until_stack_limit():
    inventory = Inventory(2)
    assert inventory.add_items(LOG, 20, 64) == 0
    assert inventory.add_items(LOG, 40, 64) == 0
    assert inventory.slots[0].quantity == 60
    assert inventory.occupied_slot_count() == 1


def test_adding_overflow_creates_new_stack():
    inventory = Inventory(2)
    assert inventory.add_items(LOG, 70, 64) == 0
    assert inventory.slots[0].quantity == 64
    assert inventory.slots[1].quantity == 6


def test_removing_items_decrements_stack():
    inventory = Inventory(2)
    inventory.add_items(LOG, 70, 64)
    inventory.remove_items(LOG, 12)
    assert inventory.total_quantity(LOG) == 58


def test_removing_too_many_raises():
    inventory = Inventory(1)
    inventory.add_items(LOG, 5, 64)
    with pytest.raises(InsufficientQuantityError) as info:
        inventory.remove_items(LOG, 6)
    assert (info.value.available, info.value.requested) == (5, 6)
    assert inventory.total_quantity(LOG) == 5


def test_zero_stack_limit_is_rejected():
    with pytest.raises(InvalidStackLimitError):
        Inventory(1).add_items(LOG, 1, 0)


def test_full_inventory_returns_leftover():
    inventory = Inventory(1)
    assert inventory.add_items(LOG, 70, 64) == 6
    assert inventory.total_quantity(LOG) == 64


def test_removing_whole_stack_frees_slot():
    inventory = Inventory(2)
    inventory.add_items(LOG, 3, 64)
    inventory.remove_items(LOG, 3)
    assert inventory.slots == (None, None)
    assert inventory.occupied_slot_count() == 0


def test_different_items_use_separate_slots():
    stone = ItemId("item.stone")
    inventory = Inventory(3)
    inventory.add_items(LOG, 2, 64)
    inventory.add_items(stone, 4, 64)
    assert inventory.slots[:2] == (ItemStack(LOG, 2), ItemStack(stone, 4))
    assert inventory.total_quantity(stone) == 4
    assert inventory.total_quantity(LOG) == 2


def test_removal_spans_multiple_stacks():
    inventory = Inventory(2)
    inventory.add_items(LOG, 70, 64)
    inventory.remove_items(LOG, 66)
    assert inventory.slots == (None, ItemStack(LOG, 4))
    assert inventory.total_quantity(LOG) == 4