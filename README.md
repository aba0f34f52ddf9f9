# alchimera

This package holds the game rules for a survival crafting game. It covers
deterministic world seeds and stable identifiers. It defines materials and
items and provides a slot-based inventory. It matches crafting recipes and
runs two-ingredient alchemy experiments. It also keeps hotbar selection state
and diagnostics overlay state. It uses only the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

- `alchimera.seed`: `WorldSeed(value)` and
  `WorldSeed.derive_child(label, coordinates, index)`.
  - Child seeds come from a fixed FNV-1a mixer, so they are the same in every
    process and on every platform.
  - Seeds and indices must fit in 64 unsigned bits. Coordinates must fit in 32
    signed bits. Other values raise `ValueError`.
- `alchimera.ids`: stable identifiers.
  - `PrototypeId`, `MaterialId`, `ItemId`, `RecipeId` and `ChunkId` reject
    empty or whitespace-only strings with `IdError`.
  - `ObjectId.from_seed_chunk_and_index(seed, chunk, index)` derives an object
    identifier. It prints as `object.<16 hex digits>`.
- `alchimera.errors` and `alchimera.validation`: the checks
  `ensure_unique_ids`, `ensure_reference_exists` and `ensure_f32_in_range`.
  - They raise `DuplicateIdError`, `MissingReferenceError` and
    `NumericOutOfRangeError`.
  - All three errors are subclasses of `ValidationError`.
- `alchimera.material`: `MaterialDefinition`, with `MaterialProperties`
  (hardness, density, flammability) and a tuple of `AlchemyTrait` tags.
  Invalid properties or ids raise `MaterialDefinitionError`.
- `alchimera.item`: `ItemDefinition`, with its `MaterialClass` and stack limit.
  Invalid definitions raise `ItemDefinitionError`.
- `alchimera.save`: `SaveData`.
  - It holds a world seed label and a schema version.
  - `to_json()` and `SaveData.from_json(text)` convert it to and from JSON.
  - `validate_version()` raises `SaveError` when the version is not
    `CURRENT_SAVE_VERSION`.
- `alchimera.inventory`: `Inventory(slot_count)` holding `ItemStack`s.
  - `add_items` fills matching stacks first and then empty slots. It returns
    the quantity that did not fit.
  - `remove_items` raises `InsufficientQuantityError` when the inventory holds
    too few items.
  - A stack limit of zero raises `InvalidStackLimitError`.
- `alchimera.alchemy`: `AlchemyKnowledge` and `AlchemyExperiment`.
  - `AlchemyKnowledge.inspect_material` records a material's traits.
  - `AlchemyExperiment.combine` tries each trait pair against
    `AlchemyExperimentRule`s, in either order. It returns an
    `AlchemyExperimentResult`.
- `alchimera.crafting`: `Recipe`, `RecipeInput.of_item` and
  `RecipeInput.of_class`, and `Recipe.match_inputs`.
- `alchimera.input_map`: `InputAction`, `InputBinding`, `InputMap` and
  `default_input_map()`. The default map binds WASD, Space, E and the keys 1–9,
  which select hotbar slots 0–8.
- `alchimera.hotbar`: `HotbarSelection` and `InventoryUiState`.
  - `HotbarSelection` wraps or clamps according to `HotbarSelectionMode`.
  - `InventoryUiState` defaults to 24 inventory slots and 8 hotbar slots.
- `alchimera.player_inventory`: `PlayerInventory`, which has 24 slots by
  default.
- `alchimera.hand_crafting`: `craft_recipe(recipe, inventory, definitions, failures)`.
  - It applies a recipe to a `PlayerInventory`, using the
    `ItemCraftingDefinitions` registry.
  - It records problems in `HandCraftingFailures`: `MissingItemDefinition`,
    `CraftingFailure`, `InventoryFailure` and `InventoryFull`.
  - It returns the applied `CraftPlan`, or `None` when the craft could not
    start.
- `alchimera.diagnostics`: `RuntimeDiagnostics` and `DiagnosticsOverlay`.
  - `RuntimeDiagnostics.update_from_measurements` stores rounded measurements.
  - `DiagnosticsOverlay.toggle` and `DiagnosticsOverlay.sync` change the
    overlay's visibility and its copy of the metrics.

## Example

```python
from alchimera.crafting import AvailableIngredient, Recipe, RecipeInput
from alchimera.ids import ItemId
from alchimera.inventory import Inventory
from alchimera.item import MaterialClass

log = ItemId("item.log")
inventory = Inventory(2)
overflow = inventory.add_items(log, 70, 64)   # 0; the logs fill two stacks, 64 and 6
inventory.remove_items(log, 12)
assert inventory.total_quantity(log) == 58

recipe = Recipe(
    "tool.stone_axe",
    [
        RecipeInput.of_class(MaterialClass.STONE, 1),
        RecipeInput.of_item(ItemId("item.handle"), 1),
    ],
    ItemId("item.stone_axe"),
    1,
)
plan = recipe.match_inputs([
    AvailableIngredient(ItemId("item.flint"), MaterialClass.STONE, 3),
    AvailableIngredient(ItemId("item.handle"), MaterialClass.WOOD, 1),
])
```

`match_inputs` returns a `CraftPlan`. The plan lists the items to consume and
the output to grant. If an input cannot be covered, the method raises
`MissingInputError`, which carries the input's index, the quantity required
and the quantity available.

## What it does not do

This package contains rules and state only. It has no game loop, window,
rendering or terrain and object generation. It has no command to run. The
package also does not do the following:

- It does not stream chunks or place objects in a world.
- It does not save or load whole game states to disk. `SaveData` only
  converts its own small record to and from JSON text.
- It does not collect diagnostics measurements itself. The caller supplies the
  values.