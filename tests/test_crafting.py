import pytest

from alchimera.crafting import (
    AvailableIngredient,
    CraftInputConsumption,
    InvalidQuantityError,
    InvalidRecipeIdError,
    MissingInputError,
    Recipe,
    RecipeInput,
)
from alchimera.ids import ItemId, RecipeId
from alchimera.item import MaterialClass


def ingredient(item, material_class, quantity):
    return AvailableIngredient(ItemId(item), material_class, quantity)


def test_recipe_matches_exact_item_inputs():
    recipe = Recipe("tool.torch", [RecipeInput.of_item(ItemId("item.stick"), 2)], ItemId("item.torch"), 4)
    available = [ingredient("item.stick", MaterialClass.WOOD, 3)]

    plan = recipe.match_inputs(available)

    assert plan.output.item_id == ItemId("item.torch")
    assert plan.output.quantity == 4
    assert plan.consumed[0].item_id == ItemId("item.stick")
    assert plan.consumed[0].quantity == 2


def test_recipe_matches_material_class_inputs():
    recipe = Recipe(
        "tool.stone_axe",
        [
            RecipeInput.of_class(MaterialClass.STONE, 1),
            RecipeInput.of_class(MaterialClass.WOOD, 1),
            RecipeInput.of_class(MaterialClass.FIBER, 1),
        ],
        ItemId("item.stone_axe"),
        1,
    )
    available = [
        ingredient("item.flint", MaterialClass.STONE, 1),
        ingredient("item.branch", MaterialClass.WOOD, 2),
        ingredient("item.vine", MaterialClass.FIBER, 3),
    ]

    plan = recipe.match_inputs(available)

    assert len(plan.consumed) == 3
    assert plan.consumed[0].item_id == ItemId("item.flint")
    assert plan.output.item_id == ItemId("item.stone_axe")


def test_recipe_rejects_missing_required_input():
    recipe = Recipe(
        "tool.stone_axe",
        [RecipeInput.of_class(MaterialClass.STONE, 2), RecipeInput.of_class(MaterialClass.WOOD, 1)],
        ItemId("item.stone_axe"),
        1,
    )
    available = [ingredient("item.flint", MaterialClass.STONE, 1)]

    with pytest.raises(MissingInputError) as caught:
        recipe.match_inputs(available)

    assert caught.value == MissingInputError(input_index=0, required=2, available=1)
    assert str(caught.value) == "missing recipe input 0: required 2, available 1"


def test_crafting_consumes_inputs_and_returns_output_plan():
    recipe = Recipe(
        "tool.stone_axe",
        [RecipeInput.of_class(MaterialClass.STONE, 1), RecipeInput.of_item(ItemId("item.handle"), 1)],
        ItemId("item.stone_axe"),
        1,
    )
    available = [
        ingredient("item.flint", MaterialClass.STONE, 3),
        ingredient("item.handle", MaterialClass.WOOD, 1),
    ]

    plan = recipe.match_inputs(available)

    assert len(plan.consumed) == 2
    assert plan.consumed[0].item_id == ItemId("item.flint")
    assert plan.consumed[0].quantity == 1
    assert plan.consumed[1].item_id == ItemId("item.handle")
    assert plan.consumed[1].quantity == 1
    assert plan.output.item_id == ItemId("item.stone_axe")
    assert plan.output.quantity == 1


def test_input_draws_from_several_matching_ingredients():
    recipe = Recipe("tool.raft", [RecipeInput.of_class(MaterialClass.WOOD, 5)], ItemId("item.raft"), 1)
    available = [
        ingredient("item.branch", MaterialClass.WOOD, 2),
        ingredient("item.log", MaterialClass.WOOD, 4),
    ]

    plan = recipe.match_inputs(available)

    assert plan.consumed == (
        CraftInputConsumption(ItemId("item.branch"), 2),
        CraftInputConsumption(ItemId("item.log"), 3),
    )


def test_later_input_cannot_reuse_consumed_quantity():
    recipe = Recipe(
        "tool.pair",
        [RecipeInput.of_class(MaterialClass.WOOD, 2), RecipeInput.of_item(ItemId("item.log"), 1)],
        ItemId("item.pair"),
        1,
    )
    with pytest.raises(MissingInputError) as caught:
        recipe.match_inputs([ingredient("item.log", MaterialClass.WOOD, 2)])
    assert (caught.value.input_index, caught.value.required, caught.value.available) == (1, 1, 0)


def test_recipe_requires_positive_output_quantity():
    with pytest.raises(InvalidQuantityError):
        Recipe("tool.torch", [], ItemId("item.torch"), 0)


def test_recipe_rejects_blank_id():
    with pytest.raises(InvalidRecipeIdError, match="invalid recipe id: RecipeId cannot be empty"):
        Recipe("  ", [], ItemId("item.torch"), 1)


def test_recipe_keeps_id():
    recipe = Recipe("tool.torch", [], ItemId("item.torch"), 1)
    assert recipe.id == RecipeId("tool.torch")
    assert recipe.match_inputs([]).consumed == ()