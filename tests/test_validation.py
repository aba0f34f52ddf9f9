import pytest

from alchimera.errors import DuplicateIdError, MissingReferenceError, NumericOutOfRangeError
from alchimera.ids import MaterialId
from alchimera.validation import (
    ensure_f32_in_range,
    ensure_reference_exists,
    ensure_unique_ids,
)


def test_duplicate_ids_are_rejected():
    ids = ["item.stone", "item.branch", "item.stone"]
    with pytest.raises(DuplicateIdError) as info:
        ensure_unique_ids(ids, "item definitions")
    assert info.value.id == "item.stone"
    assert info.value.context == "item definitions"


def test_missing_reference_is_reported_with_context():
    known_materials = ["material.oak", "material.flint"]
    with pytest.raises(MissingReferenceError) as info:
        ensure_reference_exists("material.copper", known_materials, "item.pickaxe.material")
    assert info.value.id == "material.copper"
    assert info.value.context == "item.pickaxe.material"


def test_numeric_range_validation_reports_field_name():
    with pytest.raises(NumericOutOfRangeError) as info:
        ensure_f32_in_range("material.flammability", 1.5, 0.0, 1.0)
    error = info.value
    assert error.field == "material.flammability"
    assert (error.value, error.min, error.max) == (1.5, 0.0, 1.0)


def test_range_bounds_are_inclusive_and_nan_is_rejected():
    assert ensure_f32_in_range("f", 0.0, 0.0, 1.0) is None
    assert ensure_f32_in_range("f", 1.0, 0.0, 1.0) is None
    with pytest.raises(NumericOutOfRangeError):
        ensure_f32_in_range("f", float("nan"), 0.0, 1.0)
    with pytest.raises(NumericOutOfRangeError):
        ensure_f32_in_range("f", -0.5, 0.0, 1.0)


def test_typed_ids_are_compared_by_their_text():
    with pytest.raises(DuplicateIdError) as info:
        ensure_unique_ids([MaterialId("oak"), MaterialId("oak")], "materials")
    assert info.value.id == "oak"
    assert ensure_reference_exists(MaterialId("oak"), ["oak"], "ctx") is None