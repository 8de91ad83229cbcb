"""
Unit tests for the partial-update builder.
"""

import pytest

from app.exceptions import ServiceValidationError
from domain.schemas import (
    INVENTORY_UPDATABLE_FIELDS,
    MEAL_UPDATABLE_FIELDS,
    InventoryItemUpdate,
    MealRecordUpdate,
)
from services.mutation_builder import NO_CHANGES, Mutation, MutationBuilder

NOW = "2025-01-05T09:30:00.000Z"


@pytest.fixture
def inventory_builder():
    return MutationBuilder(InventoryItemUpdate, INVENTORY_UPDATABLE_FIELDS)


def test_builds_only_present_allow_listed_fields(inventory_builder):
    mutation = inventory_builder.build({"quantity": 2, "color": "white"}, NOW)

    assert isinstance(mutation, Mutation)
    assert mutation.values == {"updated_at": NOW, "quantity": 2}
    assert mutation.fields == ("quantity",)


def test_maps_camel_case_wire_names(inventory_builder):
    mutation = inventory_builder.build(
        {"storageLocation": "freezer", "expiryDate": "2025-02-01"}, NOW
    )

    assert mutation.values["storage_location"] == "freezer"
    assert mutation.values["expiry_date"] == "2025-02-01"
    assert set(mutation.fields) == {"storage_location", "expiry_date"}


def test_protected_fields_never_reach_the_mutation(inventory_builder):
    mutation = inventory_builder.build(
        {"memo": "x", "itemId": "other", "userId": "other", "createdAt": NOW}, NOW
    )

    assert set(mutation.values) == {"memo", "updated_at"}


def test_no_allow_listed_field_gives_no_changes(inventory_builder):
    result = inventory_builder.build({"userId": "abc", "unknown": 1}, NOW)

    assert result is NO_CHANGES
    assert not result


def test_empty_payload_gives_no_changes(inventory_builder):
    assert inventory_builder.build({}, NOW) is NO_CHANGES


def test_invalid_field_rejects_whole_update(inventory_builder):
    with pytest.raises(ServiceValidationError) as exc_info:
        inventory_builder.build({"quantity": -1, "memo": "ok"}, NOW)

    assert exc_info.value.message == "Invalid value for field(s): quantity"
    assert exc_info.value.details["errors"][0]["field"] == "quantity"


def test_explicit_null_is_kept_for_nullable_field(inventory_builder):
    mutation = inventory_builder.build({"memo": None}, NOW)

    assert mutation.values == {"updated_at": NOW, "memo": None}


def test_nested_items_are_stored_as_plain_dicts():
    builder = MutationBuilder(MealRecordUpdate, MEAL_UPDATABLE_FIELDS)

    mutation = builder.build({"items": [{"name": "Apple", "quantity": 1, "foodId": "f-1"}]}, NOW)

    assert mutation.values["items"] == [{"name": "Apple", "quantity": 1.0, "foodId": "f-1"}]


def test_allow_list_must_match_schema():
    with pytest.raises(ValueError):
        MutationBuilder(InventoryItemUpdate, ("quantity", "owner"))


def test_custom_timestamp_field():
    builder = MutationBuilder(InventoryItemUpdate, ("memo",), timestamp_field="modified")

    assert builder.build({"memo": "a"}, NOW).values == {"modified": NOW, "memo": "a"}
