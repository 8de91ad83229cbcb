"""
Repository tests against a real (in-memory SQLite) session.

Verifies:
- point lookups are scoped by (userId, sort key)
- conditional update/delete report a missing record as None and write nothing
- range queries are inclusive and ordered
- store failures are rolled back and re-raised
"""

import pytest
from unittest.mock import patch
from sqlalchemy.exc import IntegrityError, OperationalError
from sqlalchemy.orm import Session

from domain.models import InventoryItem, MealRecord
from repositories import InventoryRepository, MealRepository

NOW = "2025-01-05T09:30:00.000Z"


def make_item(user_id="user-1", item_id="item-1", **overrides) -> InventoryItem:
    fields = dict(
        user_id=user_id,
        item_id=item_id,
        name="Milk",
        category="Dairy",
        quantity=1.0,
        created_at=NOW,
        updated_at=NOW,
    )
    fields.update(overrides)
    return InventoryItem(**fields)


def make_meal(record_id, record_date, user_id="user-1", created_at=NOW) -> MealRecord:
    return MealRecord(
        user_id=user_id,
        record_id=record_id,
        record_date=record_date,
        meal_type="lunch",
        items=[{"name": "Soup", "quantity": 1}],
        created_at=created_at,
        updated_at=created_at,
    )


# =============================================================================
# GET / PUT
# =============================================================================


def test_put_and_get(db_session: Session):
    repo = InventoryRepository(db_session)
    repo.put(make_item())

    item = repo.get("user-1", "item-1")

    assert item is not None
    assert item.name == "Milk"
    assert repo.get("user-2", "item-1") is None
    assert repo.get("user-1", "missing") is None


def test_list_for_user_orders_by_creation(db_session: Session):
    repo = InventoryRepository(db_session)
    repo.put(make_item(item_id="b", created_at="2025-01-02T00:00:00.000Z"))
    repo.put(make_item(item_id="a", created_at="2025-01-03T00:00:00.000Z"))
    repo.put(make_item(user_id="user-2", item_id="c"))

    items = repo.list_for_user("user-1")

    assert [i.item_id for i in items] == ["b", "a"]


# =============================================================================
# CONDITIONAL WRITES
# =============================================================================


def test_update_if_exists_returns_post_update_row(db_session: Session):
    repo = InventoryRepository(db_session)
    repo.put(make_item())

    row = repo.update_if_exists(
        "user-1", "item-1", {"quantity": 2.0, "updated_at": "2025-01-06T00:00:00.000Z"}
    )

    assert row["quantity"] == 2.0
    assert row["name"] == "Milk"
    assert row["created_at"] == NOW
    assert row["updated_at"] == "2025-01-06T00:00:00.000Z"
    assert repo.get("user-1", "item-1").quantity == 2.0


def test_update_if_exists_missing_record(db_session: Session):
    repo = InventoryRepository(db_session)

    assert repo.update_if_exists("user-1", "ghost", {"quantity": 2.0}) is None
    assert repo.list_for_user("user-1") == []


def test_update_if_exists_is_owner_scoped(db_session: Session):
    repo = InventoryRepository(db_session)
    repo.put(make_item())

    assert repo.update_if_exists("intruder", "item-1", {"quantity": 9.0}) is None
    assert repo.get("user-1", "item-1").quantity == 1.0


def test_delete_if_exists_returns_snapshot(db_session: Session):
    repo = InventoryRepository(db_session)
    repo.put(make_item(memo="top shelf"))

    row = repo.delete_if_exists("user-1", "item-1")

    assert row["item_id"] == "item-1"
    assert row["memo"] == "top shelf"
    assert repo.get("user-1", "item-1") is None
    assert repo.delete_if_exists("user-1", "item-1") is None


def test_quantity_check_constraint(db_session: Session):
    repo = InventoryRepository(db_session)
    repo.put(make_item())

    with pytest.raises(IntegrityError):
        repo.update_if_exists("user-1", "item-1", {"quantity": -1.0})

    assert repo.get("user-1", "item-1").quantity == 1.0


def test_store_failure_is_rolled_back_and_reraised(db_session: Session):
    repo = InventoryRepository(db_session)
    failure = OperationalError("UPDATE inventory_item", {}, Exception("database is locked"))

    with patch.object(db_session, "execute", side_effect=failure), patch.object(
        db_session, "rollback", wraps=db_session.rollback
    ) as rollback:
        with pytest.raises(OperationalError):
            repo.update_if_exists("user-1", "item-1", {"quantity": 2.0})

    rollback.assert_called_once()


# =============================================================================
# RANGE QUERIES
# =============================================================================


def test_meal_range_is_inclusive(db_session: Session):
    repo = MealRepository(db_session)
    for i, day in enumerate(["2024-05-01", "2024-05-02", "2024-05-03", "2024-05-04"]):
        repo.put(make_meal(f"m{i}", day))

    records = repo.list_for_user("user-1", "2024-05-02", "2024-05-03")

    assert [r.record_date for r in records] == ["2024-05-02", "2024-05-03"]


def test_meal_range_orders_same_day_by_creation(db_session: Session):
    repo = MealRepository(db_session)
    repo.put(make_meal("late", "2024-05-02", created_at="2024-05-02T20:00:00.000Z"))
    repo.put(make_meal("early", "2024-05-02", created_at="2024-05-02T07:00:00.000Z"))

    records = repo.list_for_user("user-1")

    assert [r.record_id for r in records] == ["early", "late"]


def test_meal_range_open_ended(db_session: Session):
    repo = MealRepository(db_session)
    repo.put(make_meal("a", "2024-05-01"))
    repo.put(make_meal("b", "2024-05-09"))

    assert [r.record_id for r in repo.list_for_user("user-1", start_date="2024-05-05")] == ["b"]
    assert [r.record_id for r in repo.list_for_user("user-1", end_date="2024-05-05")] == ["a"]
