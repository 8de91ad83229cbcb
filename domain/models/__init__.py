"""
Domain models package - SQLAlchemy ORM models.
"""

from domain.models.database import (
    Base,
    engine,
    SessionLocal,
    make_engine,
    make_session_factory,
    init_database,
)
from domain.models.inventory import InventoryItem
from domain.models.meal_record import MealRecord
from domain.models.purchase_record import PurchaseRecord

__all__ = [
    # Database
    "Base",
    "engine",
    "SessionLocal",
    "make_engine",
    "make_session_factory",
    "init_database",
    # Record models
    "InventoryItem",
    "MealRecord",
    "PurchaseRecord",
]
