"""
Inventory Repository - Data access layer for inventory items
"""

from typing import List
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import InventoryItem


class InventoryRepository(BaseRepository[InventoryItem]):
    """Repository for inventory item data access"""

    def __init__(self, db: Session):
        super().__init__(db, InventoryItem, "item_id")

    def list_for_user(self, user_id: str) -> List[InventoryItem]:
        """Get all inventory items for a user, oldest first"""
        return self.query(user_id, order_by=("created_at",))
