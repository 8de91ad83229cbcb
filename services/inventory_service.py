"""Inventory item operations"""

from domain.schemas import (
    INVENTORY_UPDATABLE_FIELDS,
    InventoryItemCreate,
    InventoryItemUpdate,
    InventoryItemResponse,
)
from repositories import InventoryRepository
from services.record_service import RecordService


class InventoryService(RecordService[InventoryRepository]):
    """Create/get/list/update/delete for a user's inventory items"""

    label = "Inventory item"
    plural = "inventory items"
    repository_class = InventoryRepository
    create_schema = InventoryItemCreate
    update_schema = InventoryItemUpdate
    response_schema = InventoryItemResponse
    updatable_fields = INVENTORY_UPDATABLE_FIELDS
