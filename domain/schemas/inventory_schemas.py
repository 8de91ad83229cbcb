from pydantic import Field, field_validator
from typing import Optional

from domain.schemas.common import (
    CamelModel,
    check_iso_date,
    check_non_negative_number,
    check_not_null,
)

# Fields a client may change on PUT /inventory/{itemId}
INVENTORY_UPDATABLE_FIELDS = (
    "name",
    "category",
    "quantity",
    "expiry_date",
    "unit",
    "storage_location",
    "memo",
)


class InventoryItemCreate(CamelModel):
    """Schema for creating a new inventory item"""

    name: str = Field(..., min_length=1, description="Food name (e.g., 'Milk')")
    category: str = Field(..., min_length=1, description="Food category (e.g., 'Dairy')")
    quantity: float = Field(..., description="Quantity held, never negative")
    expiry_date: Optional[str] = Field(None, description="ISO date the item expires")
    unit: Optional[str] = Field(
        None, description="Unit of measurement (e.g., 'g', 'ml', 'pieces')"
    )
    storage_location: Optional[str] = Field(
        None, description="Where it is kept (e.g., 'fridge', 'pantry')"
    )
    memo: Optional[str] = None

    @field_validator("quantity", mode="before")
    @classmethod
    def validate_quantity(cls, v):
        return check_non_negative_number(v)

    @field_validator("expiry_date", mode="before")
    @classmethod
    def validate_expiry_date(cls, v):
        return v if v is None else check_iso_date(v)


class InventoryItemUpdate(CamelModel):
    """Schema for a partial inventory item update (all fields optional)"""

    name: Optional[str] = Field(None, min_length=1)
    category: Optional[str] = Field(None, min_length=1)
    quantity: Optional[float] = None
    expiry_date: Optional[str] = None
    unit: Optional[str] = None
    storage_location: Optional[str] = None
    memo: Optional[str] = None

    @field_validator("name", "category", mode="before")
    @classmethod
    def validate_required_text(cls, v):
        return check_not_null(v)

    @field_validator("quantity", mode="before")
    @classmethod
    def validate_quantity(cls, v):
        return check_non_negative_number(v)

    @field_validator("expiry_date", mode="before")
    @classmethod
    def validate_expiry_date(cls, v):
        return v if v is None else check_iso_date(v)


class InventoryItemResponse(CamelModel):
    """Schema for an inventory item as stored"""

    user_id: str
    item_id: str
    name: str
    category: str
    quantity: float
    expiry_date: Optional[str] = None
    unit: Optional[str] = None
    storage_location: Optional[str] = None
    memo: Optional[str] = None
    created_at: str
    updated_at: str
