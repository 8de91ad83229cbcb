from pydantic import Field, field_validator
from typing import Optional, List, Dict, Any

from domain.schemas.common import (
    CamelModel,
    check_iso_date,
    check_non_negative_number,
    check_not_null,
)

PURCHASE_UPDATABLE_FIELDS = ("purchase_date", "items", "total_amount", "store", "memo")


class PurchaseItem(CamelModel):
    """One line of a purchase"""

    name: str = Field(..., min_length=1)
    quantity: float
    price: Optional[float] = None
    unit: Optional[str] = None

    @field_validator("quantity", mode="before")
    @classmethod
    def validate_quantity(cls, v):
        return check_non_negative_number(v)

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, v):
        return v if v is None else check_non_negative_number(v)


class PurchaseRecordCreate(CamelModel):
    """Schema for creating a purchase record"""

    purchase_date: str = Field(..., description="ISO date of the purchase")
    items: List[PurchaseItem] = Field(..., min_length=1)
    total_amount: Optional[float] = None
    store: Optional[str] = None
    memo: Optional[str] = None

    @field_validator("purchase_date", mode="before")
    @classmethod
    def validate_purchase_date(cls, v):
        return check_iso_date(v)

    @field_validator("total_amount", mode="before")
    @classmethod
    def validate_total_amount(cls, v):
        return v if v is None else check_non_negative_number(v)


class PurchaseRecordUpdate(CamelModel):
    """Schema for a partial purchase record update"""

    purchase_date: Optional[str] = None
    items: Optional[List[PurchaseItem]] = Field(None, min_length=1)
    total_amount: Optional[float] = None
    store: Optional[str] = None
    memo: Optional[str] = None

    @field_validator("purchase_date", mode="before")
    @classmethod
    def validate_purchase_date(cls, v):
        return check_iso_date(v)

    @field_validator("items", mode="before")
    @classmethod
    def validate_items(cls, v):
        return check_not_null(v)

    @field_validator("total_amount", mode="before")
    @classmethod
    def validate_total_amount(cls, v):
        return v if v is None else check_non_negative_number(v)


class PurchaseRecordResponse(CamelModel):
    """Schema for a purchase record as stored"""

    user_id: str
    purchase_id: str
    purchase_date: str
    items: List[Dict[str, Any]]
    total_amount: Optional[float] = None
    store: Optional[str] = None
    memo: Optional[str] = None
    created_at: str
    updated_at: str
