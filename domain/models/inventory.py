"""
Inventory models.
"""

from sqlalchemy import Column, Text, Float, CheckConstraint, Index

from domain.models.database import Base


class InventoryItem(Base):
    """Food item held in a user's inventory"""

    __tablename__ = "inventory_item"

    # partition key / sort key
    user_id = Column(Text, primary_key=True)
    item_id = Column(Text, primary_key=True)

    name = Column(Text, nullable=False)
    category = Column(Text, nullable=False)
    quantity = Column(Float, nullable=False, default=0)
    expiry_date = Column(Text)
    unit = Column(Text)
    storage_location = Column(Text)
    memo = Column(Text)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_inventory_quantity_nonneg"),
        Index("ix_inventory_user_expiry", "user_id", "expiry_date"),
    )
