"""
Purchase record models.
"""

from sqlalchemy import Column, Text, Float, JSON, Index

from domain.models.database import Base


class PurchaseRecord(Base):
    """A shopping trip: what was bought, where, and for how much"""

    __tablename__ = "purchase_record"

    user_id = Column(Text, primary_key=True)
    purchase_id = Column(Text, primary_key=True)

    purchase_date = Column(Text, nullable=False)
    items = Column(JSON, nullable=False)
    total_amount = Column(Float)
    store = Column(Text)
    memo = Column(Text)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    __table_args__ = (
        Index("ix_purchase_record_user_date", "user_id", "purchase_date"),
    )
