"""
Purchase Repository - Data access layer for purchase records
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import PurchaseRecord


class PurchaseRepository(BaseRepository[PurchaseRecord]):
    """Repository for purchase record data access"""

    def __init__(self, db: Session):
        super().__init__(db, PurchaseRecord, "purchase_id")

    def list_for_user(
        self, user_id: str, start_date: Optional[str] = None, end_date: Optional[str] = None
    ) -> List[PurchaseRecord]:
        """Get purchase records for a user, optionally within an inclusive purchaseDate range"""
        return self.query(
            user_id,
            range_column="purchase_date",
            start=start_date,
            end=end_date,
            order_by=("purchase_date", "created_at"),
        )
