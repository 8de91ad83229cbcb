"""
Meal Repository - Data access layer for meal records
"""

from typing import List, Optional
from sqlalchemy.orm import Session

from repositories.base import BaseRepository
from domain.models import MealRecord


class MealRepository(BaseRepository[MealRecord]):
    """Repository for meal record data access"""

    def __init__(self, db: Session):
        super().__init__(db, MealRecord, "record_id")

    def list_for_user(
        self, user_id: str, start_date: Optional[str] = None, end_date: Optional[str] = None
    ) -> List[MealRecord]:
        """Get meal records for a user, optionally within an inclusive recordDate range"""
        return self.query(
            user_id,
            range_column="record_date",
            start=start_date,
            end=end_date,
            order_by=("record_date", "created_at"),
        )
