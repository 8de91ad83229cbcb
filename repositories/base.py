"""
Base repository interface for data access layer.
This follows the Repository pattern to separate business logic from data access.

Every record table is keyed by (user_id, <sort key>), mirroring a partition-keyed,
sort-keyed document store. Conditional writes are single statements so the
existence check and the write cannot interleave with another request.
"""

import logging
from typing import Any, Dict, Generic, List, Mapping, Optional, Sequence, Type, TypeVar
from abc import ABC

from sqlalchemy import and_, delete, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

ModelType = TypeVar("ModelType")

logger = logging.getLogger("nutrition.repository")


class BaseRepository(Generic[ModelType], ABC):
    """
    Base repository providing the record store operations:
    get / put / query / update_if_exists / delete_if_exists.

    SQLAlchemy errors are rolled back and re-raised; callers decide how to
    report them.
    """

    def __init__(self, db: Session, model: Type[ModelType], sort_key: str):
        self.db = db
        self.model = model
        self.table = model.__table__
        self.sort_key = sort_key

    def _match(self, user_id: str, record_id: str):
        return and_(
            self.table.c.user_id == user_id,
            self.table.c[self.sort_key] == record_id,
        )

    def get(self, user_id: str, record_id: str) -> Optional[ModelType]:
        """Point lookup by (user_id, sort key)"""
        stmt = (
            select(self.model)
            .where(self._match(user_id, record_id))
            .execution_options(populate_existing=True)
        )
        return self.db.scalars(stmt).first()

    def put(self, record: ModelType) -> ModelType:
        """Write a full record unconditionally"""
        try:
            self.db.add(record)
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        self.db.refresh(record)
        logger.debug(
            "Put %s %s", self.table.name, getattr(record, self.sort_key, None)
        )
        return record

    def query(
        self,
        user_id: str,
        range_column: Optional[str] = None,
        start: Optional[str] = None,
        end: Optional[str] = None,
        order_by: Sequence[str] = (),
    ) -> List[ModelType]:
        """
        All records owned by user_id, optionally narrowed by an inclusive
        range on range_column (start only: >=, end only: <=, both: BETWEEN).
        """
        stmt = (
            select(self.model)
            .where(self.table.c.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        if range_column is not None:
            column = self.table.c[range_column]
            if start and end:
                stmt = stmt.where(column.between(start, end))
            elif start:
                stmt = stmt.where(column >= start)
            elif end:
                stmt = stmt.where(column <= end)
        stmt = stmt.order_by(
            *[self.table.c[name] for name in order_by], self.table.c[self.sort_key]
        )
        return list(self.db.scalars(stmt))

    def update_if_exists(
        self, user_id: str, record_id: str, values: Mapping[str, Any]
    ) -> Optional[Dict[str, Any]]:
        """
        Apply values to the record only if it exists.

        Returns:
            The full post-update row, or None when no such record exists
        """
        stmt = (
            update(self.table)
            .where(self._match(user_id, record_id))
            .values(**values)
            .returning(*self.table.c)
        )
        try:
            row = self.db.execute(stmt).first()
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        logger.debug(
            "Conditional update %s %s matched=%s", self.table.name, record_id, row is not None
        )
        return dict(row._mapping) if row is not None else None

    def delete_if_exists(self, user_id: str, record_id: str) -> Optional[Dict[str, Any]]:
        """
        Delete the record only if it exists.

        Returns:
            The row as it was before deletion, or None when no such record exists
        """
        stmt = delete(self.table).where(self._match(user_id, record_id)).returning(*self.table.c)
        try:
            row = self.db.execute(stmt).first()
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        logger.debug(
            "Conditional delete %s %s matched=%s", self.table.name, record_id, row is not None
        )
        return dict(row._mapping) if row is not None else None
