"""
Meal record models.
"""

from sqlalchemy import Column, Text, JSON, Index

from domain.models.database import Base


class MealRecord(Base):
    """A meal eaten on a given date, with the food items it consisted of"""

    __tablename__ = "meal_record"

    user_id = Column(Text, primary_key=True)
    record_id = Column(Text, primary_key=True)

    record_date = Column(Text, nullable=False)
    meal_type = Column(Text, nullable=False)
    items = Column(JSON, nullable=False)
    notes = Column(Text)
    created_at = Column(Text, nullable=False)
    updated_at = Column(Text, nullable=False)

    __table_args__ = (Index("ix_meal_record_user_date", "user_id", "record_date"),)
