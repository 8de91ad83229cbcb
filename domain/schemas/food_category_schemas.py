from pydantic import Field

from domain.enums import FoodCategory
from domain.schemas.common import CamelModel


class FoodCategoryResponse(CamelModel):
    """Classification result for a single food name"""

    food_name: str = Field(..., description="Food name as sent by the client")
    category: FoodCategory

    def to_record(self):
        return self.model_dump(by_alias=True, mode="json")
