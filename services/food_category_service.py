"""Food name classification through the text-generation provider"""

from typing import Any, Dict, Optional
import logging

import httpx

from adapters import gemini_adapter
from app.config import settings
from app.exceptions import ServiceError, ServiceValidationError
from domain.enums import FoodCategory
from domain.schemas import FoodCategoryResponse

logger = logging.getLogger("nutrition.food_category")

PROMPT_TEMPLATE = """You are a food category classifier. Choose exactly one category for the food below from this list:

{categories}

Food name: {food_name}

Answer with the category name only. No explanation."""


def match_category(text: str) -> FoodCategory:
    """Map the model's reply onto the fixed category list.

    Exact (case-insensitive) match first, then the first category named
    inside the reply, otherwise OTHER.
    """
    reply = (text or "").strip().strip(".").lower()
    for category in FoodCategory:
        if reply == category.value.lower():
            return category
    for category in FoodCategory:
        if category.value.lower() in reply:
            return category
    return FoodCategory.OTHER


class FoodCategoryService:
    def __init__(
        self,
        api_key: Optional[str] = None,
        api_url: Optional[str] = None,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self.api_key = api_key if api_key is not None else settings.gemini_api_key
        self.api_url = api_url or settings.gemini_api_url
        self.timeout = timeout or settings.gemini_timeout_sec
        self.transport = transport

    def categorize(self, food_name: Optional[str]) -> Dict[str, Any]:
        """
        Classify food_name into one FoodCategory.

        Raises:
            ServiceError: provider key not configured (500)
            ServiceValidationError: food_name missing
            UpstreamError: provider call failed
        """
        if not self.api_key:
            logger.error("Missing GEMINI_API_KEY setting")
            raise ServiceError("Server configuration error: Missing API key")
        if not food_name or not food_name.strip():
            raise ServiceValidationError("Missing foodName query parameter")

        prompt = PROMPT_TEMPLATE.format(
            categories="\n".join(f"- {c.value}" for c in FoodCategory),
            food_name=food_name,
        )
        logger.info("Classifying food item %r", food_name)
        text = gemini_adapter.generate_text(
            prompt,
            api_key=self.api_key,
            url=self.api_url,
            timeout=self.timeout,
            transport=self.transport,
        )
        category = match_category(text)
        logger.info("Classified %r as %s (reply=%r)", food_name, category.value, text)
        return FoodCategoryResponse(food_name=food_name, category=category).to_record()
