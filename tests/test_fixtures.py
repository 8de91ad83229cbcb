"""
Shared test fixtures and utilities for the Nutrition test suite.

Every test gets its own in-memory SQLite record store, a router wired to it,
and an `invoke` helper that pushes an event through the router and decodes
the JSON body of the response envelope.
"""

import json
import uuid
from types import SimpleNamespace
from typing import Any, Callable, Dict, Generator, Optional

import httpx
import pytest
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session

from api.router import Router, build_router
from domain.models import init_database, make_engine, make_session_factory
from services.food_category_service import FoodCategoryService


def unique_user(prefix: str = "user") -> str:
    """Generate a unique owner id so records never collide across tests"""
    return f"{prefix}-{uuid.uuid4()}"


def make_inventory_payload(**overrides) -> Dict[str, Any]:
    """Inventory item body with realistic defaults (1 litre of milk in the fridge)"""
    payload = {
        "name": "Milk",
        "category": "Dairy",
        "quantity": 1,
        "unit": "L",
        "expiryDate": "2025-06-01",
        "storageLocation": "fridge",
    }
    payload.update(overrides)
    return payload


def make_meal_payload(**overrides) -> Dict[str, Any]:
    """Meal record body: a simple breakfast"""
    payload = {
        "recordDate": "2024-05-02",
        "mealType": "breakfast",
        "items": [
            {"name": "Oatmeal", "quantity": 80, "unit": "g"},
            {"name": "Banana", "quantity": 1, "unit": "pieces"},
        ],
        "notes": "before the run",
    }
    payload.update(overrides)
    return payload


def make_purchase_payload(**overrides) -> Dict[str, Any]:
    """Purchase record body: a small grocery run"""
    payload = {
        "purchaseDate": "2024-05-03",
        "items": [
            {"name": "Milk", "quantity": 2, "price": 1.29, "unit": "L"},
            {"name": "Eggs", "quantity": 12, "price": 3.49},
        ],
        "totalAmount": 6.07,
        "store": "Corner Market",
    }
    payload.update(overrides)
    return payload


def gemini_reply(text: str) -> Dict[str, Any]:
    """A generateContent response body carrying text"""
    return {"candidates": [{"content": {"parts": [{"text": text}]}}]}


def gemini_transport(
    status_code: int = 200, json_body: Any = None, text: Optional[str] = None, calls=None
) -> httpx.MockTransport:
    """MockTransport answering every request with the given status/body"""

    def handle(request: httpx.Request) -> httpx.Response:
        if calls is not None:
            calls.append(request)
        if text is not None:
            return httpx.Response(status_code, text=text)
        return httpx.Response(status_code, json=json_body)

    return httpx.MockTransport(handle)


@pytest.fixture(scope="function")
def engine() -> Generator[Engine, None, None]:
    """Fresh in-memory database with all record tables created"""
    eng = make_engine("sqlite://", echo=False)
    init_database(eng)
    try:
        yield eng
    finally:
        eng.dispose()


@pytest.fixture(scope="function")
def session_factory(engine: Engine):
    return make_session_factory(engine)


@pytest.fixture(scope="function")
def db_session(session_factory) -> Generator[Session, None, None]:
    """Real session against the in-memory store"""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture(scope="function")
def food_category_service() -> FoodCategoryService:
    """Classifier answering "Dairy" without touching the network"""
    return FoodCategoryService(
        api_key="test-key",
        api_url="https://generativelanguage.test/v1beta/models/gemini-pro:generateContent",
        transport=gemini_transport(json_body=gemini_reply("Dairy")),
    )


@pytest.fixture(scope="function")
def router(session_factory, food_category_service) -> Router:
    return build_router(session_factory, food_category_service)


@pytest.fixture(scope="function")
def invoke(router: Router) -> Callable[..., SimpleNamespace]:
    """
    Send one minimal-form event through the router.

    Returns:
        SimpleNamespace(status, headers, body, raw) where body is the decoded
        JSON (or None for an empty body)
    """

    def _invoke(
        method: str,
        path: str,
        query: Optional[Dict[str, str]] = None,
        body: Any = None,
    ) -> SimpleNamespace:
        if isinstance(body, (dict, list)):
            body = json.dumps(body)
        response = router(
            {"method": method, "path": path, "queryParameters": query, "body": body}
        )
        raw = response["body"]
        return SimpleNamespace(
            status=response["statusCode"],
            headers=response["headers"],
            body=json.loads(raw) if raw else None,
            raw=raw,
        )

    return _invoke
