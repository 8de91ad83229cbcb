"""Inventory routes: /inventory, /inventory/{itemId}"""

from typing import Callable

from sqlalchemy.orm import Session

from api.routes.records import RecordRoutes
from services.inventory_service import InventoryService

PREFIX = "/inventory"


def make_routes(session_factory: Callable[[], Session]) -> RecordRoutes:
    return RecordRoutes(PREFIX, InventoryService, session_factory)
