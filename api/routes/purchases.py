"""Purchase record routes: /purchases, /purchases/{purchaseId}"""

from typing import Callable

from sqlalchemy.orm import Session

from api.routes.records import RecordRoutes
from services.purchase_service import PurchaseService

PREFIX = "/purchases"


def make_routes(session_factory: Callable[[], Session]) -> RecordRoutes:
    return RecordRoutes(PREFIX, PurchaseService, session_factory)
