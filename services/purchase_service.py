"""Purchase record operations"""

from typing import Any, Dict, Mapping

from domain.schemas import (
    PURCHASE_UPDATABLE_FIELDS,
    PurchaseRecordCreate,
    PurchaseRecordUpdate,
    PurchaseRecordResponse,
)
from repositories import PurchaseRepository
from services.record_service import RecordService, parse_date_filter


class PurchaseService(RecordService[PurchaseRepository]):
    """Purchase records; listing accepts a purchaseDate range like meals do"""

    label = "Purchase record"
    plural = "purchase records"
    repository_class = PurchaseRepository
    create_schema = PurchaseRecordCreate
    update_schema = PurchaseRecordUpdate
    response_schema = PurchaseRecordResponse
    updatable_fields = PURCHASE_UPDATABLE_FIELDS

    def list_filters(self, query: Mapping[str, str]) -> Dict[str, Any]:
        return {
            "start_date": parse_date_filter("startDate", query.get("startDate")),
            "end_date": parse_date_filter("endDate", query.get("endDate")),
        }
