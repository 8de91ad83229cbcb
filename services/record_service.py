"""
Shared create/get/list/update/delete behaviour for owner-scoped records.

Each concrete service names its model, schemas, repository and allow-list;
this class supplies the operations and their error semantics:

- missing owner / body / invalid fields -> ServiceValidationError (400)
- failed existence condition            -> NotFoundError (404)
- any SQLAlchemy failure                -> StoreError (500)
"""

import json
from contextlib import contextmanager
from typing import Any, Dict, List, Mapping, Optional, Type, Union
from uuid import uuid4

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError, ServiceValidationError, StoreError
from core.base.base_service import BaseService, RepositoryType
from core.utils.helpers import parse_iso_date, utc_timestamp
from domain.schemas.common import CamelModel, parse_payload
from services.mutation_builder import NO_CHANGES, MutationBuilder, to_column_value


def parse_body(body: Union[str, bytes, Mapping[str, Any], None]) -> Dict[str, Any]:
    """Decode a request body into a JSON object.

    Raises:
        ServiceValidationError: body absent, not JSON, or not an object
    """
    if body is None or (isinstance(body, (str, bytes)) and not body.strip()):
        raise ServiceValidationError("Missing request body")
    if isinstance(body, Mapping):
        return dict(body)
    try:
        data = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise ServiceValidationError("Invalid request body format", error=str(exc)) from exc
    if not isinstance(data, dict):
        raise ServiceValidationError(
            "Invalid request body format", error="Request body must be a JSON object"
        )
    return data


def parse_date_filter(name: str, value: Optional[str]) -> Optional[str]:
    """Validate an optional ISO date query parameter (startDate / endDate) into YYYY-MM-DD"""
    if value is None or value == "":
        return None
    parsed = parse_iso_date(value)
    if parsed is None:
        raise ServiceValidationError(f"Invalid format for {name}", error=f"{name}={value!r}")
    return parsed.isoformat()


class RecordService(BaseService[RepositoryType]):
    """Base class for the inventory, meal and purchase services"""

    label: str = "Record"  # e.g. "Inventory item"
    plural: str = "records"  # e.g. "inventory items"
    repository_class: Type[RepositoryType]
    create_schema: Type[CamelModel]
    update_schema: Type[CamelModel]
    response_schema: Type[CamelModel]
    updatable_fields: tuple = ()

    def __init__(self, db: Session):
        super().__init__(self.repository_class(db), f"nutrition.{self.plural.replace(' ', '_')}")
        self.mutations = MutationBuilder(self.update_schema, self.updatable_fields)

    @property
    def sort_key(self) -> str:
        return self.repository.sort_key

    # ------------------------------------------------------------------
    # helpers
    # ------------------------------------------------------------------

    @staticmethod
    def require_owner(user_id: Optional[str]) -> str:
        if not user_id:
            raise ServiceValidationError("Missing userId query parameter")
        return user_id

    def serialize(self, record: Any) -> Dict[str, Any]:
        return self.response_schema.model_validate(record).to_record()

    def not_found(self) -> NotFoundError:
        return NotFoundError(f"{self.label} not found")

    @contextmanager
    def store_call(self, action: str, noun: Optional[str] = None):
        """Translate store failures into StoreError with an operation-specific message"""
        try:
            yield
        except SQLAlchemyError as exc:
            self.logger.exception("Store failure during %s of %s", action, self.plural)
            raise StoreError(
                f"Failed to {action} {noun or self.label.lower()}.", error=str(exc)
            ) from exc

    # ------------------------------------------------------------------
    # operations
    # ------------------------------------------------------------------

    def create(self, user_id: Optional[str], body) -> Dict[str, Any]:
        """Validate body, assign a fresh identity and timestamps, write the record"""
        owner = self.require_owner(user_id)
        data = parse_body(body)
        fields = parse_payload(
            self.create_schema, data, "Missing or invalid required fields"
        )

        now = utc_timestamp()
        columns = {
            name: to_column_value(getattr(fields, name))
            for name in type(fields).model_fields
        }
        record = self.repository.model(
            user_id=owner,
            **{self.sort_key: str(uuid4())},
            **columns,
            created_at=now,
            updated_at=now,
        )
        with self.store_call("create"):
            stored = self.repository.put(record)

        self.log_info(
            f"Created {self.label.lower()}", user_id=owner, id=getattr(stored, self.sort_key)
        )
        return self.serialize(stored)

    def get(self, user_id: Optional[str], record_id: str) -> Dict[str, Any]:
        owner = self.require_owner(user_id)
        with self.store_call("retrieve"):
            record = self.repository.get(owner, record_id)
        if record is None:
            raise self.not_found()
        return self.serialize(record)

    def list_records(
        self, user_id: Optional[str], query: Optional[Mapping[str, str]] = None
    ) -> List[Dict[str, Any]]:
        """All records of the owner; subclasses narrow with query filters"""
        owner = self.require_owner(user_id)
        filters = self.list_filters(query or {})
        with self.store_call("fetch", self.plural):
            records = self.repository.list_for_user(owner, **filters)
        self.log_info(f"Listed {self.plural}", user_id=owner, count=len(records))
        return [self.serialize(r) for r in records]

    def list_filters(self, query: Mapping[str, str]) -> Dict[str, Any]:
        return {}

    def update(self, user_id: Optional[str], record_id: str, body) -> Dict[str, Any]:
        """
        Apply an allow-listed partial update, conditional on the record existing.

        Raises:
            ServiceValidationError: invalid field, or no allow-listed field present
            NotFoundError: the record does not exist
            StoreError: any other store failure
        """
        owner = self.require_owner(user_id)
        data = parse_body(body)
        mutation = self.mutations.build(data, utc_timestamp())
        if mutation is NO_CHANGES:
            raise ServiceValidationError("No valid fields provided for update")

        with self.store_call("update"):
            row = self.repository.update_if_exists(owner, record_id, mutation.values)
        if row is None:
            raise self.not_found()

        self.log_info(
            f"Updated {self.label.lower()}",
            user_id=owner,
            id=record_id,
            fields=",".join(mutation.fields),
        )
        return self.serialize(row)

    def delete(self, user_id: Optional[str], record_id: str) -> Dict[str, Any]:
        """Delete conditional on existence; returns the pre-delete snapshot"""
        owner = self.require_owner(user_id)
        with self.store_call("delete"):
            row = self.repository.delete_if_exists(owner, record_id)
        if row is None:
            raise self.not_found()

        self.log_info(f"Deleted {self.label.lower()}", user_id=owner, id=record_id)
        return {
            "message": f"{self.label} deleted successfully",
            "deletedItem": self.serialize(row),
        }
