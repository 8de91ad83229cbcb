"""
Partial-update construction for record updates.

A mutation is built from the allow-list, never from the payload keys, so a
client can only ever touch the fields an entity declares updatable. The
update timestamp is always part of the mutation.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Sequence, Tuple, Type, Union

from pydantic import BaseModel

from domain.schemas.common import CamelModel, parse_payload


class _NoChanges:
    """Sentinel: nothing allow-listed was present in the payload"""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NO_CHANGES"


NO_CHANGES = _NoChanges()


@dataclass(frozen=True)
class Mutation:
    """Column values to write, always including the update timestamp"""

    values: Dict[str, Any]
    fields: Tuple[str, ...] = field(default_factory=tuple)


def to_column_value(value: Any) -> Any:
    """Turn validated schema values into what the record columns store"""
    if isinstance(value, BaseModel):
        return value.model_dump(by_alias=True, exclude_none=True)
    if isinstance(value, list):
        return [to_column_value(v) for v in value]
    return value


class MutationBuilder:
    """Builds the allow-listed partial update for one entity type"""

    def __init__(
        self,
        schema: Type[CamelModel],
        allowed_fields: Sequence[str],
        timestamp_field: str = "updated_at",
    ):
        unknown = [f for f in allowed_fields if f not in schema.model_fields]
        if unknown:
            raise ValueError(f"{schema.__name__} does not declare {unknown}")
        self.schema = schema
        self.allowed_fields = tuple(allowed_fields)
        self.timestamp_field = timestamp_field

    def build(self, payload: Mapping[str, Any], now: str) -> Union[Mutation, _NoChanges]:
        """
        Validate payload and build the mutation.

        Any invalid allow-listed field rejects the whole update; nothing is
        partially applied.

        Returns:
            Mutation, or NO_CHANGES when no allow-listed field is present

        Raises:
            ServiceValidationError: if a present field is invalid
        """
        update = parse_payload(self.schema, payload, "Invalid value for field(s)")
        present = update.model_fields_set

        values: Dict[str, Any] = {self.timestamp_field: now}
        applied = []
        for name in self.allowed_fields:
            if name not in present:
                continue
            values[name] = to_column_value(getattr(update, name))
            applied.append(name)

        if not applied:
            return NO_CHANGES
        return Mutation(values=values, fields=tuple(applied))
