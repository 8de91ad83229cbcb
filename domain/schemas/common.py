"""
Shared pieces of the record schemas: camelCase wire format, field checks,
and translation of pydantic errors into ServiceValidationError.
"""

from typing import Any, Dict, List, Mapping, Type, TypeVar

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from app.exceptions import ServiceValidationError
from core.utils.helpers import is_number, to_iso_date

SchemaType = TypeVar("SchemaType", bound=BaseModel)


class CamelModel(BaseModel):
    """Base schema: snake_case attributes, camelCase on the wire"""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
        extra="ignore",
    )

    def to_record(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def check_non_negative_number(value: Any) -> Any:
    if not is_number(value) or value < 0:
        raise ValueError("must be a non-negative number")
    return value


def check_iso_date(value: Any) -> str:
    """Accept an extended ISO date or datetime and keep only its YYYY-MM-DD date"""
    return to_iso_date(value)


def check_not_null(value: Any) -> Any:
    if value is None:
        raise ValueError("cannot be null")
    return value


def field_errors(exc: ValidationError) -> List[Dict[str, str]]:
    """Flatten pydantic errors into [{field, reason}] using wire (camelCase) names"""
    errors = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err.get("loc", ())) or "body"
        reason = err.get("msg", "invalid")
        if err.get("type") == "missing":
            reason = "is required"
        errors.append({"field": field, "reason": reason})
    return errors


def parse_payload(
    schema: Type[SchemaType], payload: Mapping[str, Any], message_prefix: str
) -> SchemaType:
    """Validate payload against schema.

    Raises:
        ServiceValidationError: naming every missing/invalid field
    """
    try:
        return schema.model_validate(payload)
    except ValidationError as exc:
        errors = field_errors(exc)
        fields = []
        for e in errors:
            if e["field"] not in fields:
                fields.append(e["field"])
        raise ServiceValidationError(
            f"{message_prefix}: {', '.join(fields)}",
            error="; ".join(f"{e['field']} {e['reason']}" for e in errors),
            details={"errors": errors},
        ) from exc
