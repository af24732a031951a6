"""Validation contract: run a schema over a field set and report per-field errors"""

from typing import Any, Dict, List, Mapping, Type

from pydantic import BaseModel, ValidationError

from tradesec_gateway.domain.models import FieldError, ValidationResult
from tradesec_gateway.validation.schemas import (
    CardDetailsSchema,
    CreateReceivableSchema,
    PurchaseSecuritySchema,
)


def _field_errors(exc: ValidationError) -> List[FieldError]:
    errors = []
    for err in exc.errors():
        field = ".".join(str(part) for part in err["loc"]) or "__root__"
        message = err["msg"].removeprefix("Value error, ")
        errors.append(FieldError(field=field, message=message, code=err["type"]))
    return errors


def validate(schema: Type[BaseModel], data: Mapping[str, Any]) -> ValidationResult:
    """
    Validate data against schema.

    Returns the parsed values on success, or one FieldError per invalid field.
    Never raises for invalid input.
    """
    try:
        model = schema.model_validate(dict(data))
    except ValidationError as exc:
        return ValidationResult(errors=_field_errors(exc))
    return ValidationResult(values=model.model_dump())


def validate_receivable_fields(data: Mapping[str, Any]) -> ValidationResult:
    """Strict check of the core receivable fields; blocks submission on failure"""
    return validate(CreateReceivableSchema, data)


def validate_card_details(data: Mapping[str, Any]) -> ValidationResult:
    return validate(CardDetailsSchema, data)


def validate_purchase(data: Dict[str, Any]) -> ValidationResult:
    return validate(PurchaseSecuritySchema, data)
