# src/product_api/domain/validation.py
from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from product_api.domain.errors import ValidationError
from product_api.domain.models import MERGEABLE_FIELDS, Product, ProductFields

FIELD_MESSAGES: dict[str, str] = {
    "name": "Product name is required and must be a string",
    "description": "Product description is required and must be a string",
    "price": "Product price is required and must be a positive number",
    "category": "Product category is required and must be a string",
    "inStock": "Product inStock status is required and must be a boolean",
}


def validate_product_payload(payload: Any) -> ProductFields | ValidationError:
    """
    Checks a candidate payload field by field.

    Returns the validated fields, or the error for the first failing field.
    Anything that is not a JSON object is checked as an empty object.
    """
    candidate = payload if isinstance(payload, Mapping) else {}
    try:
        return ProductFields.model_validate(candidate)
    except PydanticValidationError as e:
        # Errors come back in field declaration order.
        first = e.errors()[0]
        field = str(first["loc"][0]) if first["loc"] else ""
        if field == "in_stock":
            field = "inStock"
        return ValidationError(FIELD_MESSAGES.get(field, "Invalid product payload"))


def require_object(payload: Any) -> Mapping[str, Any] | ValidationError:
    """A payload that is not a JSON object fails like a missing name."""
    if not isinstance(payload, Mapping):
        return ValidationError(FIELD_MESSAGES["name"])
    return payload


def validate_search_term(q: str | None) -> str | ValidationError:
    if not q:
        return ValidationError('Search query parameter "q" is required')
    return q


def merge_product(existing: Product | None, payload: Any) -> dict[str, Any]:
    """
    Overlays the payload on the existing record, one mergeable field at a time.

    ``id`` is never taken from the payload; unknown keys are dropped.
    """
    merged: dict[str, Any] = {}
    if existing is not None:
        merged = existing.model_dump(by_alias=True, exclude={"id"})
    if isinstance(payload, Mapping):
        for field in MERGEABLE_FIELDS:
            if field in payload:
                merged[field] = payload[field]
    return merged
