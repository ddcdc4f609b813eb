# src/product_api/api/pipeline.py
"""
Per-route steps that run before a handler.

Each check returns an explicit outcome (a value or an ApiError). ``unwrap``
is the only place that turns an error outcome into a short-circuit of the
chain; the raised error is rendered by the translator in ``api.errors``.
"""

from __future__ import annotations

from typing import Annotated, Any, TypeVar

from fastapi import Depends, Request, Security

from product_api.api.dependencies import get_product_service
from product_api.core.config import Settings, get_settings
from product_api.core.security import api_key_header, check_api_key
from product_api.domain.errors import ApiError, ValidationError
from product_api.domain.models import ProductFields
from product_api.domain.validation import (
    merge_product,
    require_object,
    validate_product_payload,
    validate_search_term,
)
from product_api.services.product_service import ProductService

T = TypeVar("T")


def unwrap(outcome: T | ApiError) -> T:
    if isinstance(outcome, ApiError):
        raise outcome
    return outcome


async def read_json_body(request: Request) -> Any | ValidationError:
    """An empty body reads as an empty object."""
    raw = await request.body()
    if not raw.strip():
        return {}
    try:
        return await request.json()
    except ValueError:
        return ValidationError("Request body must be valid JSON")


def require_api_key(
    api_key: str | None = Security(api_key_header),
    settings: Settings = Depends(get_settings),
) -> None:
    unwrap(check_api_key(api_key, settings.api_key))


async def validated_create_payload(
    request: Request,
    _: None = Depends(require_api_key),
) -> ProductFields:
    body = unwrap(await read_json_body(request))
    return unwrap(validate_product_payload(body))


async def validated_update_payload(
    product_id: str,
    request: Request,
    _: None = Depends(require_api_key),
    service: ProductService = Depends(get_product_service),
) -> ProductFields:
    body = unwrap(require_object(unwrap(await read_json_body(request))))
    existing = service.get_product(product_id)
    return unwrap(validate_product_payload(merge_product(existing, body)))


def required_search_term(q: str | None = None) -> str:
    return unwrap(validate_search_term(q))


CreatePayloadDep = Annotated[ProductFields, Depends(validated_create_payload)]
UpdatePayloadDep = Annotated[ProductFields, Depends(validated_update_payload)]
SearchTermDep = Annotated[str, Depends(required_search_term)]
