# src/product_api/api/products.py
from typing import Annotated

from fastapi import APIRouter, Depends, Query, Response, status

from product_api.api.dependencies import get_product_service
from product_api.api.pipeline import (
    CreatePayloadDep,
    SearchTermDep,
    UpdatePayloadDep,
    require_api_key,
)
from product_api.domain.errors import NotFoundError
from product_api.domain.models import ErrorEnvelope, Product, ProductPage, ProductStats
from product_api.services.product_service import ProductService

router = APIRouter(
    prefix="/api/products",
    tags=["Products"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorEnvelope},
        status.HTTP_404_NOT_FOUND: {"model": ErrorEnvelope},
    },
)

ServiceDep = Annotated[ProductService, Depends(get_product_service)]

PRODUCT_NOT_FOUND = "Product not found"


@router.get("", response_model=ProductPage)
@router.get("/", response_model=ProductPage, include_in_schema=False)
async def list_products(
    service: ServiceDep,
    category: str | None = None,
    in_stock: str | None = Query(default=None, alias="inStock"),
    page: str | None = None,
    limit: str | None = None,
) -> ProductPage:
    """
    Lists products, optionally filtered by category and stock status, one page at a time.
    """
    return service.list_products(category=category, in_stock=in_stock, page=page, limit=limit)


# /search and /stats must be registered before /{product_id}.
@router.get("/search", response_model=list[Product])
async def search_products(service: ServiceDep, q: SearchTermDep) -> list[Product]:
    """
    Case-insensitive substring search on product names.
    """
    return service.search(q)


@router.get("/stats", response_model=ProductStats)
async def get_product_stats(service: ServiceDep) -> ProductStats:
    return service.get_stats()


@router.get("/{product_id}", response_model=Product)
async def get_product(product_id: str, service: ServiceDep) -> Product:
    product = service.get_product(product_id)
    if product is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return product


@router.post(
    "/", response_model=Product, status_code=status.HTTP_201_CREATED, include_in_schema=False
)
@router.post(
    "",
    response_model=Product,
    status_code=status.HTTP_201_CREATED,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorEnvelope}},
)
async def create_product(payload: CreatePayloadDep, service: ServiceDep) -> Product:
    return service.create_product(payload)


@router.put(
    "/{product_id}",
    response_model=Product,
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorEnvelope}},
)
async def update_product(
    product_id: str, payload: UpdatePayloadDep, service: ServiceDep
) -> Product:
    updated = service.update_product(product_id, payload)
    if updated is None:
        raise NotFoundError(PRODUCT_NOT_FOUND)
    return updated


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    dependencies=[Depends(require_api_key)],
    responses={status.HTTP_401_UNAUTHORIZED: {"model": ErrorEnvelope}},
)
async def delete_product(product_id: str, service: ServiceDep) -> None:
    if not service.delete_product(product_id):
        raise NotFoundError(PRODUCT_NOT_FOUND)
