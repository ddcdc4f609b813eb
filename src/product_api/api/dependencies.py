# src/product_api/api/dependencies.py
from fastapi import Depends

from product_api.core.config import Settings, get_settings
from product_api.repositories.product_repository import (
    SAMPLE_PRODUCTS,
    InMemoryProductRepository,
)
from product_api.services.product_service import ProductService

# Singleton repository, created on first access
_repository: InMemoryProductRepository | None = None


def get_product_repository(
    settings: Settings = Depends(get_settings),
) -> InMemoryProductRepository:
    global _repository
    if _repository is None:
        seed = SAMPLE_PRODUCTS if settings.seed_sample_data else ()
        _repository = InMemoryProductRepository(seed)
    return _repository


def reset_repository() -> None:
    """Drops the singleton so the next request starts from fresh seed data."""
    global _repository
    _repository = None


def get_product_service(
    repository: InMemoryProductRepository = Depends(get_product_repository),
    settings: Settings = Depends(get_settings),
) -> ProductService:
    return ProductService(repository=repository, default_limit=settings.default_page_size)
