# src/product_api/services/product_service.py
from __future__ import annotations

import uuid

from product_api.domain.models import Product, ProductFields, ProductPage, ProductStats
from product_api.repositories.product_repository import InMemoryProductRepository
from product_api.services import query


class ProductService:
    def __init__(
        self, repository: InMemoryProductRepository, default_limit: int = query.DEFAULT_LIMIT
    ) -> None:
        self._repo = repository
        self._default_limit = default_limit

    def list_products(
        self,
        category: str | None = None,
        in_stock: str | None = None,
        page: str | None = None,
        limit: str | None = None,
    ) -> ProductPage:
        products = query.filter_by_category(self._repo.find_all(), category)
        products = query.filter_by_stock(products, in_stock)
        return query.paginate(
            products,
            page=query.coerce_int(page, query.DEFAULT_PAGE),
            limit=query.coerce_int(limit, self._default_limit),
        )

    def search(self, term: str) -> list[Product]:
        return query.search_by_name(self._repo.find_all(), term)

    def get_stats(self) -> ProductStats:
        return query.compute_stats(self._repo.find_all())

    def get_product(self, product_id: str) -> Product | None:
        return self._repo.find_by_id(product_id)

    def create_product(self, fields: ProductFields) -> Product:
        product = Product.from_fields(str(uuid.uuid4()), fields)
        return self._repo.insert(product)

    def update_product(self, product_id: str, fields: ProductFields) -> Product | None:
        """Stores the already merged fields under the path id. None if unknown."""
        return self._repo.replace(product_id, Product.from_fields(product_id, fields))

    def delete_product(self, product_id: str) -> bool:
        return self._repo.remove(product_id)
