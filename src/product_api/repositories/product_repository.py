# src/product_api/repositories/product_repository.py
from __future__ import annotations

import logging
import threading
from collections.abc import Iterable

from product_api.core.metrics import PRODUCTS_IN_STORE
from product_api.domain.models import Product

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS: tuple[Product, ...] = (
    Product(
        id="1",
        name="Laptop",
        description="High-performance laptop with 16GB RAM",
        price=1200,
        category="electronics",
        in_stock=True,
    ),
    Product(
        id="2",
        name="Smartphone",
        description="Latest model with 128GB storage",
        price=800,
        category="electronics",
        in_stock=True,
    ),
    Product(
        id="3",
        name="Coffee Maker",
        description="Programmable coffee maker with timer",
        price=50,
        category="kitchen",
        in_stock=False,
    ),
)


class InMemoryProductRepository:
    """
    Ordered in-memory storage for products.

    Records keep insertion order; replace keeps a record's position and
    remove keeps the relative order of the others. Every operation runs
    under one lock and only copies of the internal list are handed out.
    Products themselves are frozen, so sharing them is safe.
    """

    def __init__(self, products: Iterable[Product] = ()) -> None:
        self._lock = threading.RLock()
        self._products: list[Product] = list(products)
        PRODUCTS_IN_STORE.set(len(self._products))

    def find_all(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def count(self) -> int:
        with self._lock:
            return len(self._products)

    def find_by_id(self, product_id: str) -> Product | None:
        with self._lock:
            return next((p for p in self._products if p.id == product_id), None)

    def insert(self, product: Product) -> Product:
        with self._lock:
            if self._index_of(product.id) is not None:
                raise ValueError(f"Product id '{product.id}' already exists")
            self._products.append(product)
            PRODUCTS_IN_STORE.set(len(self._products))
        logger.debug("Inserted product %s", product.id)
        return product

    def replace(self, product_id: str, product: Product) -> Product | None:
        """Overwrites the record in place. Returns None if the id is unknown."""
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return None
            self._products[index] = product
        logger.debug("Replaced product %s", product_id)
        return product

    def remove(self, product_id: str) -> bool:
        """Deletes the record. Returns True if deleted."""
        with self._lock:
            index = self._index_of(product_id)
            if index is None:
                return False
            del self._products[index]
            PRODUCTS_IN_STORE.set(len(self._products))
        logger.debug("Removed product %s", product_id)
        return True

    def _index_of(self, product_id: str) -> int | None:
        for index, product in enumerate(self._products):
            if product.id == product_id:
                return index
        return None
