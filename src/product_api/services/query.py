# src/product_api/services/query.py
"""
Read-only views over a snapshot of the product store.

None of these functions mutate their input; each returns a new list or model.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from product_api.domain.models import Product, ProductPage, ProductStats

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def coerce_int(raw: str | None, default: int) -> int:
    """
    Reads a leading integer from a query value ("3", " 3", "3abc", "-1").
    Missing, non-numeric or zero values fall back to ``default``.
    """
    if raw is None:
        return default
    match = _LEADING_INT.match(raw)
    if match is None:
        return default
    value = int(match.group(1))
    return value or default


def parse_stock_flag(raw: str) -> bool:
    # Lenient on purpose: anything other than "true" means out of stock.
    return raw.lower() == "true"


def filter_by_category(products: Sequence[Product], category: str | None) -> list[Product]:
    if not category:
        return list(products)
    wanted = category.lower()
    return [p for p in products if p.category.lower() == wanted]


def filter_by_stock(products: Sequence[Product], in_stock: str | None) -> list[Product]:
    if not in_stock:
        return list(products)
    wanted = parse_stock_flag(in_stock)
    return [p for p in products if p.in_stock is wanted]


def paginate(products: Sequence[Product], page: int, limit: int) -> ProductPage:
    # Bounds clamp to [0, len(products)].
    start = min(max((page - 1) * limit, 0), len(products))
    end = min(max(page * limit, 0), len(products))
    return ProductPage(
        total=len(products),
        page=page,
        limit=limit,
        products=list(products[start:end]),
    )


def search_by_name(products: Sequence[Product], query: str) -> list[Product]:
    term = query.lower()
    return [p for p in products if term in p.name.lower()]


def compute_stats(products: Sequence[Product]) -> ProductStats:
    categories: dict[str, int] = {}
    for product in products:
        categories[product.category] = categories.get(product.category, 0) + 1

    in_stock = sum(1 for p in products if p.in_stock)
    return ProductStats(
        total_products=len(products),
        in_stock=in_stock,
        out_of_stock=len(products) - in_stock,
        categories=categories,
    )
