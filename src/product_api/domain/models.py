# src/product_api/domain/models.py
from __future__ import annotations

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field, StrictBool, StrictFloat, StrictInt, StrictStr

# Integers stay integers on the wire (1200, not 1200.0).
PositiveInt = Annotated[StrictInt, Field(gt=0)]
PositiveFloat = Annotated[StrictFloat, Field(gt=0, allow_inf_nan=False)]


# ---------------------------------------------------------------------------
# Aggregate: Product
# ---------------------------------------------------------------------------


class ProductFields(BaseModel):
    """
    The mergeable, client-supplied part of a product.

    Fields are declared in validation order; only the first failing field
    is reported to the client.
    """

    name: StrictStr = Field(min_length=1)
    description: StrictStr = Field(min_length=1)
    price: PositiveInt | PositiveFloat
    category: StrictStr = Field(min_length=1)
    in_stock: StrictBool = Field(alias="inStock")

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")


class Product(ProductFields):
    id: str = Field(description="Server-assigned opaque identifier")

    @classmethod
    def from_fields(cls, product_id: str, fields: ProductFields) -> Product:
        return cls(id=product_id, **fields.model_dump())


# Wire names of the fields an update may overwrite. ``id`` is never part of it.
MERGEABLE_FIELDS: tuple[str, ...] = tuple(
    info.alias or name for name, info in ProductFields.model_fields.items()
)


# ---------------------------------------------------------------------------
# API Response Schemas
# ---------------------------------------------------------------------------


class ProductPage(BaseModel):
    total: int
    page: int
    limit: int
    products: list[Product]


class ProductStats(BaseModel):
    total_products: int = Field(alias="totalProducts")
    in_stock: int = Field(alias="inStock")
    out_of_stock: int = Field(alias="outOfStock")
    categories: dict[str, int]

    model_config = ConfigDict(populate_by_name=True)


class ErrorDetail(BaseModel):
    name: str
    message: str
    status_code: int = Field(alias="statusCode")

    model_config = ConfigDict(populate_by_name=True)


class ErrorEnvelope(BaseModel):
    error: ErrorDetail
