"""Entity: Product."""

from decimal import Decimal
from typing import Annotated

from pydantic import Field, PlainSerializer

from storefront.entities._base import Entity

# Prices are exact decimals in Python and plain numbers on the wire
Price = Annotated[
    Decimal,
    PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductCreate(Entity):
    """Payload for creating a product; carries the mutable fields only."""

    title: str = Field(description="Product title")
    price: Price = Field(description="Unit price")
    description: str = Field(description="Product description")
    category: str = Field(description="Category name")
    image: str = Field(description="Image URL")


class ProductUpdate(ProductCreate):
    """Payload for replacing a product.

    ``id`` must repeat the id in the request path.
    """

    id: int | None = Field(default=None, description="Id of the product to replace")


class Product(ProductCreate):
    """Product entity representing a catalog item.

    The ``id`` is generated by the data store on insert.
    """

    id: int = Field(description="Store generated identifier")
