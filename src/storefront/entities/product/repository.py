"""Product repository for data access operations."""

from collections.abc import Iterable

from sqlalchemy import func
from sqlmodel import Session, select

from storefront.entities._base import is_storable_id

from .entity import Product, ProductCreate
from .table import ProductTable

_MUTABLE_FIELDS = ("title", "price", "description", "category", "image")


class ProductRepository:
    """Data-access layer for products."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def list_all(self) -> list[Product]:
        rows = self._session.exec(select(ProductTable)).all()
        return [Product.model_validate(row) for row in rows]

    def get(self, product_id: int) -> Product | None:
        if not is_storable_id(product_id):
            return None
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        return Product.model_validate(row)

    def create(self, product: ProductCreate) -> Product:
        """Insert a product; the store assigns its id."""
        row = ProductTable(**product.model_dump(include=set(_MUTABLE_FIELDS)))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row)

    def create_many(self, products: Iterable[ProductCreate]) -> list[Product]:
        """Insert several products in the current transaction."""
        rows = [
            ProductTable(**product.model_dump(include=set(_MUTABLE_FIELDS)))
            for product in products
        ]
        self._session.add_all(rows)
        self._session.flush()
        return [Product.model_validate(row) for row in rows]

    def update(self, product: Product) -> Product | None:
        """Overwrite the mutable fields of an existing product.

        Returns None when no row has ``product.id``.
        """
        if not is_storable_id(product.id):
            return None
        row = self._session.get(ProductTable, product.id)
        if row is None:
            return None

        for field in _MUTABLE_FIELDS:
            setattr(row, field, getattr(product, field))
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return Product.model_validate(row)

    def delete(self, product_id: int) -> bool:
        if not is_storable_id(product_id):
            return False
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return False

        self._session.delete(row)
        self._session.flush()
        return True

    def count(self) -> int:
        return self._session.exec(select(func.count()).select_from(ProductTable)).one()
