from loguru import logger
from sqlmodel import Session

from storefront.entities.product import Product, ProductCreate, ProductRepository


class ProductService:
    """Product operations for the HTTP layer.

    Reads delegate straight to the repository; writes commit the session.
    """

    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._product_repo = ProductRepository(db_session)

    def get_all(self) -> list[Product]:
        return self._product_repo.list_all()

    def get_by_id(self, product_id: int) -> Product | None:
        return self._product_repo.get(product_id)

    def add(self, request: ProductCreate) -> Product:
        """Create a product from the mutable fields of ``request``."""
        product = ProductCreate(
            title=request.title,
            price=request.price,
            description=request.description,
            category=request.category,
            image=request.image,
        )
        created = self._product_repo.create(product)
        self._db_session.commit()
        logger.info("Created product {}", created.id)
        return created

    def update(self, product: Product) -> Product | None:
        updated = self._product_repo.update(product)
        if updated is None:
            return None
        self._db_session.commit()
        logger.info("Updated product {}", updated.id)
        return updated

    def delete(self, product_id: int) -> bool:
        deleted = self._product_repo.delete(product_id)
        if deleted:
            self._db_session.commit()
            logger.info("Deleted product {}", product_id)
        return deleted
