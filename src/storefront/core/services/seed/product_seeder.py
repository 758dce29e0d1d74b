"""One-time import of the product catalog from an external API."""

import httpx
from loguru import logger
from pydantic import TypeAdapter
from sqlmodel import Session

from storefront.entities.product import ProductCreate, ProductRepository

_catalog_adapter = TypeAdapter(list[ProductCreate])


class SeedError(RuntimeError):
    """Raised when the product catalog cannot be fetched or parsed."""


class ProductSeeder:
    """Populate an empty products table from a remote catalog.

    The remote payload is a JSON array of product objects. Source ids are
    discarded so the store generates fresh ones.
    """

    def __init__(
        self,
        source_url: str,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._source_url = source_url
        self._timeout = timeout
        self._transport = transport

    async def fetch_catalog(self) -> list[ProductCreate]:
        try:
            async with httpx.AsyncClient(
                timeout=self._timeout, transport=self._transport
            ) as client:
                resp = await client.get(self._source_url)
                resp.raise_for_status()
                return _catalog_adapter.validate_python(resp.json())
        except httpx.HTTPError as exc:
            raise SeedError(
                f"Failed to fetch product catalog from {self._source_url}: {exc}"
            ) from exc
        except ValueError as exc:  # bad JSON or a ValidationError
            raise SeedError(
                f"Invalid product catalog from {self._source_url}: {exc}"
            ) from exc

    async def seed(self, session: Session) -> int:
        """Insert the remote catalog if the table is empty.

        Returns:
            Number of products inserted; 0 when the table already had rows.
        """
        repository = ProductRepository(session)
        existing = repository.count()
        if existing:
            logger.info("Products table has {} rows; skipping seed", existing)
            return 0

        logger.info("Seeding products from {}", self._source_url)
        products = await self.fetch_catalog()
        created = repository.create_many(products)
        session.commit()
        logger.info("Seeded {} products", len(created))
        return len(created)
