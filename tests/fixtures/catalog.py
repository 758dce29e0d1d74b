from __future__ import annotations

from collections.abc import Callable
from typing import Any

import httpx
import pytest

__all__ = ["catalog_payload", "catalog_url", "catalog_transport"]

_CATALOG_URL = "https://catalog.test/products"


@pytest.fixture
def catalog_url() -> str:
    return _CATALOG_URL


@pytest.fixture
def catalog_payload() -> list[dict[str, Any]]:
    """A trimmed copy of the public fake store catalog."""
    return [
        {
            "id": 1,
            "title": "Fjallraven - Foldsack No. 1 Backpack",
            "price": 109.95,
            "description": "Your perfect pack for everyday use.",
            "category": "men's clothing",
            "image": "https://fakestoreapi.com/img/81fPKd-2AYL._AC_SL1500_.jpg",
            "rating": {"rate": 3.9, "count": 120},
        },
        {
            "id": 2,
            "title": "Mens Casual Premium Slim Fit T-Shirts",
            "price": 22.3,
            "description": "Slim-fitting style.",
            "category": "men's clothing",
            "image": "https://fakestoreapi.com/img/71-3HjGNDUL._AC_SY879._SX._UX._SY._UY_.jpg",
            "rating": {"rate": 4.1, "count": 259},
        },
        {
            "Id": 3,
            "Title": "Mens Cotton Jacket",
            "Price": 55.99,
            "Description": "Great outerwear jackets for Spring/Autumn/Winter.",
            "Category": "men's clothing",
            "Image": "https://fakestoreapi.com/img/71li-ujtlUL._AC_UX679_.jpg",
        },
    ]


class RecordingTransport(httpx.MockTransport):
    """Mock transport that remembers every request it served."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]) -> None:
        self.requests: list[httpx.Request] = []

        def _record(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(_record)


@pytest.fixture
def catalog_transport(
    catalog_payload: list[dict[str, Any]],
) -> Callable[..., RecordingTransport]:
    """Factory for transports answering the catalog URL.

    Called with no arguments it serves ``catalog_payload``; pass
    ``status_code`` or raw ``content`` to simulate a broken upstream.
    """

    def _make(
        status_code: int = 200, content: bytes | None = None
    ) -> RecordingTransport:
        def handler(request: httpx.Request) -> httpx.Response:
            if content is not None:
                return httpx.Response(status_code, content=content)
            return httpx.Response(status_code, json=catalog_payload)

        return RecordingTransport(handler)

    return _make
