"""Tests for the request-scoped dependencies."""

from decimal import Decimal
from types import SimpleNamespace

from sqlalchemy import Engine
from sqlmodel import Session

from storefront.api.http.app_data import ApplicationDependencies
from storefront.api.http.deps import get_db_session
from storefront.core.services import DbSessionService
from storefront.entities.product import ProductCreate, ProductRepository


def _request_for(database_service: DbSessionService) -> SimpleNamespace:
    state = SimpleNamespace(
        app_dependencies=ApplicationDependencies(database_service=database_service)
    )
    return SimpleNamespace(app=SimpleNamespace(state=state))


class TestGetDbSession:
    def test_uncommitted_work_is_discarded_when_request_ends(
        self, engine: Engine, database_service: DbSessionService
    ):
        dependency = get_db_session(_request_for(database_service))
        db = next(dependency)
        ProductRepository(db).create(
            ProductCreate(
                title="Shirt",
                price=Decimal("19.99"),
                description="d",
                category="c",
                image="http://x/y.png",
            )
        )
        dependency.close()

        with Session(engine) as other:
            assert ProductRepository(other).count() == 0

    def test_session_is_closed_after_request(
        self, database_service: DbSessionService
    ):
        dependency = get_db_session(_request_for(database_service))
        db = next(dependency)
        dependency.close()

        assert not db.in_transaction()
