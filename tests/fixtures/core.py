from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import Engine, StaticPool
from sqlmodel import Session, SQLModel, create_engine

from storefront.api.http.app_data import ApplicationDependencies
from storefront.core.services import DbSessionService

__all__ = ["engine", "session", "database_service", "client"]


@pytest.fixture
def engine() -> Generator[Engine]:
    """Create a fresh in-memory database shared across threads."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    # Import models to register them with the metadata
    from storefront.entities import ProductTable, UserTable  # noqa: F401

    SQLModel.metadata.create_all(engine)
    try:
        yield engine
    finally:
        engine.dispose()


@pytest.fixture
def session(engine: Engine) -> Generator[Session]:
    """Create a database session for repository tests."""
    with Session(engine, expire_on_commit=False) as session:
        try:
            yield session
        finally:
            session.rollback()


@pytest.fixture
def database_service(engine: Engine) -> DbSessionService:
    return DbSessionService(engine)


@pytest.fixture
def client(database_service: DbSessionService) -> Generator[TestClient]:
    """Test client wired to the in-memory database.

    The lifespan is not entered, so no tables are created from config and
    no catalog is fetched.
    """
    from storefront.api.http.app import app

    app.state.app_dependencies = ApplicationDependencies(
        database_service=database_service
    )
    try:
        yield TestClient(app)
    finally:
        del app.state.app_dependencies
