"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from storefront.api.http.app_data import ApplicationDependencies
from storefront.core.services import ProductService, UserService


def get_db_session(request: Request) -> Iterator[Session]:
    """Yield a request-scoped database session.

    The session is closed when the request finishes, which rolls back
    anything a handler did not commit.
    """
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    db = app_deps.database_service.get_session()
    try:
        yield db
    finally:
        db.close()


def get_product_service(db: Session = Depends(get_db_session)) -> ProductService:
    """Get a product service bound to the request session."""
    return ProductService(db)


def get_user_service(db: Session = Depends(get_db_session)) -> UserService:
    """Get a user service bound to the request session."""
    return UserService(db)
