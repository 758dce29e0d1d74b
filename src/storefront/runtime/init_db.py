"""Database initialization script."""

from storefront.core.services.database import DbManageService, DbSessionService


def init_db(drop: bool = False) -> None:
    """Create all database tables, optionally dropping them first."""
    database_service = DbSessionService()
    try:
        manager = DbManageService(database_service.engine)
        if drop:
            manager.drop_all()
        manager.create_all()
    finally:
        database_service.dispose()


if __name__ == "__main__":
    init_db()
