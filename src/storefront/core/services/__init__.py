"""Core services exports."""

from .database.db_manage import DbManageService
from .database.db_session import DbSessionService
from .product.product_service import ProductService
from .seed.product_seeder import ProductSeeder, SeedError
from .user.user_service import UserService

__all__ = [
    # Database Services
    "DbManageService",
    "DbSessionService",
    # Domain Services
    "ProductService",
    "UserService",
    # Seeding
    "ProductSeeder",
    "SeedError",
]
