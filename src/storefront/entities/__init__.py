"""Entities organized by business concept.

Each entity package holds its domain model (entity.py), its persistence
model (table.py) and its data access layer (repository.py).
"""

from .product import (
    Product,
    ProductCreate,
    ProductRepository,
    ProductTable,
    ProductUpdate,
)
from .user import LoginRequest, RegisterRequest, User, UserRepository, UserTable

__all__ = [
    "Product",
    "ProductCreate",
    "ProductUpdate",
    "ProductRepository",
    "ProductTable",
    "LoginRequest",
    "RegisterRequest",
    "User",
    "UserRepository",
    "UserTable",
]
