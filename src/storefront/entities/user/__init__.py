"""User entity module.

This module contains all User-related classes organized by responsibility:
- User, LoginRequest, RegisterRequest: domain entity and request payloads
- UserTable: Database persistence model
- UserRepository: Data access layer
"""

from .entity import LoginRequest, RegisterRequest, User
from .repository import UserRepository
from .table import UserTable

__all__ = ["LoginRequest", "RegisterRequest", "User", "UserRepository", "UserTable"]
