"""User domain entity."""

from pydantic import Field

from storefront.entities._base import Entity


class LoginRequest(Entity):
    """Credentials submitted to the login endpoint."""

    username: str
    password: str


class RegisterRequest(LoginRequest):
    """Account details submitted to the register endpoint.

    Any ``id`` in the payload is ignored; the store assigns one.
    """

    email: str


class User(Entity):
    """User entity representing an account in the system.

    The password is stored and compared as plain text.
    """

    id: int = Field(description="Store generated identifier")
    username: str = Field(description="Login name")
    password: str = Field(description="Plain text password")
    email: str = Field(description="Contact email address")
