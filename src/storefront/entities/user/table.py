"""User database table model."""

from sqlmodel import Field, SQLModel


class UserTable(SQLModel, table=True):
    """Database persistence model for users.

    ``username`` carries no unique constraint; duplicate accounts are allowed.
    """

    __tablename__ = "users"

    id: int | None = Field(default=None, primary_key=True)
    username: str
    password: str
    email: str
