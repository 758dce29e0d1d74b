from sqlmodel import Session, select

from storefront.entities._base import is_storable_id

from .entity import User
from .table import UserTable


class UserRepository:
    """Data-access layer for users."""

    def __init__(self, session: Session) -> None:
        self._session = session

    def login(self, username: str, password: str) -> User | None:
        """Return the first user whose username and password match exactly."""
        statement = (
            select(UserTable)
            .where(UserTable.username == username, UserTable.password == password)
            .order_by(UserTable.id)
        )
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return User.model_validate(row)

    def register(self, username: str, password: str, email: str) -> User:
        row = UserTable(username=username, password=password, email=email)
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return User.model_validate(row)

    def get(self, user_id: int) -> User | None:
        if not is_storable_id(user_id):
            return None
        row = self._session.get(UserTable, user_id)
        if row is None:
            return None
        return User.model_validate(row)
