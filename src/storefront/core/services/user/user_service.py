from loguru import logger
from sqlmodel import Session

from storefront.entities.user import User, UserRepository


class UserService:
    def __init__(self, db_session: Session):
        self._db_session = db_session
        self._user_repo = UserRepository(db_session)

    def login(self, username: str, password: str) -> User | None:
        return self._user_repo.login(username, password)

    def register(self, username: str, password: str, email: str) -> User:
        user = self._user_repo.register(username, password, email)
        self._db_session.commit()
        logger.info("Registered user {}", user.id)
        return user

    def get_user_by_id(self, user_id: int) -> User | None:
        return self._user_repo.get(user_id)
