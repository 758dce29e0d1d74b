"""Tests for the product and user services."""

from decimal import Decimal

from sqlalchemy import Engine
from sqlmodel import Session

from storefront.core.services import ProductService, UserService
from storefront.entities.product import Product, ProductCreate, ProductRepository
from storefront.entities.user import UserRepository


def _payload() -> ProductCreate:
    return ProductCreate(
        title="Shirt",
        price=Decimal("19.99"),
        description="d",
        category="c",
        image="http://x/y.png",
    )


class TestProductService:
    def test_add_commits(self, session: Session, engine: Engine):
        created = ProductService(session).add(_payload())

        with Session(engine) as other:
            assert ProductRepository(other).get(created.id) == created

    def test_add_keeps_only_mutable_fields(self, session: Session):
        request = ProductCreate.model_validate({"id": 50, **_payload().model_dump()})

        created = ProductService(session).add(request)

        assert created.id != 50
        assert created.model_dump(exclude={"id"}) == _payload().model_dump()

    def test_reads_delegate_to_repository(self, session: Session):
        service = ProductService(session)
        created = service.add(_payload())

        assert service.get_all() == [created]
        assert service.get_by_id(created.id) == created
        assert service.get_by_id(created.id + 1) is None

    def test_update_and_delete(self, session: Session, engine: Engine):
        service = ProductService(session)
        created = service.add(_payload())
        changed = Product(**{**created.model_dump(), "title": "Hat"})

        assert service.update(changed) == changed
        assert service.delete(created.id) is True
        assert service.delete(created.id) is False

        with Session(engine) as other:
            assert ProductRepository(other).get(created.id) is None

    def test_update_missing_returns_none(self, session: Session):
        missing = Product(id=404, **_payload().model_dump())

        assert ProductService(session).update(missing) is None


class TestUserService:
    def test_register_commits(self, session: Session, engine: Engine):
        user = UserService(session).register("alice", "secret", "a@example.com")

        with Session(engine) as other:
            assert UserRepository(other).get(user.id) == user

    def test_login_and_lookup(self, session: Session):
        service = UserService(session)
        user = service.register("alice", "secret", "a@example.com")

        assert service.login("alice", "secret") == user
        assert service.login("alice", "Secret") is None
        assert service.get_user_by_id(user.id) == user
        assert service.get_user_by_id(user.id + 1) is None
