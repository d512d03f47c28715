import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel, Session, create_engine

from storefront.database import get_session, write_transaction
from storefront.main import app
from storefront.models.product import Product
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.services.cart_service import CartService
from storefront.services.checkout_service import CheckoutService
from storefront.services.product_service import ProductService


@pytest.fixture
def engine():
    """
    Fresh in-memory SQLite database per test.

    StaticPool keeps one connection so every session sees the same data.
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        ProductService(ProductRepository()).seed_catalog(session)
        yield session


@pytest.fixture
def product_service():
    return ProductService(ProductRepository())


@pytest.fixture
def cart_service():
    return CartService(CartRepository(), ProductRepository())


@pytest.fixture
def checkout_service():
    return CheckoutService(CartRepository())


@pytest.fixture
def make_product(session):
    """Insert an extra product and return its id."""

    def _make(name: str, price: float, image: str = "📦") -> int:
        with write_transaction(session):
            product = Product(name=name, price=price, image=image)
            session.add(product)
            session.flush()
            product_id = product.id
        return product_id

    return _make


@pytest.fixture
def client(engine, session):
    def _get_session_override():
        with Session(engine) as s:
            yield s

    app.dependency_overrides[get_session] = _get_session_override
    yield TestClient(app)
    app.dependency_overrides.clear()
