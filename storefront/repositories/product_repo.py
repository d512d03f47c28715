# storefront/repositories/product_repo.py
from sqlalchemy import func
from sqlmodel import Session, select

from storefront.models.product import Product


class ProductRepository:
    """
    Data access layer for Product.

    - Pure DB operations (CRUD + queries).
    - No FastAPI, no business logic.
    - Writes are staged only; the caller's write_transaction commits.
    """

    def get_by_id(self, session: Session, product_id: int) -> Product | None:
        return session.get(Product, product_id)

    def list_all(self, session: Session) -> list[Product]:
        stmt = select(Product).order_by(Product.id)
        return list(session.exec(stmt).all())

    def count(self, session: Session) -> int:
        stmt = select(func.count()).select_from(Product)
        return session.exec(stmt).one()

    def create_many(self, session: Session, products: list[Product]) -> list[Product]:
        session.add_all(products)
        session.flush()
        return products
