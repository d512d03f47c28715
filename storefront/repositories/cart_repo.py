# storefront/repositories/cart_repo.py
from sqlmodel import Session, select

from storefront.models.cart import CartItem
from storefront.models.product import Product


class CartRepository:
    """
    Data access layer for the shared cart.

    Nothing here commits: mutations are flushed so generated ids are
    available, and the service commits the whole unit of work.
    """

    # Lines joined with their product, in insertion (id) order
    def list_with_products(self, session: Session) -> list[tuple[CartItem, Product]]:
        stmt = (
            select(CartItem, Product)
            .join(Product, CartItem.product_id == Product.id)
            .order_by(CartItem.id)
        )
        return list(session.exec(stmt).all())

    def get_by_id(self, session: Session, item_id: int) -> CartItem | None:
        return session.get(CartItem, item_id)

    def get_by_product(self, session: Session, product_id: int) -> CartItem | None:
        stmt = select(CartItem).where(CartItem.product_id == product_id)
        return session.exec(stmt).first()

    def list_all(self, session: Session) -> list[CartItem]:
        return list(session.exec(select(CartItem)).all())

    # CRUD
    def create(self, session: Session, item: CartItem) -> CartItem:
        session.add(item)
        session.flush()
        return item

    def update(self, session: Session, item: CartItem) -> CartItem:
        session.add(item)
        session.flush()
        return item

    def delete(self, session: Session, item: CartItem) -> None:
        session.delete(item)
        session.flush()

    def clear(self, session: Session) -> int:
        rows = self.list_all(session)
        for row in rows:
            session.delete(row)
        session.flush()
        return len(rows)
