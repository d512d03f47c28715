# storefront/services/cart_service.py
from sqlmodel import Session

from storefront.core.errors import InvalidInput, NotFound
from storefront.database import storage_errors, write_transaction
from storefront.models.cart import CartItem
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.cart import (
    CartCleared,
    CartItemAdded,
    CartItemRemoved,
    CartItemUpdated,
    CartLineRead,
    CartSummary,
)


# Largest quantity a single cart line may hold
MAX_QTY = 9999


def money(value: float) -> float:
    return round(value, 2)


class CartService:
    """
    Business logic for the shared cart.

    Responsibilities:
      - validate product existence and quantities
      - additive upsert keyed by product_id (one line per product)
      - compute line totals and the cart total

    Every mutation runs in a single write_transaction, so concurrent
    requests never lose an update.
    """

    def __init__(self, cart_repo: CartRepository, product_repo: ProductRepository):
        self.cart_repo = cart_repo
        self.product_repo = product_repo

    # ---- internal helpers ----

    @staticmethod
    def _validate_qty(qty: int | None) -> int:
        if qty is None or qty < 1 or qty > MAX_QTY:
            raise InvalidInput("Invalid quantity")
        return qty

    # ---- public operations ----

    def get_cart_summary(self, session: Session) -> CartSummary:
        """
        Return the cart lines joined with product name/price/image,
        plus total = sum(price * qty).
        """
        with storage_errors("reading cart"):
            rows = self.cart_repo.list_with_products(session)

        items = [
            CartLineRead(
                id=line.id,
                product_id=line.product_id,
                qty=line.qty,
                name=product.name,
                price=product.price,
                image=product.image,
            )
            for line, product in rows
        ]
        total = money(sum(it.price * it.qty for it in items))
        return CartSummary(items=items, total=total)

    def add_to_cart(
        self,
        session: Session,
        product_id: int | None,
        qty: int = 1,
    ) -> CartItemAdded:
        """
        Add a product to the cart.

        Rules:
          - product_id is required and must reference an existing product
          - qty must be between 1 and MAX_QTY, including after accumulation
          - existing line: qty accumulates (never overwritten)
          - otherwise a new line is created
        """
        if product_id is None:
            raise InvalidInput("productId is required")
        qty = self._validate_qty(qty)

        with write_transaction(session, "adding to cart"):
            if self.product_repo.get_by_id(session, product_id) is None:
                raise NotFound("Product not found")

            existing = self.cart_repo.get_by_product(session, product_id)
            if existing:
                if existing.qty + qty > MAX_QTY:
                    raise InvalidInput(f"Quantity exceeds maximum of {MAX_QTY}")
                existing.qty += qty
                item = self.cart_repo.update(session, existing)
                message = "Cart updated"
            else:
                item = self.cart_repo.create(
                    session, CartItem(product_id=product_id, qty=qty)
                )
                message = "Item added to cart"

            result = CartItemAdded(
                message=message,
                id=item.id,
                product_id=item.product_id,
                qty=item.qty,
            )

        return result

    def update_quantity(
        self,
        session: Session,
        item_id: int,
        qty: int | None,
    ) -> CartItemUpdated:
        """
        Overwrite the quantity of a cart line.

        Zero/negative quantities are rejected; use remove_item instead.
        """
        qty = self._validate_qty(qty)

        with write_transaction(session, "updating cart item"):
            item = self.cart_repo.get_by_id(session, item_id)
            if not item:
                raise NotFound("Cart item not found")
            item.qty = qty
            self.cart_repo.update(session, item)

        return CartItemUpdated(message="Cart item updated", id=item_id, qty=qty)

    def remove_item(self, session: Session, item_id: int) -> CartItemRemoved:
        with write_transaction(session, "removing cart item"):
            item = self.cart_repo.get_by_id(session, item_id)
            if not item:
                raise NotFound("Cart item not found")
            self.cart_repo.delete(session, item)

        return CartItemRemoved(message="Item removed from cart", id=item_id)

    def clear_cart(self, session: Session) -> CartCleared:
        """
        Remove every line from the cart.
        """
        with write_transaction(session, "clearing cart"):
            removed = self.cart_repo.clear(session)

        return CartCleared(message="Cart cleared", removed=removed)
