# storefront/services/checkout_service.py
import logging
import time
import uuid
from datetime import datetime, timezone

from sqlmodel import Session

from storefront.core.errors import EmptyCart, InvalidInput
from storefront.database import write_transaction
from storefront.repositories.cart_repo import CartRepository
from storefront.schemas.checkout import Receipt, ReceiptItem
from storefront.services.cart_service import money

logger = logging.getLogger(__name__)


def generate_order_id() -> str:
    """
    ORD-<epoch millis>-<8 random hex chars>.

    The random suffix keeps ids unique when two checkouts land in the
    same millisecond.
    """
    return f"ORD-{int(time.time() * 1000)}-{uuid.uuid4().hex[:8]}"


class CheckoutService:
    """
    Turns the current cart into a receipt.

    Steps (one write transaction):
      1. Validate customer name/email.
      2. Load cart lines joined with products; error if empty.
      3. Snapshot items (name, qty, price, subtotal) in line order.
      4. Compute total.
      5. Delete exactly the lines that were read.

    The receipt is returned to the caller and not stored anywhere.
    """

    def __init__(self, cart_repo: CartRepository):
        self.cart_repo = cart_repo

    @staticmethod
    def _require(value: str | None, field: str) -> str:
        value = (value or "").strip()
        if not value:
            raise InvalidInput(f"{field} is required")
        return value

    def checkout(
        self,
        session: Session,
        name: str | None,
        email: str | None,
    ) -> Receipt:
        name = self._require(name, "name")
        email = self._require(email, "email")

        with write_transaction(session, "checking out"):
            rows = self.cart_repo.list_with_products(session)
            if not rows:
                raise EmptyCart("Cart is empty")

            items = [
                ReceiptItem(
                    name=product.name,
                    qty=line.qty,
                    price=product.price,
                    subtotal=money(product.price * line.qty),
                )
                for line, product in rows
            ]

            for line, _ in rows:
                self.cart_repo.delete(session, line)

        receipt = Receipt(
            order_id=generate_order_id(),
            customer_name=name,
            customer_email=email,
            items=items,
            total=money(sum(it.subtotal for it in items)),
            timestamp=datetime.now(timezone.utc),
        )
        logger.info("Order completed: %s (%d items)", receipt.order_id, len(items))
        return receipt
