# storefront/schemas/checkout.py
from datetime import datetime

from storefront.schemas.base import CamelModel


class CheckoutRequest(CamelModel):
    """
    Customer details for checkout.

    Both fields are required; emptiness is checked by the checkout service
    so the error carries the invalid_input code.
    """

    name: str | None = None
    email: str | None = None


class ReceiptItem(CamelModel):
    """
    Snapshot of one cart line at checkout time.
    """

    name: str
    qty: int
    price: float
    subtotal: float


class Receipt(CamelModel):
    """
    Result of a completed checkout. Never persisted.
    """

    order_id: str
    customer_name: str
    customer_email: str
    items: list[ReceiptItem]
    total: float
    timestamp: datetime
