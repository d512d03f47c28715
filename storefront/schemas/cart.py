# storefront/schemas/cart.py
from pydantic import StrictInt

from storefront.schemas.base import CamelModel


class CartItemCreate(CamelModel):
    """
    Payload for adding to cart.

    product_id is optional at the schema level so that a missing id is
    reported by the service as InvalidInput rather than a bare 422.
    """

    product_id: StrictInt | None = None
    qty: StrictInt = 1


class CartItemUpdate(CamelModel):
    """
    Payload for overwriting the quantity of a cart line.
    """

    qty: StrictInt | None = None


class CartLineRead(CamelModel):
    """
    A cart line joined with its product's display fields.
    """

    id: int
    product_id: int
    qty: int
    name: str
    price: float
    image: str | None = None


class CartSummary(CamelModel):
    """
    Full cart response model with total.
    """

    items: list[CartLineRead]
    total: float


class CartItemAdded(CamelModel):
    message: str
    id: int
    product_id: int
    qty: int


class CartItemUpdated(CamelModel):
    message: str
    id: int
    qty: int


class CartItemRemoved(CamelModel):
    message: str
    id: int


class CartCleared(CamelModel):
    message: str
    removed: int
