# storefront/models/cart.py
from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field


class CartItem(SQLModel, table=True):
    """
    One line of the shared shopping cart.

    At most one row per product_id; the cart service upserts inside a
    write transaction instead of relying on a unique constraint.
    Positive qty is checked by the database; the upper bound by the service.
    """

    __tablename__ = "cart"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    product_id: int = Field(
        foreign_key="products.id",
        index=True,
    )

    qty: int = Field(
        description="Must be >= 1",
    )

    __table_args__ = (
        CheckConstraint("qty > 0", name="ck_cart_qty_pos"),
    )
