# storefront/models/product.py
from sqlalchemy import CheckConstraint
from sqlmodel import SQLModel, Field


class Product(SQLModel, table=True):
    """
    Product catalog entry.

    Rows are inserted by the startup seed and never modified afterwards.
    """

    __tablename__ = "products"

    id: int | None = Field(
        default=None,
        primary_key=True,
    )

    name: str = Field(
        description="Display name of the product",
    )

    price: float = Field(
        description="Unit price, never negative",
    )

    image: str | None = Field(
        default=None,
        description="Display token shown by the storefront (emoji)",
    )

    __table_args__ = (
        CheckConstraint("price >= 0", name="ck_products_price_nonneg"),
    )
