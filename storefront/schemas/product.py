# storefront/schemas/product.py
from storefront.schemas.base import CamelModel


class ProductRead(CamelModel):
    """
    Public representation of a catalog product.
    """

    id: int
    name: str
    price: float
    image: str | None = None
