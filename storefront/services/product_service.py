# storefront/services/product_service.py
import logging

from sqlmodel import Session

from storefront.database import storage_errors, write_transaction
from storefront.models.product import Product
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.product import ProductRead

logger = logging.getLogger(__name__)

# Demo catalog inserted on first run (name, price, image)
SEED_PRODUCTS: list[tuple[str, float, str]] = [
    ("Wireless Headphones", 79.99, "🎧"),
    ("Smart Watch", 199.99, "⌚"),
    ("Laptop Stand", 49.99, "💻"),
    ("Mechanical Keyboard", 129.99, "⌨️"),
    ("USB-C Hub", 39.99, "🔌"),
    ("Webcam HD", 89.99, "📷"),
    ("Phone Case", 24.99, "📱"),
    ("Portable Charger", 34.99, "🔋"),
]


class ProductService:
    """
    Read-only catalog plus the first-run seed.
    """

    def __init__(self, repo: ProductRepository):
        self.repo = repo

    def list_products(self, session: Session) -> list[ProductRead]:
        """
        Return every product ordered by id. No filtering, no paging.
        """
        with storage_errors("listing products"):
            products = self.repo.list_all(session)
        return [ProductRead.model_validate(p) for p in products]

    def seed_catalog(self, session: Session) -> int:
        """
        Insert the demo catalog if the products table is empty.

        Returns the number of inserted rows (0 when already seeded).
        """
        with write_transaction(session, "seeding products"):
            if self.repo.count(session) > 0:
                return 0
            products = [
                Product(name=name, price=price, image=image)
                for name, price, image in SEED_PRODUCTS
            ]
            self.repo.create_many(session, products)

        logger.info("Inserted %d demo products", len(products))
        return len(products)
