# storefront/routers/products.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.database import get_session
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.product import ProductRead
from storefront.services.product_service import ProductService

router = APIRouter(prefix="/products", tags=["Products"])

repo = ProductRepository()
service = ProductService(repo)


@router.get("", response_model=list[ProductRead])
def list_products(session: Session = Depends(get_session)):
    """
    List the whole catalog, ordered by id.
    """
    return service.list_products(session)
