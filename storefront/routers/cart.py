# storefront/routers/cart.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.database import get_session
from storefront.repositories.cart_repo import CartRepository
from storefront.repositories.product_repo import ProductRepository
from storefront.schemas.cart import (
    CartCleared,
    CartItemAdded,
    CartItemCreate,
    CartItemRemoved,
    CartItemUpdate,
    CartItemUpdated,
    CartSummary,
)
from storefront.services.cart_service import CartService

router = APIRouter(prefix="/cart", tags=["Cart"])

cart_repo = CartRepository()
product_repo = ProductRepository()
service = CartService(cart_repo, product_repo)


@router.get("", response_model=CartSummary)
def get_cart(session: Session = Depends(get_session)):
    """
    Get the cart lines with product details and the cart total.
    """
    return service.get_cart_summary(session)


@router.post("", response_model=CartItemAdded)
def add_to_cart(
    payload: CartItemCreate,
    session: Session = Depends(get_session),
):
    """
    Add a product to the cart.

    Adding a product that is already in the cart increases its quantity.
    """
    return service.add_to_cart(session, payload.product_id, payload.qty)


@router.put("/{item_id}", response_model=CartItemUpdated)
def update_cart_item(
    item_id: int,
    payload: CartItemUpdate,
    session: Session = Depends(get_session),
):
    """
    Overwrite the quantity of a cart line (qty >= 1).
    """
    return service.update_quantity(session, item_id, payload.qty)


@router.delete("/{item_id}", response_model=CartItemRemoved)
def remove_cart_item(
    item_id: int,
    session: Session = Depends(get_session),
):
    return service.remove_item(session, item_id)


@router.delete("", response_model=CartCleared)
def clear_cart(session: Session = Depends(get_session)):
    """
    Remove every line from the cart.
    """
    return service.clear_cart(session)
