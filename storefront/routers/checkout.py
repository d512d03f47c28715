# storefront/routers/checkout.py
from fastapi import APIRouter, Depends
from sqlmodel import Session

from storefront.database import get_session
from storefront.repositories.cart_repo import CartRepository
from storefront.schemas.checkout import CheckoutRequest, Receipt
from storefront.services.checkout_service import CheckoutService

router = APIRouter(prefix="/checkout", tags=["Checkout"])

cart_repo = CartRepository()
service = CheckoutService(cart_repo)


@router.post("", response_model=Receipt)
def checkout(
    payload: CheckoutRequest,
    session: Session = Depends(get_session),
):
    """
    Convert the cart into a receipt and empty the cart.

    The receipt is only returned, never stored.
    """
    return service.checkout(session, payload.name, payload.email)
