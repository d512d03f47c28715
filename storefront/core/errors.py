# storefront/core/errors.py
"""
Error taxonomy for the storefront.

Services raise these directly (they are HTTPExceptions, so FastAPI knows
the status code); the handler in storefront.main renders them as

    {"error": "<human readable message>", "code": "<code>"}

None of them are retried.
"""

from fastapi import HTTPException, status


class ShopError(HTTPException):
    code: str = "internal_error"
    status_code_default: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message: str = "Internal server error"

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(status_code=self.status_code_default, detail=self.message)


class InvalidInput(ShopError):
    """Client sent a malformed or missing required field."""

    code = "invalid_input"
    status_code_default = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid input"


class NotFound(ShopError):
    """Referenced cart line (or product) does not exist."""

    code = "not_found"
    status_code_default = status.HTTP_404_NOT_FOUND
    default_message = "Not found"


class EmptyCart(ShopError):
    """Checkout attempted with no lines in the cart."""

    code = "empty_cart"
    status_code_default = status.HTTP_400_BAD_REQUEST
    default_message = "Cart is empty"


class StorageFailure(ShopError):
    """Underlying read/write error, not otherwise classified."""

    code = "storage_failure"
    status_code_default = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Storage failure"
