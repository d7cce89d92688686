"""Product domain exceptions.

Raised by the Service Layer when business rules are violated.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations

from modules.products.constants import PRODUCT_NOT_FOUND


class ProductNotFound(Exception):
    """The requested product does not exist."""

    def __init__(self, message: str = PRODUCT_NOT_FOUND) -> None:
        super().__init__(message)
