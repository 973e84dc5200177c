# quickcart/domain/errors.py
from typing import Any, List

#kody bledow zwracane w polu "error"
MISSING_CUSTOMER_ID = "missing_customer_id"
ITEMS_REQUIRED = "items_required"
INVALID_ITEMS = "invalid_items"
MISSING_USER_ID = "missing_user_id"
PRODUCT_NOT_FOUND = "product_not_found"
INVALID_JSON = "invalid_json"
INTERNAL_SERVER_ERROR = "internal_server_error"

#powody w details dla invalid_items
ITEM_FIELDS_REQUIRED = "product_id and quantity are required"
INVALID_QUANTITY = "quantity must be a positive number"


class CartValidationError(ValueError):
    """Odrzucony koszyk - nic nie zostalo zapisane."""

    def __init__(self, code: str, details: List[dict[str, Any]] | None = None):
        super().__init__(code)
        self.code = code
        self.details = details
