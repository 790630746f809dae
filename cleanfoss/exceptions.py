"""CleanFoss exceptions."""

from typing import Any


ERROR_MESSAGES = {
    "INVALID_BOOKING": "Invalid product booking",
    "INVALID_INDEX": "Invalid booking index",
    "INVALID_QUANTITY": "Invalid quantity",
    "UNKNOWN_PRODUCT_TYPE": "Unknown product type",
    "MAIN_PRODUCT_NOT_FOUND": "Main product not found",
    "ADDON_NOT_FOUND": "Addon not found",
    "CAR_NOT_FOUND": "Car model not found",
    "VEHICLE_NOT_APPLICABLE": "Vehicle details only apply to cars",
    "PRODUCT_NOT_FOUND": "Product not found in cart",
    "CART_FULL": "Cart is full",
    "CART_MIN_ITEMS": "Cart must keep at least one product",
    "COMPANY_NOT_FOUND": "Company not found",
    "COMPANY_INACTIVE": "Company is inactive",
}


class PricingError(Exception):
    """
    Structured exception for pricing and cart operations.

    Usage:
        try:
            summary = PricingService.quote(cart)
        except PricingError as e:
            if e.code == "ADDON_NOT_FOUND":
                print(f"Unknown addon on {e.booking_id}")
    """

    def __init__(self, code: str, message: str = "", **data: Any) -> None:
        self.code = code
        self.message = message or ERROR_MESSAGES.get(code, code)
        self.data = data
        super().__init__(f"[{code}] {self.message}")

    @property
    def booking_id(self) -> str | None:
        return self.data.get("booking_id")

    def as_dict(self) -> dict:
        return {
            "code": self.code,
            "message": self.message,
            "data": self.data,
        }
