"""
Booking cart.

Holds the ordered product bookings of one booking session and applies the
wizard's edits to them. Order matters: only the first booking is priced
without the multi-item discount.

Usage:
    cart = Cart()
    second = cart.add_product("car")
    cart.toggle_addon(second.id, "pet-hair")
    summary = cart.pricing()
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cleanfoss.booking import AddonSelection, CarModel, PricingSummary, ProductBooking
from cleanfoss.choices import ProductTypeKey
from cleanfoss.conf import cleanfoss_settings
from cleanfoss.exceptions import PricingError
from cleanfoss.pricing import (
    calculate_pricing,
    calculate_product_discount,
    calculate_product_subtotal,
    change_product_type,
    create_default_product_booking,
    get_main_products_by_type,
)

if TYPE_CHECKING:
    from cleanfoss.protocols.catalog import CatalogBackend


class Cart:
    """Ordered product bookings of one session, starting with one car."""

    def __init__(self, catalog: CatalogBackend | None = None, product_type: str = ProductTypeKey.CAR):
        self.catalog = catalog
        self._next_number = 1
        self.products: list[ProductBooking] = []
        self._append(product_type)

    def __len__(self) -> int:
        return len(self.products)

    def _append(self, product_type: str) -> ProductBooking:
        booking = create_default_product_booking(
            f"product-{self._next_number}", product_type, self.catalog
        )
        self._next_number += 1
        self.products.append(booking)
        return booking

    def add_product(self, product_type: str = ProductTypeKey.CAR) -> ProductBooking:
        max_items = cleanfoss_settings.MAX_CART_ITEMS
        if len(self.products) >= max_items:
            raise PricingError("CART_FULL", max_items=max_items)
        return self._append(product_type)

    def remove_product(self, product_id: str) -> None:
        booking = self.get_product(product_id)
        if len(self.products) <= 1:
            raise PricingError("CART_MIN_ITEMS", booking_id=product_id)
        self.products.remove(booking)

    def get_product(self, product_id: str) -> ProductBooking:
        for booking in self.products:
            if booking.id == product_id:
                return booking
        raise PricingError("PRODUCT_NOT_FOUND", booking_id=product_id)

    def update_product_type(self, product_id: str, product_type: str) -> ProductBooking:
        return change_product_type(self.get_product(product_id), product_type, self.catalog)

    def update_main_product(self, product_id: str, main_product_id: str) -> ProductBooking:
        booking = self.get_product(product_id)
        for main_product in get_main_products_by_type(booking.type_key, self.catalog):
            if main_product.id == main_product_id:
                booking.main_product = main_product
                return booking
        raise PricingError(
            "MAIN_PRODUCT_NOT_FOUND",
            booking_id=product_id,
            main_product_id=main_product_id,
        )

    def select_car(self, product_id: str, car: CarModel | None) -> ProductBooking:
        """Set (or clear, with None) the car of a car booking."""
        booking = self.get_product(product_id)
        if booking.vehicle_details is None:
            raise PricingError("VEHICLE_NOT_APPLICABLE", booking_id=product_id)
        booking.vehicle_details.selected_car = car
        return booking

    def _get_addon(self, product_id: str, addon_id: str) -> AddonSelection:
        selection = self.get_product(product_id).get_addon(addon_id)
        if selection is None:
            raise PricingError("ADDON_NOT_FOUND", booking_id=product_id, addon_id=addon_id)
        return selection

    def toggle_addon(self, product_id: str, addon_id: str, selected: bool | None = None) -> AddonSelection:
        """Flip an addon, or set it when selected is given."""
        selection = self._get_addon(product_id, addon_id)
        selection.selected = not selection.selected if selected is None else selected
        return selection

    def set_addon_quantity(self, product_id: str, addon_id: str, quantity: int) -> AddonSelection:
        selection = self._get_addon(product_id, addon_id)
        selection.set_quantity(quantity)
        return selection

    def pricing(self) -> PricingSummary:
        """Price the cart and refresh each booking's informational totals."""
        summary = calculate_pricing(self.products)
        for index, booking in enumerate(self.products):
            booking.subtotal = calculate_product_subtotal(booking)
            booking.discount = calculate_product_discount(booking, index)
        return summary
