"""
CleanFoss public API.

CORE (essential):
    PricingService.quote(cart, company)          - Price a submitted cart
    PricingService.get_catalog(company)          - Catalog for a company

BUILDING (helpers):
    PricingService.build_bookings(cart, catalog) - Payload -> ProductBookings
    PricingService.build_booking(data, i, ...)   - One payload entry

Submitted carts carry selections only. Prices always come from the catalog,
so a client cannot change what it pays by editing the payload.

Payload entry:
    {
        "id": "product-1",
        "product_type": "car",
        "main_product": "car-whole",      # absent = type default, None = none
        "addons": [{"id": "pet-hair"}, {"id": "deep-seat", "quantity": 3}],
        "car": "vw-golf",                 # cars only, optional
    }
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from cleanfoss.conf import cleanfoss_settings, get_catalog_backend
from cleanfoss.exceptions import PricingError
from cleanfoss.pricing import calculate_pricing, create_default_product_booking
from cleanfoss.vehicles import get_car_by_id

if TYPE_CHECKING:
    from cleanfoss.booking import PricingSummary, ProductBooking
    from cleanfoss.models import Company
    from cleanfoss.protocols import CatalogBackend

logger = logging.getLogger(__name__)


class PricingService:
    """
    CleanFoss public API.

    Uses @classmethod for extensibility: subclass and override
    get_catalog() to plug in caching or another tenant lookup.
    """

    # ======================================================================
    # CORE API
    # ======================================================================

    @classmethod
    def get_catalog(cls, company: Company | str | None = None) -> CatalogBackend:
        """
        Catalog to price against.

        Without a company: the configured CATALOG_BACKEND.
        With a company (instance or slug): that company's database catalog.
        """
        if company is None:
            return get_catalog_backend()
        from cleanfoss.adapters.catalog_backend import DjangoCatalogBackend

        return DjangoCatalogBackend(company)

    @classmethod
    def quote(
        cls,
        cart: list[Mapping[str, Any]],
        company: Company | str | None = None,
    ) -> PricingSummary:
        """
        Price a submitted cart.

        Raises:
            PricingError: If any entry is malformed or names unknown items.
                The whole quote fails; no entry is skipped.
        """
        catalog = cls.get_catalog(company)
        bookings = cls.build_bookings(cart, catalog)
        summary = calculate_pricing(bookings)
        logger.info(
            "Quoted %d product(s) for %s: total=%d discount=%d",
            len(bookings),
            getattr(company, "slug", company) or "shared catalog",
            summary.total,
            summary.discount,
        )
        return summary

    # ======================================================================
    # BUILDING
    # ======================================================================

    @classmethod
    def build_bookings(
        cls,
        cart: list[Mapping[str, Any]],
        catalog: CatalogBackend,
    ) -> list[ProductBooking]:
        if not isinstance(cart, (list, tuple)):
            raise PricingError("INVALID_BOOKING", message="Cart must be a list")
        max_items = cleanfoss_settings.MAX_CART_ITEMS
        if len(cart) > max_items:
            raise PricingError("CART_FULL", max_items=max_items, items=len(cart))
        return [cls.build_booking(data, index, catalog) for index, data in enumerate(cart)]

    @classmethod
    def build_booking(
        cls,
        data: Mapping[str, Any],
        index: int,
        catalog: CatalogBackend,
    ) -> ProductBooking:
        """Turn one payload entry into a ProductBooking priced from catalog."""
        if not isinstance(data, Mapping):
            raise PricingError("INVALID_BOOKING", index=index)

        booking_id = str(data.get("id") or f"product-{index + 1}")
        product_type = data.get("product_type")
        if not product_type or not isinstance(product_type, str):
            raise PricingError("INVALID_BOOKING", booking_id=booking_id, field="product_type")

        booking = create_default_product_booking(booking_id, product_type, catalog)
        if booking.product_type is None:
            raise PricingError("UNKNOWN_PRODUCT_TYPE", booking_id=booking_id, product_type=product_type)

        if "main_product" in data:
            cls._apply_main_product(booking, data["main_product"], catalog)
        cls._apply_addons(booking, data.get("addons") or [])
        if data.get("car"):
            if not isinstance(data["car"], str):
                raise PricingError("INVALID_BOOKING", booking_id=booking_id, field="car")
            cls._apply_car(booking, data["car"])
        return booking

    @classmethod
    def _apply_main_product(cls, booking, main_product_id, catalog) -> None:
        if main_product_id is None:
            booking.main_product = None
            return
        for main_product in catalog.get_main_products(booking.type_key):
            if main_product.id == main_product_id:
                booking.main_product = main_product
                return
        raise PricingError(
            "MAIN_PRODUCT_NOT_FOUND",
            booking_id=booking.id,
            main_product_id=main_product_id,
        )

    @classmethod
    def _apply_addons(cls, booking, addons) -> None:
        if not isinstance(addons, (list, tuple)):
            raise PricingError("INVALID_BOOKING", booking_id=booking.id, field="addons")
        for entry in addons:
            if isinstance(entry, str):
                entry = {"id": entry}
            if not isinstance(entry, Mapping):
                raise PricingError("INVALID_BOOKING", booking_id=booking.id, field="addons")
            selection = booking.get_addon(entry.get("id"))
            if selection is None:
                raise PricingError("ADDON_NOT_FOUND", booking_id=booking.id, addon_id=entry.get("id"))
            if not entry.get("selected", True):
                continue
            selection.selected = True
            if selection.addon.is_quantity:
                quantity = entry.get("quantity", 1)
                if isinstance(quantity, bool) or not isinstance(quantity, int):
                    raise PricingError(
                        "INVALID_QUANTITY",
                        booking_id=booking.id,
                        addon_id=selection.addon.id,
                        quantity=quantity,
                    )
                selection.set_quantity(quantity)

    @classmethod
    def _apply_car(cls, booking, car_id) -> None:
        if booking.vehicle_details is None:
            raise PricingError("VEHICLE_NOT_APPLICABLE", booking_id=booking.id)
        car = get_car_by_id(car_id)
        if car is None:
            raise PricingError("CAR_NOT_FOUND", booking_id=booking.id, car_id=car_id)
        booking.vehicle_details.selected_car = car

