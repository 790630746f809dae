"""
CleanFoss pricing engine.

Pure functions over cart state; the only outside input is the catalog, which
defaults to the configured CatalogBackend.

CATALOG:
    get_main_products_by_type(type)   - Main products for a product type
    get_addons_by_type(type)          - Fresh, unselected addon selections
    get_default_product_types()       - The four default product types

CALCULATION:
    get_vehicle_size_multiplier(size) - Car size price factor
    calculate_product_subtotal(b)     - One booking, size-adjusted
    calculate_product_discount(b, i)  - 10% off every booking after the first
    generate_line_items(bookings)     - Display rows
    calculate_pricing(bookings)       - Subtotal, discount, total and VAT

BOOKINGS:
    create_default_product_booking(id, type)
    change_product_type(booking, type)

Amounts are whole Danish kroner. Rounding is half-up, applied to the
size-adjusted base price, the discount and the VAT (one decimal).
"""

from __future__ import annotations

import logging
from dataclasses import replace
from decimal import ROUND_HALF_UP, Decimal
from typing import TYPE_CHECKING

from cleanfoss.adapters.static import DEFAULT_PRODUCT_TYPES
from cleanfoss.booking import (
    AddonSelection,
    LineItem,
    PricingSummary,
    ProductBooking,
    VehicleDetails,
)
from cleanfoss.choices import AddonKind, LineItemType, ProductTypeKey, VehicleSize
from cleanfoss.conf import cleanfoss_settings, get_catalog_backend
from cleanfoss.exceptions import PricingError

if TYPE_CHECKING:
    from collections.abc import Sequence

    from cleanfoss.protocols.catalog import CatalogBackend, MainProduct, ProductType

logger = logging.getLogger(__name__)


NEUTRAL_MULTIPLIER = Decimal("1.0")

VEHICLE_SIZE_MULTIPLIERS: dict[str, Decimal] = {
    VehicleSize.MINI.value: Decimal("0.8"),
    VehicleSize.MELLEM.value: Decimal("1.0"),
    VehicleSize.SEDAN.value: Decimal("1.1"),
    VehicleSize.STATIONCAR.value: Decimal("1.2"),
    VehicleSize.SUV.value: Decimal("1.3"),
    VehicleSize.MPV.value: Decimal("1.3"),
    VehicleSize.VAREVOGN.value: Decimal("1.5"),
}


def round_half_up(value, places: str = "1") -> Decimal:
    """Round like the booking frontend does (half-up for positive amounts)."""
    return Decimal(str(value)).quantize(Decimal(places), rounding=ROUND_HALF_UP)


# ======================================================================
# CATALOG
# ======================================================================


def _catalog(catalog: CatalogBackend | None) -> CatalogBackend:
    return catalog if catalog is not None else get_catalog_backend()


def get_main_products_by_type(
    product_type: str, catalog: CatalogBackend | None = None
) -> list[MainProduct]:
    """Main products for a product type; empty for unknown types."""
    return list(_catalog(catalog).get_main_products(product_type))


def get_addons_by_type(
    product_type: str, catalog: CatalogBackend | None = None
) -> list[AddonSelection]:
    """
    Addon selections for a product type, all unselected with quantity 1.

    New wrappers on every call so two bookings never share selection state.
    """
    return [
        AddonSelection(addon=addon, selected=False, quantity=1)
        for addon in _catalog(catalog).get_addons(product_type)
    ]


def get_default_product_types() -> list[ProductType]:
    return list(DEFAULT_PRODUCT_TYPES)


def _find_product_type(product_type: str) -> ProductType | None:
    for candidate in DEFAULT_PRODUCT_TYPES:
        if candidate.type == product_type:
            return candidate
    return None


# ======================================================================
# VEHICLE SIZE
# ======================================================================


def lookup_vehicle_size_multiplier(size) -> Decimal | None:
    """Multiplier for a known size, None otherwise."""
    try:
        return VEHICLE_SIZE_MULTIPLIERS.get(size)
    except TypeError:
        return None


def get_vehicle_size_multiplier(size) -> Decimal:
    """Multiplier for a size; unknown or missing sizes price as neutral."""
    multiplier = lookup_vehicle_size_multiplier(size)
    if multiplier is None:
        return NEUTRAL_MULTIPLIER
    return multiplier


# ======================================================================
# CALCULATION
# ======================================================================


def _check_booking(booking) -> ProductBooking:
    if not isinstance(booking, ProductBooking):
        raise PricingError("INVALID_BOOKING", value=repr(booking))
    if booking.addons is None:
        raise PricingError("INVALID_BOOKING", booking_id=booking.id, field="addons")
    return booking


def _addon_price(booking: ProductBooking, selection: AddonSelection) -> int:
    """Price of one selected addon. Missing price fields count as 0."""
    addon = selection.addon
    if addon.is_quantity:
        if selection.quantity < 1:
            raise PricingError(
                "INVALID_QUANTITY",
                booking_id=booking.id,
                addon_id=addon.id,
                quantity=selection.quantity,
            )
        if addon.unit_price:
            return addon.unit_price * selection.quantity
        return 0
    if addon.kind == AddonKind.BOOLEAN and addon.price:
        return addon.price
    return 0


def _adjusted_base_price(booking: ProductBooking) -> int:
    """Main product price, scaled by car size when a car is chosen."""
    price = booking.main_product.price
    if (
        booking.type_key == ProductTypeKey.CAR
        and booking.vehicle_details is not None
        and booking.vehicle_details.selected_car is not None
    ):
        multiplier = get_vehicle_size_multiplier(booking.vehicle_details.selected_car.size)
        price = int(round_half_up(Decimal(price) * multiplier))
    return price


def calculate_product_subtotal(booking: ProductBooking) -> int:
    """Main product (size-adjusted) plus selected addons."""
    booking = _check_booking(booking)
    total = 0
    if booking.main_product is not None:
        total += _adjusted_base_price(booking)
    for selection in booking.addons:
        if selection.selected:
            total += _addon_price(booking, selection)
    return total


def calculate_product_discount(booking: ProductBooking, booking_index: int) -> int:
    """
    Discount for the booking at booking_index in the cart.

    The first booking is never discounted; every later one gets
    ADDITIONAL_ITEM_DISCOUNT_RATE of its subtotal, whatever its type.
    """
    if booking_index < 0:
        raise PricingError("INVALID_INDEX", index=booking_index)
    booking = _check_booking(booking)
    if booking_index == 0:
        return 0
    subtotal = calculate_product_subtotal(booking)
    rate = cleanfoss_settings.ADDITIONAL_ITEM_DISCOUNT_RATE
    return int(round_half_up(Decimal(subtotal) * rate))


def generate_line_items(bookings: Sequence[ProductBooking]) -> list[LineItem]:
    """
    Flatten bookings into display rows.

    Per booking: main product (catalog price, no size adjustment), selected
    addons in catalog order, then the discount row for bookings after the first.
    """
    line_items: list[LineItem] = []

    for index, booking in enumerate(bookings):
        booking = _check_booking(booking)
        label = "" if index == 0 else f" #{index + 1}"

        if booking.main_product is not None:
            line_items.append(
                LineItem(
                    id=f"{booking.id}-main",
                    name=booking.main_product.name + label,
                    price=booking.main_product.price,
                    type=LineItemType.MAIN_PRODUCT,
                    product_id=booking.id,
                )
            )

        for selection in booking.addons:
            if not selection.selected:
                continue
            addon = selection.addon
            name = addon.name + label
            if addon.is_quantity and addon.unit_price and selection.quantity > 1:
                name += f" ({selection.quantity} stk.)"
            line_items.append(
                LineItem(
                    id=f"{booking.id}-{addon.id}",
                    name=name,
                    price=_addon_price(booking, selection),
                    type=LineItemType.ADDON,
                    product_id=booking.id,
                    quantity=selection.quantity if addon.is_quantity else None,
                )
            )

        if index > 0:
            discount = calculate_product_discount(booking, index)
            if discount > 0:
                type_name = booking.product_type.name if booking.product_type else "Produkt"
                line_items.append(
                    LineItem(
                        id=f"discount-{booking.id}",
                        name=f"Rabat ({type_name} #{index + 1})",
                        price=-discount,
                        type=LineItemType.DISCOUNT,
                        product_id=booking.id,
                    )
                )

    return line_items


def calculate_vat(total: int) -> float:
    """VAT contained in a VAT-inclusive total, rounded to one decimal."""
    rate = cleanfoss_settings.VAT_RATE
    amount = Decimal(total)
    vat = amount - amount / (1 + rate)
    return float(round_half_up(vat, "0.1"))


def calculate_pricing(bookings: Sequence[ProductBooking]) -> PricingSummary:
    """
    Price a whole cart.

    subtotal sums the displayed line items, so it uses catalog main product
    prices; adjusted_subtotal sums calculate_product_subtotal() and includes
    the car size multiplier.
    """
    bookings = list(bookings)
    line_items = generate_line_items(bookings)

    subtotal = sum(item.price for item in line_items if item.type != LineItemType.DISCOUNT)
    discount = abs(sum(item.price for item in line_items if item.type == LineItemType.DISCOUNT))
    total = sum(item.price for item in line_items)
    adjusted_subtotal = sum(calculate_product_subtotal(booking) for booking in bookings)

    summary = PricingSummary(
        line_items=line_items,
        subtotal=subtotal,
        discount=discount,
        total=total,
        vat=calculate_vat(total),
        adjusted_subtotal=adjusted_subtotal,
    )
    logger.debug(
        "Priced %d booking(s): subtotal=%d discount=%d total=%d",
        len(bookings),
        summary.subtotal,
        summary.discount,
        summary.total,
    )
    return summary


# ======================================================================
# BOOKINGS
# ======================================================================


def create_default_product_booking(
    id: str,
    product_type: str = ProductTypeKey.CAR,
    catalog: CatalogBackend | None = None,
) -> ProductBooking:
    """
    New booking with the type's first main product preselected.

    Unknown types still produce a booking, with product_type None.
    Only cars get vehicle_details.
    """
    selected_type = _find_product_type(product_type)
    main_products = get_main_products_by_type(product_type, catalog)

    return ProductBooking(
        id=id,
        product_type=replace(selected_type, selected=True) if selected_type else None,
        main_product=main_products[0] if main_products else None,
        addons=get_addons_by_type(product_type, catalog),
        vehicle_details=VehicleDetails() if product_type == ProductTypeKey.CAR else None,
        subtotal=0,
        discount=0,
    )


def change_product_type(
    booking: ProductBooking,
    product_type: str,
    catalog: CatalogBackend | None = None,
) -> ProductBooking:
    """Switch a booking to another type, resetting main product and addons."""
    booking = _check_booking(booking)
    selected_type = _find_product_type(product_type)
    main_products = get_main_products_by_type(product_type, catalog)

    booking.product_type = replace(selected_type, selected=True) if selected_type else None
    booking.main_product = main_products[0] if main_products else None
    booking.addons = get_addons_by_type(product_type, catalog)
    if product_type == ProductTypeKey.CAR:
        if booking.vehicle_details is None:
            booking.vehicle_details = VehicleDetails()
    else:
        booking.vehicle_details = None
    return booking
