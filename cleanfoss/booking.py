"""
Cart state and pricing output.

Cart structures are mutable and owned by one session; pricing output is frozen.
"""

from dataclasses import asdict, dataclass, field

from cleanfoss.exceptions import PricingError
from cleanfoss.protocols.catalog import Addon, MainProduct, ProductType


@dataclass(frozen=True)
class CarModel:
    """Car model with its size category."""

    id: str
    brand: str
    model: str
    size: str
    search_terms: tuple[str, ...] = ()

    @property
    def display_name(self) -> str:
        return f"{self.brand} {self.model}"


@dataclass
class VehicleDetails:
    selected_car: CarModel | None = None


@dataclass
class AddonSelection:
    """An addon wrapped with the user's choice."""

    addon: Addon
    selected: bool = False
    quantity: int = 1

    def set_quantity(self, quantity: int) -> None:
        """Set quantity within the addon's bounds."""
        low = self.addon.min if self.addon.min is not None else 1
        high = self.addon.max if self.addon.max is not None else low
        if not self.addon.is_quantity or not low <= quantity <= high:
            raise PricingError(
                "INVALID_QUANTITY",
                addon_id=self.addon.id,
                quantity=quantity,
                min=low,
                max=high,
            )
        self.quantity = quantity


@dataclass
class ProductBooking:
    """
    One cart entry: one physical item and its selected services.

    vehicle_details is None for non-vehicle bookings and VehicleDetails()
    for a car without a chosen model. subtotal and discount are informational;
    the pricing functions recompute them.
    """

    id: str
    product_type: ProductType | None = None
    main_product: MainProduct | None = None
    addons: list[AddonSelection] = field(default_factory=list)
    vehicle_details: VehicleDetails | None = None
    subtotal: int = 0
    discount: int = 0

    @property
    def type_key(self) -> str | None:
        return self.product_type.type if self.product_type else None

    def get_addon(self, addon_id: str) -> AddonSelection | None:
        for selection in self.addons:
            if selection.addon.id == addon_id:
                return selection
        return None


@dataclass(frozen=True)
class LineItem:
    """Display row of the order summary. Discounts carry a negative price."""

    id: str
    name: str
    price: int
    type: str
    product_id: str | None = None
    quantity: int | None = None


@dataclass(frozen=True)
class PricingSummary:
    """
    Aggregate pricing of a cart.

    subtotal is the sum of displayed (catalog) prices; adjusted_subtotal is the
    sum of per-booking subtotals with the vehicle size multiplier applied. They
    differ whenever a car with a non-neutral size is in the cart.
    """

    line_items: list[LineItem]
    subtotal: int
    discount: int
    total: int
    vat: float
    adjusted_subtotal: int = 0

    def as_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class TimeSlot:
    id: str
    label: str
    start_time: str
    end_time: str


def get_time_slots() -> list[TimeSlot]:
    """Predefined service time slots."""
    return [
        TimeSlot(id="morning", label="08:00 - 12:00", start_time="08:00", end_time="12:00"),
        TimeSlot(id="midday", label="12:00 - 15:00", start_time="12:00", end_time="15:00"),
        TimeSlot(id="afternoon", label="15:00 - 19:00", start_time="15:00", end_time="19:00"),
    ]
