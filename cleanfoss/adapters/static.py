"""
Built-in catalog.

The default CATALOG_BACKEND. Holds the standard CleanFoss price list as
immutable records; companies with their own prices use the ORM backend.

Usage in settings.py:
    CLEANFOSS = {
        "CATALOG_BACKEND": "cleanfoss.adapters.static.StaticCatalogBackend",
    }
"""

from __future__ import annotations

from cleanfoss.protocols.catalog import (
    Addon,
    CatalogBackend,
    MainProduct,
    ProductType,
    ServiceCategory,
)


DEFAULT_PRODUCT_TYPES: tuple[ProductType, ...] = (
    ProductType(id="car", name="Bil", type="car"),
    ProductType(id="baby-trolley", name="Barnevogn", type="baby-trolley"),
    ProductType(id="motorcycle", name="Motorcykel", type="motorcycle"),
    ProductType(id="yacht", name="Båd", type="yacht"),
)

_CAR_MAIN = ServiceCategory(id="car-main", name="Bil Hovedservice", slug="car-main")
_CAR_PREMIUM = ServiceCategory(id="car-premium", name="Premium Bil", slug="car-premium")
_TROLLEY_MAIN = ServiceCategory(id="trolley-main", name="Barnevogn Service", slug="trolley-main")
_BIKE_MAIN = ServiceCategory(id="bike-main", name="Motorcykel Service", slug="bike-main")
_YACHT_MAIN = ServiceCategory(id="yacht-main", name="Båd Service", slug="yacht-main")


MAIN_PRODUCTS: dict[str, tuple[MainProduct, ...]] = {
    "car": (
        MainProduct(
            id="car-whole",
            name="Hele bilen",
            description="Komplet rengøring af din bil - både indvendigt og udvendigt med professionel finish",
            price=849,
            duration=120,
            product_type="car",
            category=_CAR_MAIN,
            image="/images/car-whole.jpg",
        ),
        MainProduct(
            id="car-inside",
            name="Indvendig",
            description="Grundig rengøring af bilens indre - sæder, gulvtæpper, instrumentbord og alle interne overflader",
            price=599,
            duration=90,
            product_type="car",
            category=_CAR_MAIN,
            image="/images/car-inside.jpg",
        ),
        MainProduct(
            id="car-gold",
            name="Gold Package",
            description="Vores premium service med detailing, voksbehandling og beskyttelse af alle overflader",
            price=2616,
            duration=180,
            product_type="car",
            category=_CAR_PREMIUM,
            image="/images/car-gold.jpg",
        ),
    ),
    "baby-trolley": (
        MainProduct(
            id="trolley-complete",
            name="Komplet barnevogn",
            description="Grundig rengøring og desinfektion af barnevogn - sikker for baby",
            price=299,
            duration=45,
            product_type="baby-trolley",
            category=_TROLLEY_MAIN,
            image="/images/trolley-complete.jpg",
        ),
    ),
    "motorcycle": (
        MainProduct(
            id="bike-complete",
            name="Komplet motorcykel",
            description="Professionel rengøring og polering af motorcykel",
            price=449,
            duration=75,
            product_type="motorcycle",
            category=_BIKE_MAIN,
            image="/images/bike-complete.jpg",
        ),
    ),
    "yacht": (
        MainProduct(
            id="yacht-complete",
            name="Båd rengøring",
            description="Komplet rengøring af båd - både dæk og kahyt",
            price=1299,
            duration=240,
            product_type="yacht",
            category=_YACHT_MAIN,
            image="/images/yacht-complete.jpg",
        ),
    ),
}


ADDONS: dict[str, tuple[Addon, ...]] = {
    "car": (
        Addon(
            id="pet-hair",
            name="Fjernelse af hundehår",
            kind="boolean",
            product_type="car",
            description="Specialbehandling for fjernelse af kæledyrshår",
            price=199,
        ),
        Addon(
            id="leather-care",
            name="Læderpleje",
            kind="boolean",
            product_type="car",
            description="Professionel pleje og behandling af læder",
            price=179,
        ),
        Addon(
            id="deep-seat",
            name="Dybdegående sæderens",
            kind="quantity",
            product_type="car",
            description="Intensiv rengøring af bilsæder",
            unit_price=99,
            min=1,
            max=7,
        ),
        Addon(
            id="tire-shine",
            name="Dækshine",
            kind="boolean",
            product_type="car",
            description="Behandling for blanke og beskyttede dæk",
            price=99,
        ),
    ),
    "baby-trolley": (
        Addon(
            id="disinfection",
            name="Extra desinfektion",
            kind="boolean",
            product_type="baby-trolley",
            description="Ekstra desinfektion med babysikre midler",
            price=79,
        ),
    ),
    "motorcycle": (
        Addon(
            id="chain-clean",
            name="Kæderens",
            kind="boolean",
            product_type="motorcycle",
            description="Rengøring og smøring af motorcykelkæde",
            price=89,
        ),
    ),
    "yacht": (
        Addon(
            id="deck-wax",
            name="Dæk voksbehandling",
            kind="boolean",
            product_type="yacht",
            description="Beskyttende voksbehandling af dæk",
            price=399,
        ),
    ),
}


class StaticCatalogBackend:
    """
    CatalogBackend over in-module data.

    Pass main_products/addons to serve a different price list with the same
    shape (e.g. in tests or for a fixed tenant catalog).
    """

    def __init__(
        self,
        main_products: dict[str, tuple[MainProduct, ...]] | None = None,
        addons: dict[str, tuple[Addon, ...]] | None = None,
    ) -> None:
        self._main_products = MAIN_PRODUCTS if main_products is None else main_products
        self._addons = ADDONS if addons is None else addons

    def get_main_products(self, product_type: str) -> list[MainProduct]:
        """Return main products for a product type."""
        return list(self._main_products.get(product_type, ()))

    def get_addons(self, product_type: str) -> list[Addon]:
        """Return addons for a product type."""
        return list(self._addons.get(product_type, ()))


# Verify protocol compliance at import time.
if not isinstance(StaticCatalogBackend(), CatalogBackend):
    raise TypeError("StaticCatalogBackend does not implement CatalogBackend protocol")
