"""CleanFoss protocols."""

from cleanfoss.protocols.catalog import (
    Addon,
    CatalogBackend,
    MainProduct,
    ProductType,
    ServiceCategory,
)

__all__ = [
    "Addon",
    "CatalogBackend",
    "MainProduct",
    "ProductType",
    "ServiceCategory",
]
