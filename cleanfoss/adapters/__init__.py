"""CleanFoss adapters."""

from cleanfoss.adapters.catalog_backend import DjangoCatalogBackend
from cleanfoss.adapters.static import StaticCatalogBackend

__all__ = [
    "DjangoCatalogBackend",
    "StaticCatalogBackend",
]
