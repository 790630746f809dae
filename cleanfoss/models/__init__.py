"""CleanFoss models."""

from cleanfoss.models.catalog import Addon, MainProduct, ServiceCategory
from cleanfoss.models.company import Company

__all__ = [
    "Addon",
    "Company",
    "MainProduct",
    "ServiceCategory",
]
