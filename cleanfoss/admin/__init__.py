"""CleanFoss admin."""

from cleanfoss.admin.catalog import AddonAdmin, MainProductAdmin, ServiceCategoryAdmin
from cleanfoss.admin.company import CompanyAdmin

__all__ = [
    "AddonAdmin",
    "CompanyAdmin",
    "MainProductAdmin",
    "ServiceCategoryAdmin",
]
