"""CatalogBackend implementation over the CleanFoss models."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from cleanfoss.exceptions import PricingError
from cleanfoss.protocols import (
    Addon,
    CatalogBackend,
    MainProduct,
    ServiceCategory,
)

if TYPE_CHECKING:
    from cleanfoss import models as cleanfoss_models

logger = logging.getLogger(__name__)


class DjangoCatalogBackend:
    """
    CatalogBackend reading one company's catalog from the database.

    company may be a Company instance, a company slug, or None for the shared
    catalog (rows without a company). Only active rows are returned, in
    sort_order.

    Usage:
        catalog = DjangoCatalogBackend("vaskehallen")
        booking = create_default_product_booking("product-1", "car", catalog)
    """

    def __init__(self, company: cleanfoss_models.Company | str | None = None) -> None:
        self.company = self._resolve_company(company)

    @staticmethod
    def _resolve_company(company):
        from cleanfoss.models import Company

        if company is None or isinstance(company, Company):
            found = company
        else:
            found = Company.objects.filter(slug=company).first()
            if found is None:
                raise PricingError("COMPANY_NOT_FOUND", company=company)
        if found is not None and not found.is_active:
            raise PricingError("COMPANY_INACTIVE", company=found.slug)
        return found

    def _filter(self, queryset, product_type: str):
        return queryset.filter(
            company=self.company,
            product_type=product_type,
            is_active=True,
        ).order_by("sort_order", "pk")

    def get_main_products(self, product_type: str) -> list[MainProduct]:
        """Return main products for a product type."""
        from cleanfoss.models import MainProduct as MainProductModel

        rows = self._filter(MainProductModel.objects.select_related("category"), product_type)
        return [
            MainProduct(
                id=row.code,
                name=row.name,
                description=row.description,
                price=row.price,
                duration=row.duration_minutes,
                product_type=row.product_type,
                category=(
                    ServiceCategory(id=row.category.slug, name=row.category.name, slug=row.category.slug)
                    if row.category
                    else None
                ),
                image=row.image or None,
            )
            for row in rows
        ]

    def get_addons(self, product_type: str) -> list[Addon]:
        """Return addons for a product type."""
        from cleanfoss.models import Addon as AddonModel

        addons = []
        for row in self._filter(AddonModel.objects.all(), product_type):
            price_field = "unit_price" if row.is_quantity else "price"
            if getattr(row, price_field) is None:
                logger.warning(
                    "Addon %s (%s) has no %s; it will be priced at 0",
                    row.code,
                    self.company.slug if self.company else "shared",
                    price_field,
                )
            addons.append(
                Addon(
                    id=row.code,
                    name=row.name,
                    kind=row.kind,
                    product_type=row.product_type,
                    description=row.description,
                    price=row.price,
                    unit_price=row.unit_price,
                    min=row.min_qty if row.is_quantity else None,
                    max=row.max_qty if row.is_quantity else None,
                )
            )
        return addons


# Verify implementation at import time
if not isinstance(DjangoCatalogBackend.__new__(DjangoCatalogBackend), CatalogBackend):
    raise TypeError("DjangoCatalogBackend does not implement CatalogBackend protocol")
