"""Tests for the catalog backends."""

import pytest

from cleanfoss.adapters import DjangoCatalogBackend, StaticCatalogBackend
from cleanfoss.exceptions import PricingError
from cleanfoss.models import Addon, MainProduct
from cleanfoss.pricing import calculate_pricing, create_default_product_booking
from cleanfoss.protocols import CatalogBackend, ServiceCategory


class TestStaticCatalogBackend:
    def test_implements_protocol(self):
        assert isinstance(StaticCatalogBackend(), CatalogBackend)

    def test_returns_new_lists(self):
        backend = StaticCatalogBackend()
        first = backend.get_addons("car")
        first.clear()
        assert len(backend.get_addons("car")) == 4

    def test_unknown_type(self):
        backend = StaticCatalogBackend()
        assert backend.get_main_products("hovercraft") == []
        assert backend.get_addons("hovercraft") == []


@pytest.mark.django_db
class TestDjangoCatalogBackend:
    def test_main_products_in_sort_order(self, company_catalog):
        products = DjangoCatalogBackend(company_catalog).get_main_products("car")

        assert [p.id for p in products] == ["car-basic", "car-premium"]
        basic = products[0]
        assert basic.price == 500
        assert basic.duration == 60
        assert basic.product_type == "car"
        assert basic.category == ServiceCategory(id="car-main", name="Bil Hovedservice", slug="car-main")
        assert basic.image is None

    def test_addons_skip_inactive(self, company_catalog):
        addons = DjangoCatalogBackend(company_catalog).get_addons("car")
        assert [a.id for a in addons] == ["wax", "mats"]

    def test_addon_fields(self, company_catalog):
        wax, mats = DjangoCatalogBackend(company_catalog).get_addons("car")

        assert (wax.kind, wax.price, wax.min, wax.max) == ("boolean", 150, None, None)
        assert mats.is_quantity
        assert (mats.unit_price, mats.min, mats.max) == (25, 1, 4)

    def test_resolve_by_slug(self, company_catalog):
        backend = DjangoCatalogBackend("vaskehallen")
        assert backend.company == company_catalog
        assert len(backend.get_main_products("car")) == 2

    def test_unknown_company(self, db):
        with pytest.raises(PricingError) as exc:
            DjangoCatalogBackend("findes-ikke")
        assert exc.value.code == "COMPANY_NOT_FOUND"

    def test_inactive_company(self, inactive_company):
        with pytest.raises(PricingError) as exc:
            DjangoCatalogBackend(inactive_company)
        assert exc.value.code == "COMPANY_INACTIVE"

        with pytest.raises(PricingError):
            DjangoCatalogBackend("lukket")

    def test_shared_catalog(self, company_catalog):
        MainProduct.objects.create(code="car-whole", product_type="car", name="Hele bilen", price=849)

        shared = DjangoCatalogBackend().get_main_products("car")

        assert [p.id for p in shared] == ["car-whole"]
        assert DjangoCatalogBackend().get_addons("car") == []

    def test_other_product_type_empty(self, company_catalog):
        backend = DjangoCatalogBackend(company_catalog)
        assert backend.get_main_products("yacht") == []
        assert backend.get_addons("yacht") == []

    def test_missing_price_warns_and_prices_zero(self, company_catalog, caplog):
        Addon.objects.filter(code="wax").update(price=None)

        addons = DjangoCatalogBackend(company_catalog).get_addons("car")

        assert addons[0].price is None
        assert "Addon wax (vaskehallen) has no price" in caplog.text

        booking = create_default_product_booking("product-1", "car", DjangoCatalogBackend(company_catalog))
        booking.get_addon("wax").selected = True
        assert calculate_pricing([booking]).total == 500

    def test_prices_booking(self, company_catalog):
        catalog = DjangoCatalogBackend(company_catalog)
        booking = create_default_product_booking("product-1", "car", catalog)
        booking.get_addon("mats").selected = True
        booking.get_addon("mats").set_quantity(4)

        assert booking.main_product.id == "car-basic"
        assert calculate_pricing([booking]).total == 600
