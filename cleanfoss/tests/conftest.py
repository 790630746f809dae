"""Pytest fixtures for CleanFoss tests."""

import pytest

from cleanfoss.booking import AddonSelection, ProductBooking
from cleanfoss.conf import reset_catalog_backend
from cleanfoss.models import Addon, Company, MainProduct, ServiceCategory
from cleanfoss.protocols import Addon as AddonRecord
from cleanfoss.protocols import MainProduct as MainProductRecord
from cleanfoss.vehicles import get_car_by_id


@pytest.fixture(autouse=True)
def _fresh_catalog_backend():
    """Every test starts from the configured CATALOG_BACKEND."""
    reset_catalog_backend()
    yield
    reset_catalog_backend()


# ═══════════════════════════════════════════════════════════════════
# Engine records
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def hele_bilen():
    """The whole-car clean at the price used by the booking tests."""
    return MainProductRecord(
        id="full-car",
        name="Hele bilen",
        description="",
        price=999,
        duration=120,
        product_type="car",
    )


@pytest.fixture
def pet_hair():
    return AddonRecord(id="pet-hair", name="Fjernelse af hundehår", kind="boolean", product_type="car", price=199)


@pytest.fixture
def leather_care():
    return AddonRecord(id="leather-care", name="Læderpleje", kind="boolean", product_type="car", price=179)


@pytest.fixture
def deep_seat():
    return AddonRecord(
        id="deep-seat",
        name="Dybdegående sæderens",
        kind="quantity",
        product_type="car",
        unit_price=99,
        min=1,
        max=7,
    )


@pytest.fixture
def make_booking():
    """Factory for bookings built from records, without any catalog."""

    def _make(id="test-product", main_product=None, addons=(), product_type=None, vehicle_details=None):
        return ProductBooking(
            id=id,
            product_type=product_type,
            main_product=main_product,
            addons=[
                item if isinstance(item, AddonSelection) else AddonSelection(addon=item)
                for item in addons
            ],
            vehicle_details=vehicle_details,
        )

    return _make


@pytest.fixture
def golf():
    """Volkswagen Golf, size "mellem" (1.0x)."""
    return get_car_by_id("vw-golf")


@pytest.fixture
def xc90():
    """Volvo XC90, size "suv" (1.3x)."""
    return get_car_by_id("volvo-xc90")


# ═══════════════════════════════════════════════════════════════════
# Database catalog
# ═══════════════════════════════════════════════════════════════════


@pytest.fixture
def company(db):
    """Create a test company."""
    return Company.objects.create(slug="vaskehallen", name="Vaskehallen ApS")


@pytest.fixture
def inactive_company(db):
    return Company.objects.create(slug="lukket", name="Lukket ApS", is_active=False)


@pytest.fixture
def category(db):
    return ServiceCategory.objects.create(slug="car-main", name="Bil Hovedservice")


@pytest.fixture
def company_catalog(db, company, category):
    """A company catalog for cars: two main products and three addons."""
    MainProduct.objects.create(
        company=company,
        code="car-basic",
        product_type="car",
        name="Basis",
        price=500,
        duration_minutes=60,
        category=category,
        sort_order=1,
    )
    MainProduct.objects.create(
        company=company,
        code="car-premium",
        product_type="car",
        name="Premium",
        price=1500,
        duration_minutes=180,
        category=category,
        sort_order=2,
    )
    Addon.objects.create(
        company=company,
        code="wax",
        product_type="car",
        kind="boolean",
        name="Voks",
        price=150,
        sort_order=1,
    )
    Addon.objects.create(
        company=company,
        code="mats",
        product_type="car",
        kind="quantity",
        name="Måtter",
        unit_price=25,
        min_qty=1,
        max_qty=4,
        sort_order=2,
    )
    Addon.objects.create(
        company=company,
        code="ozone",
        product_type="car",
        kind="boolean",
        name="Ozonbehandling",
        price=250,
        sort_order=3,
        is_active=False,
    )
    return company
