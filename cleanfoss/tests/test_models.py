"""Tests for CleanFoss models."""

import pytest
from django.core.exceptions import ValidationError
from django.db import IntegrityError, transaction

from cleanfoss.models import Addon, Company, MainProduct
from cleanfoss.signals import price_changed


pytestmark = pytest.mark.django_db


@pytest.fixture
def price_changes():
    """Collect price_changed signals sent during a test."""
    received = []

    def handler(sender, **kwargs):
        received.append({"sender": sender, **kwargs})

    price_changed.connect(handler)
    yield received
    price_changed.disconnect(handler)


class TestCompany:
    def test_str(self, company):
        assert str(company) == "Vaskehallen ApS"

    def test_related_catalog(self, company_catalog):
        assert company_catalog.main_products.count() == 2
        assert company_catalog.addons.count() == 3


class TestMainProduct:
    def test_create(self, company, category):
        product = MainProduct.objects.create(
            company=company,
            code="car-basic",
            product_type="car",
            name="Basis",
            price=500,
            category=category,
        )
        assert product.uuid is not None
        assert product.duration_minutes == 60
        assert product.is_active
        assert str(product) == "car-basic - Basis"

    def test_same_code_for_different_companies(self, company):
        other = Company.objects.create(slug="skinnende", name="Skinnende Biler")
        MainProduct.objects.create(company=company, code="car-basic", product_type="car", name="A", price=500)
        MainProduct.objects.create(company=other, code="car-basic", product_type="car", name="B", price=600)
        assert MainProduct.objects.filter(code="car-basic").count() == 2

    def test_code_unique_per_company(self, company):
        MainProduct.objects.create(company=company, code="car-basic", product_type="car", name="A", price=500)
        with pytest.raises(ValidationError):
            MainProduct.objects.create(company=company, code="car-basic", product_type="car", name="B", price=600)

    def test_code_unique_per_company_in_database(self, company):
        MainProduct.objects.create(company=company, code="car-basic", product_type="car", name="A", price=500)
        duplicate = MainProduct(company=company, code="car-basic", product_type="car", name="B", price=600)
        with pytest.raises(IntegrityError), transaction.atomic():
            MainProduct.objects.bulk_create([duplicate])

    def test_code_unique_in_shared_catalog(self):
        MainProduct.objects.create(code="car-whole", product_type="car", name="Hele bilen", price=849)
        with pytest.raises(ValidationError):
            MainProduct.objects.create(code="car-whole", product_type="car", name="Hele bilen", price=899)

    def test_negative_price_invalid(self, company):
        product = MainProduct(company=company, code="x", product_type="car", name="X", price=-1)
        with pytest.raises(ValidationError) as exc:
            product.full_clean()
        assert "price" in exc.value.message_dict

    def test_negative_price_not_saved(self, company):
        with pytest.raises(ValidationError) as exc:
            MainProduct.objects.create(company=company, code="x", product_type="car", name="X", price=-1)
        assert "price" in exc.value.message_dict
        assert not MainProduct.objects.filter(code="x").exists()

    def test_price_change_signal(self, company, price_changes):
        product = MainProduct.objects.create(company=company, code="car-basic", product_type="car", name="A", price=500)
        assert price_changes == []

        product.price = 550
        product.save()

        assert len(price_changes) == 1
        change = price_changes[0]
        assert change["sender"] is MainProduct
        assert change["instance"] == product
        assert change["company_slug"] == "vaskehallen"
        assert change["code"] == "car-basic"
        assert change["field"] == "price"
        assert (change["old_price"], change["new_price"]) == (500, 550)

    def test_no_signal_without_price_change(self, company, price_changes):
        product = MainProduct.objects.create(company=company, code="car-basic", product_type="car", name="A", price=500)
        product.name = "Basis"
        product.save()
        assert price_changes == []

    def test_shared_catalog_signal_has_no_company(self, price_changes):
        product = MainProduct.objects.create(code="car-whole", product_type="car", name="Hele bilen", price=849)
        product.price = 899
        product.save()
        assert price_changes[0]["company_slug"] is None

    def test_history_tracks_price(self, company):
        product = MainProduct.objects.create(company=company, code="car-basic", product_type="car", name="A", price=500)
        product.price = 550
        product.save()

        assert product.history.count() == 2
        assert [h.price for h in product.history.all()] == [550, 500]


class TestAddon:
    def test_boolean_addon(self, company):
        addon = Addon.objects.create(company=company, code="wax", product_type="car", name="Voks", price=150)
        assert addon.kind == "boolean"
        assert not addon.is_quantity

    def test_boolean_addon_needs_price(self, company):
        with pytest.raises(ValidationError) as exc:
            Addon.objects.create(company=company, code="wax", product_type="car", name="Voks")
        assert "price" in exc.value.message_dict

    def test_quantity_addon_needs_unit_price(self, company):
        with pytest.raises(ValidationError) as exc:
            Addon.objects.create(
                company=company, code="mats", product_type="car", kind="quantity", name="Måtter", max_qty=4
            )
        assert "unit_price" in exc.value.message_dict

    def test_quantity_addon_min_at_least_one(self, company):
        with pytest.raises(ValidationError) as exc:
            Addon.objects.create(
                company=company,
                code="mats",
                product_type="car",
                kind="quantity",
                name="Måtter",
                unit_price=25,
                min_qty=0,
                max_qty=4,
            )
        assert "min_qty" in exc.value.message_dict

    def test_quantity_addon_max_below_min(self, company):
        with pytest.raises(ValidationError) as exc:
            Addon.objects.create(
                company=company,
                code="mats",
                product_type="car",
                kind="quantity",
                name="Måtter",
                unit_price=25,
                min_qty=3,
                max_qty=2,
            )
        assert "max_qty" in exc.value.message_dict

    def test_unit_price_change_signal(self, company_catalog, price_changes):
        mats = Addon.objects.get(company=company_catalog, code="mats")
        mats.unit_price = 30
        mats.save()

        assert len(price_changes) == 1
        assert price_changes[0]["sender"] is Addon
        assert price_changes[0]["field"] == "unit_price"
        assert (price_changes[0]["old_price"], price_changes[0]["new_price"]) == (25, 30)

    def test_history(self, company_catalog):
        wax = Addon.objects.get(company=company_catalog, code="wax")
        wax.price = 175
        wax.save()
        assert wax.history.first().price == 175
