"""Tests for the car model database."""

from cleanfoss.pricing import VEHICLE_SIZE_MULTIPLIERS
from cleanfoss.vehicles import (
    CAR_DATABASE,
    get_all_brands,
    get_car_by_id,
    get_cars_by_brand,
    search_cars,
)


class TestCarDatabase:
    def test_ids_unique(self):
        ids = [car.id for car in CAR_DATABASE]
        assert len(ids) == len(set(ids))

    def test_every_size_is_priced(self):
        assert {car.size for car in CAR_DATABASE} == set(VEHICLE_SIZE_MULTIPLIERS)

    def test_get_car_by_id(self):
        car = get_car_by_id("volvo-xc90")
        assert car.brand == "Volvo"
        assert car.size == "suv"
        assert car.display_name == "Volvo XC90"

    def test_get_unknown_car(self):
        assert get_car_by_id("trabant-601") is None


class TestSearchCars:
    def test_short_query_returns_nothing(self):
        assert search_cars("") == []
        assert search_cars("v") == []

    def test_model_search(self):
        assert [car.id for car in search_cars("golf")] == ["vw-golf"]

    def test_case_insensitive(self):
        assert [car.id for car in search_cars("GOLF")] == ["vw-golf"]

    def test_alias_term(self):
        assert "vw-golf" in [car.id for car in search_cars("vw")]

    def test_brand_matches_sorted_by_model(self):
        results = search_cars("volvo")
        assert [car.model for car in results] == ["S60", "S90", "V60", "V70", "V90", "XC40", "XC60", "XC90"]

    def test_model_prefix_sorted(self):
        assert [car.id for car in search_cars("a4")] == ["audi-a4", "audi-a4-avant"]
        assert [car.model for car in search_cars("xc")] == ["XC40", "XC60", "XC90"]

    def test_brand_prefix_before_other_matches(self):
        """Toyota matches by brand; Touring, Ducato and Picanto by term."""
        results = search_cars("to", limit=20)
        brands = [car.brand for car in results]
        assert brands[:5] == ["Toyota"] * 5
        assert brands[5:] == ["BMW", "BMW", "Fiat", "Kia"]

    def test_limit(self):
        assert [car.model for car in search_cars("volvo", limit=3)] == ["S60", "S90", "V60"]
        assert len(search_cars("to")) == 9

    def test_no_match(self):
        assert search_cars("zzz") == []


class TestBrands:
    def test_all_brands_sorted_and_distinct(self):
        brands = get_all_brands()
        assert brands == sorted(set(brands))
        assert "Volkswagen" in brands
        assert "BMW" in brands

    def test_cars_by_brand(self):
        cars = get_cars_by_brand("Volvo")
        assert len(cars) == 8
        assert all(car.brand == "Volvo" for car in cars)

    def test_cars_by_brand_case_insensitive(self):
        assert get_cars_by_brand("volvo") == get_cars_by_brand("VOLVO")

    def test_unknown_brand(self):
        assert get_cars_by_brand("Trabant") == []
