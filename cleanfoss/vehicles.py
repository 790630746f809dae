"""
Car model database.

Maps Danish market car models to a size category so the booking wizard can
price a car from its make and model.

Usage:
    from cleanfoss.vehicles import search_cars

    cars = search_cars("golf")
"""

from cleanfoss.booking import CarModel


CAR_DATABASE: tuple[CarModel, ...] = (
    # mini, 0.8x
    CarModel("toyota-aygo", "Toyota", "Aygo", "mini", ("toyota", "aygo")),
    CarModel("vw-up", "Volkswagen", "Up!", "mini", ("volkswagen", "vw", "up")),
    CarModel("peugeot-108", "Peugeot", "108", "mini", ("peugeot", "108")),
    CarModel("citroen-c1", "Citroën", "C1", "mini", ("citroen", "citroën", "c1")),
    CarModel("fiat-500", "Fiat", "500", "mini", ("fiat", "500")),
    CarModel("smart-fortwo", "Smart", "ForTwo", "mini", ("smart", "fortwo")),
    CarModel("kia-picanto", "Kia", "Picanto", "mini", ("kia", "picanto")),
    CarModel("hyundai-i10", "Hyundai", "i10", "mini", ("hyundai", "i10")),

    # mellem, 1.0x
    CarModel("vw-golf", "Volkswagen", "Golf", "mellem", ("volkswagen", "vw", "golf")),
    CarModel("ford-focus", "Ford", "Focus", "mellem", ("ford", "focus")),
    CarModel("opel-astra", "Opel", "Astra", "mellem", ("opel", "astra")),
    CarModel("toyota-corolla", "Toyota", "Corolla", "mellem", ("toyota", "corolla")),
    CarModel("nissan-leaf", "Nissan", "Leaf", "mellem", ("nissan", "leaf")),
    CarModel("peugeot-308", "Peugeot", "308", "mellem", ("peugeot", "308")),
    CarModel("renault-megane", "Renault", "Mégane", "mellem", ("renault", "megane", "mégane")),
    CarModel("seat-leon", "Seat", "Leon", "mellem", ("seat", "leon")),
    CarModel("skoda-octavia", "Škoda", "Octavia", "mellem", ("skoda", "škoda", "octavia")),
    CarModel("honda-civic", "Honda", "Civic", "mellem", ("honda", "civic")),
    CarModel("mazda-3", "Mazda", "3", "mellem", ("mazda", "3", "mazda3")),
    CarModel("kia-ceed", "Kia", "Ceed", "mellem", ("kia", "ceed")),
    CarModel("hyundai-i30", "Hyundai", "i30", "mellem", ("hyundai", "i30")),

    # sedan, 1.1x
    CarModel("vw-passat", "Volkswagen", "Passat", "sedan", ("volkswagen", "vw", "passat")),
    CarModel("audi-a4", "Audi", "A4", "sedan", ("audi", "a4")),
    CarModel("audi-a6", "Audi", "A6", "sedan", ("audi", "a6")),
    CarModel("bmw-3-series", "BMW", "3-serie", "sedan", ("bmw", "3-serie", "3 serie", "320", "330")),
    CarModel("bmw-5-series", "BMW", "5-serie", "sedan", ("bmw", "5-serie", "5 serie", "520", "530")),
    CarModel("mercedes-c-class", "Mercedes-Benz", "C-Klasse", "sedan", ("mercedes", "mercedes-benz", "c-klasse", "c klasse", "c200", "c220")),
    CarModel("mercedes-e-class", "Mercedes-Benz", "E-Klasse", "sedan", ("mercedes", "mercedes-benz", "e-klasse", "e klasse", "e200", "e220")),
    CarModel("ford-mondeo", "Ford", "Mondeo", "sedan", ("ford", "mondeo")),
    CarModel("toyota-camry", "Toyota", "Camry", "sedan", ("toyota", "camry")),
    CarModel("volvo-s60", "Volvo", "S60", "sedan", ("volvo", "s60")),
    CarModel("volvo-s90", "Volvo", "S90", "sedan", ("volvo", "s90")),
    CarModel("tesla-model-3", "Tesla", "Model 3", "sedan", ("tesla", "model 3", "model3")),

    # stationcar, 1.2x
    CarModel("vw-passat-variant", "Volkswagen", "Passat Variant", "stationcar", ("volkswagen", "vw", "passat", "variant")),
    CarModel("audi-a4-avant", "Audi", "A4 Avant", "stationcar", ("audi", "a4", "avant")),
    CarModel("audi-a6-avant", "Audi", "A6 Avant", "stationcar", ("audi", "a6", "avant")),
    CarModel("bmw-3-touring", "BMW", "3-serie Touring", "stationcar", ("bmw", "3-serie", "touring", "320", "330")),
    CarModel("bmw-5-touring", "BMW", "5-serie Touring", "stationcar", ("bmw", "5-serie", "touring", "520", "530")),
    CarModel("mercedes-c-estate", "Mercedes-Benz", "C-Klasse Estate", "stationcar", ("mercedes", "c-klasse", "estate")),
    CarModel("mercedes-e-estate", "Mercedes-Benz", "E-Klasse Estate", "stationcar", ("mercedes", "e-klasse", "estate")),
    CarModel("volvo-v60", "Volvo", "V60", "stationcar", ("volvo", "v60")),
    CarModel("volvo-v70", "Volvo", "V70", "stationcar", ("volvo", "v70")),
    CarModel("volvo-v90", "Volvo", "V90", "stationcar", ("volvo", "v90")),
    CarModel("skoda-octavia-combi", "Škoda", "Octavia Combi", "stationcar", ("skoda", "škoda", "octavia", "combi")),
    CarModel("ford-focus-stationcar", "Ford", "Focus Stationcar", "stationcar", ("ford", "focus", "stationcar")),

    # suv, 1.3x
    CarModel("audi-q3", "Audi", "Q3", "suv", ("audi", "q3")),
    CarModel("audi-q5", "Audi", "Q5", "suv", ("audi", "q5")),
    CarModel("audi-q7", "Audi", "Q7", "suv", ("audi", "q7")),
    CarModel("bmw-x1", "BMW", "X1", "suv", ("bmw", "x1")),
    CarModel("bmw-x3", "BMW", "X3", "suv", ("bmw", "x3")),
    CarModel("bmw-x5", "BMW", "X5", "suv", ("bmw", "x5")),
    CarModel("mercedes-gla", "Mercedes-Benz", "GLA", "suv", ("mercedes", "gla")),
    CarModel("mercedes-glc", "Mercedes-Benz", "GLC", "suv", ("mercedes", "glc")),
    CarModel("mercedes-gle", "Mercedes-Benz", "GLE", "suv", ("mercedes", "gle")),
    CarModel("volvo-xc40", "Volvo", "XC40", "suv", ("volvo", "xc40")),
    CarModel("volvo-xc60", "Volvo", "XC60", "suv", ("volvo", "xc60")),
    CarModel("volvo-xc90", "Volvo", "XC90", "suv", ("volvo", "xc90")),
    CarModel("tesla-model-y", "Tesla", "Model Y", "suv", ("tesla", "model y", "modely")),
    CarModel("toyota-rav4", "Toyota", "RAV4", "suv", ("toyota", "rav4", "rav 4")),
    CarModel("nissan-qashqai", "Nissan", "Qashqai", "suv", ("nissan", "qashqai")),
    CarModel("mazda-cx5", "Mazda", "CX-5", "suv", ("mazda", "cx5", "cx-5")),
    CarModel("hyundai-tucson", "Hyundai", "Tucson", "suv", ("hyundai", "tucson")),
    CarModel("kia-sportage", "Kia", "Sportage", "suv", ("kia", "sportage")),

    # mpv, 1.3x
    CarModel("vw-sharan", "Volkswagen", "Sharan", "mpv", ("volkswagen", "vw", "sharan")),
    CarModel("ford-galaxy", "Ford", "Galaxy", "mpv", ("ford", "galaxy")),
    CarModel("seat-alhambra", "Seat", "Alhambra", "mpv", ("seat", "alhambra")),
    CarModel("toyota-verso", "Toyota", "Verso", "mpv", ("toyota", "verso")),
    CarModel("opel-zafira", "Opel", "Zafira", "mpv", ("opel", "zafira")),
    CarModel("citroen-c4-picasso", "Citroën", "C4 Picasso", "mpv", ("citroen", "citroën", "c4", "picasso")),
    CarModel("peugeot-5008", "Peugeot", "5008", "mpv", ("peugeot", "5008")),

    # varevogn, 1.5x
    CarModel("ford-transit", "Ford", "Transit", "varevogn", ("ford", "transit")),
    CarModel("mercedes-sprinter", "Mercedes-Benz", "Sprinter", "varevogn", ("mercedes", "sprinter")),
    CarModel("vw-crafter", "Volkswagen", "Crafter", "varevogn", ("volkswagen", "vw", "crafter")),
    CarModel("iveco-daily", "Iveco", "Daily", "varevogn", ("iveco", "daily")),
    CarModel("renault-master", "Renault", "Master", "varevogn", ("renault", "master")),
    CarModel("peugeot-boxer", "Peugeot", "Boxer", "varevogn", ("peugeot", "boxer")),
    CarModel("citroen-jumper", "Citroën", "Jumper", "varevogn", ("citroen", "citroën", "jumper")),
    CarModel("fiat-ducato", "Fiat", "Ducato", "varevogn", ("fiat", "ducato")),
)

_CARS_BY_ID = {car.id: car for car in CAR_DATABASE}


def search_cars(query: str, limit: int = 10) -> list[CarModel]:
    """
    Find cars whose search terms contain the query.

    Queries shorter than two characters return nothing. Brand prefix matches
    come first, then model prefix matches, then alphabetical order.
    """
    if not query or len(query) < 2:
        return []

    needle = query.lower().strip()
    matches = [
        car
        for car in CAR_DATABASE
        if any(needle in term.lower() for term in car.search_terms)
    ]
    matches.sort(
        key=lambda car: (
            not car.brand.lower().startswith(needle),
            not car.model.lower().startswith(needle),
            car.brand.casefold(),
            car.model.casefold(),
        )
    )
    return matches[:limit]


def get_car_by_id(car_id: str) -> CarModel | None:
    return _CARS_BY_ID.get(car_id)


def get_all_brands() -> list[str]:
    """Distinct brands, sorted."""
    return sorted({car.brand for car in CAR_DATABASE})


def get_cars_by_brand(brand: str) -> list[CarModel]:
    """Cars of a brand (case-insensitive)."""
    brand = brand.lower()
    return [car for car in CAR_DATABASE if car.brand.lower() == brand]
