import math

from domain.vehicle import Vehicle, vehicle_age


def test_from_dict_coerces_numbers():
    v = Vehicle.from_dict({
        "id": 5, "make": " Honda ", "model": "Civic", "year": "2021",
        "price": "25,000", "mileage": math.nan, "views": None, "features": None,
    })
    assert v.make == "Honda"
    assert v.year == 2021
    assert v.price == 25000.0
    assert v.mileage is None
    assert v.views == 0
    assert v.features == ()


def test_from_dict_wrong_types_become_none():
    v = Vehicle.from_dict({"price": {"amount": 20000}, "mileage": [1000], "year": object()})
    assert v.price is None
    assert v.mileage is None
    assert v.year is None


def test_from_dict_bad_values_become_none():
    v = Vehicle.from_dict({"price": "call us", "year": "", "mileage": "null"})
    assert v.price is None
    assert v.year is None
    assert v.mileage is None


def test_from_dict_features_and_extra_keys():
    v = Vehicle.from_dict({"features": "bluetooth, sunroof", "promoted": True})
    assert v.features == ("bluetooth", "sunroof")
    assert v.meta == {"promoted": True}


def test_display_name():
    assert Vehicle(year=2020, make="Kia", model="Sorento").display_name == "2020 Kia Sorento"
    assert Vehicle().display_name == "Unknown vehicle"


def test_vehicle_age():
    assert vehicle_age(Vehicle(year=2018), 2024) == 6
    assert vehicle_age(Vehicle(year=2026), 2024) == 0
    assert vehicle_age(Vehicle(), 2024) is None
