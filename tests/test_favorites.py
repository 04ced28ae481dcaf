import pathlib

import pytest

from comparison.engine import compare_vehicles
from services.favorites import FavoritesError, find_vehicle, load_favorites

FIXTURE = pathlib.Path(__file__).parent / "fixtures" / "favorites.json"


def test_load_favorites_json():
    cars = load_favorites(str(FIXTURE))
    assert len(cars) == 3
    camry = cars[0]
    assert camry.id == 101
    assert camry.features == ("backup_camera", "bluetooth")
    assert camry.price == 20000
    ranger = cars[2]
    assert ranger.price is None
    assert ranger.features == ()
    assert ranger.meta.get("promoted") is True


def test_find_vehicle():
    cars = load_favorites(str(FIXTURE))
    assert find_vehicle(cars, 102).model == "Sorento"
    assert find_vehicle(cars, "2022 toyota camry").id == 101
    assert find_vehicle(cars, "nope") is None
    assert find_vehicle(cars, None) is None


def test_loaded_favorites_compare():
    cars = load_favorites(str(FIXTURE))
    res = compare_vehicles(cars[0], cars[2], as_of_year=2024)
    assert res is not None
    assert res.right.cost is None
    assert "Off-road driving" in res.right.use_cases


def test_missing_file():
    with pytest.raises(FavoritesError):
        load_favorites("does/not/exist.json")


def test_unsupported_format(tmp_path):
    p = tmp_path / "favorites.txt"
    p.write_text("hello", encoding="utf-8")
    with pytest.raises(FavoritesError):
        load_favorites(str(p))


def test_broken_json(tmp_path):
    p = tmp_path / "favorites.json"
    p.write_text("[{not json", encoding="utf-8")
    with pytest.raises(FavoritesError):
        load_favorites(str(p))
