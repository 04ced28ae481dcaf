import pytest

from config import ConfigError, load_settings
from comparison.engine import compare_vehicles
from comparison.ownership import total_cost_of_ownership
from comparison.scoring import environmental_score, value_score
from domain.vehicle import Vehicle, current_year, reference_year


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    for name in ("CARCOMPARE_FAVORITES", "CARCOMPARE_REFERENCE_YEAR",
                 "CARCOMPARE_PROJECTION_YEARS", "CARCOMPARE_LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    s = load_settings(dotenv=False)
    assert s.favorites_path == "data/favorites.json"
    assert s.reference_year == current_year()
    assert s.projection_years == 5
    assert s.log_level == "WARNING"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CARCOMPARE_FAVORITES", "/tmp/favs.parquet")
    monkeypatch.setenv("CARCOMPARE_REFERENCE_YEAR", "2030")
    monkeypatch.setenv("CARCOMPARE_LOG_LEVEL", "debug")
    s = load_settings(dotenv=False)
    assert s.favorites_path == "/tmp/favs.parquet"
    assert s.reference_year == 2030
    assert s.log_level == "DEBUG"


def test_bad_values(monkeypatch):
    monkeypatch.setenv("CARCOMPARE_REFERENCE_YEAR", "soon")
    with pytest.raises(ConfigError):
        load_settings(dotenv=False)
    monkeypatch.setenv("CARCOMPARE_REFERENCE_YEAR", "2024")
    monkeypatch.setenv("CARCOMPARE_PROJECTION_YEARS", "0")
    with pytest.raises(ConfigError):
        load_settings(dotenv=False)



def test_scoring_ignores_environment(monkeypatch):
    car = Vehicle(make="Kia", model="Rio", year=2020, price=20000, mileage=1000)
    monkeypatch.setenv("CARCOMPARE_REFERENCE_YEAR", "twenty")
    assert reference_year() == current_year()
    assert value_score(car) == value_score(car, current_year())
    assert environmental_score(car) is not None
    assert total_cost_of_ownership(car) is not None
    assert compare_vehicles(car, car) is not None
    with pytest.raises(ConfigError):
        load_settings(dotenv=False)


def test_settings_flow_into_comparison(monkeypatch):
    monkeypatch.setenv("CARCOMPARE_REFERENCE_YEAR", "2024")
    monkeypatch.setenv("CARCOMPARE_PROJECTION_YEARS", "3")
    s = load_settings(dotenv=False)
    assert s.projection_years == 3

    a = Vehicle(id=1, make="Kia", model="Rio", year=2022, price=18000, mileage=20000)
    b = Vehicle(id=2, make="Ford", model="Focus", year=2019, price=15000, mileage=70000)
    res = compare_vehicles(a, b, as_of_year=s.reference_year, years=s.projection_years)
    assert res.projection_years == 3
    assert len(res.left.cost.schedule) == 3
    assert [r.label for r in res.depreciation_rows][1] == "Value in 3 Years"
    assert res.cost_rows[-1].label == "3 Year Total"

    fresh = value_score(a, as_of_year=2022)
    assert value_score(a, as_of_year=s.reference_year) < fresh
