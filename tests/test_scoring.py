import pytest

from comparison.scoring import better_value, environmental_score, value_score
from domain.vehicle import Vehicle

AS_OF = 2024


def _car(**kw):
    base = dict(id=1, make="Make", model="Model", year=2020, price=25000, mileage=40000,
                condition="Used", type="Benzine", category="Sedan", features=())
    base.update(kw)
    if isinstance(base["features"], list):
        base["features"] = tuple(base["features"])
    return Vehicle(**base)


# ---------------- better_value ----------------
@pytest.mark.parametrize("attr", ["price", "mileage", "total_cost", "depreciation"])
def test_lower_is_better(attr):
    assert better_value(attr, 100, 200) == 1
    assert better_value(attr, 200, 100) == 2
    assert better_value(attr, 150, 150) == 0


@pytest.mark.parametrize("attr", ["year", "value_score", "environmental_score"])
def test_higher_is_better(attr):
    assert better_value(attr, 2022, 2020) == 1
    assert better_value(attr, 2020, 2022) == 2
    assert better_value(attr, 2021, 2021) == 0


def test_null_side_loses():
    assert better_value("price", None, 10000) == 2
    assert better_value("price", 10000, None) == 1
    assert better_value("price", None, None) == 0
    assert better_value("features", None, ["bluetooth"]) == 2


def test_unknown_attribute_is_never_a_win():
    assert better_value("horsepower", 300, 150) == 0
    assert better_value("color", "red", "blue") == 0


def test_feature_counts():
    left = ["backup_camera", "lane_assist", "blind_spot"]
    right = ["parking_sensors", "bluetooth", "navigation", "sunroof"]
    assert better_value("safety_features", left, right) == 1
    assert better_value("features", left, right) == 2
    assert better_value("tech_features", left, right) == 2
    assert better_value("comfort_features", left, right) == 2
    assert better_value("comfort_features", [], []) == 0


def test_uncataloged_features_only_count_towards_total():
    assert better_value("features", ["mystery_option"], []) == 1
    assert better_value("tech_features", ["mystery_option"], []) == 0


# ---------------- value_score ----------------
def test_value_score_floors():
    car = _car(price=150000, year=2000, mileage=300000)
    # age 0.5*25 + mileage 0.6*20 + price 0.5*15
    assert value_score(car, AS_OF) == pytest.approx(32.0)


def test_value_score_new_car_without_features():
    car = _car(price=30000, year=2024, mileage=0)
    # 25 + 20 + 0.8*15
    assert value_score(car, AS_OF) == pytest.approx(57.0)


def test_value_score_is_capped():
    car = _car(price=30000, year=2024, mileage=0, features=["backup_camera", "lane_assist"])
    assert value_score(car, AS_OF) == 100.0


def test_value_score_bounds():
    cars = [
        _car(price=p, year=y, mileage=m, features=f)
        for p in (0, 9000, 60000, 400000)
        for y in (1985, 2015, 2024, 2027)
        for m in (0, 120000, 900000)
        for f in ([], ["bluetooth"], ["backup_camera", "blind_spot", "lane_assist"])
    ]
    for car in cars:
        assert 0.0 <= value_score(car, AS_OF) <= 100.0


def test_value_score_guards():
    assert value_score(None, AS_OF) is None
    assert value_score(_car(price=None), AS_OF) is None
    assert value_score(_car(year=None), AS_OF) is None


def test_value_score_negative_inputs_are_clamped():
    assert value_score(_car(price=-5000, mileage=-100), AS_OF) == value_score(_car(price=0, mileage=0), AS_OF)


# ---------------- environmental_score ----------------
def test_environmental_score_by_fuel():
    assert environmental_score(_car(type="Hybrid", category="Sedan", year=2022), AS_OF) == pytest.approx(72.0)
    assert environmental_score(_car(type="DIESEL", category="SUV", year=2024), AS_OF) == pytest.approx(35.0)
    assert environmental_score(_car(type="steam", category="Wagon", year=2024), AS_OF) == pytest.approx(30.0)


def test_environmental_score_clamped():
    ev = _car(type="Electric", category="Hatchback", year=2024, features=["regenerative_braking"])
    assert environmental_score(ev, AS_OF) == 100.0
    old_truck = _car(type="Benzine", category="Truck", year=2004)
    assert environmental_score(old_truck, AS_OF) == 0.0


def test_environmental_score_no_bonus_for_future_model_year():
    car = _car(type="Hybrid", category="Sedan", year=2026)
    assert environmental_score(car, AS_OF) == pytest.approx(75.0)


def test_environmental_efficiency_features():
    plain = _car(type="Benzine", category="Coupe", year=2024)
    eco = _car(type="Benzine", category="Coupe", year=2024, features=["eco_mode", "auto_start_stop"])
    assert environmental_score(eco, AS_OF) - environmental_score(plain, AS_OF) == pytest.approx(5.0)


def test_environmental_score_missing_vehicle():
    assert environmental_score(None, AS_OF) is None
