# comparison/scoring.py
from __future__ import annotations

from typing import Any, Optional

import numpy as np

from domain.costs import normalize_fuel_type
from domain.features import EFFICIENCY_FEATURES, count_features
from domain.vehicle import Vehicle, reference_year, vehicle_age

# 0 = equal / not comparable, 1 = left is better, 2 = right is better
NONE, LEFT, RIGHT = 0, 1, 2

LOWER_IS_BETTER = {"price", "mileage", "total_cost", "depreciation"}
HIGHER_IS_BETTER = {"year", "value_score", "environmental_score"}
FEATURE_COUNT_CATEGORY = {
    "features": None,
    "safety_features": "safety",
    "comfort_features": "comfort",
    "tech_features": "technology",
}


def _cmp(a: Any, b: Any, higher_is_better: bool) -> int:
    if a == b:
        return NONE
    if higher_is_better:
        return LEFT if a > b else RIGHT
    return LEFT if a < b else RIGHT


def better_value(attr: str, value1: Any, value2: Any) -> int:
    """
    Which side wins `attr`: 0 (tie / not comparable), 1 (left), 2 (right).
    A missing value always loses against a present one.
    """
    if value1 is None and value2 is None:
        return NONE
    if value1 is None:
        return RIGHT
    if value2 is None:
        return LEFT

    if attr in LOWER_IS_BETTER:
        return _cmp(value1, value2, higher_is_better=False)
    if attr in HIGHER_IS_BETTER:
        return _cmp(value1, value2, higher_is_better=True)
    if attr in FEATURE_COUNT_CATEGORY:
        category = FEATURE_COUNT_CATEGORY[attr]
        return _cmp(count_features(value1, category), count_features(value2, category), higher_is_better=True)
    return NONE


# ---------------- Value score ----------------
def value_score(vehicle: Optional[Vehicle], as_of_year: int | None = None) -> float | None:
    """
    0..100 desirability from features, age, mileage and price.
    None when the vehicle, its price or its model year is missing; missing mileage counts as 0.
    """
    if vehicle is None or vehicle.price is None or vehicle.year is None:
        return None
    year = reference_year(as_of_year)

    feature_count = count_features(vehicle.features)
    safety = count_features(vehicle.features, category="safety")
    high_importance = count_features(vehicle.features, importance="high")
    feature_value = feature_count * 1 + safety * 2 + high_importance * 1.5

    age = vehicle_age(vehicle, year)
    age_factor = max(0.5, 1 - age * 0.05)

    mileage = max(0.0, vehicle.mileage or 0.0)
    mileage_factor = max(0.6, 1 - mileage / 200000)

    price = max(0.0, vehicle.price)
    price_factor = max(0.5, 1 - price / 150000)

    raw = feature_value * 40 + age_factor * 25 + mileage_factor * 20 + price_factor * 15
    return float(np.clip(raw, 0.0, 100.0))


# ---------------- Environmental score ----------------
FUEL_BASE_SCORE = {
    "Electric": 90,
    "Hybrid": 70,
    "Diesel": 40,
    "Benzine": 30,
}

CATEGORY_ADJUSTMENT = {
    "compact": 10,
    "coupe": 10,
    "hatchback": 10,
    "sedan": 5,
    "suv": -5,
    "truck": -10,
}


def environmental_score(vehicle: Optional[Vehicle], as_of_year: int | None = None) -> float | None:
    if vehicle is None:
        return None
    year = reference_year(as_of_year)

    base = FUEL_BASE_SCORE[normalize_fuel_type(vehicle.type)]

    age = vehicle_age(vehicle, year) or 0
    age_adj = min(0.0, -1.5 * age)

    cat = (vehicle.category or "").strip().lower()
    cat_adj = CATEGORY_ADJUSTMENT.get(cat, 0)

    eff_adj = 5 if any(f in EFFICIENCY_FEATURES for f in vehicle.features) else 0

    return float(np.clip(base + age_adj + cat_adj + eff_adj, 0.0, 100.0))
