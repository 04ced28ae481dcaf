# domain/costs.py
from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Mapping, Optional

log = logging.getLogger(__name__)

# ---------------- Reference tables (annual, USD) ----------------
ANNUAL_MAINTENANCE: Mapping[str, float] = MappingProxyType({
    "New": 500,
    "Used": 1200,
})

ANNUAL_INSURANCE: Mapping[str, float] = MappingProxyType({
    "Sedan": 1200,
    "SUV": 1400,
    "Coupe": 1500,
    "Hatchback": 1100,
    "Truck": 1600,
})

ANNUAL_FUEL: Mapping[str, Mapping[str, float]] = MappingProxyType({
    "Benzine": MappingProxyType({"Sedan": 1500, "SUV": 2000, "Coupe": 1700, "Hatchback": 1400, "Truck": 2500}),
    "Diesel": MappingProxyType({"Sedan": 1200, "SUV": 1700, "Coupe": 1400, "Hatchback": 1100, "Truck": 2200}),
    "Hybrid": MappingProxyType({"Sedan": 1000, "SUV": 1300, "Coupe": 1100, "Hatchback": 900, "Truck": 1800}),
    "Electric": MappingProxyType({"Sedan": 500, "SUV": 700, "Coupe": 600, "Hatchback": 450, "Truck": 1000}),
})

# percent of the current value lost during the Nth year since new
DEPRECIATION_RATES: Mapping[int, float] = MappingProxyType({
    1: 15, 2: 13, 3: 10, 4: 8, 5: 7, 6: 5, 7: 4, 8: 3, 9: 2, 10: 1.5,
})
DEPRECIATION_RATE_10_PLUS = 1.5

DEFAULT_CONDITION = "Used"
DEFAULT_CATEGORY = "Sedan"
DEFAULT_FUEL = "Benzine"
DEFAULT_ANNUAL_MILEAGE = 15000

REGISTRATION_MIN = 300.0
REGISTRATION_RATE = 0.005

OWNERSHIP_YEARS = 5

_FUEL_ALIASES = {
    "benzine": "Benzine",
    "gasoline": "Benzine",
    "petrol": "Benzine",
    "gas": "Benzine",
    "regular": "Benzine",
    "diesel": "Diesel",
    "hybrid": "Hybrid",
    "hev": "Hybrid",
    "electric": "Electric",
    "electricity": "Electric",
    "ev": "Electric",
    "bev": "Electric",
}


def _match_key(table: Mapping[str, Any], raw: Optional[str]) -> Optional[str]:
    if not raw:
        return None
    s = str(raw).strip().lower()
    for key in table:
        if key.lower() == s:
            return key
    return None


def normalize_fuel_type(raw: Optional[str]) -> str:
    """Map a free-form fuel label onto a fuel table key; unknown labels become Benzine."""
    if raw is None:
        return DEFAULT_FUEL
    return _FUEL_ALIASES.get(str(raw).strip().lower(), DEFAULT_FUEL)


def annual_maintenance(condition: Optional[str]) -> float:
    key = _match_key(ANNUAL_MAINTENANCE, condition)
    if key is None:
        log.debug("maintenance: unknown condition %r, using %s", condition, DEFAULT_CONDITION)
        key = DEFAULT_CONDITION
    return float(ANNUAL_MAINTENANCE[key])


def annual_insurance(category: Optional[str]) -> float:
    key = _match_key(ANNUAL_INSURANCE, category)
    if key is None:
        log.debug("insurance: unknown category %r, using %s", category, DEFAULT_CATEGORY)
        key = DEFAULT_CATEGORY
    return float(ANNUAL_INSURANCE[key])


def annual_fuel(fuel_type: Optional[str], category: Optional[str]) -> float:
    by_category = ANNUAL_FUEL[normalize_fuel_type(fuel_type)]
    key = _match_key(by_category, category)
    if key is None:
        log.debug("fuel: unknown category %r, using %s", category, DEFAULT_CATEGORY)
        key = DEFAULT_CATEGORY
    return float(by_category[key])


def annual_registration(value: Optional[float]) -> float:
    """Flat yearly estimate: 0.5% of the vehicle value, at least $300."""
    v = max(0.0, float(value or 0.0))
    return max(REGISTRATION_MIN, v * REGISTRATION_RATE)


def depreciation_rate(years_since_new: int) -> float:
    """Percent lost in the given year since new. Year 0 or less is treated as year 1."""
    y = max(1, int(years_since_new))
    if y in DEPRECIATION_RATES:
        return float(DEPRECIATION_RATES[y])
    return float(DEPRECIATION_RATE_10_PLUS)
