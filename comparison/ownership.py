# comparison/ownership.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from domain.costs import (
    DEFAULT_ANNUAL_MILEAGE,
    OWNERSHIP_YEARS,
    annual_fuel,
    annual_insurance,
    annual_maintenance,
    annual_registration,
    depreciation_rate,
)
from domain.vehicle import Vehicle, reference_year, vehicle_age


@dataclass(frozen=True)
class DepreciationYear:
    year: int              # 1..N into the projection
    years_since_new: int
    rate: float            # percent
    amount: float
    value_after: float


@dataclass(frozen=True)
class CostBreakdown:
    depreciation: float
    maintenance: float
    insurance: float
    fuel: float
    registration: float
    annual_mileage: int
    years: int = OWNERSHIP_YEARS

    def per_year(self, key: str) -> float:
        return getattr(self, key) / self.years

    @property
    def annual_running(self) -> float:
        """Maintenance + insurance + fuel + registration per year (depreciation excluded)."""
        return (self.maintenance + self.insurance + self.fuel + self.registration) / self.years


@dataclass(frozen=True)
class CostOfOwnership:
    total: float
    breakdown: CostBreakdown
    current_value: float
    future_value: float
    schedule: List[DepreciationYear] = field(default_factory=list)


def depreciation_schedule(current_value: float, current_age: int, years: int = OWNERSHIP_YEARS) -> List[DepreciationYear]:
    """
    Compounding depreciation: each year's rate applies to the value left after the previous year.
    """
    value = max(0.0, float(current_value))
    age = max(0, int(current_age))
    out: List[DepreciationYear] = []
    for year in range(1, int(years) + 1):
        since_new = age + year
        rate = depreciation_rate(since_new)
        amount = value * (rate / 100)
        value -= amount
        out.append(DepreciationYear(year, since_new, rate, amount, value))
    return out


def estimate_annual_mileage(vehicle: Vehicle, as_of_year: int | None = None) -> int:
    """Odometer spread over the vehicle's age (at least one year); 15000 when unknown."""
    age = vehicle_age(vehicle, reference_year(as_of_year))
    if age is None or not vehicle.mileage or vehicle.mileage <= 0:
        return DEFAULT_ANNUAL_MILEAGE
    return int(round(vehicle.mileage / max(1, age)))


def total_cost_of_ownership(
    vehicle: Optional[Vehicle],
    as_of_year: int | None = None,
    years: int = OWNERSHIP_YEARS,
) -> CostOfOwnership | None:
    """
    Ownership cost over `years` (5 by default): depreciation + maintenance + insurance + fuel + registration.
    None when the vehicle, its price or its model year is missing.
    """
    if vehicle is None or vehicle.price is None or vehicle.year is None:
        return None
    year = reference_year(as_of_year)
    age = vehicle_age(vehicle, year)
    price = max(0.0, vehicle.price)

    years = max(1, int(years))
    schedule = depreciation_schedule(price, age, years)
    depreciation = sum(y.amount for y in schedule)

    maintenance = annual_maintenance(vehicle.condition) * years
    insurance = annual_insurance(vehicle.category) * years
    fuel = annual_fuel(vehicle.type, vehicle.category) * years
    registration = annual_registration(price) * years

    breakdown = CostBreakdown(
        depreciation=depreciation,
        maintenance=maintenance,
        insurance=insurance,
        fuel=fuel,
        registration=registration,
        annual_mileage=estimate_annual_mileage(vehicle, year),
        years=years,
    )
    return CostOfOwnership(
        total=depreciation + maintenance + insurance + fuel + registration,
        breakdown=breakdown,
        current_value=price,
        future_value=schedule[-1].value_after,
        schedule=schedule,
    )
