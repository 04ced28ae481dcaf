# domain/vehicle.py
from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, Optional, Tuple


def _to_float_or_none(val: Any) -> float | None:
    if val in [None, "", "null"]:
        return None
    if isinstance(val, str):
        val = val.replace(",", "").replace("$", "").strip()
    try:
        f = float(val)
    except (TypeError, ValueError):
        return None
    if math.isnan(f):
        return None
    return f


def _to_int_or_none(val: Any) -> int | None:
    f = _to_float_or_none(val)
    return int(f) if f is not None else None


def _to_str_or_none(val: Any) -> str | None:
    if val is None:
        return None
    if isinstance(val, float) and math.isnan(val):
        return None
    s = str(val).strip()
    return s or None


def _to_tuple(val: Any) -> Tuple[str, ...]:
    if val is None:
        return ()
    if isinstance(val, str):
        # "a,b,c" shows up in CSV exports
        return tuple(x.strip() for x in val.split(",") if x.strip())
    try:
        return tuple(str(x) for x in val if x is not None)
    except TypeError:
        return ()


@dataclass(frozen=True)
class Vehicle:
    id: Any = None
    make: Optional[str] = None
    model: Optional[str] = None
    year: Optional[int] = None
    price: Optional[float] = None
    condition: Optional[str] = None      # "New" / "Used"
    transmission: Optional[str] = None
    color: Optional[str] = None
    mileage: Optional[float] = None      # km
    drivetrain: Optional[str] = None     # FWD / RWD / AWD / 4WD / 4x4
    type: Optional[str] = None           # fuel: Benzine / Diesel / Hybrid / Electric
    category: Optional[str] = None       # Sedan / SUV / Coupe / Hatchback / Truck ...
    description: Optional[str] = None
    images: Tuple[str, ...] = ()
    views: int = 0
    likes: int = 0
    features: Tuple[str, ...] = ()
    dealership_id: Any = None
    dealership_name: Optional[str] = None
    status: Optional[str] = None
    meta: Dict[str, Any] = field(default_factory=dict, compare=False, hash=False)

    @property
    def display_name(self) -> str:
        parts = [str(p) for p in (self.year, self.make, self.model) if p not in (None, "")]
        return " ".join(parts) or "Unknown vehicle"

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "Vehicle":
        """
        Build a record from a backend/listing row.
        Bad numbers turn into None instead of raising; unknown keys land in `meta`.
        """
        known = {
            "id", "make", "model", "year", "price", "condition", "transmission", "color",
            "mileage", "drivetrain", "type", "category", "description", "images",
            "views", "likes", "features", "dealership_id", "dealership_name", "status",
        }
        return cls(
            id=raw.get("id"),
            make=_to_str_or_none(raw.get("make")),
            model=_to_str_or_none(raw.get("model")),
            year=_to_int_or_none(raw.get("year")),
            price=_to_float_or_none(raw.get("price")),
            condition=_to_str_or_none(raw.get("condition")),
            transmission=_to_str_or_none(raw.get("transmission")),
            color=_to_str_or_none(raw.get("color")),
            mileage=_to_float_or_none(raw.get("mileage")),
            drivetrain=_to_str_or_none(raw.get("drivetrain")),
            type=_to_str_or_none(raw.get("type")),
            category=_to_str_or_none(raw.get("category")),
            description=_to_str_or_none(raw.get("description")),
            images=_to_tuple(raw.get("images")),
            views=_to_int_or_none(raw.get("views")) or 0,
            likes=_to_int_or_none(raw.get("likes")) or 0,
            features=_to_tuple(raw.get("features")),
            dealership_id=raw.get("dealership_id"),
            dealership_name=_to_str_or_none(raw.get("dealership_name")),
            status=_to_str_or_none(raw.get("status")),
            meta={k: v for k, v in raw.items() if k not in known},
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "make": self.make,
            "model": self.model,
            "year": self.year,
            "price": self.price,
            "condition": self.condition,
            "transmission": self.transmission,
            "color": self.color,
            "mileage": self.mileage,
            "drivetrain": self.drivetrain,
            "type": self.type,
            "category": self.category,
            "features": list(self.features),
            "status": self.status,
        }


def vehicle_age(vehicle: Vehicle, as_of_year: int) -> int | None:
    """Years since model year. Future model years count as brand new (0)."""
    if vehicle.year is None:
        return None
    return max(0, int(as_of_year) - int(vehicle.year))


def current_year() -> int:
    return datetime.now().year


def reference_year(as_of_year: int | None = None) -> int:
    """Year used to compute vehicle age: the explicit argument, else today."""
    if as_of_year is not None:
        return int(as_of_year)
    return current_year()
