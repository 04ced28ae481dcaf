# comparison/engine.py
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, List, Literal, Optional, Tuple

from domain.costs import OWNERSHIP_YEARS, normalize_fuel_type
from domain.features import count_features
from domain.vehicle import Vehicle, reference_year
from comparison.ownership import CostOfOwnership, total_cost_of_ownership
from comparison.scoring import LEFT, NONE, RIGHT, better_value, environmental_score, value_score

log = logging.getLogger(__name__)

Side = Literal["left", "right"]
Confidence = Literal["slight", "moderate", "high"]

# Points a side earns for winning each dimension of the recommendation
RECOMMENDATION_WEIGHTS = {
    "price": 20,
    "value_score": 25,
    "total_cost": 20,
    "features": 15,
    "safety_features": 20,
}

# How each won dimension is named in the recommendation reason
REASON_LABELS = {
    "price": "price",
    "value_score": "value",
    "total_cost": "cost of ownership",
    "features": "features",
    "safety_features": "safety",
}

# attribute -> (phrase for the winner, phrase for the loser)
PROS_CONS_PHRASES: List[Tuple[str, str, str]] = [
    ("price", "Lower purchase price", "Higher purchase price"),
    ("year", "Newer model year", "Older model year"),
    ("mileage", "Lower mileage", "Higher mileage"),
    ("features", "More features overall", "Fewer features overall"),
    ("safety_features", "Better safety features", "Fewer safety features"),
    ("comfort_features", "More comfort features", "Fewer comfort features"),
    ("tech_features", "More technology features", "Fewer technology features"),
    ("total_cost", "Lower cost of ownership", "Higher cost of ownership"),
    ("environmental_score", "Better environmental score", "Lower environmental score"),
]


# ---------------- Result types ----------------
@dataclass(frozen=True)
class ComparisonRow:
    label: str
    attribute: str
    left: Any
    right: Any
    better: int = NONE     # 0 none, 1 left, 2 right


@dataclass
class SideSummary:
    vehicle: Vehicle
    value_score: Optional[float]
    environmental_score: Optional[float]
    cost: Optional[CostOfOwnership]
    pros: List[str] = field(default_factory=list)
    cons: List[str] = field(default_factory=list)
    use_cases: List[str] = field(default_factory=list)
    score: int = 0

    @property
    def total_cost(self) -> Optional[float]:
        return self.cost.total if self.cost is not None else None


@dataclass
class ComparisonResult:
    left: SideSummary
    right: SideSummary
    rows: List[ComparisonRow]
    recommended: Optional[Side]
    confidence: Confidence
    reasons: List[str]
    cost_rows: List[ComparisonRow]
    depreciation_rows: List[ComparisonRow]
    projection_years: int = OWNERSHIP_YEARS

    @property
    def evenly_matched(self) -> bool:
        return self.recommended is None

    @property
    def recommended_vehicle(self) -> Optional[Vehicle]:
        if self.recommended == "left":
            return self.left.vehicle
        if self.recommended == "right":
            return self.right.vehicle
        return None

    @property
    def score_gap(self) -> int:
        return abs(self.left.score - self.right.score)


# ---------------- Helpers ----------------
def _attribute_values(side: SideSummary, attr: str) -> Any:
    v = side.vehicle
    if attr in ("price", "year", "mileage"):
        return getattr(v, attr)
    if attr in ("features", "safety_features", "comfort_features", "tech_features"):
        return v.features
    if attr == "value_score":
        return side.value_score
    if attr == "environmental_score":
        return side.environmental_score
    if attr == "total_cost":
        return side.total_cost
    return None


def _lower_set(*values: Optional[str]) -> set:
    return {str(x).strip().lower() for x in values if x}


def confidence_level(gap: int) -> Confidence:
    if gap > 30:
        return "high"
    if gap < 15:
        return "slight"
    return "moderate"


def attribute_rows(left: SideSummary, right: SideSummary) -> List[ComparisonRow]:
    a, b = left.vehicle, right.vehicle
    rows = [
        ComparisonRow("Price", "price", a.price, b.price, better_value("price", a.price, b.price)),
        ComparisonRow("Year", "year", a.year, b.year, better_value("year", a.year, b.year)),
        ComparisonRow("Mileage", "mileage", a.mileage, b.mileage, better_value("mileage", a.mileage, b.mileage)),
        # subjective / preference based, never scored
        ComparisonRow("Condition", "condition", a.condition, b.condition),
        ComparisonRow("Transmission", "transmission", a.transmission, b.transmission),
        ComparisonRow("Color", "color", a.color, b.color),
        ComparisonRow("Drivetrain", "drivetrain", a.drivetrain, b.drivetrain),
        ComparisonRow("Fuel Type", "type", a.type, b.type),
        ComparisonRow("Category", "category", a.category, b.category),
    ]
    lv, rv = left.value_score, right.value_score
    rows.append(ComparisonRow(
        "Score", "value_score",
        round(lv) if lv is not None else None,
        round(rv) if rv is not None else None,
        better_value("value_score", lv, rv),
    ))
    return rows


def _apply_pros_cons(left: SideSummary, right: SideSummary) -> None:
    for attr, pro, con in PROS_CONS_PHRASES:
        better = better_value(attr, _attribute_values(left, attr), _attribute_values(right, attr))
        if better == LEFT:
            left.pros.append(pro)
            right.cons.append(con)
        elif better == RIGHT:
            right.pros.append(pro)
            left.cons.append(con)


def _use_cases(side: SideSummary, other: SideSummary) -> List[str]:
    v = side.vehicle
    category = _lower_set(v.category)
    cases: List[str] = []

    if category & {"hatchback", "sedan"}:
        cases.append("Urban driving")
    if _lower_set(v.drivetrain) & {"4wd", "4x4"} or category & {"suv", "truck"}:
        cases.append("Off-road driving")
    if category & {"suv", "minivan"} or "third_row_seats" in v.features:
        cases.append("Family trips")
    if count_features(v.features, category="comfort") >= 3:
        cases.append("Comfortable commuting")
    if count_features(v.features, category="technology") >= 3:
        cases.append("Tech enthusiasts")

    o = other.vehicle
    if (
        v.price is not None and o.price is not None and v.price < o.price
        and side.total_cost is not None and other.total_cost is not None
        and side.total_cost < other.total_cost
    ):
        cases.append("Budget-conscious buyers")

    if v.type and normalize_fuel_type(v.type) in ("Diesel", "Hybrid", "Electric"):
        cases.append("Long distance travel")
    return cases


def _recommend(left: SideSummary, right: SideSummary) -> Tuple[Optional[Side], List[str]]:
    won: dict[Side, List[str]] = {"left": [], "right": []}
    for attr, weight in RECOMMENDATION_WEIGHTS.items():
        better = better_value(attr, _attribute_values(left, attr), _attribute_values(right, attr))
        if better == LEFT:
            left.score += weight
            won["left"].append(REASON_LABELS[attr])
        elif better == RIGHT:
            right.score += weight
            won["right"].append(REASON_LABELS[attr])

    if left.score > right.score:
        return "left", won["left"]
    if right.score > left.score:
        return "right", won["right"]
    return None, []


def cost_rows(left: SideSummary, right: SideSummary, years: int = OWNERSHIP_YEARS) -> List[ComparisonRow]:
    """Annual cost estimates plus the total over the ownership horizon."""
    def per_year(side: SideSummary, key: str) -> Optional[float]:
        if side.cost is None:
            return None
        return side.cost.breakdown.per_year(key)

    lc, rc = left.cost, right.cost
    rows = [ComparisonRow(
        "Est. Annual Mileage", "annual_mileage",
        lc.breakdown.annual_mileage if lc else None,
        rc.breakdown.annual_mileage if rc else None,
    )]
    for label, key in (("Maintenance", "maintenance"), ("Insurance", "insurance"),
                       ("Fuel", "fuel"), ("Registration", "registration")):
        lv, rv = per_year(left, key), per_year(right, key)
        rows.append(ComparisonRow(label, key, lv, rv, better_value("price", lv, rv)))

    la = lc.breakdown.annual_running if lc else None
    ra = rc.breakdown.annual_running if rc else None
    rows.append(ComparisonRow("Total Annual", "annual_total", la, ra, better_value("price", la, ra)))
    rows.append(ComparisonRow(
        f"{years} Year Total", "total_cost", left.total_cost, right.total_cost,
        better_value("total_cost", left.total_cost, right.total_cost),
    ))
    return rows


def depreciation_rows(left: SideSummary, right: SideSummary, years: int = OWNERSHIP_YEARS) -> List[ComparisonRow]:
    def loss(side: SideSummary) -> Tuple[Optional[float], Optional[float], Optional[float]]:
        c = side.cost
        if c is None:
            return None, None, None
        future = round(c.future_value)
        amount = c.current_value - future
        pct = (amount / c.current_value * 100) if c.current_value > 0 else None
        return future, amount, pct

    lf, la, lp = loss(left)
    rf, ra, rp = loss(right)
    better = better_value("depreciation", lp, rp)
    return [
        ComparisonRow("Value Now", "current_value",
                      left.cost.current_value if left.cost else None,
                      right.cost.current_value if right.cost else None),
        ComparisonRow(f"Value in {years} Years", "future_value", lf, rf),
        ComparisonRow("Total price drop", "depreciation", la, ra, better),
        ComparisonRow("Price drop Rate", "depreciation_rate",
                      round(lp, 1) if lp is not None else None,
                      round(rp, 1) if rp is not None else None,
                      better),
    ]


# ---------------- Public API ----------------
def compare_vehicles(
    left: Optional[Vehicle],
    right: Optional[Vehicle],
    as_of_year: int | None = None,
    years: int = OWNERSHIP_YEARS,
) -> ComparisonResult | None:
    """
    Side-by-side comparison of two listings; costs are projected over `years`.
    Returns None when either side is missing (nothing selected yet).
    """
    if left is None or right is None:
        return None
    year = reference_year(as_of_year)
    years = max(1, int(years))

    sides = []
    for v in (left, right):
        sides.append(SideSummary(
            vehicle=v,
            value_score=value_score(v, year),
            environmental_score=environmental_score(v, year),
            cost=total_cost_of_ownership(v, year, years),
        ))
    l, r = sides

    _apply_pros_cons(l, r)
    l.use_cases = _use_cases(l, r)
    r.use_cases = _use_cases(r, l)
    recommended, reasons = _recommend(l, r)

    result = ComparisonResult(
        left=l,
        right=r,
        rows=attribute_rows(l, r),
        recommended=recommended,
        confidence=confidence_level(abs(l.score - r.score)),
        reasons=reasons,
        cost_rows=cost_rows(l, r, years),
        depreciation_rows=depreciation_rows(l, r, years),
        projection_years=years,
    )
    log.debug(
        "compared %s vs %s: scores %d/%d -> %s (%s)",
        left.display_name, right.display_name, l.score, r.score,
        recommended or "evenly matched", result.confidence,
    )
    return result


def recommendation_text(result: ComparisonResult) -> str:
    rec = result.recommended_vehicle
    if rec is None:
        return (
            "Evenly Matched: both vehicles have comparable pros and cons. "
            "Consider your specific needs and preferences, or review the detailed insights."
        )
    text = f"Recommended Choice: {rec.display_name}. With a {result.confidence} level of confidence"
    if result.reasons:
        return text + f", this vehicle scores better across key metrics including {', '.join(result.reasons)}."
    return text + "."


def value_insight(result: ComparisonResult) -> str:
    l, r = result.left, result.right
    ls, rs = l.value_score, r.value_score
    if ls is None and rs is None:
        return "Value scores are unavailable: both listings are missing a price or model year."
    better = better_value("value_score", ls, rs)
    if better == NONE:
        return f"Both vehicles offer similar value with scores of {round(ls)}/100."
    win, lose = (l, r) if better == LEFT else (r, l)
    lose_score = f"{round(lose.value_score)}/100" if lose.value_score is not None else "N/A"
    return (
        f"The {win.vehicle.display_name} offers better overall value with a score of "
        f"{round(win.value_score)}/100 compared to {lose_score} for the {lose.vehicle.make or 'other car'}."
    )


def environmental_insight(result: ComparisonResult) -> str:
    l, r = result.left, result.right
    better = better_value("environmental_score", l.environmental_score, r.environmental_score)
    if better == NONE:
        return f"Both vehicles have similar environmental scores of {round(l.environmental_score)}/100."
    win = l if better == LEFT else r
    return (
        f"The {win.vehicle.display_name} has a better environmental score "
        f"({round(win.environmental_score)}/100) based on fuel type, age, and vehicle category."
    )


def _fmt_price(price: Optional[float]) -> str:
    if price is None:
        return "N/A"
    return f"${int(round(price, 0)):,}"


def share_message(result: ComparisonResult) -> str:
    a, b = result.left.vehicle, result.right.vehicle

    def short(v: Vehicle) -> str:
        return " ".join(p for p in (v.make, v.model) if p) or "Unknown vehicle"

    title = f"Car Comparison: {short(a)} vs {short(b)}"
    body = (
        f"I'm comparing a {a.display_name} ({_fmt_price(a.price)}) "
        f"with a {b.display_name} ({_fmt_price(b.price)})."
    )
    return f"{title}\n\n{body}"
