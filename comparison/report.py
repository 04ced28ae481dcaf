# comparison/report.py
from __future__ import annotations

from dataclasses import asdict
from typing import Any, Dict, List

import pandas as pd

from comparison.engine import (
    ComparisonResult,
    ComparisonRow,
    SideSummary,
    environmental_insight,
    recommendation_text,
    value_insight,
)

BETTER_LABELS = {0: "", 1: "left", 2: "right"}


def rows_frame(rows: List[ComparisonRow], left_name: str = "left", right_name: str = "right") -> pd.DataFrame:
    df = pd.DataFrame(
        [
            {"attribute": r.label, left_name: r.left, right_name: r.right, "better": BETTER_LABELS.get(r.better, "")}
            for r in rows
        ],
        columns=["attribute", left_name, right_name, "better"],
    )
    return df


def _side_dict(side: SideSummary) -> Dict[str, Any]:
    return {
        "vehicle": side.vehicle.to_dict(),
        "name": side.vehicle.display_name,
        "value_score": side.value_score,
        "environmental_score": side.environmental_score,
        "total_cost": side.total_cost,
        "cost_breakdown": asdict(side.cost.breakdown) if side.cost is not None else None,
        "future_value": side.cost.future_value if side.cost is not None else None,
        "pros": list(side.pros),
        "cons": list(side.cons),
        "use_cases": list(side.use_cases),
        "score": side.score,
    }


def result_to_dict(result: ComparisonResult) -> Dict[str, Any]:
    """JSON-friendly view of a comparison (CLI output / sharing)."""
    return {
        "left": _side_dict(result.left),
        "right": _side_dict(result.right),
        "rows": [asdict(r) for r in result.rows],
        "cost_rows": [asdict(r) for r in result.cost_rows],
        "depreciation_rows": [asdict(r) for r in result.depreciation_rows],
        "recommended": result.recommended or "evenly_matched",
        "confidence": result.confidence,
        "reasons": list(result.reasons),
        "projection_years": result.projection_years,
        "summary": recommendation_text(result),
        "insights": {
            "value": value_insight(result),
            "environmental": environmental_insight(result),
        },
    }
