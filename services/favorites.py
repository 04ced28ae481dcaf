# services/favorites.py
from __future__ import annotations

import logging
import os
from typing import Any, List, Optional

import pandas as pd

from domain.vehicle import Vehicle

log = logging.getLogger(__name__)


class FavoritesError(RuntimeError):
    """Favorites file missing or unreadable."""
    pass


def _read_frame(path: str) -> pd.DataFrame:
    ext = os.path.splitext(path)[1].lower()
    if ext == ".parquet":
        return pd.read_parquet(path)
    if ext == ".csv":
        return pd.read_csv(path)
    if ext in (".json", ".jsonl"):
        return pd.read_json(path, orient="records", lines=(ext == ".jsonl"), dtype=False)
    raise FavoritesError(f"Unsupported favorites format: {path}")


def _clean(val: Any) -> Any:
    # pandas hands back NaN/NaT and numpy scalars; Vehicle.from_dict wants plain values
    if isinstance(val, (list, tuple)):
        return list(val)
    if hasattr(val, "tolist") and not isinstance(val, str):
        return val.tolist()
    try:
        if pd.isna(val):
            return None
    except (TypeError, ValueError):
        pass
    return val


def load_favorites(path: str) -> List[Vehicle]:
    """Previously exported favorite listings (JSON / JSONL / CSV / Parquet) as Vehicle records."""
    if not os.path.exists(path):
        raise FavoritesError(f"Favorites not found: {path}")
    try:
        df = _read_frame(path)
    except FavoritesError:
        raise
    except Exception as e:
        raise FavoritesError(f"Failed to read {path}: {e}") from e

    vehicles = [
        Vehicle.from_dict({k: _clean(v) for k, v in row.items()})
        for row in df.to_dict(orient="records")
    ]
    log.debug("loaded %d favorites from %s", len(vehicles), path)
    return vehicles


def find_vehicle(vehicles: List[Vehicle], key: Any) -> Optional[Vehicle]:
    """Match by id first, then by "year make model" (case-insensitive)."""
    if key is None:
        return None
    s = str(key).strip()
    for v in vehicles:
        if v.id is not None and str(v.id) == s:
            return v
    low = s.lower()
    for v in vehicles:
        if v.display_name.lower() == low:
            return v
    return None

