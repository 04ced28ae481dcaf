# config.py
from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from domain.costs import OWNERSHIP_YEARS
from domain.vehicle import current_year

DEFAULT_FAVORITES = "data/favorites.json"


class ConfigError(RuntimeError):
    """Invalid value in the environment / .env file."""
    pass


@dataclass(frozen=True)
class Settings:
    favorites_path: str = DEFAULT_FAVORITES
    reference_year: int = field(default_factory=current_year)
    projection_years: int = OWNERSHIP_YEARS
    log_level: str = "WARNING"


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw in (None, ""):
        return default
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def load_settings(dotenv: bool = True) -> Settings:
    """
    Read CARCOMPARE_* variables once, at the CLI / screen edge.
    The scoring layer never looks at the environment; callers pass these values down.
    """
    if dotenv:
        load_dotenv()

    projection_years = _int_env("CARCOMPARE_PROJECTION_YEARS", OWNERSHIP_YEARS)
    if projection_years < 1:
        raise ConfigError(f"CARCOMPARE_PROJECTION_YEARS must be >= 1, got {projection_years}")

    return Settings(
        favorites_path=os.getenv("CARCOMPARE_FAVORITES") or DEFAULT_FAVORITES,
        reference_year=_int_env("CARCOMPARE_REFERENCE_YEAR", current_year()),
        projection_years=projection_years,
        log_level=(os.getenv("CARCOMPARE_LOG_LEVEL") or "WARNING").upper(),
    )
