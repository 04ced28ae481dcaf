import argparse
import json
import logging
import os
import sys

sys.path.append(os.path.dirname(os.path.dirname(os.path.abspath(__file__))))  # import config / comparison / services

from config import ConfigError, load_settings
from comparison.engine import compare_vehicles
from comparison.report import result_to_dict
from services.favorites import FavoritesError, find_vehicle, load_favorites


def main(argv=None) -> int:
    try:
        settings = load_settings()
    except ConfigError as e:
        raise SystemExit(f"❌ {e}")

    parser = argparse.ArgumentParser(description="Compare two favorite cars")
    parser.add_argument("left", help="id or 'year make model' of the first car")
    parser.add_argument("right", help="id or 'year make model' of the second car")
    parser.add_argument("--favorites", type=str, default=settings.favorites_path)
    parser.add_argument("--year", type=int, default=settings.reference_year, help="reference year for vehicle age")
    parser.add_argument("--years", type=int, default=settings.projection_years, help="ownership horizon for cost projections")
    parser.add_argument("--indent", type=int, default=2)
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level, format="%(levelname)s %(name)s: %(message)s")

    try:
        favorites = load_favorites(args.favorites)
    except FavoritesError as e:
        raise SystemExit(f"❌ {e}")

    left = find_vehicle(favorites, args.left)
    right = find_vehicle(favorites, args.right)
    missing = [k for k, v in ((args.left, left), (args.right, right)) if v is None]
    if missing:
        raise SystemExit(f"❌ not in favorites: {', '.join(missing)}")

    if args.years < 1:
        raise SystemExit(f"❌ --years must be >= 1, got {args.years}")

    result = compare_vehicles(left, right, as_of_year=args.year, years=args.years)
    print(json.dumps(result_to_dict(result), indent=args.indent, ensure_ascii=False, default=str))
    return 0


if __name__ == "__main__":
    main()
