"""CLI entry point: print the Sun's azimuth and elevation.

    uv run solarazel --when "2020-06-21 12:00" --lat 52.975 --lng -6.0494
"""

import argparse
import sys
from pathlib import Path

from dotenv import find_dotenv, load_dotenv

from solarazel.compute import normalize_azimuth, run
from solarazel.config import load_settings
from solarazel.logger import get_logger, set_level
from solarazel.models import QueryInput
from solarazel.validation import QueryError

logger = get_logger(__name__)


def _build_parser(defaults) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="solarazel",
        description="Solar azimuth/elevation for a site at a UTC instant.",
    )
    parser.add_argument(
        "--when",
        default="now",
        help='UTC time, "YYYY-MM-DD HH:MM[:SS]", ISO 8601, or "now" (default)',
    )
    parser.add_argument("--lat", type=float, default=defaults.lat, help="latitude, deg (S negative)")
    parser.add_argument("--lng", type=float, default=defaults.lng, help="longitude, deg (W negative)")
    parser.add_argument(
        "--alt-km", type=float, default=defaults.alt_km, help="altitude above sea level, km"
    )
    parser.add_argument("--chart", type=Path, default=None, help="also save a PNG chart here")
    parser.add_argument(
        "--normalize", action="store_true", help="wrap azimuth into [0, 360)"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv(find_dotenv(usecwd=True))
    try:
        settings = load_settings()
    except QueryError as e:
        print(f"solarazel: {e}", file=sys.stderr)
        return 2
    set_level(settings.log_level)

    args = _build_parser(settings).parse_args(argv)
    query = QueryInput(when=args.when, lat=args.lat, lng=args.lng, alt_km=args.alt_km)
    try:
        observation = run(query)
    except QueryError as e:
        logger.error("invalid query: %s", e)
        print(f"solarazel: {e}", file=sys.stderr)
        return 2

    az, el = observation.position.az_el
    if args.normalize:
        az = normalize_azimuth(az)
    print("Azimuth: %f" % az)
    print("Elevation: %f" % el)

    if args.chart is not None:
        # matplotlib is only imported when a chart is requested
        from solarazel.renderers.static import save_static_chart

        path = save_static_chart(observation, args.chart)
        print(f"Saved: {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
