"""
Main Entry Point - Bidding Utilities CLI

Small command line front end for inspecting what the bidding script will
request and which values it will read from a weather response.
"""

import sys
import os
import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.coreutils.logging import setup_logging
from src.transformation.api_columns import resolve_api_values
from src.weather.query import build_forecast_url

logger = logging.getLogger(__name__)


def run_url(lat: float, lon: float) -> str:
    """
    Build the forecast URL for one location

    Args:
        lat: Latitude
        lon: Longitude

    Returns:
        str: Request URL
    """
    logger.info(f"🌤️ Building forecast URL for lat={lat}, lon={lon}")
    return build_forecast_url(lat, lon)


def run_resolve(
    json_path: str | Path, headers: Sequence[str], strict: bool = False
) -> Dict[str, Any]:
    """
    Resolve "api:" headers against a saved API response

    Args:
        json_path: Path to a JSON file holding the response
        headers: Header row cells
        strict: Fail on the first unresolved path

    Returns:
        Dict: path -> value
    """
    json_path = Path(json_path)
    if not json_path.exists():
        raise FileNotFoundError(f"JSON file not found: {json_path}")

    with open(json_path, "r", encoding="utf-8") as f:
        document = json.load(f)

    logger.info(f"🔍 Resolving {len(headers)} headers against {json_path}")
    return resolve_api_values(headers, document, strict=strict)


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="OpenWeather Bidding Utilities")
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    url_parser = subparsers.add_parser("url", help="Print the forecast request URL")
    url_parser.add_argument("--lat", type=float, required=True, help="Latitude")
    url_parser.add_argument("--lon", type=float, required=True, help="Longitude")

    resolve_parser = subparsers.add_parser(
        "resolve", help="Resolve api: headers against a JSON response"
    )
    resolve_parser.add_argument(
        "--json", dest="json_path", required=True, help="Path to the JSON response"
    )
    resolve_parser.add_argument(
        "--headers", nargs="+", required=True, help="Header row cells"
    )
    resolve_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail on unresolved paths instead of emitting null",
    )

    args = parser.parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    try:
        if args.command == "url":
            print(run_url(args.lat, args.lon))
        elif args.command == "resolve":
            values = run_resolve(args.json_path, args.headers, args.strict)
            print(json.dumps(values, indent=2))
    except (LookupError, ValueError, OSError) as e:
        logger.error(f"❌ {args.command} failed: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
