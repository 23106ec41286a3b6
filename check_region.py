"""Quick check: analyze a bounding box against the live Overpass API.

Run from project root:
  python check_region.py 52.50 13.38 52.52 13.41
"""
import argparse
import asyncio
import json
import logging
import sys

from dotenv import load_dotenv
load_dotenv()

from modules.errors import UrbanscopeError
from modules.region_analyzer import analyze_region

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s: %(message)s")


async def main(lat1: float, lng1: float, lat2: float, lng2: float) -> int:
    try:
        report = await analyze_region([[lat1, lng1], [lat2, lng2]])
    except UrbanscopeError as exc:
        print(f"FAILED: {exc}")
        return 1

    print("=" * 60)
    print(f"  Region ({lat1}, {lng1}) -> ({lat2}, {lng2})")
    print("=" * 60)
    print(json.dumps(report, indent=2))
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    for name in ("lat1", "lng1", "lat2", "lng2"):
        parser.add_argument(name, type=float)
    args = parser.parse_args()
    sys.exit(asyncio.run(main(args.lat1, args.lng1, args.lat2, args.lng2)))
