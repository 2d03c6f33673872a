"""
Command-line entry point.

    python -m tn_agri_ai.cli recommend --lat 11.02 --lon 76.96 --goal profit
    python -m tn_agri_ai.cli regions
    python -m tn_agri_ai.cli resolve --lat 13.08 --lon 80.27
"""

import argparse
import json
import logging
import sys

import pandas as pd

from .geo.resolver import resolve
from .pipeline import RecommendationRequest, recommend
from .registry.profiles import registry_frame


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Tamil Nadu location-based crop recommendation"
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable info logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    rec = sub.add_parser("recommend", help="Recommend crops for a coordinate.")
    rec.add_argument("--lat", type=float, required=True)
    rec.add_argument("--lon", type=float, required=True)
    rec.add_argument("--goal", default="mixed", help="profit, cash-crop, soil-health, mixed ...")
    rec.add_argument("--risk", default="medium", help="low, medium or high")
    rec.add_argument("--json", action="store_true", help="Print the full result as JSON.")

    sub.add_parser("regions", help="List the district soil registry.")

    res = sub.add_parser("resolve", help="Resolve a coordinate to its district.")
    res.add_argument("--lat", type=float, required=True)
    res.add_argument("--lon", type=float, required=True)

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.INFO if args.verbose else logging.WARNING)

    if args.command == "recommend":
        result = recommend(
            RecommendationRequest(args.lat, args.lon, args.goal, args.risk)
        )
        if args.json:
            print(json.dumps(result.to_dict(), indent=2))
        else:
            print(result.reasoning)
    elif args.command == "regions":
        with pd.option_context("display.max_rows", None, "display.width", 160):
            print(registry_frame().to_string(index=False))
    elif args.command == "resolve":
        print(json.dumps(resolve(args.lat, args.lon).to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
