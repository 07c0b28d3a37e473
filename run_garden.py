import argparse
import os

import pandas as pd

from crops.environment import LEVELS, parse_environment
from crops.errors import MissingAttribute
from data.loaders import load_garden
from decision.report import crop_summary, garden_totals
from decision.scenarios import yield_range, yield_scenarios
from decision.yields import get_total_yield


def main(argv=None):
    parser = argparse.ArgumentParser(description="Vegetable garden yield and profit planner")
    parser.add_argument("--crops", default=None, help="Crops CSV (columns: name,yield,cost,sale_price)")
    parser.add_argument("--factors", default=None, help="Factors CSV (columns: crop,factor,level,percent)")
    parser.add_argument("--orders", default=None, help="Orders CSV (columns: crop,quantity)")
    parser.add_argument(
        "--env",
        action="append",
        default=[],
        metavar="FACTOR=LEVEL",
        help="Override an environment factor, e.g. --env sun=high (repeatable)",
    )
    parser.add_argument("--strict", action="store_true", help="Fail on levels a crop has no entry for")
    parser.add_argument("--scenarios", action="store_true", help="Show the total yield range over all levels")
    parser.add_argument("--output", default=None, help="Write the per-crop summary to this CSV path")
    args = parser.parse_args(argv)

    try:
        environment = parse_environment(args.env)
        orders = load_garden(args.crops, args.factors, args.orders)
        if args.strict:
            get_total_yield(orders, environment, strict=True)
        summary = crop_summary(orders, environment)
    except ValueError as e:
        raise SystemExit(f"Error: {e}")

    print("Environment: " + ", ".join(f"{k}={v}" for k, v in environment.items()))
    with pd.option_context("display.width", 120, "display.max_columns", None):
        print(summary.to_string(index=False))
    print()
    try:
        totals = garden_totals(orders, environment)
    except MissingAttribute as e:
        print(f"Totals unavailable: {e}")
    else:
        for key, value in totals.items():
            print(f"{key:>14}: {value:.2f}")

    if args.scenarios:
        factors = sorted({f for o in orders for f in o.crop.factors})
        try:
            scenarios = yield_scenarios(orders, {f: LEVELS for f in factors}, strict=args.strict)
        except ValueError as e:
            raise SystemExit(f"Error: {e}")
        rng = yield_range(scenarios)
        print(
            f"\nYield over {len(scenarios)} scenarios: "
            f"min {rng['min']:.2f}, mean {rng['mean']:.2f}, max {rng['max']:.2f}"
        )

    if args.output:
        os.makedirs(os.path.dirname(os.path.abspath(args.output)), exist_ok=True)
        summary.to_csv(args.output, index=False)
        print(f"\n✓ Summary saved to {os.path.abspath(args.output)}")


if __name__ == "__main__":
    main()
