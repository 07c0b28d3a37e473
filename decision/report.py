from __future__ import annotations

from typing import Callable, Dict, Sequence

import numpy as np
import pandas as pd

from crops.environment import Environment
from crops.errors import MissingAttribute
from crops.models import CropOrder
from .profit import (
    get_adjusted_revenue_for_crop,
    get_costs_for_crop,
    get_profit_for_crop,
    get_revenue_for_crop,
    get_total_profit,
)
from .yields import get_total_yield, get_yield_for_crop, get_yield_for_plant

SUMMARY_COLUMNS = [
    "crop",
    "quantity",
    "yield_per_plant",
    "yield",
    "cost",
    "revenue",
    "adjusted_revenue",
    "profit",
]


def _or_nan(fn: Callable[[], float]) -> float:
    try:
        return float(fn())
    except MissingAttribute:
        return np.nan


def crop_summary(orders: Sequence[CropOrder], environment: Environment) -> pd.DataFrame:
    """Tabulate yield and money figures per order.

    Figures that need an attribute the crop does not carry are NaN, so a
    catalogue without prices can still be used for yield planning.
    """
    rows = []
    for order in orders:
        rows.append(
            {
                "crop": order.crop.name,
                "quantity": order.quantity,
                "yield_per_plant": _or_nan(lambda: get_yield_for_plant(order.crop, environment)),
                "yield": _or_nan(lambda: get_yield_for_crop(order, environment)),
                "cost": _or_nan(lambda: get_costs_for_crop(order)),
                "revenue": _or_nan(lambda: get_revenue_for_crop(order)),
                "adjusted_revenue": _or_nan(lambda: get_adjusted_revenue_for_crop(order, environment)),
                "profit": _or_nan(lambda: get_profit_for_crop(order)),
            }
        )
    return pd.DataFrame(rows, columns=SUMMARY_COLUMNS)


def garden_totals(orders: Sequence[CropOrder], environment: Environment) -> Dict:
    total_cost = sum(get_costs_for_crop(o) for o in orders)
    total_revenue = sum(get_revenue_for_crop(o) for o in orders)
    return {
        "total_yield": float(get_total_yield(orders, environment)),
        "total_cost": float(total_cost),
        "total_revenue": float(total_revenue),
        "total_profit": float(get_total_profit(orders)),
    }
