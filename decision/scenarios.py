from __future__ import annotations

from itertools import product
from typing import Dict, List, Mapping, Sequence

import numpy as np
import pandas as pd

from crops.models import CropOrder
from .yields import get_total_yield


def environment_grid(levels: Mapping[str, Sequence[str]]) -> List[Dict[str, str]]:
    """Every combination of levels, one environment per combination."""
    factors = list(levels)
    if not factors:
        return [{}]
    return [dict(zip(factors, combo)) for combo in product(*(levels[f] for f in factors))]


def yield_scenarios(
    orders: Sequence[CropOrder], levels: Mapping[str, Sequence[str]], strict: bool = False
) -> pd.DataFrame:
    rows = []
    for env in environment_grid(levels):
        row = dict(env)
        row["total_yield"] = float(get_total_yield(orders, env, strict=strict))
        rows.append(row)
    return pd.DataFrame(rows, columns=list(levels) + ["total_yield"])


def yield_range(scenarios: pd.DataFrame) -> Dict[str, float]:
    if scenarios.empty:
        raise ValueError("No scenarios to summarise.")
    y = scenarios["total_yield"].to_numpy(dtype=float)
    return {
        "min": float(np.min(y)),
        "mean": float(np.mean(y)),
        "max": float(np.max(y)),
        "spread": float(np.max(y) - np.min(y)),
    }
