import io
import os
from typing import Dict, List, Optional, Union

import pandas as pd

from crops.models import Crop, CropOrder
from .validators import validate_crops, validate_factors, validate_orders

Source = Optional[Union[str, os.PathLike, io.IOBase]]

CROP_COLS = {"name", "yield", "cost", "sale_price"}
FACTOR_COLS = {"crop", "factor", "level", "percent"}
ORDER_COLS = {"crop", "quantity"}


def _read(source, required: set, label: str) -> pd.DataFrame:
    try:
        df = pd.read_csv(source)
    except Exception as e:
        raise ValueError(f"Could not read {label} CSV: {e}")
    # Normalize column names (strip BOMs and spaces, lowercase)
    df.columns = [str(c).replace("\ufeff", "").strip().lower() for c in df.columns]
    if not required.issubset(df.columns):
        raise ValueError(f"{label} CSV must contain columns: {sorted(required)}. Found: {list(df.columns)}")
    return df


def load_crops_csv(source: Source) -> pd.DataFrame:
    """Load a crop catalogue (columns: name, yield, cost, sale_price).

    Any of yield / cost / sale_price may be blank; calculations that need a
    blank value raise MissingAttribute later on.
    """
    if source is None:
        crops, _, _ = make_example_garden()
        return validate_crops(crops)
    return validate_crops(_read(source, CROP_COLS, "Crops"))


def load_factors_csv(source: Source) -> pd.DataFrame:
    """Load factor sensitivities in long form (columns: crop, factor, level, percent)."""
    if source is None:
        _, factors, _ = make_example_garden()
        return validate_factors(factors)
    return validate_factors(_read(source, FACTOR_COLS, "Factors"))


def load_orders_csv(source: Source) -> pd.DataFrame:
    if source is None:
        _, _, orders = make_example_garden()
        return validate_orders(orders)
    return validate_orders(_read(source, ORDER_COLS, "Orders"))


def _optional(value) -> Optional[float]:
    return None if pd.isna(value) else float(value)


def build_crops(crops_df: pd.DataFrame, factors_df: pd.DataFrame) -> Dict[str, Crop]:
    tables: Dict[str, Dict[str, Dict[str, float]]] = {}
    for row in factors_df.itertuples(index=False):
        tables.setdefault(str(row.crop), {}).setdefault(str(row.factor), {})[str(row.level)] = float(row.percent)

    unknown = set(tables) - set(crops_df["name"].astype(str))
    if unknown:
        raise ValueError(f"Factors refer to crops missing from the catalogue: {sorted(unknown)}")

    crops = {}
    for row in crops_df.to_dict("records"):
        name = str(row["name"])
        crops[name] = Crop(
            name=name,
            base_yield=_optional(row["yield"]),
            cost=_optional(row["cost"]),
            sale_price=_optional(row["sale_price"]),
            factors=tables.get(name, {}),
        )
    return crops


def build_orders(orders_df: pd.DataFrame, crops: Dict[str, Crop]) -> List[CropOrder]:
    missing = sorted(set(orders_df["crop"].astype(str)) - set(crops))
    if missing:
        raise ValueError(f"Orders refer to unknown crops: {missing}")
    orders = []
    for row in orders_df.itertuples(index=False):
        qty = float(row.quantity)
        orders.append(CropOrder(crop=crops[str(row.crop)], quantity=int(qty) if qty.is_integer() else qty))
    return orders


def make_example_garden():
    """Corn and pumpkin, the two-crop garden used throughout the docs and tests."""
    crops = pd.DataFrame(
        [
            ("corn", 3, 10, 5),
            ("pumpkin", 4, 5, 4),
        ],
        columns=["name", "yield", "cost", "sale_price"],
    )
    factors = pd.DataFrame(
        [
            ("corn", "sun", "low", -50),
            ("corn", "sun", "medium", 0),
            ("corn", "sun", "high", 50),
            ("pumpkin", "sun", "low", -20),
            ("pumpkin", "sun", "medium", 0),
            ("pumpkin", "sun", "high", 50),
            ("pumpkin", "wind", "low", 0),
            ("pumpkin", "wind", "medium", 30),
            ("pumpkin", "wind", "high", -60),
        ],
        columns=["crop", "factor", "level", "percent"],
    )
    orders = pd.DataFrame([("corn", 5), ("pumpkin", 2)], columns=["crop", "quantity"])
    return crops, factors, orders


def load_garden(crops_src: Source = None, factors_src: Source = None, orders_src: Source = None) -> List[CropOrder]:
    crops = build_crops(load_crops_csv(crops_src), load_factors_csv(factors_src))
    return build_orders(load_orders_csv(orders_src), crops)
