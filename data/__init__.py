from .loaders import (
    load_crops_csv,
    load_factors_csv,
    load_orders_csv,
    build_crops,
    build_orders,
    load_garden,
)

__all__ = [
    "load_crops_csv",
    "load_factors_csv",
    "load_orders_csv",
    "build_crops",
    "build_orders",
    "load_garden",
]
