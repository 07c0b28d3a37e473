from .yields import get_yield_for_plant, get_yield_for_crop, get_total_yield
from .profit import (
    get_costs_for_crop,
    get_revenue_for_crop,
    get_adjusted_revenue_for_crop,
    get_profit_for_crop,
    get_total_profit,
)

__all__ = [
    "get_yield_for_plant",
    "get_yield_for_crop",
    "get_total_yield",
    "get_costs_for_crop",
    "get_revenue_for_crop",
    "get_adjusted_revenue_for_crop",
    "get_profit_for_crop",
    "get_total_profit",
]
