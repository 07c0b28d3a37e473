from typing import Sequence

from crops.environment import Environment
from crops.models import CropOrder
from .yields import get_yield_for_crop


def get_costs_for_crop(order: CropOrder) -> float:
    return order.crop.require("cost") * order.quantity


def get_revenue_for_crop(order: CropOrder) -> float:
    # Uses the unadjusted base yield; see get_adjusted_revenue_for_crop.
    crop = order.crop
    return crop.require("base_yield") * order.quantity * crop.require("sale_price")


def get_adjusted_revenue_for_crop(order: CropOrder, environment: Environment) -> float:
    return get_yield_for_crop(order, environment) * order.crop.require("sale_price")


def get_profit_for_crop(order: CropOrder) -> float:
    return get_revenue_for_crop(order) - get_costs_for_crop(order)


def get_total_profit(orders: Sequence[CropOrder]) -> float:
    total_profit = 0
    for order in orders:
        total_profit += get_profit_for_crop(order)
    return total_profit
