from typing import Sequence

from crops.environment import Environment
from crops.errors import UnknownFactorLevel
from crops.models import Crop, CropOrder


def get_yield_for_plant(crop: Crop, environment: Environment, strict: bool = False) -> float:
    """Base yield of one plant adjusted by every environment factor the crop reacts to.

    Factors the crop has no table for are ignored. A level missing from a
    factor table counts as no adjustment unless `strict` is set.
    """
    total_yield = crop.require("base_yield")
    for factor, level in environment.items():
        if factor not in crop.factors:
            continue
        percent = crop.effect(factor, level)
        if percent is None:
            if strict:
                raise UnknownFactorLevel(crop.name, factor, level)
            continue
        total_yield *= 1 + percent / 100
    return total_yield


def get_yield_for_crop(order: CropOrder, environment: Environment, strict: bool = False) -> float:
    return get_yield_for_plant(order.crop, environment, strict=strict) * order.quantity


def get_total_yield(orders: Sequence[CropOrder], environment: Environment, strict: bool = False) -> float:
    total_yield = 0
    for order in orders:
        total_yield += get_yield_for_crop(order, environment, strict=strict)
    return total_yield
