import pytest

from crops.errors import MissingAttribute
from crops.models import Crop, CropOrder
from decision.profit import (
    get_adjusted_revenue_for_crop,
    get_costs_for_crop,
    get_profit_for_crop,
    get_revenue_for_crop,
    get_total_profit,
)


def test_costs_for_crop():
    corn = Crop(name="corn", cost=10, factors={"sun": {"low": -50, "medium": 0, "high": 50}})
    assert get_costs_for_crop(CropOrder(crop=corn, quantity=5)) == 50


def test_revenue_for_crop():
    corn = Crop(name="corn", base_yield=3, sale_price=5)
    assert get_revenue_for_crop(CropOrder(crop=corn, quantity=5)) == 75


def test_profit_for_crop(corn):
    assert get_profit_for_crop(CropOrder(crop=corn, quantity=5)) == 25


def test_total_profit_with_multiple_crops(corn, pumpkin):
    orders = [CropOrder(crop=corn, quantity=5), CropOrder(crop=pumpkin, quantity=2)]
    assert get_total_profit(orders) == 47


def test_total_profit_is_sum_of_parts(corn, pumpkin):
    orders = [CropOrder(crop=corn, quantity=3), CropOrder(crop=pumpkin, quantity=11), CropOrder(crop=corn, quantity=1)]
    assert get_total_profit(orders) == sum(get_profit_for_crop(o) for o in orders)
    assert get_total_profit([]) == 0


def test_profit_is_revenue_minus_costs(pumpkin):
    order = CropOrder(crop=pumpkin, quantity=2.5)
    assert get_profit_for_crop(order) == get_revenue_for_crop(order) - get_costs_for_crop(order)


def test_zero_quantity_gives_zero(corn):
    order = CropOrder(crop=corn, quantity=0)
    assert get_costs_for_crop(order) == 0
    assert get_revenue_for_crop(order) == 0
    assert get_profit_for_crop(order) == 0


def test_revenue_ignores_environment_but_adjusted_revenue_does_not(corn):
    order = CropOrder(crop=corn, quantity=5)
    assert get_revenue_for_crop(order) == 75
    assert get_adjusted_revenue_for_crop(order, {"sun": "low"}) == 37.5
    assert get_adjusted_revenue_for_crop(order, {"sun": "medium"}) == 75


@pytest.mark.parametrize(
    "crop, attribute",
    [
        (Crop(name="kale", base_yield=2, sale_price=3), "cost"),
        (Crop(name="kale", base_yield=2, cost=1), "sale_price"),
        (Crop(name="kale", cost=1, sale_price=3), "base_yield"),
    ],
)
def test_profit_needs_every_attribute(crop, attribute):
    with pytest.raises(MissingAttribute) as exc:
        get_profit_for_crop(CropOrder(crop=crop, quantity=1))
    assert exc.value.attribute == attribute
    assert exc.value.crop == "kale"
