import pytest

from crops.models import Crop


@pytest.fixture
def corn():
    return Crop(
        name="corn",
        base_yield=3,
        cost=10,
        sale_price=5,
        factors={"sun": {"low": -50, "medium": 0, "high": 50}},
    )


@pytest.fixture
def pumpkin():
    return Crop(
        name="pumpkin",
        base_yield=4,
        cost=5,
        sale_price=4,
        factors={
            "sun": {"low": -20, "medium": 0, "high": 50},
            "wind": {"low": 0, "medium": 30, "high": -60},
        },
    )


@pytest.fixture
def environment():
    return {"sun": "low", "wind": "medium"}
