from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional, Union

from .errors import InvalidQuantity, MissingAttribute

Number = Union[int, float]


@dataclass(frozen=True)
class Crop:
    """Static attributes of a plant species.

    `factors` maps a factor name (sun, wind, ...) to a table of
    level -> percentage adjustment, e.g. {"sun": {"low": -50, "high": 50}}.
    """

    name: str
    base_yield: Optional[Number] = None
    cost: Optional[Number] = None
    sale_price: Optional[Number] = None
    factors: Dict[str, Dict[str, Number]] = field(default_factory=dict)

    def effect(self, factor: str, level: str) -> Optional[Number]:
        table = self.factors.get(factor)
        if table is None or level not in table:
            return None
        return table[level]

    def require(self, attribute: str) -> Number:
        value = getattr(self, attribute)
        if value is None:
            raise MissingAttribute(self.name, attribute)
        return value


@dataclass(frozen=True)
class CropOrder:
    crop: Crop
    quantity: Number

    def __post_init__(self) -> None:
        # NaN fails this check as well as negatives.
        if not self.quantity >= 0:
            raise InvalidQuantity(self.quantity)
