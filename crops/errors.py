from __future__ import annotations


class InvalidQuantity(ValueError):
    """Raised when a crop order asks for a negative number of plants."""

    def __init__(self, quantity) -> None:
        self.quantity = quantity
        super().__init__(f"Quantity must be non-negative, got {quantity!r}.")


class MissingAttribute(ValueError):
    """Raised when a calculation needs a crop attribute that was never set."""

    def __init__(self, crop: str, attribute: str) -> None:
        self.crop = crop
        self.attribute = attribute
        super().__init__(f"Crop '{crop}' has no '{attribute}' value.")


class UnknownFactorLevel(ValueError):
    def __init__(self, crop: str, factor: str, level: str) -> None:
        self.crop = crop
        self.factor = factor
        self.level = level
        super().__init__(f"Crop '{crop}' defines no '{level}' level for factor '{factor}'.")
