from .environment import ENVIRONMENT_FACTORS, LEVELS, Environment, parse_environment
from .errors import InvalidQuantity, MissingAttribute, UnknownFactorLevel
from .models import Crop, CropOrder

__all__ = [
    "Crop",
    "CropOrder",
    "Environment",
    "ENVIRONMENT_FACTORS",
    "LEVELS",
    "parse_environment",
    "InvalidQuantity",
    "MissingAttribute",
    "UnknownFactorLevel",
]
