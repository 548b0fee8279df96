"""Public package interface for weighted_sampler."""

from .config import SamplerConfig
from .errors import (
    EmptyInputError,
    InvalidWeightError,
    LengthMismatchError,
    NonPositiveWeightError,
    TotalWeightOverflowError,
    WeightedSamplerError,
)
from .sampler import WeightedRandomItemSampler
from .types import RandomFn, WeightedItem
from .utils import weighted_choice

__all__ = [
    "EmptyInputError",
    "InvalidWeightError",
    "LengthMismatchError",
    "NonPositiveWeightError",
    "RandomFn",
    "SamplerConfig",
    "TotalWeightOverflowError",
    "WeightedItem",
    "WeightedRandomItemSampler",
    "WeightedSamplerError",
    "weighted_choice",
]
