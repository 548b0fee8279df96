"""Validation errors raised while constructing a sampler."""

from __future__ import annotations


class WeightedSamplerError(ValueError):
    """Base class for invalid sampler input."""


class EmptyInputError(WeightedSamplerError):
    """Raised when no items are supplied."""

    def __init__(self) -> None:
        super().__init__("Zero items were provided to WeightedRandomItemSampler")


class LengthMismatchError(WeightedSamplerError):
    """Raised when the item and weight counts differ."""

    def __init__(self, items_count: int, weights_count: int) -> None:
        self.items_count = items_count
        self.weights_count = weights_count
        super().__init__(
            f"WeightedRandomItemSampler received {items_count} items and {weights_count} weights. "
            "Each item must have exactly 1 respective weight"
        )


class NonPositiveWeightError(WeightedSamplerError):
    """Raised for a weight that is zero, negative, NaN or infinite."""

    def __init__(self, index: int, weight: float) -> None:
        self.index = index
        self.weight = weight
        super().__init__(
            f"WeightedRandomItemSampler received a non-positive weight of {weight!r} at index {index}"
        )


class InvalidWeightError(WeightedSamplerError):
    """Raised for a weight that is not a real number or does not fit in a float."""

    def __init__(self, index: int, weight: object) -> None:
        self.index = index
        self.weight = weight
        super().__init__(
            f"WeightedRandomItemSampler received an invalid weight of {weight!r} at index {index}; "
            "weights must be real numbers representable as floats"
        )


class TotalWeightOverflowError(WeightedSamplerError):
    """Raised when the weights are finite but their sum is not."""

    def __init__(self, index: int) -> None:
        self.index = index
        super().__init__(
            f"WeightedRandomItemSampler weights overflow a float when summed up to index {index}"
        )


__all__ = [
    "EmptyInputError",
    "InvalidWeightError",
    "LengthMismatchError",
    "NonPositiveWeightError",
    "TotalWeightOverflowError",
    "WeightedSamplerError",
]
