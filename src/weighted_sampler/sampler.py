"""Weighted random item sampler backed by a cumulative weight table.

Each item owns the half-open range ``[boundaries[i-1], boundaries[i])`` of the
interval ``[0, total_weight)``, where ``boundaries`` holds the running sums of
the weights. A draw scales a uniform value from ``[0, 1)`` onto that interval
and binary-searches for the range containing it.

Complexity:

- construction: O(n) time and space
- ``sample``: O(log n) time, O(1) space

The sampler is never mutated after construction, so a single instance can be
shared between threads as long as its random source is thread-safe.
"""

from __future__ import annotations

import logging
import math
import numbers
import random
from typing import Generic, Iterable, Mapping, Optional, Sequence, TypeVar, Union

from .config import SamplerConfig
from .errors import (
    EmptyInputError,
    InvalidWeightError,
    LengthMismatchError,
    NonPositiveWeightError,
    TotalWeightOverflowError,
)
from .types import RandomFn, WeightedItem

LOGGER = logging.getLogger(__name__)

T = TypeVar("T")


class WeightedRandomItemSampler(Generic[T]):
    """Sample items with replacement, proportionally to their weights.

    Given items ``[A, B]`` with weights ``[5, 12]``, ``B`` is drawn 12/5 times
    as often as ``A``. Weights must be positive finite real numbers (``bool``
    and numeric strings are refused) whose sum still fits in a float.
    """

    def __init__(
        self,
        items: Sequence[T],
        weights: Sequence[float],
        *,
        config: Optional[SamplerConfig] = None,
        random_fn: Optional[RandomFn] = None,
    ) -> None:
        self.config = config or SamplerConfig()
        if len(items) == 0:
            raise EmptyInputError()
        if len(items) != len(weights):
            raise LengthMismatchError(len(items), len(weights))

        validated: list[float] = []
        boundaries: list[float] = []
        running = 0.0
        for index, raw in enumerate(weights):
            weight = self._to_float(index, raw)
            # NaN fails every comparison, so test for the valid case
            if not (weight > 0.0 and math.isfinite(weight)):
                raise NonPositiveWeightError(index, raw)
            running += weight
            if math.isinf(running):
                raise TotalWeightOverflowError(index)
            validated.append(weight)
            boundaries.append(running)

        self._items: Sequence[T] = tuple(items) if self.config.copy_items else items
        self._weights = tuple(validated)
        self._boundaries = tuple(boundaries)
        self._total = running
        self._random = random_fn or self._default_random_fn()
        LOGGER.debug(
            "Built weighted sampler over %d items with total weight %s",
            len(boundaries),
            running,
        )

    @classmethod
    def from_pairs(
        cls,
        pairs: Iterable[Union[WeightedItem, tuple[T, float]]],
        **kwargs,
    ) -> "WeightedRandomItemSampler[T]":
        """Build a sampler from ``(item, weight)`` tuples or :class:`WeightedItem` models."""

        items: list[T] = []
        weights: list[float] = []
        for pair in pairs:
            item, weight = pair.as_pair() if isinstance(pair, WeightedItem) else pair
            items.append(item)
            weights.append(weight)
        return cls(items, weights, **kwargs)

    @classmethod
    def from_mapping(cls, mapping: Mapping[T, float], **kwargs) -> "WeightedRandomItemSampler[T]":
        """Build a sampler from an ``{item: weight}`` mapping, in iteration order."""

        return cls(list(mapping.keys()), list(mapping.values()), **kwargs)

    # ------------------------------------------------------------------
    # Sampling
    # ------------------------------------------------------------------
    def sample(self) -> T:
        """Draw one item; the chance of each item is its weight over the total."""

        point = self._random() * self._total
        return self._items[self._find_range_index(point)]

    def sample_many(self, count: int) -> list[T]:
        """Draw ``count`` independent items with replacement."""

        if count < 0:
            raise ValueError("count must be non-negative")
        return [self.sample() for _ in range(count)]

    def _find_range_index(self, point: float) -> int:
        # Leftmost index whose exclusive range end lies beyond the point.
        # Falls back to the last range if rounding pushed the point to the total.
        boundaries = self._boundaries
        found = len(boundaries) - 1
        left = 0
        right = len(boundaries) - 1
        while left <= right:
            mid = (left + right) // 2
            if boundaries[mid] > point:
                found = mid
                right = mid - 1
            else:
                left = mid + 1
        return found

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------
    @property
    def items(self) -> tuple[T, ...]:
        return tuple(self._items)

    @property
    def weights(self) -> tuple[float, ...]:
        return self._weights

    @property
    def boundaries(self) -> tuple[float, ...]:
        """Cumulative weight sums, one per item."""

        return self._boundaries

    @property
    def total_weight(self) -> float:
        return self._total

    def probability(self, index: int) -> float:
        """Return the chance that a single draw yields ``items[index]``."""

        return self._weights[index] / self._total

    def __len__(self) -> int:
        return len(self._boundaries)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(items={len(self)}, total_weight={self._total!r})"

    @staticmethod
    def _to_float(index: int, raw: object) -> float:
        # bool is an int subclass; strings and other coercible types are refused too
        if isinstance(raw, bool) or not isinstance(raw, numbers.Real):
            raise InvalidWeightError(index, raw)
        try:
            return float(raw)
        except OverflowError:
            if raw < 0:
                raise NonPositiveWeightError(index, raw) from None
            raise InvalidWeightError(index, raw) from None

    def _default_random_fn(self) -> RandomFn:
        if self.config.seed is not None:
            return random.Random(self.config.seed).random
        return random.random


__all__ = ["WeightedRandomItemSampler"]
