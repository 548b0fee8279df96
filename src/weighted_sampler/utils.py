"""Utility helpers for one-off weighted draws."""

from __future__ import annotations

import random
from typing import Sequence, TypeVar

from .config import SamplerConfig
from .sampler import WeightedRandomItemSampler

T = TypeVar("T")


def weighted_choice(items: Sequence[T], weights: Sequence[float], *, random_fn=random.random) -> T:
    """Choose a single item based on weights.

    Builds a throwaway sampler, so prefer :class:`WeightedRandomItemSampler`
    when drawing repeatedly from the same items.
    """

    sampler = WeightedRandomItemSampler(
        items,
        weights,
        config=SamplerConfig(copy_items=False),
        random_fn=random_fn,
    )
    return sampler.sample()


__all__ = ["weighted_choice"]
