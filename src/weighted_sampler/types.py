"""Common data types used across the weighted sampler package."""

from __future__ import annotations

from typing import Any, Callable

from pydantic import BaseModel, Field

RandomFn = Callable[[], float]


class WeightedItem(BaseModel):
    """An item paired with its relative weight."""

    item: Any
    weight: float = Field(..., gt=0.0, allow_inf_nan=False)

    def as_pair(self) -> tuple[Any, float]:
        return self.item, self.weight


__all__ = ["RandomFn", "WeightedItem"]
