"""Configuration model for the weighted sampler."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class SamplerConfig(BaseModel):
    """Construction options for :class:`WeightedRandomItemSampler`."""

    copy_items: bool = Field(
        default=True,
        description=(
            "Copy the items into a private tuple. When disabled the caller's sequence is "
            "kept by reference and must not be mutated afterwards."
        ),
    )
    seed: Optional[int] = Field(
        default=None,
        ge=0,
        description="Seed for a private random.Random used when no random_fn is supplied.",
    )


__all__ = ["SamplerConfig"]
