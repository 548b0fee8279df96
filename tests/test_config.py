import pytest
from pydantic import ValidationError

from weighted_sampler.config import SamplerConfig
from weighted_sampler.types import WeightedItem


def test_config_defaults():
    config = SamplerConfig()

    assert config.copy_items is True
    assert config.seed is None


def test_config_rejects_negative_seed():
    with pytest.raises(ValidationError):
        SamplerConfig(seed=-1)


@pytest.mark.parametrize("weight", [0, -3.5, float("nan"), float("inf")])
def test_weighted_item_rejects_invalid_weight(weight):
    with pytest.raises(ValidationError):
        WeightedItem(item="x", weight=weight)


def test_weighted_item_as_pair():
    assert WeightedItem(item=("nested", 1), weight=2.5).as_pair() == (("nested", 1), 2.5)
