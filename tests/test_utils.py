import pytest

from weighted_sampler.errors import EmptyInputError, NonPositiveWeightError
from weighted_sampler.utils import weighted_choice


def test_weighted_choice_uses_random_fn():
    assert weighted_choice(["a", "b", "c"], [1, 1, 2], random_fn=lambda: 0.1) == "a"
    assert weighted_choice(["a", "b", "c"], [1, 1, 2], random_fn=lambda: 0.4) == "b"
    assert weighted_choice(["a", "b", "c"], [1, 1, 2], random_fn=lambda: 0.99) == "c"


def test_weighted_choice_validates_input():
    with pytest.raises(EmptyInputError):
        weighted_choice([], [])
    with pytest.raises(NonPositiveWeightError):
        weighted_choice(["a", "b"], [1, 0])
