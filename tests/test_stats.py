import math

import numpy as np
import pandas as pd
import pytest

from statcanvas.stats import mean, median, mode, std_dev, variance


def test_mean_values():
    assert mean([1, 2, 3, 4]) == 2.5
    assert mean([5]) == 5


def test_mean_of_empty_sample_is_not_finite():
    assert not math.isfinite(mean([]))


def test_median_odd_and_even():
    assert median([3, 1, 2]) == 2
    assert median([1, 2, 3, 4]) == 2.5


def test_median_sorts_numerically_not_lexicographically():
    # A string sort would order these as 1, 10, 2, 9.
    assert median([10, 9, 2, 1]) == 5.5
    assert median([100, 25, 3]) == 25


def test_median_and_mode_do_not_mutate_input():
    data = [5, 3, 1, 3, 4]
    snapshot = list(data)
    median(data)
    mode(data)
    assert data == snapshot


def test_mode_multimodal_ascending():
    assert mode([1, 1, 2, 2, 3]) == [1, 2]
    assert mode([3, 3, 1, 1, 2]) == [1, 3]


def test_mode_single():
    assert mode([4, 1, 4, 2]) == [4]


def test_mode_all_unique_returns_every_value():
    assert mode([1, 2, 3]) == [1, 2, 3]


def test_mode_empty():
    assert mode([]) == []


def test_variance_and_std_dev():
    data = [2, 4, 4, 4, 5, 5, 7, 9]
    # Sum of squared deviations is 32 over n - 1 = 7.
    assert math.isclose(variance(data), 32 / 7)
    assert std_dev(data) == math.sqrt(variance(data))


@pytest.mark.parametrize(
    "data", [[1.5, 2.5], [10, -3, 7, 7.25], list(np.linspace(0, 1, 11))]
)
def test_std_dev_is_sqrt_of_variance(data):
    assert std_dev(data) == math.sqrt(variance(data))


def test_variance_requires_two_values():
    assert math.isnan(variance([3]))
    assert math.isnan(std_dev([]))


def test_accepts_numpy_and_pandas():
    assert mean(np.array([1.0, 2.0, 3.0])) == 2.0
    assert median(pd.Series([7, 1, 4])) == 4


def test_accepts_generators():
    assert mean(x for x in [1, 2, 3]) == 2.0
    assert median(iter([5, 1, 3])) == 3.0
    assert math.isclose(variance(x * 2 for x in [1, 2, 3]), 4.0)


def test_rejects_nested_sample():
    with pytest.raises(ValueError, match="one-dimensional"):
        mean([[1, 2], [3, 4]])
