import math

import numpy as np
import pytest

from statcanvas import UnsupportedOptionWarning
from statcanvas.stats import (
    RegressionLine,
    line_of_best_fit,
    model2_regression,
    pmcc,
    simple_regression,
    std_dev,
)

ON_LINE = [[0, 1], [1, 3], [2, 5], [3, 7]]


def test_simple_recovers_exact_line():
    a, b = line_of_best_fit(ON_LINE, "simple")
    assert math.isclose(a, 2.0)
    assert math.isclose(b, 1.0)


def test_simple_matches_polyfit():
    rng = np.random.default_rng(7)
    x = np.linspace(0, 10, 25)
    y = 0.8 * x - 2 + rng.normal(0, 0.5, x.size)
    m, c = np.polyfit(x, y, 1)
    line = simple_regression(np.column_stack((x, y)))
    assert math.isclose(line.slope, m, rel_tol=1e-9)
    assert math.isclose(line.intercept, c, rel_tol=1e-9)


def test_model2_slope_is_ratio_of_std_devs():
    data = [[1, 2.0], [2, 4.5], [3, 5.0], [4, 8.5], [5, 9.0]]
    xs = [p[0] for p in data]
    ys = [p[1] for p in data]
    line = model2_regression(data)
    assert math.isclose(line.slope, std_dev(ys) / std_dev(xs))
    # Through the mean centre.
    assert math.isclose(line.y_at(np.mean(xs)), np.mean(ys))


def test_model2_negative_correlation_gives_negative_slope():
    line = model2_regression([[1, 9], [2, 7], [3, 6], [4, 2]])
    assert line.slope < 0


def test_model2_zero_correlation_gives_positive_slope():
    data = [[-1, 1], [0, 0], [1, 1]]
    assert pmcc(data) == 0.0
    line = model2_regression(data)
    assert line.slope > 0
    assert math.isclose(line.slope, std_dev([1, 0, 1]) / std_dev([-1, 0, 1]))


def test_model2_constant_y_is_flat_line():
    line = model2_regression([[1, 5], [2, 5], [3, 5]])
    assert line.slope == 0.0
    assert line.intercept == 5.0


def test_model2_on_exact_line():
    a, b = model2_regression(ON_LINE)
    assert math.isclose(a, 2.0)
    assert math.isclose(b, 1.0)


def test_default_method_is_model2():
    data = [[1, 2.0], [2, 4.5], [3, 5.0], [4, 8.5]]
    assert line_of_best_fit(data) == model2_regression(data)


def test_unknown_method_falls_back_to_model2():
    data = [[1, 2.0], [2, 4.5], [3, 5.0], [4, 8.5]]
    with pytest.warns(UnsupportedOptionWarning, match="defaulted to 'model2'"):
        line = line_of_best_fit(data, "quadratic")
    assert line == model2_regression(data)


def test_vertical_data_is_undefined():
    for fit in (simple_regression, model2_regression):
        line = fit([[2, 1], [2, 5], [2, 9]])
        assert math.isnan(line.slope)
        assert math.isnan(line.intercept)


def test_regression_line_evaluates():
    line = RegressionLine(0.5, -1.0)
    assert line.y_at(4) == 1.0
    slope, intercept = line
    assert (slope, intercept) == (0.5, -1.0)
