# tests/test_functions.py
import math

import numpy as np
import pytest

from chord_app.core.errors import UnknownEquationError
from chord_app.core.functions import EQUATIONS, evaluate_array, f, f_der2, get_equation


def test_registry_has_four_equations():
    assert list(EQUATIONS) == ["f1", "f2", "f3", "f4"]
    for key, eq in EQUATIONS.items():
        assert eq.key == key
        assert eq.title


@pytest.mark.parametrize(
    "key, x, expected",
    [
        ("f1", 0.0, 1.0),
        ("f1", -1.0, -math.e),
        ("f2", -1.0, -3.0),
        ("f2", 1.0, -11.0),
        ("f2", 0.0, 2.0),
        ("f3", 0.0, 0.0),
        ("f3", 2.0, 4.0 - 5.0 * math.sin(2.0)),
        ("f4", 1.0, 0.1),
        ("f4", 2.0, 0.4 - 2.0 * math.log(2.0)),
    ],
)
def test_f_values(key, x, expected):
    assert f(key, x) == pytest.approx(expected, rel=1e-12, abs=1e-12)


@pytest.mark.parametrize(
    "key, x, expected",
    [
        ("f2", -1.0, 0.0),
        ("f2", 1.0, -24.0),
        ("f2", 3.0, 144.0),
        ("f3", 0.0, -5.0),
        ("f4", 1.0, -0.8),
    ],
)
def test_second_derivative_values(key, x, expected):
    assert f_der2(key, x) == pytest.approx(expected, rel=1e-12, abs=1e-12)


def test_f1_second_derivative_uses_constant_sin_pi():
    x = 0.3
    literal = -(math.cos(math.pi * x) + math.pi * math.sin(math.pi)) * math.exp(-x)
    textbook_like = -(math.cos(math.pi * x) + math.pi * math.sin(math.pi * x)) * math.exp(-x)

    assert f_der2("f1", x) == pytest.approx(literal, rel=1e-12)
    assert f_der2("f1", x) != pytest.approx(textbook_like, rel=1e-3)


def test_f3_second_derivative_is_literal_formula():
    x = 1.0
    assert f_der2("f3", x) == pytest.approx(2.0 - 5.0 * math.cos(1.0), rel=1e-12)


def test_out_of_domain_propagates_nan_without_raising():
    assert math.isnan(f("f4", -1.0))
    assert math.isnan(f_der2("f4", -1.0))
    # 0 * ln(0) = 0 * (-inf)
    assert math.isnan(f("f4", 0.0))
    assert math.isinf(f_der2("f4", 0.0))


def test_unknown_equation():
    with pytest.raises(UnknownEquationError):
        get_equation("f5")
    with pytest.raises(KeyError):
        f("nope", 1.0)


def test_evaluate_array_matches_scalar():
    xs = np.linspace(0.5, 2.0, 7)
    ys = evaluate_array("f4", xs)
    assert ys.shape == xs.shape
    for x, y in zip(xs, ys):
        assert y == pytest.approx(f("f4", float(x)), rel=1e-12)


def test_evaluate_array_keeps_nan_for_invalid_points():
    ys = evaluate_array("f4", np.array([-1.0, 1.0]))
    assert math.isnan(ys[0])
    assert ys[1] == pytest.approx(0.1)
