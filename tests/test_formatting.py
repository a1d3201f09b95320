# tests/test_formatting.py
import math

import pytest

from chord_app.core.chord import chord_step
from chord_app.core.formatting import (
    STATUS_CONVERGED,
    STATUS_ERROR,
    format_iterate,
    format_iteration,
    format_status,
    x_decimals,
)
from chord_app.core.problem import Problem


@pytest.mark.parametrize(
    "eps, digits",
    [
        (0.001, 4),
        (0.5, 2),
        (1e-05, 6),
        (1.0, 3),
        (10.0, 3),
    ],
)
def test_x_decimals(eps, digits):
    assert x_decimals(eps) == digits


def test_format_before_start_is_empty(make_problem):
    p = make_problem("f2", 0.0, 1.0)
    assert format_iterate(p) == ""
    assert format_status(p) == ""
    assert format_iteration(p) == "Ітерація -1"


def test_format_after_initial_step(make_problem):
    p = make_problem("f2", 0.0, 1.0, eps=0.001)
    p.apply(chord_step(p))

    assert format_iterate(p) == "x = 0.0000, f(x) = 2.0000"
    assert format_iteration(p) == "Ітерація 0"
    assert format_status(p) == ""


def test_format_status_converged(engine, make_problem):
    p = make_problem("f4", 1.0, 2.0)
    engine.solve(p)
    assert format_status(p) == STATUS_CONVERGED


def test_format_status_failed(engine, make_problem):
    p = make_problem("f2", -1.0, 1.0)
    engine.solve(p)
    assert format_status(p) == STATUS_ERROR
    # останнє прийняте наближення лишається на екрані
    assert format_iterate(p).startswith("x = -1.0000")


def test_format_status_nan_iterate_is_error():
    p = Problem(equation_key="f4", a=-1.0, b=1.0, eps=0.001,
                fixed=1.0, fixed_at_left=False, x=math.nan, iteration=1)
    assert format_status(p) == STATUS_ERROR
    assert "nan" in format_iterate(p)
