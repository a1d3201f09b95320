# tests/test_chord_step.py
import math

import pytest

from chord_app.core import chord
from chord_app.core.chord import FailureKind, StepFailure, StepResult, chord_step
from chord_app.core.functions import f, f_der2
from chord_app.core.problem import NOT_STARTED, Problem, ProblemStatus


# ---------------------------------------------------------------------------
# Ініціалізація
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("key", ["f1", "f2", "f3", "f4"])
def test_initial_step_picks_fixed_endpoint_from_sign(key, make_problem):
    p = make_problem(key, -1.0, 1.0)
    fixed_at_left = f(key, -1.0) * f_der2(key, -1.0) > 0.0

    res = chord_step(p)

    assert isinstance(res, StepResult)
    assert res.initial
    assert res.fixed_at_left == fixed_at_left
    if fixed_at_left:
        assert (res.fixed, res.x) == (-1.0, 1.0)
    else:
        assert (res.fixed, res.x) == (1.0, -1.0)
    assert res.converged is False
    assert res.step == 0.0


def test_initial_step_can_fix_left_endpoint(make_problem):
    # f3: f(1) < 0 та 2·1 − 5·cos(1) < 0
    p = make_problem("f3", 1.0, 3.0)
    res = chord_step(p)
    assert res.fixed_at_left is True
    assert res.fixed == 1.0
    assert res.x == 3.0


def test_chord_step_does_not_mutate_problem(make_problem):
    p = make_problem("f2", 0.0, 1.0)
    before = p.copy()
    chord_step(p)
    assert p == before
    assert p.iteration == NOT_STARTED


def test_apply_initial_step_starts_problem(make_problem):
    p = make_problem("f2", 0.0, 1.0)
    assert p.status is ProblemStatus.NOT_STARTED

    p.apply(chord_step(p))

    assert p.iteration == 0
    assert p.fixed == 1.0
    assert p.x == 0.0
    assert p.status is ProblemStatus.RUNNING


# ---------------------------------------------------------------------------
# Звичайний крок
# ---------------------------------------------------------------------------

def test_first_real_step_value_and_segments(make_problem):
    p = make_problem("f3", 1.0, 3.0)
    p.apply(chord_step(p))

    res = chord_step(p)

    assert isinstance(res, StepResult)
    expected = 3.0 - f("f3", 3.0) / (f("f3", 3.0) - f("f3", 1.0)) * (3.0 - 1.0)
    assert res.x == pytest.approx(expected, rel=1e-12)
    assert res.x == pytest.approx(1.5577, abs=1e-3)
    assert res.f_x == f("f3", res.x)
    assert res.step == pytest.approx(3.0 - res.x)

    assert res.chord.start == (1.0, f("f3", 1.0))
    assert res.chord.end == (res.x, res.f_x)
    assert res.drop.start == (res.x, res.f_x)
    assert res.drop.end == (res.x, 0.0)
    assert res.segments == [res.chord, res.drop]


def test_iteration_increments_by_one_per_successful_step(make_problem):
    p = make_problem("f4", 1.0, 2.0)
    p.apply(chord_step(p))
    for expected in range(1, 4):
        p.apply(chord_step(p))
        assert p.iteration == expected


def test_fixed_endpoint_never_changes_after_initialization(make_problem):
    p = make_problem("f4", 1.0, 2.0)
    p.apply(chord_step(p))
    fixed, branch = p.fixed, p.fixed_at_left

    while not p.is_terminal:
        p.apply(chord_step(p))
        assert p.fixed == fixed
        assert p.fixed_at_left == branch


def test_sign_is_not_retested_after_initialization(monkeypatch, make_problem):
    p = make_problem("f2", 0.0, 1.0)
    p.apply(chord_step(p))

    def _boom(*args):
        raise AssertionError("f'' evaluated after initialization")

    monkeypatch.setattr(chord, "f_der2", _boom)
    for _ in range(3):
        p.apply(chord_step(p))
    assert p.iteration == 3


def test_large_eps_converges_on_first_real_step(make_problem):
    p = make_problem("f2", 0.0, 1.0, eps=1.0)
    p.apply(chord_step(p))
    res = chord_step(p)
    assert res.converged is True
    p.apply(res)
    assert p.status is ProblemStatus.CONVERGED


# ---------------------------------------------------------------------------
# Невдачі
# ---------------------------------------------------------------------------

def test_out_of_bracket_failure_on_first_real_step(make_problem):
    # f(-1) = -3, f(1) = -11: хорда перетинає Ox лівіше за a
    p = make_problem("f2", -1.0, 1.0)
    p.apply(chord_step(p))
    x_before = p.x

    res = chord_step(p)

    assert isinstance(res, StepFailure)
    assert res.kind is FailureKind.OUT_OF_BRACKET
    assert res.x_rejected == pytest.approx(-1.75)
    assert res.x_last == x_before

    p.apply(res)
    assert p.failed is True
    assert p.x == x_before
    assert p.iteration == 0
    assert p.status is ProblemStatus.FAILED


def test_failure_after_successful_step_keeps_last_iterate(make_problem):
    p = make_problem("f3", 1.0, 3.0)
    p.apply(chord_step(p))
    p.apply(chord_step(p))
    x_valid = p.x

    res = chord_step(p)

    assert isinstance(res, StepFailure)
    assert res.x_rejected > 3.0
    p.apply(res)
    assert p.x == x_valid
    assert p.iteration == 1


def test_bracket_test_wins_over_convergence(make_problem):
    p = make_problem("f2", -1.0, 1.0, eps=10.0)
    p.apply(chord_step(p))
    res = chord_step(p)
    assert isinstance(res, StepFailure)


# ---------------------------------------------------------------------------
# NaN / ∞
# ---------------------------------------------------------------------------

def test_nan_iterate_is_committed_by_default(make_problem):
    p = make_problem("f4", -1.0, 1.0)
    p.apply(chord_step(p))
    assert p.x == -1.0

    res = chord_step(p)

    assert isinstance(res, StepResult)
    assert math.isnan(res.x)
    assert res.converged is False
    p.apply(res)
    assert p.failed is False
    assert p.iteration == 1
    assert not p.has_finite_iterate


def test_nan_iterate_fails_in_strict_mode(make_problem):
    p = make_problem("f4", -1.0, 1.0)
    p.apply(chord_step(p, strict_finite=True))

    res = chord_step(p, strict_finite=True)

    assert isinstance(res, StepFailure)
    assert res.kind is FailureKind.NON_FINITE
    p.apply(res)
    assert p.failed is True
    assert p.x == -1.0


def test_zero_denominator_does_not_raise():
    p = Problem(equation_key="f2", a=0.0, b=1.0, eps=0.001,
                fixed=0.5, fixed_at_left=True, x=0.5, iteration=0)
    res = chord_step(p)
    assert isinstance(res, StepResult)
    assert math.isnan(res.x)
