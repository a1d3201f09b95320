# tests/test_session.py
import math

import numpy as np
import pytest

from chord_app.core.errors import ProblemConfigError, UnknownEquationError
from chord_app.core.functions import f
from chord_app.core.problem import NOT_STARTED
from chord_app.core.session import ChordSession, sample_graph


@pytest.fixture
def session(engine):
    return ChordSession(engine, a=-1.0, b=1.0, eps=0.001)


def test_session_holds_independent_problem_per_equation(session):
    assert set(session.runs) == {"f1", "f2", "f3", "f4"}
    assert session.current_key == "f1"
    problems = [run.problem for run in session.runs.values()]
    assert len({id(p) for p in problems}) == 4
    for p in problems:
        assert (p.a, p.b, p.eps, p.iteration) == (-1.0, 1.0, 0.001, NOT_STARTED)


def test_stepping_one_equation_does_not_touch_others(session):
    session.select("f2")
    session.apply_bounds(0.0, 1.0, 0.001)
    session.next_iteration()
    session.next_iteration()

    assert session.runs["f2"].problem.iteration == 1
    assert session.runs["f3"].problem.iteration == NOT_STARTED

    session.select("f3")
    session.select("f2")
    assert session.current.problem.iteration == 1


def test_select_unknown_equation(session):
    with pytest.raises(UnknownEquationError):
        session.select("f9")
    assert session.current_key == "f1"


def test_apply_bounds_resets_run(session):
    session.select("f2")
    session.apply_bounds(0.0, 1.0, 0.001)
    session.solve()
    assert session.current.iterations

    run = session.apply_bounds(0.0, 1.0, 0.01)

    assert run.problem.iteration == NOT_STARTED
    assert run.problem.eps == 0.01
    assert run.iterations == []
    assert run.segments == []
    assert run.last_failure is None


def test_apply_bounds_rejects_invalid_data_and_keeps_state(session):
    session.select("f2")
    session.apply_bounds(0.0, 1.0, 0.001)
    session.next_iteration()
    before = session.current

    with pytest.raises(ProblemConfigError):
        session.apply_bounds(1.0, 0.0, 0.001)
    with pytest.raises(ProblemConfigError):
        session.apply_bounds(0.0, 1.0, 0.0)

    assert session.current is before
    assert session.current.problem.iteration == 0


def test_session_records_iterations_and_segments(session):
    session.select("f4")
    session.apply_bounds(1.0, 2.0, 0.001)
    result = session.solve()

    run = session.current
    assert result.stopped_by == "converged"
    assert len(run.iterations) == run.problem.iteration + 1
    assert len(run.segments) == 2 * len(run.iterations)
    assert run.segments[-1].end == (run.problem.x, 0.0)


def test_session_keeps_last_failure(session):
    session.select("f2")
    outcome = session.next_iteration()
    assert outcome.ok
    outcome = session.next_iteration()
    assert not outcome.ok
    assert session.current.last_failure is outcome
    assert session.next_iteration() is None


def test_reset_reproduces_identical_iterates(session):
    session.select("f2")
    session.apply_bounds(0.0, 1.0, 0.001)
    session.solve()
    first = [it.x for it in session.current.iterations]

    session.reset()
    assert session.current.iterations == []
    session.solve()
    second = [it.x for it in session.current.iterations]

    assert first == second


# ---------------------------------------------------------------------------
# Графік
# ---------------------------------------------------------------------------

def test_sample_graph_uniform_points_exclude_right_border():
    graph = sample_graph("f2", -1.0, 1.0, points=100)

    assert graph.xs.shape == (100,)
    assert graph.xs[0] == -1.0
    assert graph.xs[-1] == pytest.approx(1.0 - 0.02)
    assert np.allclose(np.diff(graph.xs), 0.02)
    assert graph.ys[0] == f("f2", -1.0)


def test_sample_graph_borders_span_max_abs_value():
    graph = sample_graph("f2", -1.0, 1.0, points=100)
    expected = float(np.max(np.abs(graph.ys)))

    assert graph.max_abs_y == expected
    assert graph.left_border.start == (-1.0, -expected)
    assert graph.left_border.end == (-1.0, expected)
    assert graph.right_border.start == (1.0, -expected)
    assert graph.right_border.end == (1.0, expected)


def test_sample_graph_ignores_nan_values():
    graph = sample_graph("f4", -1.0, 1.0, points=100)
    assert math.isnan(graph.ys[0])
    assert math.isfinite(graph.max_abs_y)
    assert graph.max_abs_y > 0.0
