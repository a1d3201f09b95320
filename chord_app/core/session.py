"""
session.py

Стан сесії GUI: окрема задача (Problem) для кожного з рівнянь f1..f4.

Відображення
    ключ рівняння -> ChordRun
належить контролеру. Движок працює лише з переданим Problem.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

import numpy as np

from .chord import StepFailure, StepOutcome
from .engine import ChordEngine, ChordRunResult, IterationCallback
from .functions import EQUATIONS, evaluate_array, get_equation
from .iteration_result import IterationResult, Segment
from .problem import Problem


# ---------------------------------------------------------------------------
# Графік функції на відрізку
# ---------------------------------------------------------------------------

@dataclass
class GraphSample:
    """
    Рівномірна вибірка f на [a, b] для відображення.

    Атрибути:
        xs, ys      - точки графіка
        max_abs_y   - найбільше скінченне |f| (1.0, якщо таких немає)
        left_border, right_border - вертикальні маркери x = a та x = b
    """
    xs: np.ndarray
    ys: np.ndarray
    max_abs_y: float
    left_border: Segment
    right_border: Segment


def sample_graph(key: str, a: float, b: float, points: int = 100) -> GraphSample:
    """
    Вибірка a + i·(b − a)/points, i = 0..points−1 (права межа не входить).
    """
    step = (b - a) / points
    xs = a + step * np.arange(points, dtype=float)
    ys = evaluate_array(key, xs)

    finite = np.abs(ys[np.isfinite(ys)])
    max_abs_y = float(finite.max()) if finite.size else 1.0
    if max_abs_y == 0.0:
        max_abs_y = 1.0

    return GraphSample(
        xs=xs,
        ys=ys,
        max_abs_y=max_abs_y,
        left_border=Segment((a, -max_abs_y), (a, max_abs_y), kind="border"),
        right_border=Segment((b, -max_abs_y), (b, max_abs_y), kind="border"),
    )


# ---------------------------------------------------------------------------
# Стан одного рівняння
# ---------------------------------------------------------------------------

@dataclass
class ChordRun:
    problem: Problem
    graph: GraphSample
    iterations: List[IterationResult] = field(default_factory=list)
    segments: List[Segment] = field(default_factory=list)
    last_failure: Optional[StepFailure] = None

    @property
    def title(self) -> str:
        return get_equation(self.problem.equation_key).title

    def record(self, it: IterationResult) -> None:
        self.iterations.append(it)
        self.segments.extend(it.segments)


class ChordSession:
    """
    Набір задач для всіх рівнянь + вибране рівняння.

    Використання:
        session = ChordSession(ChordEngine(), a=-1, b=1, eps=1e-3)
        session.select("f2")
        session.apply_bounds(0.0, 1.0, 1e-3)
        session.solve()
    """

    def __init__(
        self,
        engine: ChordEngine,
        a: float = -1.0,
        b: float = 1.0,
        eps: float = 0.001,
        graph_points: int = 100,
    ) -> None:
        self.engine = engine
        self.graph_points = graph_points
        self.runs: Dict[str, ChordRun] = {
            key: self._new_run(Problem(equation_key=key, a=a, b=b, eps=eps))
            for key in EQUATIONS
        }
        self.current_key: str = next(iter(EQUATIONS))

    def _new_run(self, problem: Problem) -> ChordRun:
        graph = sample_graph(problem.equation_key, problem.a, problem.b, self.graph_points)
        return ChordRun(problem=problem, graph=graph)

    # ------------------------------------------------------------------
    # Вибір рівняння
    # ------------------------------------------------------------------

    @property
    def current(self) -> ChordRun:
        return self.runs[self.current_key]

    def select(self, key: str) -> ChordRun:
        get_equation(key)
        self.current_key = key
        return self.current

    # ------------------------------------------------------------------
    # Скидання
    # ------------------------------------------------------------------

    def apply_bounds(self, a: float, b: float, eps: float) -> ChordRun:
        """
        Замінити задачу вибраного рівняння новою з межами (a, b, eps).

        Некоректні дані -> ProblemConfigError, поточний стан не змінюється.
        """
        problem = self.current.problem.with_bounds(a, b, eps)
        self.runs[self.current_key] = self._new_run(problem)
        return self.current

    def reset(self) -> ChordRun:
        """Скинути вибране рівняння з тими ж межами."""
        self.runs[self.current_key] = self._new_run(self.current.problem.reset())
        return self.current

    # ------------------------------------------------------------------
    # Кроки
    # ------------------------------------------------------------------

    def next_iteration(self, callback: Optional[IterationCallback] = None) -> Optional[StepOutcome]:
        run = self.current

        def _collect(it: IterationResult) -> None:
            run.record(it)
            if callback is not None:
                callback(it)

        outcome = self.engine.next_iteration(run.problem, callback=_collect)
        if isinstance(outcome, StepFailure):
            run.last_failure = outcome
        return outcome

    def solve(
        self,
        max_iter: Optional[int] = None,
        callback: Optional[IterationCallback] = None,
    ) -> ChordRunResult:
        run = self.current

        def _collect(it: IterationResult) -> None:
            run.record(it)
            if callback is not None:
                callback(it)

        result = self.engine.solve(run.problem, max_iter=max_iter, callback=_collect)
        if result.failure is not None:
            run.last_failure = result.failure
        return result


__all__ = [
    "GraphSample",
    "sample_graph",
    "ChordRun",
    "ChordSession",
]
