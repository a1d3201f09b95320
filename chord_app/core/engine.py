"""
engine.py

Ітераційний двигун методу хорд.

Функціонал:
    - виконує один крок (next_iteration) або цикл до зупинки (solve);
    - не дає кроку для термінальної задачі (збіжність / помилка / NaN);
    - формує трасу ітерацій (для таблиць і графіків);
    - фіксує причину зупинки (converged, out_of_bracket, non_finite, max_iter);
    - підтримує callback для оновлення GUI на кожній ітерації.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Optional

from loguru import logger

from .chord import FailureKind, StepFailure, StepOutcome, StepResult, chord_step
from .iteration_result import IterationResult, Segment
from .problem import Problem


@dataclass
class ChordRunResult:
    """
    Підсумок одного запуску solve().

    Атрибути:
        equation_key  - ключ рівняння.
        iterations    - IterationResult для кожного прийнятого кроку цього запуску.
        x_star        - останнє прийняте наближення (None, якщо кроків не було).
        f_star        - f(x_star).
        n_iter        - номер останньої ітерації задачі (Problem.iteration).
        stopped_by    - причина зупинки ("converged", "out_of_bracket",
                        "non_finite", "max_iter", "terminal").
        failure       - StepFailure, якщо зупинка через невдалий крок.
    """
    equation_key: str
    iterations: List[IterationResult]
    x_star: Optional[float]
    f_star: Optional[float]
    n_iter: int
    stopped_by: str
    failure: Optional[StepFailure] = None
    segments: List[Segment] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.stopped_by == "converged"


# Тип callback'а для GUI/логів
IterationCallback = Callable[[IterationResult], None]


def to_iteration_result(problem: Problem, step: StepResult) -> IterationResult:
    """Перетворити StepResult (вже зафіксований у problem) на запис траси."""
    meta = dict(step.meta)
    meta.setdefault("fixed", step.fixed)
    meta.setdefault("converged", step.converged)
    return IterationResult(
        index=problem.iteration,
        x=step.x,
        f=step.f_x,
        step=step.step,
        segments=step.segments,
        meta=meta,
    )


class ChordEngine:
    """
    Движок, який керує ітераційним процесом для Problem.

    Налаштування за замовчуванням (можуть бути переозначені у solve()):
        max_iter       : стеля кількості кроків у solve() (default: 10000)
        strict_finite  : NaN/∞ наближення вважається невдачею всередині кроку (default: False)
    """

    def __init__(self, max_iter: int = 10_000, strict_finite: bool = False) -> None:
        self.max_iter_default = max_iter
        self.strict_finite = strict_finite

    # ------------------------------------------------------------------
    # Один крок
    # ------------------------------------------------------------------

    def can_step(self, problem: Problem) -> bool:
        """
        Чи можна робити наступний крок.

        Окрім прапорців converged/failed перевіряється й саме наближення:
        NaN/∞ не ловиться перевіркою меж, тому блокується тут.
        """
        return not problem.is_terminal and problem.has_finite_iterate

    def next_iteration(
        self,
        problem: Problem,
        callback: Optional[IterationCallback] = None,
    ) -> Optional[StepOutcome]:
        """
        Виконати один крок і зафіксувати його в problem.

        Повертає StepResult / StepFailure або None, якщо крок заборонено.
        """
        if not self.can_step(problem):
            logger.debug(
                "{}: крок пропущено (status={}, x={})",
                problem.equation_key, problem.status.value, problem.x,
            )
            return None

        outcome = chord_step(problem, strict_finite=self.strict_finite)
        problem.apply(outcome)

        if isinstance(outcome, StepFailure):
            logger.warning(
                "{}: ітерація {} невдала ({}): {}",
                problem.equation_key, problem.iteration + 1,
                outcome.kind.value, outcome.message,
            )
            return outcome

        if outcome.initial:
            logger.debug(
                "{}: ініціалізація, fixed={}, x0={}",
                problem.equation_key, outcome.fixed, outcome.x,
            )
        else:
            logger.debug(
                "{}: k={}, x={:.10g}, f(x)={:.4e}, |dx|={:.3e}",
                problem.equation_key, problem.iteration,
                outcome.x, outcome.f_x, outcome.step,
            )

        if outcome.converged:
            logger.info(
                "{}: досягнуто точності eps={} на ітерації {}, x*={:.10g}",
                problem.equation_key, problem.eps, problem.iteration, outcome.x,
            )

        if callback is not None:
            callback(to_iteration_result(problem, outcome))

        return outcome

    # ------------------------------------------------------------------
    # Цикл до зупинки
    # ------------------------------------------------------------------

    def solve(
        self,
        problem: Problem,
        max_iter: Optional[int] = None,
        callback: Optional[IterationCallback] = None,
    ) -> ChordRunResult:
        """
        Виконувати кроки до збіжності, невдачі, NaN або max_iter кроків.
        """
        max_iter = max_iter if max_iter is not None else self.max_iter_default

        iterations: List[IterationResult] = []
        segments: List[Segment] = []
        failure: Optional[StepFailure] = None

        def _collect(it: IterationResult) -> None:
            iterations.append(it)
            segments.extend(it.segments)
            if callback is not None:
                callback(it)

        if not self.can_step(problem):
            stopped_by = "terminal"
        else:
            stopped_by = "max_iter"
            for _ in range(max_iter):
                outcome = self.next_iteration(problem, callback=_collect)

                if isinstance(outcome, StepFailure):
                    failure = outcome
                    stopped_by = outcome.kind.value
                    break
                if problem.converged:
                    stopped_by = "converged"
                    break
                if not problem.has_finite_iterate:
                    stopped_by = FailureKind.NON_FINITE.value
                    break
            else:
                logger.warning(
                    "{}: досягнуто ліміту {} ітерацій без збіжності",
                    problem.equation_key, max_iter,
                )

        x_star = iterations[-1].x if iterations else problem.x
        f_star = iterations[-1].f if iterations else None

        return ChordRunResult(
            equation_key=problem.equation_key,
            iterations=iterations,
            x_star=x_star,
            f_star=f_star,
            n_iter=problem.iteration,
            stopped_by=stopped_by,
            failure=failure,
            segments=segments,
        )


__all__ = [
    "ChordRunResult",
    "IterationCallback",
    "ChordEngine",
    "to_iteration_result",
]
