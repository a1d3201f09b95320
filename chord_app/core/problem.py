"""
problem.py

Стан задачі пошуку кореня методом хорд для одного рівняння.

Problem належить викликачу (GUI / сесії): движок лише читає його
та повертає результат кроку, а фіксацію виконує Problem.apply().

Життєвий цикл:
    NOT_STARTED -> RUNNING -> {CONVERGED, FAILED}
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import TYPE_CHECKING, Optional, Union

from .errors import ProblemConfigError
from .functions import get_equation

if TYPE_CHECKING:
    from .chord import StepFailure, StepResult

# Сентинел "ще не стартували"
NOT_STARTED = -1


class ProblemStatus(str, Enum):
    NOT_STARTED = "not_started"
    RUNNING = "running"
    CONVERGED = "converged"
    FAILED = "failed"


@dataclass
class Problem:
    """
    Задача f(x) = 0 на відрізку [a, b] з точністю eps.

    Атрибути:
        equation_key   - ключ рівняння у core.functions.EQUATIONS
        a, b           - межі відрізка (a < b)
        eps            - точність за відстанню між сусідніми наближеннями
        fixed          - нерухомий кінець хорди (a або b)
        fixed_at_left  - гілка, обрана на кроці ініціалізації (f(a)·f''(a) > 0);
                         None до ініціалізації
        x              - поточне наближення
        iteration      - номер ітерації (NOT_STARTED до ініціалізації)
        converged      - досягнуто точності eps
        failed         - наближення вийшло за [a, b]
    """
    equation_key: str
    a: float
    b: float
    eps: float
    fixed: Optional[float] = None
    fixed_at_left: Optional[bool] = None
    x: Optional[float] = None
    iteration: int = NOT_STARTED
    converged: bool = False
    failed: bool = False

    def __post_init__(self) -> None:
        # кидає UnknownEquationError для невідомого ключа
        get_equation(self.equation_key)

        self.a = float(self.a)
        self.b = float(self.b)
        self.eps = float(self.eps)

        if not (math.isfinite(self.a) and math.isfinite(self.b)):
            raise ProblemConfigError("Межі відрізка a, b повинні бути скінченними числами.")
        if self.a >= self.b:
            raise ProblemConfigError(
                f"Ліва межа повинна бути меншою за праву: a={self.a}, b={self.b}."
            )
        if not (self.eps > 0.0) or not math.isfinite(self.eps):
            raise ProblemConfigError(f"Точність eps повинна бути додатною: eps={self.eps}.")

    # ------------------------------------------------------------------
    # Стан
    # ------------------------------------------------------------------

    @property
    def started(self) -> bool:
        return self.iteration != NOT_STARTED

    @property
    def status(self) -> ProblemStatus:
        if self.failed:
            return ProblemStatus.FAILED
        if self.converged:
            return ProblemStatus.CONVERGED
        if not self.started:
            return ProblemStatus.NOT_STARTED
        return ProblemStatus.RUNNING

    @property
    def is_terminal(self) -> bool:
        return self.converged or self.failed

    @property
    def has_finite_iterate(self) -> bool:
        """Поточне наближення скінченне (або ще не задане)."""
        return self.x is None or math.isfinite(self.x)

    # ------------------------------------------------------------------
    # Життєвий цикл
    # ------------------------------------------------------------------

    def reset(self) -> "Problem":
        """
        Повернути нову задачу в стані NOT_STARTED з тими ж (key, a, b, eps).
        """
        return Problem(
            equation_key=self.equation_key,
            a=self.a,
            b=self.b,
            eps=self.eps,
        )

    def with_bounds(self, a: float, b: float, eps: float) -> "Problem":
        """Нова задача з іншими межами/точністю (повне скидання стану)."""
        return Problem(equation_key=self.equation_key, a=a, b=b, eps=eps)

    def apply(self, outcome: Union["StepResult", "StepFailure"]) -> None:
        """
        Зафіксувати результат кроку chord_step().

        StepFailure: лише встановлює failed; x та iteration не змінюються.
        StepResult: записує нове наближення, нерухомий кінець (лише на
        кроці ініціалізації) і збільшує лічильник ітерацій.
        """
        if not outcome.ok:
            self.failed = True
            return

        if outcome.initial:
            self.fixed = outcome.fixed
            self.fixed_at_left = outcome.fixed_at_left

        self.x = outcome.x
        self.converged = outcome.converged
        self.iteration += 1

    def copy(self) -> "Problem":
        return replace(self)


__all__ = [
    "NOT_STARTED",
    "ProblemStatus",
    "Problem",
]
