"""
chord.py

Один крок методу хорд (хибного положення) з нерухомим кінцем.

Ідея:
    На кроці ініціалізації обирається нерухомий кінець за знаком f(a)·f''(a):
        f(a)·f''(a) > 0  ->  fixed = a, x_0 = b
        інакше           ->  fixed = b, x_0 = a
    Далі:
        x_{k+1} = x_k - f(x_k) / (f(x_k) - f(fixed)) * (x_k - fixed)

    Гілка обирається ОДИН раз і далі не перевіряється повторно.

Формат:
    chord_step(problem) -> StepResult | StepFailure

Функція чиста: Problem не змінюється, фіксацію робить Problem.apply().
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

import numpy as np

from .functions import f, f_der2
from .iteration_result import Segment
from .problem import NOT_STARTED, Problem


class FailureKind(str, Enum):
    OUT_OF_BRACKET = "out_of_bracket"
    NON_FINITE = "non_finite"


# ---------------------------------------------------------------------------
# Результати одного кроку
# ---------------------------------------------------------------------------

@dataclass
class StepResult:
    """
    Успішний крок методу хорд.

    Атрибути:
        x             - нове наближення x_{k+1}
        f_x           - f(x_{k+1})
        converged     - |x_{k+1} - x_k| <= eps
        chord         - відрізок (fixed, f(fixed)) -> (x_{k+1}, f(x_{k+1}))
        drop          - відрізок (x_{k+1}, f(x_{k+1})) -> (x_{k+1}, 0)
        fixed         - нерухомий кінець
        fixed_at_left - обрана гілка (fixed == a)
        step          - |x_{k+1} - x_k| (0.0 для ініціалізації)
        initial       - True для кроку ініціалізації
        meta          - додаткова інформація
    """
    x: float
    f_x: float
    converged: bool
    chord: Segment
    drop: Segment
    fixed: float
    fixed_at_left: bool
    step: float = 0.0
    initial: bool = False
    meta: Dict[str, Any] = field(default_factory=dict)

    ok = True

    @property
    def segments(self) -> List[Segment]:
        return [self.chord, self.drop]


@dataclass
class StepFailure:
    """
    Невдалий крок: нове наближення відкинуто, задача стає термінальною.

    Атрибути:
        kind        - причина (FailureKind)
        x_rejected  - обчислене, але не прийняте наближення
        x_last      - останнє прийняте наближення
    """
    kind: FailureKind
    x_rejected: float
    x_last: Optional[float]
    message: str = ""

    ok = False


StepOutcome = Union[StepResult, StepFailure]


# ---------------------------------------------------------------------------
# Допоміжні обчислення
# ---------------------------------------------------------------------------

def _secant_x(key: str, x1: float, fixed: float, fixed_at_left: bool) -> float:
    """
    Точка перетину хорди з віссю Ox.

    Ділення на нуль дає ±∞/NaN (семантика IEEE), а не ZeroDivisionError.
    """
    f1 = np.float64(f(key, x1))
    ff = np.float64(f(key, fixed))
    x1 = np.float64(x1)
    fixed = np.float64(fixed)

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        if fixed_at_left:
            x2 = x1 - f1 / (f1 - ff) * (x1 - fixed)
        else:
            x2 = x1 - f1 / (ff - f1) * (fixed - x1)

    return float(x2)


def _make_result(
    key: str,
    x2: float,
    fixed: float,
    fixed_at_left: bool,
    converged: bool,
    step: float,
    initial: bool,
) -> StepResult:
    f_fixed = f(key, fixed)
    f_x2 = f(key, x2)
    return StepResult(
        x=x2,
        f_x=f_x2,
        converged=converged,
        chord=Segment((fixed, f_fixed), (x2, f_x2), kind="chord"),
        drop=Segment((x2, f_x2), (x2, 0.0), kind="drop"),
        fixed=fixed,
        fixed_at_left=fixed_at_left,
        step=step,
        initial=initial,
    )


# ---------------------------------------------------------------------------
# Головна функція кроку
# ---------------------------------------------------------------------------

def chord_step(problem: Problem, strict_finite: bool = False) -> StepOutcome:
    """
    Виконати один крок методу хорд для задачі problem.

    Parameters
    ----------
    problem : Problem
        Поточний стан задачі (не змінюється).
    strict_finite : bool
        Якщо True, нескінченне/NaN наближення вважається невдачею
        (FailureKind.NON_FINITE). За замовчуванням NaN проходить перевірку
        меж (порівняння з NaN хибні) і приймається як звичайний крок.

    Returns
    -------
    StepResult | StepFailure
    """
    key = problem.equation_key
    a, b = problem.a, problem.b

    if problem.iteration == NOT_STARTED:
        fixed_at_left = f(key, a) * f_der2(key, a) > 0.0
        if fixed_at_left:
            fixed, x2 = a, b
        else:
            fixed, x2 = b, a
        result = _make_result(key, x2, fixed, fixed_at_left,
                              converged=False, step=0.0, initial=True)
        result.meta["initial"] = True
        return result

    x1 = float(problem.x)
    fixed = float(problem.fixed)
    fixed_at_left = bool(problem.fixed_at_left)

    x2 = _secant_x(key, x1, fixed, fixed_at_left)
    step = abs(x2 - x1)
    converged = step <= problem.eps

    if x2 > b or x2 < a:
        return StepFailure(
            kind=FailureKind.OUT_OF_BRACKET,
            x_rejected=x2,
            x_last=x1,
            message=f"Наближення x={x2:.6g} вийшло за межі [{a}, {b}]",
        )

    if strict_finite and not math.isfinite(x2):
        return StepFailure(
            kind=FailureKind.NON_FINITE,
            x_rejected=x2,
            x_last=x1,
            message=f"Наближення не є скінченним числом (x={x2})",
        )

    return _make_result(key, x2, fixed, fixed_at_left,
                        converged=converged, step=step, initial=False)


__all__ = [
    "FailureKind",
    "StepResult",
    "StepFailure",
    "StepOutcome",
    "chord_step",
]
