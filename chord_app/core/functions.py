"""
functions.py

Модуль з визначенням тестових рівнянь f(x) = 0 та їх других похідних.
Формат:
    - усі функції приймають скаляр або numpy.ndarray і працюють поелементно;
    - реалізовані:
        f1, ..., f4
        der2_f1, ..., der2_f4
    - є реєстр EQUATIONS для зручного вибору рівняння в GUI/движку;
    - f(key, x), f_der2(key, x): обчислення за ключем рівняння.

Вихід за область визначення (ln(x) при x <= 0) НЕ перехоплюється:
результатом буде NaN/∞, який далі поширюється в обчисленнях.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, Union

import numpy as np

from .errors import UnknownEquationError

ArrayLike = Union[float, np.ndarray]
RealFunction = Callable[[ArrayLike], ArrayLike]


# ---------------------------------------------------------------------------
# Рівняння f1–f4
# ---------------------------------------------------------------------------

def f1(x: ArrayLike) -> ArrayLike:
    """
    f1(x) = exp(-x) * cos(pi * x)
    """
    return np.exp(-x) * np.cos(x * np.pi)


def f2(x: ArrayLike) -> ArrayLike:
    """
    f2(x) = 3x^4 - 4x^3 - 12x^2 + 2
    """
    return 3.0 * x ** 4 - 4.0 * x ** 3 - 12.0 * x * x + 2.0


def f3(x: ArrayLike) -> ArrayLike:
    """
    f3(x) = x^2 - 5 sin(x)
    """
    return x * x - 5.0 * np.sin(x)


def f4(x: ArrayLike) -> ArrayLike:
    """
    f4(x) = 0.1x^2 - x ln(x)
    (визначена лише для x > 0)
    """
    return 0.1 * x * x - x * np.log(x)


# ---------------------------------------------------------------------------
# Другі похідні у замкненій формі
# ---------------------------------------------------------------------------

def der2_f1(x: ArrayLike) -> ArrayLike:
    # sin(pi) тут саме константа (~1.2e-16), а не sin(pi * x)
    return -(np.cos(np.pi * x) + np.pi * np.sin(np.pi)) * np.exp(-x)


def der2_f2(x: ArrayLike) -> ArrayLike:
    return 12.0 * x ** 3 - 12.0 * x ** 2 - 24.0 * x


def der2_f3(x: ArrayLike) -> ArrayLike:
    return 2.0 * x - 5.0 * np.cos(x)


def der2_f4(x: ArrayLike) -> ArrayLike:
    return 0.2 * x - np.log(x) - 1.0


# ---------------------------------------------------------------------------
# Реєстр рівнянь для вибору в GUI / движку
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Equation:
    key: str
    title: str
    func: RealFunction
    der2: RealFunction


EQUATIONS: Dict[str, Equation] = {
    "f1": Equation(
        key="f1",
        title="exp(-x) · cos(πx)",
        func=f1,
        der2=der2_f1,
    ),
    "f2": Equation(
        key="f2",
        title="3x⁴ − 4x³ − 12x² + 2",
        func=f2,
        der2=der2_f2,
    ),
    "f3": Equation(
        key="f3",
        title="x² − 5·sin(x)",
        func=f3,
        der2=der2_f3,
    ),
    "f4": Equation(
        key="f4",
        title="0.1x² − x·ln(x)",
        func=f4,
        der2=der2_f4,
    ),
}


def get_equation(key: str) -> Equation:
    """Повернути Equation за ключем або кинути UnknownEquationError."""
    try:
        return EQUATIONS[key]
    except KeyError:
        raise UnknownEquationError(key) from None


def f(key: str, x: float) -> float:
    """Обчислити f(x) для рівняння key (NaN/∞ поширюються без винятків)."""
    eq = get_equation(key)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(eq.func(np.float64(x)))


def f_der2(key: str, x: float) -> float:
    """Обчислити f''(x) для рівняння key."""
    eq = get_equation(key)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return float(eq.der2(np.float64(x)))


def evaluate_array(key: str, xs: np.ndarray) -> np.ndarray:
    """
    Векторизоване обчислення f на масиві точок (для побудови графіка).
    """
    eq = get_equation(key)
    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        return np.asarray(eq.func(np.asarray(xs, dtype=float)), dtype=float)


__all__ = [
    "ArrayLike",
    "RealFunction",
    "f1", "f2", "f3", "f4",
    "der2_f1", "der2_f2", "der2_f3", "der2_f4",
    "Equation",
    "EQUATIONS",
    "get_equation",
    "f",
    "f_der2",
    "evaluate_array",
]
