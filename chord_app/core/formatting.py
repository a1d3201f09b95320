"""
formatting.py

Текстові підписи під графіком: x, f(x), номер ітерації, статус.
Кількість знаків після коми залежить від eps.
"""

from __future__ import annotations

import math

import numpy as np

from .functions import f
from .problem import Problem

STATUS_ERROR = "Сталася помилка!"
STATUS_CONVERGED = "Досягнуто точності!"


def x_decimals(eps: float) -> int:
    """
    Кількість знаків для x: знаки дробової частини eps + 1
    (2 + 1, якщо дробової частини немає).

        x_decimals(0.001) == 4
        x_decimals(1.0)   == 3
    """
    text = np.format_float_positional(eps, trim="-")
    parts = text.split(".")
    dec = len(parts[1]) if len(parts) == 2 else 2
    return dec + 1


def format_iterate(problem: Problem) -> str:
    if problem.x is None:
        return ""
    digits = x_decimals(problem.eps)
    fx = f(problem.equation_key, problem.x)
    return f"x = {problem.x:.{digits}f}, f(x) = {fx:.{digits}f}"


def format_iteration(problem: Problem) -> str:
    return f"Ітерація {problem.iteration}"


def format_status(problem: Problem) -> str:
    if problem.failed or (problem.x is not None and not math.isfinite(problem.x)):
        return STATUS_ERROR
    if problem.converged:
        return STATUS_CONVERGED
    return ""


__all__ = [
    "STATUS_ERROR",
    "STATUS_CONVERGED",
    "x_decimals",
    "format_iterate",
    "format_iteration",
    "format_status",
]
