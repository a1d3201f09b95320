"""
errors.py

Ієрархія винятків ядра.

Збої самого ітераційного процесу (вихід за відрізок, NaN/∞) НЕ є винятками:
движок повертає StepFailure. Винятки тут: лише для некоректної конфігурації.
"""

from __future__ import annotations


class ChordError(Exception):
    """Базовий виняток застосунку."""


class UnknownEquationError(ChordError, KeyError):
    """Невідомий ключ рівняння (очікується f1..f4)."""

    def __init__(self, key: str) -> None:
        super().__init__(key)
        self.key = key

    def __str__(self) -> str:
        return f"Невідоме рівняння: '{self.key}'"


class ProblemConfigError(ChordError, ValueError):
    """Некоректні межі відрізка [a, b] або точність eps."""


__all__ = [
    "ChordError",
    "UnknownEquationError",
    "ProblemConfigError",
]
