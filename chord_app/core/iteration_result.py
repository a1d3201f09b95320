"""
iteration_result.py

Структури даних для представлення результатів окремих ітерацій
методу хорд. Використовуються як у движку, так і в GUI.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple

Point = Tuple[float, float]


@dataclass(frozen=True)
class Segment:
    """
    Відрізок для відображення на графіку.

    Атрибути:
        start  - початкова точка (x, y)
        end    - кінцева точка (x, y)
        kind   - "chord" (хорда) або "drop" (вертикаль до осі Ox)
    """
    start: Point
    end: Point
    kind: str = "chord"

    def as_xy(self) -> Tuple[List[float], List[float]]:
        """Координати у форматі matplotlib: ([x0, x1], [y0, y1])."""
        return [self.start[0], self.end[0]], [self.start[1], self.end[1]]


@dataclass
class IterationResult:
    """
    Опис однієї ітерації методу хорд.

    Атрибути:
        index      - номер ітерації (0 = ініціалізація, 1, 2, ...)
        x          - наближення кореня x_k
        f          - значення функції f(x_k)
        step       - |x_k - x_{k-1}| (для k=0 = 0.0)
        segments   - відрізки для графіка (хорда + вертикаль)
        meta       - довільна додаткова інформація (fixed, initial, ...)
    """
    index: int
    x: float
    f: float
    step: float
    segments: List[Segment] = field(default_factory=list)
    meta: Dict[str, Any] = field(default_factory=dict)


__all__ = [
    "Point",
    "Segment",
    "IterationResult",
]
