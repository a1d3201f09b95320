"""
table_view.py

Таблиця ітерацій методу хорд.

Функціонал:
    - відображає послідовність IterationResult;
    - колонки:
        k, x, f(x), |Δx|;
    - хелпери:
        clear_table()
        add_iteration(iteration)
        populate(iterations)
"""

from __future__ import annotations

import math
from typing import Any, Iterable, Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QLabel,
    QTableWidget,
    QTableWidgetItem,
    QHeaderView,
    QAbstractItemView,
)

from chord_app.core.iteration_result import IterationResult
from .styles import MARGIN, SPACING, apply_table_style, apply_label_muted


def _fmt(value: float, fmt: str) -> str:
    if not math.isfinite(value):
        return "Помилка"
    return format(value, fmt)


class IterationsTableWidget(QWidget):
    """
    Обгортка над QTableWidget для траси методу хорд.

    Колонки:
        0: k      – номер ітерації
        1: x      – наближення кореня
        2: f(x)   – значення функції
        3: |Δx|   – відстань до попереднього наближення
    """

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._build_ui()

    # ------------------------------------------------------------------
    # Побудова UI
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        root = QVBoxLayout(self)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        header_row = QHBoxLayout()
        header_row.setContentsMargins(0, 0, 0, 0)
        header_row.setSpacing(SPACING)

        title = QLabel("Ітерації методу хорд", self)
        title.setAlignment(Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter)

        self.subtitle = QLabel("k, наближення x, f(x) та |Δx|", self)
        self.subtitle.setAlignment(Qt.AlignmentFlag.AlignRight | Qt.AlignmentFlag.AlignVCenter)
        apply_label_muted(self.subtitle)

        header_row.addWidget(title)
        header_row.addStretch(1)
        header_row.addWidget(self.subtitle)

        root.addLayout(header_row)

        self.table = QTableWidget(self)
        self.table.setColumnCount(4)
        self.table.setHorizontalHeaderLabels(["k", "x", "f(x)", "|Δx|"])

        apply_table_style(self.table)

        h_header = self.table.horizontalHeader()
        h_header.setSectionResizeMode(0, QHeaderView.ResizeMode.ResizeToContents)  # k
        h_header.setSectionResizeMode(1, QHeaderView.ResizeMode.Stretch)          # x
        h_header.setSectionResizeMode(2, QHeaderView.ResizeMode.Stretch)          # f(x)
        h_header.setSectionResizeMode(3, QHeaderView.ResizeMode.Stretch)          # |Δx|

        self.table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.table.setSelectionMode(QAbstractItemView.SelectionMode.SingleSelection)
        self.table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.table.verticalHeader().setDefaultSectionSize(22)

        root.addWidget(self.table)

    # ------------------------------------------------------------------
    # Публічне API
    # ------------------------------------------------------------------

    def clear_table(self) -> None:
        """Очистити всі рядки таблиці."""
        self.table.setRowCount(0)

    def add_iteration(self, iteration: IterationResult) -> None:
        """
        Додати один рядок у таблицю за IterationResult.
        """
        row = self.table.rowCount()
        self.table.insertRow(row)

        def _item(text: Any, align: Qt.AlignmentFlag) -> QTableWidgetItem:
            it = QTableWidgetItem(str(text))
            it.setFlags(it.flags() & ~Qt.ItemFlag.ItemIsEditable)
            it.setTextAlignment(align | Qt.AlignmentFlag.AlignVCenter)
            return it

        self.table.setItem(row, 0, _item(iteration.index, Qt.AlignmentFlag.AlignHCenter))
        self.table.setItem(row, 1, _item(_fmt(iteration.x, ".10f"), Qt.AlignmentFlag.AlignRight))
        self.table.setItem(row, 2, _item(_fmt(iteration.f, ".6e"), Qt.AlignmentFlag.AlignRight))

        if iteration.meta.get("initial"):
            step_text = "—"
        else:
            step_text = _fmt(iteration.step, ".3e")
        self.table.setItem(row, 3, _item(step_text, Qt.AlignmentFlag.AlignRight))

        self.table.scrollToBottom()

    def populate(self, iterations: Iterable[IterationResult]) -> None:
        """
        Повністю перезаповнити таблицю трасою ітерацій.
        """
        self.clear_table()
        for it in iterations:
            self.add_iteration(it)
