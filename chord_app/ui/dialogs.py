"""
ui/dialogs.py

Стандартні діалоги для GUI-застосунку:

    - show_error     – повідомлення про помилку
    - show_info      – інформаційне повідомлення
    - show_help      – коротка інструкція користувача
    - show_about     – вікно "Про програму"
"""

from __future__ import annotations

from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtWidgets import (
    QWidget,
    QMessageBox,
    QDialog,
    QHBoxLayout,
    QVBoxLayout,
    QLabel,
    QDialogButtonBox,
    QFrame,
)

from chord_app.core.functions import EQUATIONS
from .styles import MARGIN, SPACING, apply_label_muted


# ---------------------------------------------------------------------------
# Простi діалоги: помилка / інформація / довідка / about
# ---------------------------------------------------------------------------


def show_error(parent: Optional[QWidget], message: str, title: str = "Помилка") -> None:
    """
    Показати діалог помилки з червоною іконкою.
    """
    dlg = QMessageBox(parent)
    dlg.setIcon(QMessageBox.Icon.Critical)
    dlg.setWindowTitle(title)
    dlg.setText(message)
    dlg.setStandardButtons(QMessageBox.StandardButton.Ok)
    dlg.exec()


def show_info(parent: Optional[QWidget], title: str, message: str) -> None:
    dlg = QMessageBox(parent)
    dlg.setIcon(QMessageBox.Icon.Information)
    dlg.setWindowTitle(title)
    dlg.setText(message)
    dlg.setStandardButtons(QMessageBox.StandardButton.Ok)
    dlg.exec()


HELP_TEXT = (
    "Програма розв'язує нелінійне рівняння методом хорд.\n\n"
    "Оберіть рівняння у блоці \"Оберіть рівняння\" та задайте межі a, b "
    "і точність eps, після чого натисніть \"Оновити\".\n\n"
    "Далі можна проходити ітерації по одній кнопкою \"Наступна ітерація\" "
    "або одразу натиснути \"Розв'язати\".\n\n"
    "Кожна ітерація показує на графіку хорду та нове наближення x, "
    "яке з кожним кроком ближче до кореня."
)


def show_help(parent: Optional[QWidget]) -> None:
    show_info(parent, "Довідка", HELP_TEXT)


def show_about(parent: Optional[QWidget]) -> None:
    """
    Показати діалог "Про програму".
    """
    dlg = AboutDialog(parent)
    dlg.exec()


def humanize_stop_reason(code: Optional[str]) -> str:
    """
    Перетворити машинний код причини зупинки на людське пояснення.
    """
    if not code:
        return "Невідомо"

    mapping = {
        "converged": "Досягнуто точності eps",
        "out_of_bracket": "Наближення вийшло за межі відрізка [a, b]",
        "non_finite": "Обчислення зупинено через некоректні значення (NaN/∞)",
        "max_iter": "Досягнуто граничної кількості ітерацій",
        "terminal": "Задачу вже завершено — натисніть \"Оновити\"",
    }

    return mapping.get(code, f"Інша причина ({code})")


class AboutDialog(QDialog):
    """
    Вікно "Про програму".
    """

    def __init__(self, parent: Optional[QWidget]) -> None:
        super().__init__(parent)
        self.setWindowTitle("Про програму")
        self.setModal(True)
        self.resize(560, 440)

        self._build_ui()

    def _build_ui(self) -> None:
        root = QHBoxLayout(self)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        column = QFrame(self)
        column.setObjectName("aboutColumn")
        column_layout = QVBoxLayout(column)
        column_layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        column_layout.setSpacing(SPACING)

        title = QLabel("<b>Метод хорд: покрокова демонстрація</b>", column)
        title.setWordWrap(True)

        subtitle = QLabel("Навчальний застосунок для дослідження методу хорд.", column)
        subtitle.setWordWrap(True)
        apply_label_muted(subtitle)

        separator = QFrame(column)
        separator.setFrameShape(QFrame.Shape.HLine)
        separator.setFrameShadow(QFrame.Shadow.Sunken)

        description = QLabel(
            (
                "<p>Нерухомий кінець хорди обирається один раз за знаком f(a)·f''(a). "
                "На кожній ітерації нове наближення — точка перетину хорди з віссю Ox. "
                "Процес зупиняється, коли |x<sub>k+1</sub> − x<sub>k</sub>| ≤ eps "
                "або наближення виходить за межі відрізка.</p>"
            ),
            column,
        )
        description.setWordWrap(True)

        items = "".join(f"<li>{eq.title} = 0</li>" for eq in EQUATIONS.values())
        equations = QLabel(f"<p><b>Рівняння:</b></p><ul>{items}</ul>", column)
        equations.setWordWrap(True)

        footer = QLabel("<p><b>Версія:</b> 1.0.0</p>", column)
        footer.setWordWrap(True)
        apply_label_muted(footer)

        buttons = QDialogButtonBox(
            QDialogButtonBox.StandardButton.Ok,
            orientation=Qt.Orientation.Horizontal,
            parent=self,
        )
        buttons.accepted.connect(self.accept)

        column_layout.addWidget(title)
        column_layout.addWidget(subtitle)
        column_layout.addWidget(separator)
        column_layout.addWidget(description)
        column_layout.addWidget(equations)
        column_layout.addStretch(1)
        column_layout.addWidget(footer)
        column_layout.addWidget(buttons, alignment=Qt.AlignmentFlag.AlignRight)

        root.addWidget(column, stretch=1)
