"""
control_panel.py

Панель керування для GUI:
    - вибір рівняння;
    - межі відрізка a, b та точність eps;
    - кнопка "Оновити" (застосувати дані, скинути ітерації);
    - кнопки: Наступна ітерація, Розв'язати, Вихід.

Видає назовні:
    - сигнал equationChanged(str)
    - сигнал applyRequested(ChordConfig)
    - сигнал nextRequested()
    - сигнал solveRequested()
    - сигнал exitRequested()
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional

from PyQt6.QtCore import Qt, pyqtSignal
from PyQt6.QtWidgets import (
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QGroupBox,
    QLabel,
    QPushButton,
    QDoubleSpinBox,
    QRadioButton,
    QButtonGroup,
)

from chord_app.core.functions import EQUATIONS
from .styles import (
    MARGIN,
    SPACING,
    apply_groupbox_flat_style,
    apply_button_secondary,
)


# ---------------------------------------------------------------------------
# Дані, введені користувачем
# ---------------------------------------------------------------------------

@dataclass
class ChordConfig:
    equation_key: str
    a: float
    b: float
    eps: float


# ---------------------------------------------------------------------------
# Віджет панелі керування
# ---------------------------------------------------------------------------

class ControlPanelWidget(QWidget):
    """
    Ліва панель керування.

    Сигнали:
        equationChanged(str)        – обрано інше рівняння
        applyRequested(ChordConfig) – натиснуто "Оновити"
        nextRequested()             – натиснуто "Наступна ітерація"
        solveRequested()            – натиснуто "Розв'язати"
        exitRequested()             – натиснуто "Вихід"
    """

    equationChanged = pyqtSignal(str)
    applyRequested = pyqtSignal(ChordConfig)
    nextRequested = pyqtSignal()
    solveRequested = pyqtSignal()
    exitRequested = pyqtSignal()

    def __init__(self, parent: Optional[QWidget] = None) -> None:
        super().__init__(parent)
        self._radio_keys: Dict[int, str] = {}
        self._build_ui()
        self._connect_signals()

    # ------------------------------------------------------------------
    # Побудова UI
    # ------------------------------------------------------------------

    def _build_ui(self) -> None:
        self.setObjectName("controlPanel")

        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        main_layout.setSpacing(SPACING)

        # ------------------------------------------------------------------
        # Блок 1. Рівняння
        # ------------------------------------------------------------------
        self.equation_group = QGroupBox("Оберіть рівняння", self)
        apply_groupbox_flat_style(self.equation_group)

        equation_layout = QVBoxLayout(self.equation_group)
        equation_layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        equation_layout.setSpacing(SPACING)

        self.equation_buttons = QButtonGroup(self.equation_group)
        for idx, (key, eq) in enumerate(EQUATIONS.items()):
            radio = QRadioButton(f"{eq.title} = 0", self.equation_group)
            if idx == 0:
                radio.setChecked(True)
            self.equation_buttons.addButton(radio, idx)
            self._radio_keys[idx] = key
            equation_layout.addWidget(radio)

        main_layout.addWidget(self.equation_group)

        # ------------------------------------------------------------------
        # Блок 2. Межі відрізка та точність
        # ------------------------------------------------------------------
        self.params_group = QGroupBox("Дані задачі", self)
        apply_groupbox_flat_style(self.params_group)

        params_layout = QVBoxLayout(self.params_group)
        params_layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        params_layout.setSpacing(SPACING)

        self.input_a = self._make_spin(-1e6, 1e6, 6, -1.0, "a: ")
        self.input_b = self._make_spin(-1e6, 1e6, 6, 1.0, "b: ")
        self.input_eps = self._make_spin(1e-12, 1e3, 12, 0.001, "eps: ")

        bounds_row = QHBoxLayout()
        bounds_row.setSpacing(SPACING)
        bounds_row.addWidget(self.input_a)
        bounds_row.addWidget(self.input_b)

        self.button_apply = QPushButton("Оновити", self.params_group)
        apply_button_secondary(self.button_apply)

        self.label_current = QLabel("", self.params_group)
        self.label_current.setAlignment(Qt.AlignmentFlag.AlignHCenter | Qt.AlignmentFlag.AlignVCenter)

        params_layout.addLayout(bounds_row)
        params_layout.addWidget(self.input_eps)
        params_layout.addWidget(self.button_apply)
        params_layout.addWidget(self.label_current)

        main_layout.addWidget(self.params_group)

        # ------------------------------------------------------------------
        # Нижній ряд кнопок
        # ------------------------------------------------------------------
        buttons_row = QHBoxLayout()
        buttons_row.setContentsMargins(0, SPACING, 0, 0)
        buttons_row.setSpacing(SPACING)

        self.button_next = QPushButton("Наступна ітерація", self)
        self.button_solve = QPushButton("Розв'язати", self)
        self.button_exit = QPushButton("Вихід", self)

        apply_button_secondary(self.button_exit)

        buttons_row.addWidget(self.button_next)
        buttons_row.addWidget(self.button_solve)
        buttons_row.addStretch(1)
        buttons_row.addWidget(self.button_exit)

        main_layout.addLayout(buttons_row)
        main_layout.addStretch(1)

    def _make_spin(
        self,
        lo: float,
        hi: float,
        decimals: int,
        value: float,
        prefix: str,
    ) -> QDoubleSpinBox:
        spin = QDoubleSpinBox(self.params_group)
        spin.setRange(lo, hi)
        spin.setDecimals(decimals)
        spin.setSingleStep(0.01)
        spin.setValue(value)
        spin.setPrefix(prefix)
        return spin

    # ------------------------------------------------------------------
    # Сигнали
    # ------------------------------------------------------------------

    def _connect_signals(self) -> None:
        self.equation_buttons.idClicked.connect(self._on_equation_clicked)
        self.button_apply.clicked.connect(self._on_apply_clicked)
        self.button_next.clicked.connect(self.nextRequested.emit)
        self.button_solve.clicked.connect(self.solveRequested.emit)
        self.button_exit.clicked.connect(self.exitRequested.emit)

    # ------------------------------------------------------------------
    # Публічне API
    # ------------------------------------------------------------------

    def selected_equation_key(self) -> str:
        return self._radio_keys[self.equation_buttons.checkedId()]

    def build_config(self) -> ChordConfig:
        """
        Зібрати ChordConfig з поточного стану контролів.
        """
        return ChordConfig(
            equation_key=self.selected_equation_key(),
            a=float(self.input_a.value()),
            b=float(self.input_b.value()),
            eps=float(self.input_eps.value()),
        )

    def set_inputs(self, a: float, b: float, eps: float) -> None:
        """Показати у полях дані задачі обраного рівняння."""
        self.input_a.setValue(a)
        self.input_b.setValue(b)
        self.input_eps.setValue(eps)
        self.label_current.setText(f"a: {a:g}, b: {b:g}, eps: {eps:g}")

    def set_stepping_enabled(self, enabled: bool) -> None:
        self.button_next.setEnabled(enabled)
        self.button_solve.setEnabled(enabled)

    def restyle(self, palette) -> None:
        apply_button_secondary(self.button_apply, palette)
        apply_button_secondary(self.button_exit, palette)

    # ------------------------------------------------------------------
    # Обробники
    # ------------------------------------------------------------------

    def _on_equation_clicked(self, idx: int) -> None:
        self.equationChanged.emit(self._radio_keys[idx])

    def _on_apply_clicked(self) -> None:
        self.applyRequested.emit(self.build_config())
