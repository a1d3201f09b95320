"""
Головне вікно:
    - зліва: панель керування (рівняння, дані, кнопки);
    - справа: графік над таблицею ітерацій;
    - знизу: поточне x, f(x), номер ітерації та статус.
"""

from __future__ import annotations
from typing import Optional

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QAction
from PyQt6.QtWidgets import (
    QMainWindow,
    QWidget,
    QVBoxLayout,
    QHBoxLayout,
    QStatusBar,
    QLabel,
    QSplitter,
)

from chord_app.core.iteration_result import IterationResult
from chord_app.core.session import ChordRun
from chord_app.core.formatting import format_iterate, format_iteration, format_status, STATUS_ERROR
from chord_app.ui.control_panel import ControlPanelWidget
from chord_app.ui.table_view import IterationsTableWidget
from chord_app.ui.plot_view import PlotView
from chord_app.ui.dialogs import show_about, show_help
from chord_app.ui.styles import (
    AppPalette,
    LATTE,
    MARGIN,
    SPACING,
    apply_label_muted,
    apply_label_status,
)


class MainWindow(QMainWindow):
    """
    Головне вікно демонстрації методу хорд.
    """

    def __init__(self, parent: Optional[QWidget] = None, palette: AppPalette = LATTE) -> None:
        super().__init__(parent)
        self.palette_ = palette

        self.setWindowTitle("Метод хорд")
        self.resize(1300, 860)

        self._create_actions()
        self._create_menu()
        self._create_status_bar()
        self._create_content()
        self._connect_signals()

    # ----------------------------------------------------------------------
    # Menu + actions
    # ----------------------------------------------------------------------
    def _create_actions(self) -> None:
        self.action_exit = QAction("Вихід", self, shortcut="Ctrl+Q")
        self.action_theme = QAction(self._theme_caption(), self, shortcut="Ctrl+T")
        self.action_help = QAction("Довідка", self, shortcut="F1")
        self.action_about = QAction("Про програму", self)

    def _create_menu(self) -> None:
        menu = self.menuBar()
        menu.addMenu("Файл").addAction(self.action_exit)
        menu.addMenu("Вигляд").addAction(self.action_theme)
        help_menu = menu.addMenu("Довідка")
        help_menu.addAction(self.action_help)
        help_menu.addAction(self.action_about)

    def _create_status_bar(self) -> None:
        status = QStatusBar(self)
        self.setStatusBar(status)
        status.showMessage("Готово")

    def _theme_caption(self) -> str:
        return f"Тема: {self.palette_.name.upper()}"

    # ----------------------------------------------------------------------
    # CONTENT LAYOUT
    # ----------------------------------------------------------------------
    def _create_content(self) -> None:
        central = QWidget(self)
        self.setCentralWidget(central)

        root = QHBoxLayout(central)
        root.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        root.setSpacing(SPACING)

        left_panel = self._build_left_panel()
        right_panel = self._build_right_panel()

        root.addWidget(left_panel, stretch=2)
        root.addWidget(right_panel, stretch=5)

    def _build_left_panel(self) -> QWidget:
        widget = QWidget(self)
        widget.setMinimumWidth(360)

        layout = QVBoxLayout(widget)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SPACING)

        self.control_panel = ControlPanelWidget(widget)
        layout.addWidget(self.control_panel)
        layout.addStretch()

        return widget

    def _build_right_panel(self) -> QWidget:
        widget = QWidget(self)
        widget.setMinimumWidth(720)

        layout = QVBoxLayout(widget)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(SPACING)

        splitter = QSplitter(Qt.Orientation.Vertical, widget)
        splitter.setHandleWidth(6)

        self.plot_view = PlotView(widget, self.palette_)
        splitter.addWidget(self.plot_view)

        bottom = QWidget(widget)
        bottom_layout = QVBoxLayout(bottom)
        bottom_layout.setContentsMargins(0, 0, 0, 0)
        bottom_layout.setSpacing(SPACING)

        self.iterations_table = IterationsTableWidget(bottom)
        bottom_layout.addWidget(self.iterations_table)
        bottom_layout.addLayout(self._build_stats_row())

        splitter.addWidget(bottom)
        splitter.setStretchFactor(0, 3)
        splitter.setStretchFactor(1, 2)

        layout.addWidget(splitter)

        return widget

    def _build_stats_row(self) -> QHBoxLayout:
        row = QHBoxLayout()
        row.setContentsMargins(0, 0, 0, 0)
        row.setSpacing(SPACING)

        self.label_iterate = QLabel("", self)
        self.label_status = QLabel("", self)
        self.label_iteration = QLabel("", self)

        apply_label_muted(self.label_iterate, self.palette_)
        apply_label_muted(self.label_iteration, self.palette_)

        row.addWidget(self.label_iterate)
        row.addStretch()
        row.addWidget(self.label_status)
        row.addStretch()
        row.addWidget(self.label_iteration)
        return row

    # ------------------------------------------------------------------
    # Signals
    # ------------------------------------------------------------------
    def _connect_signals(self) -> None:
        self.action_exit.triggered.connect(self.close)
        self.action_help.triggered.connect(lambda: show_help(self))
        self.action_about.triggered.connect(lambda: show_about(self))
        self.control_panel.exitRequested.connect(self.close)

    # ------------------------------------------------------------------
    # PUBLIC API (для app.py)
    # ------------------------------------------------------------------
    def set_palette(self, palette: AppPalette) -> None:
        self.palette_ = palette
        self.action_theme.setText(self._theme_caption())
        self.plot_view.set_palette(palette)
        self.control_panel.restyle(palette)
        apply_label_muted(self.label_iterate, palette)
        apply_label_muted(self.label_iteration, palette)
        apply_label_muted(self.iterations_table.subtitle, palette)

    def show_run(self, run: ChordRun) -> None:
        """
        Повністю показати стан рівняння: дані, графік, таблицю, підписи.
        """
        problem = run.problem
        self.control_panel.set_inputs(problem.a, problem.b, problem.eps)
        self.iterations_table.populate(run.iterations)
        self.refresh(run)

    def add_iteration(self, iteration: IterationResult) -> None:
        self.iterations_table.add_iteration(iteration)

    def refresh(self, run: ChordRun) -> None:
        """Оновити графік і підписи (без перезаповнення таблиці)."""
        problem = run.problem
        self.plot_view.plot_run(run.title, run.graph, run.segments)

        self.label_iterate.setText(format_iterate(problem))
        self.label_iteration.setText(format_iteration(problem))

        status = format_status(problem)
        self.label_status.setText(status)
        apply_label_status(self.label_status, self.palette_, status == STATUS_ERROR)
