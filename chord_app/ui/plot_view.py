"""
Віджет графіка методу хорд.

Показує:
    - криву f(x) на відрізку [a, b];
    - вертикальні межі відрізка x = a, x = b;
    - для кожної ітерації хорду та вертикаль до осі Ox.

Публічні методи:
    show_placeholder(), plot_run(...), set_palette(...)
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np
from PyQt6.QtWidgets import QWidget, QVBoxLayout

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg as FigureCanvas
from matplotlib.figure import Figure

from chord_app.core.iteration_result import Segment
from chord_app.core.session import GraphSample
from .styles import MARGIN, SPACING, AppPalette, LATTE, apply_card_style


class PlotView(QWidget):
    def __init__(self, parent: Optional[QWidget] = None, palette: AppPalette = LATTE) -> None:
        super().__init__(parent)
        self.setObjectName("plotView")
        self.palette_ = palette
        self._build_ui()

    # ------------------------------------------------------------------
    # UI
    # ------------------------------------------------------------------
    def _build_ui(self) -> None:
        layout = QVBoxLayout(self)
        layout.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)
        layout.setSpacing(SPACING)

        apply_card_style(self, self.palette_)

        self.figure = Figure(facecolor=self.palette_.surface)
        self.axes = self.figure.add_subplot(111)
        self.canvas = FigureCanvas(self.figure)
        self.canvas.setStyleSheet("background-color: transparent;")
        layout.addWidget(self.canvas, stretch=1)

        self.show_placeholder()

    # ------------------------------------------------------------------
    # Стилізація
    # ------------------------------------------------------------------
    def set_palette(self, palette: AppPalette) -> None:
        self.palette_ = palette
        self.figure.set_facecolor(palette.surface)
        apply_card_style(self, palette)

    def _style_axes(self, ax) -> None:
        p = self.palette_
        ax.set_facecolor(p.surface)
        ax.tick_params(colors=p.text_muted, labelsize=9)
        for spine in ax.spines.values():
            spine.set_color(p.border)
            spine.set_linewidth(0.8)
        ax.grid(True, color=p.border, linestyle="--", linewidth=0.5, alpha=0.6)
        ax.axhline(0.0, color=p.text_muted, linewidth=0.8)
        ax.title.set_color(p.text_main)
        ax.xaxis.label.set_color(p.text_main)
        ax.yaxis.label.set_color(p.text_main)

    def _redraw(self) -> None:
        self.figure.tight_layout()
        self.canvas.draw_idle()

    # ------------------------------------------------------------------
    # Публічні методи
    # ------------------------------------------------------------------
    def show_placeholder(self) -> None:
        ax = self.axes
        ax.clear()
        self._style_axes(ax)
        ax.text(0.5, 0.5, "Оберіть рівняння та задайте дані", ha="center", va="center",
                transform=ax.transAxes, color=self.palette_.text_muted)
        self.canvas.draw_idle()

    def plot_run(self, title: str, graph: GraphSample, segments: List[Segment]) -> None:
        """
        Перемалювати графік: крива, межі, усі накопичені відрізки.
        """
        p = self.palette_
        ax = self.axes
        ax.clear()
        self._style_axes(ax)

        # NaN-точки (поза областю визначення) matplotlib просто пропускає
        ys = np.where(np.isfinite(graph.ys), graph.ys, np.nan)
        ax.plot(graph.xs, ys, color=p.curve, linewidth=1.6, label=title)

        for i, border in enumerate((graph.left_border, graph.right_border)):
            xs, bys = border.as_xy()
            ax.plot(xs, bys, color=p.bracket, linewidth=1.2, linestyle="--",
                    label="Межі відрізка" if i == 0 else None)

        chord_labelled = drop_labelled = False
        for seg in segments:
            xs, sys_ = seg.as_xy()
            if not (np.all(np.isfinite(xs)) and np.all(np.isfinite(sys_))):
                continue
            if seg.kind == "drop":
                ax.plot(xs, sys_, color=p.drop, linewidth=1.0,
                        label=None if drop_labelled else "x_k")
                drop_labelled = True
            else:
                ax.plot(xs, sys_, color=p.chord, linewidth=1.2,
                        label=None if chord_labelled else "Хорди")
                chord_labelled = True

        ax.set_xlabel("x")
        ax.set_ylabel("f(x)")
        ax.set_title(f"{title} = 0")

        legend = ax.legend(loc="best", fontsize=8, facecolor=p.surface_alt, edgecolor=p.border)
        for text in legend.get_texts():
            text.set_color(p.text_main)

        self._redraw()
