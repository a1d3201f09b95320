"""
app.py

Контролер для GUI-застосунку демонстрації методу хорд.

Зв'язує:
    - ui.MainWindow (PyQt6)
    - core.ChordSession (задача для кожного рівняння)
    - core.ChordEngine (крок / розв'язання до кінця)
    - core.config.Settings та core.logger

Функціонал:
    - перемикання рівнянь зі збереженням стану кожного з них;
    - "Оновити": скинути задачу з новими a, b, eps (з валідацією);
    - "Наступна ітерація": один крок, рядок у таблиці, перемальований графік;
    - "Розв'язати": кроки до збіжності / помилки / ліміту ітерацій;
    - перемикання колірної теми.
"""

from __future__ import annotations

import sys
from typing import Optional

from loguru import logger
from PyQt6.QtWidgets import QApplication

from chord_app.ui.main_window import MainWindow
from chord_app.ui.control_panel import ChordConfig
from chord_app.ui.styles import THEMES, apply_app_style, next_theme
from chord_app.ui.dialogs import show_error, humanize_stop_reason

from chord_app.core.config import Settings, get_settings
from chord_app.core.engine import ChordEngine, ChordRunResult
from chord_app.core.errors import ChordError
from chord_app.core.logger import setup_logging
from chord_app.core.session import ChordSession


# ---------------------------------------------------------------------------
# Контролер
# ---------------------------------------------------------------------------

class ChordController:
    """
    Зв'язує MainWindow та ChordSession/ChordEngine.

    Схема:
        GUI (ControlPanel) --[сигнали]--> Controller
        Controller -- ChordSession.next_iteration() / solve()
        Engine -- через callback -> Controller -> MainWindow.add_iteration(...)
        Після кроку: MainWindow.refresh(...)
    """

    def __init__(
        self,
        window: MainWindow,
        session: ChordSession,
        app: Optional[QApplication] = None,
    ) -> None:
        self.window = window
        self.session = session
        self.app = app

        panel = self.window.control_panel
        panel.equationChanged.connect(self.on_equation_changed)
        panel.applyRequested.connect(self.on_apply_requested)
        panel.nextRequested.connect(self.on_next_requested)
        panel.solveRequested.connect(self.on_solve_requested)
        self.window.action_theme.triggered.connect(self.on_theme_toggled)

        self._show_current()

    # ------------------------------------------------------------------
    # Хелпери
    # ------------------------------------------------------------------

    def _show_current(self) -> None:
        run = self.session.current
        self.window.show_run(run)
        self._update_buttons()

    def _refresh_current(self) -> None:
        self.window.refresh(self.session.current)
        self._update_buttons()

    def _update_buttons(self) -> None:
        problem = self.session.current.problem
        self.window.control_panel.set_stepping_enabled(self.session.engine.can_step(problem))

    # ------------------------------------------------------------------
    # Обробники сигналів від GUI
    # ------------------------------------------------------------------

    def on_equation_changed(self, key: str) -> None:
        self.session.select(key)
        self._show_current()
        self.window.statusBar().showMessage(f"Рівняння: {self.session.current.title} = 0")

    def on_apply_requested(self, cfg: ChordConfig) -> None:
        """
        Головний вхід для нових даних: натиснута кнопка "Оновити".
        """
        if cfg.equation_key != self.session.current_key:
            self.session.select(cfg.equation_key)

        try:
            run = self.session.apply_bounds(cfg.a, cfg.b, cfg.eps)
        except ChordError as exc:
            logger.warning("Некоректні дані: {}", exc)
            show_error(self.window, str(exc), title="Некоректні дані")
            self.window.statusBar().showMessage(f"Помилка: {exc}")
            return

        logger.info(
            "{}: нові дані a={}, b={}, eps={}",
            run.problem.equation_key, run.problem.a, run.problem.b, run.problem.eps,
        )
        self._show_current()
        self.window.statusBar().showMessage(
            f"Дані застосовано: a={run.problem.a:g}, b={run.problem.b:g}, eps={run.problem.eps:g}"
        )

    def on_next_requested(self) -> None:
        outcome = self.session.next_iteration(callback=self.window.add_iteration)
        self._refresh_current()

        problem = self.session.current.problem
        if outcome is None:
            self.window.statusBar().showMessage("Крок неможливий — натисніть \"Оновити\"")
        elif not outcome.ok:
            self.window.statusBar().showMessage(humanize_stop_reason(outcome.kind.value))
        else:
            self.window.statusBar().showMessage(f"Ітерація {problem.iteration}")

    def on_solve_requested(self) -> None:
        result: ChordRunResult = self.session.solve(callback=self.window.add_iteration)
        self._refresh_current()

        msg = f"Зупинка: {humanize_stop_reason(result.stopped_by)}, ітерацій: {result.n_iter}"
        if result.x_star is not None:
            msg += f", x* = {result.x_star:.10g}"
        self.window.statusBar().showMessage(msg)

    def on_theme_toggled(self) -> None:
        palette = next_theme(self.window.palette_.name)
        if self.app is not None:
            apply_app_style(self.app, palette)
        self.window.set_palette(palette)
        self._refresh_current()


# ---------------------------------------------------------------------------
# Точка входу
# ---------------------------------------------------------------------------

def build_session(settings: Settings) -> ChordSession:
    engine = ChordEngine(max_iter=settings.MAX_ITER, strict_finite=settings.STRICT_FINITE)
    return ChordSession(
        engine,
        a=settings.DEFAULT_A,
        b=settings.DEFAULT_B,
        eps=settings.DEFAULT_EPS,
        graph_points=settings.GRAPH_POINTS,
    )


def main() -> None:
    settings = get_settings()
    setup_logging(settings.LOG_LEVEL, settings.LOG_FILE)

    app = QApplication(sys.argv)

    palette = THEMES[settings.THEME]
    apply_app_style(app, palette)

    window = MainWindow(palette=palette)
    session = build_session(settings)

    # Контролер прив’язується до сигналів вікна і до сесії
    _controller = ChordController(window, session, app)

    logger.info("Застосунок запущено (max_iter={}, strict_finite={})",
                settings.MAX_ITER, settings.STRICT_FINITE)

    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
