"""
Колірні теми застосунку (чотири варіанти Catppuccin).

Основні принципи:
    - одна палітра AppPalette на тему;
    - акцентний колір для дій та виділення;
    - окремі кольори для графіка: крива, межі відрізка, хорда, вертикаль.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Dict

from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor, QFont, QPalette
from PyQt6.QtWidgets import (
    QApplication,
    QWidget,
    QTableWidget,
    QHeaderView,
    QGroupBox,
    QPushButton,
    QLabel,
)

MARGIN = 12
SPACING = 10
RADIUS = 6

FONT_FAMILY = "Montserrat"
FONT_SIZE = 10

@dataclass(frozen=True)
class AppPalette:
    name: str

    background: str
    surface: str
    surface_alt: str

    text_main: str
    text_muted: str
    text_inverse: str

    accent: str
    accent_alt: str

    border: str
    border_soft: str

    # графік
    curve: str
    chord: str
    drop: str
    bracket: str
    error: str


LATTE = AppPalette(
    name="latte",
    background="#eff1f5", surface="#e6e9ef", surface_alt="#ccd0da",
    text_main="#4c4f69", text_muted="#6c6f85", text_inverse="#eff1f5",
    accent="#1e66f5", accent_alt="#7287fd",
    border="#bcc0cc", border_soft="#dce0e8",
    curve="#d20f39", chord="#40a02b", drop="#179299", bracket="#ea76cb", error="#d20f39",
)

FRAPPE = AppPalette(
    name="frappe",
    background="#303446", surface="#292c3c", surface_alt="#414559",
    text_main="#c6d0f5", text_muted="#a5adce", text_inverse="#303446",
    accent="#8caaee", accent_alt="#babbf1",
    border="#51576d", border_soft="#232634",
    curve="#e78284", chord="#a6d189", drop="#81c8be", bracket="#f4b8e4", error="#e78284",
)

MACCHIATO = AppPalette(
    name="macchiato",
    background="#24273a", surface="#1e2030", surface_alt="#363a4f",
    text_main="#cad3f5", text_muted="#a5adcb", text_inverse="#24273a",
    accent="#8aadf4", accent_alt="#b7bdf8",
    border="#494d64", border_soft="#181926",
    curve="#ed8796", chord="#a6da95", drop="#8bd5ca", bracket="#f5bde6", error="#ed8796",
)

MOCHA = AppPalette(
    name="mocha",
    background="#1e1e2e", surface="#181825", surface_alt="#313244",
    text_main="#cdd6f4", text_muted="#a6adc8", text_inverse="#1e1e2e",
    accent="#89b4fa", accent_alt="#b4befe",
    border="#45475a", border_soft="#11111b",
    curve="#f38ba8", chord="#a6e3a1", drop="#94e2d5", bracket="#f5c2e7", error="#f38ba8",
)

THEMES: Dict[str, AppPalette] = {
    "latte": LATTE,
    "frappe": FRAPPE,
    "macchiato": MACCHIATO,
    "mocha": MOCHA,
}

# Порядок перемикання кнопкою "Тема"
_THEME_CYCLE = {
    "mocha": "macchiato",
    "macchiato": "frappe",
    "frappe": "latte",
    "latte": "mocha",
}


def next_theme(name: str) -> AppPalette:
    return THEMES[_THEME_CYCLE.get(name, "latte")]


# ---------------------------------------------------------------------------
# GLOBAL APP STYLESHEET (Qt Compatible)
# ---------------------------------------------------------------------------

def build_app_stylesheet(p: AppPalette) -> str:
    return f"""
    QWidget {{
        background-color: {p.background};
        color: {p.text_main};
        font-family: "{FONT_FAMILY}";
        font-size: {FONT_SIZE}pt;
    }}

    QMainWindow {{
        background-color: {p.background};
    }}

    /* Panels */
    QGroupBox {{
        background-color: {p.surface};
        border: 1px solid {p.border_soft};
        border-radius: {RADIUS}px;
        margin-top: 14px;
    }}
    QGroupBox::title {{
        subcontrol-origin: margin;
        left: 10px;
        padding: 0 4px;
        color: {p.accent};
        font-weight: 600;
    }}

    /* Menu */
    QMenuBar {{
        background-color: {p.surface};
        border-bottom: 1px solid {p.border};
    }}
    QMenuBar::item:selected {{
        background-color: {p.accent};
        color: {p.text_inverse};
        border-radius: 4px;
    }}

    QMenu {{
        background-color: {p.surface_alt};
        border: 1px solid {p.border};
    }}
    QMenu::item:selected {{
        background-color: {p.accent};
        color: {p.text_inverse};
    }}

    /* Status bar */
    QStatusBar {{
        background-color: {p.surface};
        color: {p.text_muted};
        border-top: 1px solid {p.border};
    }}

    /* Buttons */
    QPushButton {{
        background-color: {p.accent};
        color: {p.text_inverse};
        border-radius: {RADIUS}px;
        padding: 7px 14px;
        border: 1px solid {p.accent};
        font-weight: 600;
    }}
    QPushButton:hover {{
        background-color: {p.accent_alt};
        border-color: {p.accent_alt};
    }}
    QPushButton:disabled {{
        background-color: {p.surface_alt};
        border-color: {p.border};
        color: {p.text_muted};
    }}

    /* Inputs */
    QLineEdit, QSpinBox, QDoubleSpinBox, QComboBox {{
        background-color: {p.surface};
        border: 1px solid {p.border};
        border-radius: {RADIUS}px;
        padding: 6px 8px;
        color: {p.text_main};
    }}
    QLineEdit:focus, QSpinBox:focus, QDoubleSpinBox:focus, QComboBox:focus {{
        border: 1px solid {p.accent};
    }}

    QFrame#aboutColumn {{
        background-color: {p.surface};
        border: 1px solid {p.border_soft};
        border-radius: {RADIUS}px;
    }}

    /* Radio buttons */
    QRadioButton::indicator {{
        width: 14px;
        height: 14px;
        border-radius: 7px;
        border: 1px solid {p.border};
        background: {p.surface_alt};
    }}
    QRadioButton::indicator:checked {{
        background: {p.accent};
        border: 1px solid {p.accent};
    }}

    /* Tables */
    QTableWidget {{
        background-color: {p.surface};
        border: 1px solid {p.border};
        border-radius: {RADIUS}px;
        gridline-color: {p.border};
        alternate-background-color: {p.surface_alt};
        selection-background-color: {p.accent};
        selection-color: {p.text_inverse};
    }}

    QHeaderView::section {{
        background-color: {p.surface_alt};
        color: {p.text_main};
        padding: 6px;
        border: none;
        border-right: 1px solid {p.border};
        font-weight: 600;
    }}

    /* Tooltip */
    QToolTip {{
        background-color: {p.surface_alt};
        color: {p.text_main};
        border: 1px solid {p.border};
        padding: 6px;
        border-radius: 6px;
    }}
    """


# ---------------------------------------------------------------------------
# APPLY STYLE
# ---------------------------------------------------------------------------

def apply_app_style(app: QApplication, palette: AppPalette = LATTE) -> None:
    p = app.palette()

    p.setColor(QPalette.ColorRole.Window, QColor(palette.background))
    p.setColor(QPalette.ColorRole.Base, QColor(palette.surface))
    p.setColor(QPalette.ColorRole.Text, QColor(palette.text_main))
    p.setColor(QPalette.ColorRole.Button, QColor(palette.accent))

    app.setPalette(p)
    app.setFont(QFont(FONT_FAMILY, FONT_SIZE))
    app.setStyleSheet(build_app_stylesheet(palette))


# ---------------------------------------------------------------------------
# HELPERS
# ---------------------------------------------------------------------------

def apply_groupbox_flat_style(group: QGroupBox):
    group.setContentsMargins(MARGIN, MARGIN, MARGIN, MARGIN)

def apply_table_style(table: QTableWidget):
    table.verticalHeader().setVisible(False)
    table.setAlternatingRowColors(True)
    table.horizontalHeader().setSectionResizeMode(QHeaderView.ResizeMode.Stretch)
    table.horizontalHeader().setHighlightSections(False)
    table.horizontalHeader().setDefaultAlignment(
        Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter
    )

def apply_button_secondary(btn: QPushButton, palette: AppPalette = LATTE):
    p = palette
    btn.setStyleSheet(f"""
        QPushButton {{
            background-color: {p.surface_alt};
            color: {p.text_main};
            border-radius: {RADIUS}px;
            padding: 7px 14px;
            border: 1px solid {p.border};
        }}
        QPushButton:hover {{
            border-color: {p.accent};
        }}
    """)

def apply_label_muted(lbl: QLabel, palette: AppPalette = LATTE):
    lbl.setStyleSheet(f"color: {palette.text_muted};")

def apply_label_status(lbl: QLabel, palette: AppPalette, is_error: bool):
    color = palette.error if is_error else palette.chord
    lbl.setStyleSheet(f"color: {color}; font-weight: 600;")

def apply_card_style(widget: QWidget, palette: AppPalette = LATTE):
    widget.setStyleSheet(f"""
        QWidget#{widget.objectName()} {{
            background-color: {palette.surface};
            border-radius: {RADIUS}px;
            border: 1px solid {palette.border};
        }}
    """)
