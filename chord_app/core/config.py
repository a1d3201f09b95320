"""
config.py

Налаштування застосунку (pydantic-settings).

Значення беруться зі змінних середовища з префіксом CHORD_
або з файлу .env, наприклад:
    CHORD_MAX_ITER=500
    CHORD_STRICT_FINITE=true
    CHORD_THEME=mocha
"""

from __future__ import annotations

from functools import lru_cache
from typing import Literal, Optional

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ThemeName = Literal["latte", "frappe", "macchiato", "mocha"]


class Settings(BaseSettings):
    """Налаштування движка, графіка та логування."""

    model_config = SettingsConfigDict(
        env_prefix="CHORD_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    # =========================================================
    # 1. Движок
    # =========================================================
    MAX_ITER: int = Field(
        default=10_000,
        description="Максимальна кількість ітерацій у режимі 'Розв'язати'",
    )
    STRICT_FINITE: bool = Field(
        default=False,
        description="Вважати NaN/∞ наближення невдачею всередині движка",
    )

    # =========================================================
    # 2. Початкові дані задачі
    # =========================================================
    DEFAULT_A: float = Field(default=-1.0, description="Ліва межа відрізка")
    DEFAULT_B: float = Field(default=1.0, description="Права межа відрізка")
    DEFAULT_EPS: float = Field(default=0.001, description="Точність eps")

    # =========================================================
    # 3. Графік та тема
    # =========================================================
    GRAPH_POINTS: int = Field(default=100, description="Кількість точок графіка f(x)")
    THEME: ThemeName = Field(default="latte", description="Початкова колірна тема")

    # =========================================================
    # 4. Логування
    # =========================================================
    LOG_LEVEL: str = Field(default="INFO", description="Рівень логів у консолі")
    LOG_FILE: Optional[str] = Field(
        default=None,
        description="Файл для DEBUG-логів (None — не писати у файл)",
    )

    @field_validator("MAX_ITER", "GRAPH_POINTS")
    @classmethod
    def _positive_int(cls, v: int) -> int:
        if v <= 0:
            raise ValueError("значення повинно бути додатним")
        return v

    @field_validator("DEFAULT_EPS")
    @classmethod
    def _positive_eps(cls, v: float) -> float:
        if not v > 0.0:
            raise ValueError("eps повинно бути додатним")
        return v

    @field_validator("THEME", mode="before")
    @classmethod
    def _lower_theme(cls, v):
        if isinstance(v, str):
            return v.strip().lower()
        return v

    @field_validator("LOG_LEVEL")
    @classmethod
    def _upper_level(cls, v: str) -> str:
        return v.strip().upper()

    @model_validator(mode="after")
    def _check_bounds(self) -> "Settings":
        if self.DEFAULT_A >= self.DEFAULT_B:
            raise ValueError("DEFAULT_A повинно бути меншим за DEFAULT_B")
        return self


@lru_cache
def get_settings() -> Settings:
    """Кешований екземпляр Settings."""
    return Settings()


__all__ = [
    "ThemeName",
    "Settings",
    "get_settings",
]
