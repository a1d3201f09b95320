# tests/conftest.py
from __future__ import annotations

import pytest
from loguru import logger

from chord_app.core.config import get_settings
from chord_app.core.engine import ChordEngine
from chord_app.core.problem import Problem


@pytest.fixture(autouse=True)
def _quiet_loguru():
    # stderr-обробник loguru за замовчуванням засмічує вивід pytest
    logger.remove()
    yield


@pytest.fixture(autouse=True)
def _clean_settings_cache(monkeypatch):
    for name in ("MAX_ITER", "STRICT_FINITE", "DEFAULT_A", "DEFAULT_B",
                 "DEFAULT_EPS", "GRAPH_POINTS", "THEME", "LOG_LEVEL", "LOG_FILE"):
        monkeypatch.delenv(f"CHORD_{name}", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def engine() -> ChordEngine:
    return ChordEngine()


@pytest.fixture
def make_problem():
    def _make(key: str = "f2", a: float = 0.0, b: float = 1.0, eps: float = 0.001) -> Problem:
        return Problem(equation_key=key, a=a, b=b, eps=eps)

    return _make
