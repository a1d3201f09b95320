# tests/test_config.py
import pytest
from pydantic import ValidationError

from chord_app.core.config import Settings, get_settings


def test_defaults():
    s = get_settings()
    assert s.MAX_ITER == 10_000
    assert s.STRICT_FINITE is False
    assert (s.DEFAULT_A, s.DEFAULT_B, s.DEFAULT_EPS) == (-1.0, 1.0, 0.001)
    assert s.GRAPH_POINTS == 100
    assert s.THEME == "latte"
    assert s.LOG_LEVEL == "INFO"
    assert s.LOG_FILE is None


def test_get_settings_is_cached():
    assert get_settings() is get_settings()


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("CHORD_MAX_ITER", "500")
    monkeypatch.setenv("CHORD_STRICT_FINITE", "true")
    monkeypatch.setenv("CHORD_THEME", "Mocha")
    monkeypatch.setenv("CHORD_LOG_LEVEL", "debug")
    get_settings.cache_clear()

    s = get_settings()

    assert s.MAX_ITER == 500
    assert s.STRICT_FINITE is True
    assert s.THEME == "mocha"
    assert s.LOG_LEVEL == "DEBUG"


@pytest.mark.parametrize(
    "kwargs",
    [
        {"MAX_ITER": 0},
        {"GRAPH_POINTS": -5},
        {"DEFAULT_EPS": 0.0},
        {"THEME": "solarized"},
        {"DEFAULT_A": 2.0, "DEFAULT_B": 1.0},
    ],
)
def test_invalid_values_rejected(kwargs):
    with pytest.raises(ValidationError):
        Settings(**kwargs)
