# tests/test_logger.py
from loguru import logger

from chord_app.core.logger import setup_logging


def test_setup_logging_console_only():
    assert setup_logging("WARNING") is None


def test_setup_logging_writes_debug_to_file(tmp_path):
    target = tmp_path / "logs" / "chord.log"

    path = setup_logging("INFO", str(target))
    logger.debug("крок методу хорд")
    logger.remove()

    assert path == str(target)
    assert "крок методу хорд" in target.read_text(encoding="utf-8")
