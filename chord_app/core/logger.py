"""
logger.py

Налаштування loguru для застосунку.
    - Console: рівень з Settings.LOG_LEVEL (stderr)
    - File: DEBUG, лише якщо задано Settings.LOG_FILE
"""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Optional

from loguru import logger


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> Optional[str]:
    """
    Ініціалізувати логування. Повертає шлях до файлу логів (або None).
    """
    # Прибираємо стандартний обробник loguru, щоб не дублювати вивід
    logger.remove()

    logger.add(
        sys.stderr,
        level=level,
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
    )

    if log_file is None:
        return None

    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    logger.add(
        str(path),
        rotation="1 MB",
        retention=5,
        level="DEBUG",
        encoding="utf-8",
        format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{line} - {message}",
    )
    return str(path)


__all__ = ["setup_logging"]
