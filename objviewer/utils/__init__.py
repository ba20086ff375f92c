# objviewer/utils/__init__.py
"""
Пакет утилит.

Экспортируем:
    * logger        – готовый объект logging.Logger (с level INFO)
    * set_log_level – смена уровня, например из конфигурации
    * Config        – JSON‑конфигурация
    * Profiler      – замер времени блока кода

load_obj живёт в objviewer.utils.loader и здесь не импортируется,
чтобы objviewer.mesh мог пользоваться логгером без циклического импорта.
"""

from .logger import logger, set_log_level
from .config import Config
from .profiler import Profiler

__all__ = ["logger", "set_log_level", "Config", "Profiler"]
