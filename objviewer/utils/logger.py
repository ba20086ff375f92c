# objviewer/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер пакета.
# ---------------------------------------------------------------

import logging

def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("objviewer")

logger = init_logger()

def set_log_level(level) -> None:
    """Сменить уровень логгера (имя уровня «DEBUG»/«INFO» или число)."""
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    if not isinstance(level, int):
        logger.warning(f"[Logger] Unknown log level {level!r}, keeping current")
        return
    logger.setLevel(level)
