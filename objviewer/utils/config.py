"""
Простой загрузчик/сохранитель конфигурации в формате JSON.
Если файл не найден – создаётся файл с настройками по‑умолчанию.
"""

import copy
import json
from pathlib import Path
from objviewer.utils.logger import logger, set_log_level

DEFAULT_CONFIG = {
    "window": {"width": 1280, "height": 720, "title": "objviewer"},
    "camera": {
        "position": [0.0, 0.0, 2.0],
        "move_speed": 5.0,
        "look_speed": 6.0,
        "fov_deg": 45.0,
        "near": 0.1,
        "far": 100.0,
    },
    "grid": {"x_squares_half": 4, "z_squares_half": 4},
    "obj": {"face_policy": "reject"},
    "log_level": "INFO",
}

class Config:
    """Singleton‑подобный объект конфигурации."""
    _instance = None

    def __new__(cls, path: str = "config.json"):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance.path = Path(path)
            cls._instance._load()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Забыть текущий экземпляр (следующий Config() перечитает файл)."""
        cls._instance = None

    def _load(self):
        if self.path.is_file():
            try:
                with self.path.open("r", encoding="utf-8") as f:
                    self.data = json.load(f)
                logger.info("[Config] Loaded configuration.")
            except (OSError, ValueError) as exc:
                logger.error(f"[Config] Failed to read config: {exc}")
                self.data = copy.deepcopy(DEFAULT_CONFIG)
                self.save()
        else:
            logger.info("[Config] No config file – creating default.")
            self.data = copy.deepcopy(DEFAULT_CONFIG)
            self.save()
        # уровень логгера задаётся один раз – при загрузке конфигурации
        set_log_level(self["log_level"])

    def save(self):
        try:
            with self.path.open("w", encoding="utf-8") as f:
                json.dump(self.data, f, indent=4)
            logger.info("[Config] Configuration saved.")
        except OSError as exc:
            logger.error(f"[Config] Unable to save config: {exc}")

    def __getitem__(self, key):
        default = DEFAULT_CONFIG.get(key)
        value = self.data.get(key, default)
        # вложенные секции дополняем недостающими ключами
        if isinstance(default, dict) and isinstance(value, dict):
            merged = copy.deepcopy(default)
            merged.update(value)
            return merged
        return value

    def __setitem__(self, key, value):
        self.data[key] = value
        self.save()

    def get(self, key, default=None):
        return self.data.get(key, default)
