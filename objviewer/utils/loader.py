# -*- coding: utf-8 -*-
"""
Чтение .obj с диска и передача текста в objviewer.mesh.load_model.
Политика для многоугольных граней берётся из конфигурации.
"""
from pathlib import Path

from objviewer.mesh.loader import load_model
from objviewer.mesh.model import FlattenedModel
from objviewer.utils.config import Config
from objviewer.utils.logger import logger


def load_obj(path, config: Config = None) -> FlattenedModel:
    p = Path(path).expanduser().resolve()
    if not p.is_file():
        raise FileNotFoundError(f"OBJ file not found: {p}")

    if config is None:
        config = Config()
    face_policy = config["obj"].get("face_policy", "reject")

    # байты декодирует load_model: ошибки кодировки станут ObjParseError
    model = load_model(p.read_bytes(), face_policy=face_policy)
    logger.info(f"[ObjLoader] Loaded {p.name}: {model.face_count} faces, "
                f"{model.vertex_count} vertices")
    return model
