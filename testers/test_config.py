# -*- coding: utf-8 -*-
import json
import logging

import pytest

from objviewer.math import Vec3
from objviewer.mesh.errors import ObjParseError
from objviewer.scene import FpsCamera
from objviewer.utils.config import DEFAULT_CONFIG, Config
from objviewer.utils.loader import load_obj
from objviewer.utils.logger import logger


def test_default_config_written(config, tmp_path):
    path = tmp_path / "config.json"
    assert path.is_file()
    assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG
    assert config["obj"]["face_policy"] == "reject"


def test_config_is_singleton(config):
    assert Config() is config


def test_existing_config_merged_with_defaults(tmp_path):
    path = tmp_path / "custom.json"
    path.write_text(json.dumps({"camera": {"fov_deg": 60.0}}), encoding="utf-8")
    Config.reset()
    try:
        cfg = Config(str(path))
        assert cfg["camera"]["fov_deg"] == 60.0
        assert cfg["camera"]["near"] == DEFAULT_CONFIG["camera"]["near"]
        assert cfg["window"] == DEFAULT_CONFIG["window"]
        assert cfg.get("window") is None
    finally:
        Config.reset()


def test_broken_config_falls_back_to_defaults(tmp_path):
    path = tmp_path / "broken.json"
    path.write_text("{not json", encoding="utf-8")
    Config.reset()
    try:
        cfg = Config(str(path))
        assert cfg.data == DEFAULT_CONFIG
        # файл перезаписан корректными настройками
        assert json.loads(path.read_text(encoding="utf-8")) == DEFAULT_CONFIG
    finally:
        Config.reset()


def test_setitem_saves(config, tmp_path):
    config["obj"] = {"face_policy": "fan"}
    saved = json.loads((tmp_path / "config.json").read_text(encoding="utf-8"))
    assert saved["obj"]["face_policy"] == "fan"


def test_camera_from_config(config):
    cam = FpsCamera.from_config(config)
    assert cam.position == Vec3(0.0, 0.0, 2.0)
    assert cam.fov_deg == 45.0
    assert cam.move_speed == 5.0


def test_load_obj_uses_face_policy(config, tmp_path):
    obj = tmp_path / "quad.obj"
    obj.write_text("v 0 0 0\nv 1 0 0\nv 1 1 0\nv 0 1 0\nf 1 2 3 4\n", encoding="utf-8")
    config["obj"] = {"face_policy": "fan"}
    model = load_obj(obj, config)
    assert model.vertex_count == 6


def test_load_obj_missing_file(config, tmp_path):
    with pytest.raises(FileNotFoundError):
        load_obj(tmp_path / "missing.obj", config)


def test_log_level_applied_when_config_loads(tmp_path):
    path = tmp_path / "debug.json"
    path.write_text(json.dumps({"log_level": "DEBUG"}), encoding="utf-8")
    previous = logger.level
    Config.reset()
    try:
        Config(str(path))
        assert logger.level == logging.DEBUG
    finally:
        Config.reset()
        logger.setLevel(previous)


def test_load_obj_keeps_caller_log_level(config, tmp_path):
    obj = tmp_path / "tri.obj"
    obj.write_text("v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n", encoding="utf-8")
    previous = logger.level
    logger.setLevel(logging.WARNING)
    try:
        load_obj(obj, config)
        assert logger.level == logging.WARNING
    finally:
        logger.setLevel(previous)


def test_load_obj_invalid_utf8(config, tmp_path):
    obj = tmp_path / "broken.obj"
    obj.write_bytes(b"v 0 0 0\nv 1 0 0\nv 0 1 \xff\nf 1 2 3\n")
    with pytest.raises(ObjParseError) as exc:
        load_obj(obj, config)
    assert exc.value.lineno == 3
