# -*- coding: utf-8 -*-
"""
conftest.py – образцы OBJ‑текстов и мок‑бэкенд.
Бэкенд не создаёт GPU‑ресурсов, а только записывает вызовы,
чтобы проверить, что Mesh → Backend вызываются в ожидаемом порядке.
"""

from typing import Any, Tuple

import pytest

from objviewer.utils.config import Config


# ----------------------------------------------------------------------
# Образцы OBJ
# ----------------------------------------------------------------------
TRIANGLE_OBJ = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf 1 2 3\n"
TRIANGLE_OBJ_RELATIVE = "v 0 0 0\nv 1 0 0\nv 0 1 0\nf -3 -2 -1\n"

QUAD_AS_TRIANGLES_OBJ = """\
# два треугольника, только позиции
v 0 0 0
v 1 0 0
v 1 1 0
v 0 1 0
f 1 2 3
f 1 3 4
"""

TEXTURED_OBJ = """\
# quad with uv and normals
o Quad
v -1.0 -1.0 0.0
v  1.0 -1.0 0.0
v  1.0  1.0 0.0
v -1.0  1.0 0.0
vt 0.0 0.0
vt 1.0 0.0
vt 1.0 1.0
vt 0.0 1.0
vn 0.0 0.0 1.0
s off
f 1/1/1 2/2/1 3/3/1
f 1/1/1 3/3/1 4/4/1
"""


@pytest.fixture
def triangle_obj() -> str:
    return TRIANGLE_OBJ


@pytest.fixture
def textured_obj() -> str:
    return TEXTURED_OBJ


@pytest.fixture
def quad_obj() -> str:
    return QUAD_AS_TRIANGLES_OBJ


# ----------------------------------------------------------------------
# Конфигурация во временной папке
# ----------------------------------------------------------------------
@pytest.fixture
def config(tmp_path):
    """Свежий Config, записанный в tmp_path (синглтон сбрасывается)."""
    Config.reset()
    cfg = Config(str(tmp_path / "config.json"))
    yield cfg
    Config.reset()


# ----------------------------------------------------------------------
# MockBackend – внешний «коллаборатор» загрузки буферов
# ----------------------------------------------------------------------
class MockBackend:
    """
    Минимальная имитация графического бэкенда.
    Каждый метод только записывает вызов в `self.calls`.
    """

    def __init__(self) -> None:
        # (method_name, args, kwargs)
        self.calls: list[Tuple[str, Tuple[Any, ...], dict]] = []
        self.buffers: list[bytes] = []

    def _record(self, name: str, *a, **kw) -> None:
        self.calls.append((name, a, kw))

    def create_buffer(self, data: bytes, usage: str = "default") -> Any:
        self._record("create_buffer", data, usage)
        self.buffers.append(data)
        return 0xB0B0 + len(self.buffers)

    def set_vertex_buffers(self, vb: Any, ib: Any = None) -> None:
        self._record("set_vertex_buffers", vb, ib)

    def draw(self, vertex_count: int) -> None:
        self._record("draw", vertex_count)

    def names(self) -> list[str]:
        return [c[0] for c in self.calls]


@pytest.fixture
def backend() -> MockBackend:
    return MockBackend()
