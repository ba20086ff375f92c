"""
objviewer – разбор Wavefront OBJ в плоские вершинные массивы
и матричное ядро 4×4 для model / view / projection / normal.
Окно, GPU и ввод – внешние коллабораторы, здесь их нет.
"""

from objviewer.utils import logger
from objviewer.math import Vec3, Vec4, Mat4
from objviewer.mesh import (
    FlattenedModel, IndexOutOfRange, ObjParseError, UnsupportedFaceError, load_model,
)
from objviewer.scene import CameraInput, FpsCamera, Mesh, Scene, Transform, line_grid

__version__ = "1.0.0"

__all__ = [
    "logger",
    "Vec3",
    "Vec4",
    "Mat4",
    "FlattenedModel",
    "IndexOutOfRange",
    "ObjParseError",
    "UnsupportedFaceError",
    "load_model",
    "CameraInput",
    "FpsCamera",
    "Mesh",
    "Scene",
    "Transform",
    "line_grid",
]
