"""
Пакет scene – положение объектов, камера, опорная сетка, меши.
"""

from objviewer.scene.transform import Transform
from objviewer.scene.camera import CameraInput, FpsCamera
from objviewer.scene.grid import LINE_VERTICES, line_grid
from objviewer.scene.mesh import Mesh
from objviewer.scene.scene import Scene, ShaderConstants

__all__ = ["Transform", "CameraInput", "FpsCamera", "LINE_VERTICES",
           "line_grid", "Mesh", "Scene", "ShaderConstants"]
