"""
Состояние кадра: набор мешей и расчёт констант для шейдера.
"""

from dataclasses import dataclass
from typing import Iterator, List

from objviewer.math.mat4 import Mat4
from objviewer.math.vec4 import Vec4
from objviewer.scene.camera import FpsCamera
from objviewer.scene.mesh import Mesh


@dataclass
class ShaderConstants:
    """То, что уходит в константный буфер для одного draw‑вызова."""
    xform: Mat4     # projection · view · model
    model: Mat4
    normal: Mat4    # transpose(inverse(model))
    color: Vec4


class Scene:
    """Плоский список мешей (иерархии узлов нет)."""
    def __init__(self):
        self.meshes: List[Mesh] = []

    def add(self, mesh: Mesh) -> Mesh:
        self.meshes.append(mesh)
        return mesh

    def remove(self, mesh: Mesh) -> None:
        self.meshes.remove(mesh)

    def __iter__(self) -> Iterator[Mesh]:
        return iter(self.meshes)

    def __len__(self) -> int:
        return len(self.meshes)

    def frame_constants(self, camera: FpsCamera, width: float, height: float) -> List[ShaderConstants]:
        """Константы для всех мешей в порядке добавления."""
        view_proj = camera.projection_matrix(width, height) @ camera.view_matrix()
        result = []
        for mesh in self.meshes:
            model = mesh.transform.model_matrix()
            result.append(ShaderConstants(
                xform=view_proj @ model,
                model=model,
                normal=model.normal_matrix(),
                color=mesh.color,
            ))
        return result

    def draw(self, backend) -> None:
        for mesh in self.meshes:
            mesh.draw(backend)
