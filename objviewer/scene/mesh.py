"""
Меш из FlattenedModel – создаёт вершинный буфер у внешнего бэкенда при первом draw().
"""

import numpy as np

from objviewer.math.vec4 import Vec4
from objviewer.mesh.model import FlattenedModel
from objviewer.scene.transform import Transform

FLOAT_SIZE = 4


class Mesh:
    """
    Плоская модель + Transform + цвет.

    Бэкенд – любой объект с методами
        create_buffer(data: bytes, usage: str) -> handle
        set_vertex_buffers(vb, ib)
        draw(vertex_count)
    Индексного буфера нет: каждый угол грани – отдельная вершина.
    """
    def __init__(self,
                 model: FlattenedModel,
                 transform: Transform = None,
                 color: Vec4 = None,
                 name="Mesh"):
        self.name = name
        self.model = model
        self.transform = transform if transform is not None else Transform()
        self.color = color if color is not None else Vec4(1.0, 1.0, 1.0, 1.0)
        self.vb = None

        # bounding sphere в локальных координатах
        verts = model.positions
        if len(verts):
            self._bounding_center = verts.mean(axis=0).astype(np.float32)
            self._bounding_radius = float(
                np.linalg.norm(verts - self._bounding_center, axis=1).max())
        else:
            self._bounding_center = np.zeros(3, dtype=np.float32)
            self._bounding_radius = 0.0

    @property
    def vertex_count(self) -> int:
        return self.model.vertex_count

    @property
    def components(self) -> int:
        """Число float на вершину: позиция [+ нормаль] [+ texcoord]."""
        count = 3
        if self.model.has_normals:
            count += 3
        if self.model.has_texcoords:
            count += 2
        return count

    @property
    def stride(self) -> int:
        return self.components * FLOAT_SIZE

    def interleaved(self) -> np.ndarray:
        parts = [self.model.positions]
        if self.model.has_normals:
            parts.append(self.model.normals)
        if self.model.has_texcoords:
            parts.append(self.model.texcoords)
        return np.column_stack(parts).astype(np.float32).ravel()

    def _setup_gpu_buffers(self, backend):
        self.vb = backend.create_buffer(self.interleaved().tobytes(), usage="vertex")

    def draw(self, backend):
        """Отрисовать меш, создавая буфер «лениво»."""
        if self.vb is None:
            self._setup_gpu_buffers(backend)
        backend.set_vertex_buffers(self.vb, None)
        backend.draw(self.vertex_count)

    @property
    def bounding_sphere(self):
        """(центр, радиус) в мировых координатах."""
        world = self.transform.model_matrix().to_np()
        centre_h = np.append(self._bounding_center, 1.0).astype(np.float32)
        centre_world = world @ centre_h
        scale = np.linalg.norm(world[0:3, 0:3], axis=0).max()
        return centre_world[:3], float(self._bounding_radius * scale)
