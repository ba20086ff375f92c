# objviewer/mesh/model.py
# ---------------------------------------------------------------
# Массивы модели: «сырые» атрибуты из файла, индексы углов и
# итоговая плоская модель (одна вершина на каждый угол грани).
# Все массивы выделяются один раз по счётчикам первого прохода.
# ---------------------------------------------------------------

from dataclasses import dataclass
from typing import Optional

import numpy as np

from objviewer.mesh.stats import ObjStats


@dataclass
class RawAttributeArrays:
    positions: np.ndarray   # (P, 3) float32
    texcoords: np.ndarray   # (T, 2) float32, может быть пустым
    normals: np.ndarray     # (N, 3) float32, может быть пустым

    @classmethod
    def allocate(cls, stats: ObjStats) -> "RawAttributeArrays":
        return cls(
            positions=np.zeros((stats.position_count, 3), dtype=np.float32),
            texcoords=np.zeros((stats.texcoord_count, 2), dtype=np.float32),
            normals=np.zeros((stats.normal_count, 3), dtype=np.float32),
        )


@dataclass
class CornerIndices:
    """Разрешённые (0‑based) индексы атрибутов для каждого угла."""
    positions: np.ndarray
    texcoords: Optional[np.ndarray] = None
    normals: Optional[np.ndarray] = None

    @classmethod
    def allocate(cls, vertex_count: int, has_texcoords: bool,
                 has_normals: bool) -> "CornerIndices":
        def _empty():
            return np.zeros(vertex_count, dtype=np.int64)
        return cls(
            positions=_empty(),
            texcoords=_empty() if has_texcoords else None,
            normals=_empty() if has_normals else None,
        )

    def __len__(self) -> int:
        return len(self.positions)


@dataclass
class FlattenedModel:
    """
    Параллельные массивы, готовые к загрузке в вершинный буфер.
    Строка i каждого массива описывает i‑й угол граней в порядке файла.
    """
    positions: np.ndarray                    # (V, 3) float32
    texcoords: Optional[np.ndarray] = None   # (V, 2) float32
    normals: Optional[np.ndarray] = None     # (V, 3) float32

    @property
    def vertex_count(self) -> int:
        return len(self.positions)

    @property
    def face_count(self) -> int:
        return self.vertex_count // 3

    @property
    def has_texcoords(self) -> bool:
        return self.texcoords is not None

    @property
    def has_normals(self) -> bool:
        return self.normals is not None


def flatten(raw: RawAttributeArrays, corners: CornerIndices) -> FlattenedModel:
    """Собрать атрибуты по индексам углов; индексы уже проверены резолвером."""
    model = FlattenedModel(positions=raw.positions[corners.positions])
    if corners.texcoords is not None:
        model.texcoords = raw.texcoords[corners.texcoords]
    if corners.normals is not None:
        model.normals = raw.normals[corners.normals]

    vertex_count = len(corners)
    assert model.positions.shape == (vertex_count, 3)
    assert model.texcoords is None or model.texcoords.shape == (vertex_count, 2)
    assert model.normals is None or model.normals.shape == (vertex_count, 3)
    return model
