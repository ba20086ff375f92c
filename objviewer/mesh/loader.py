# objviewer/mesh/loader.py
"""
Загрузка OBJ‑текста в плоскую модель за два прохода.

1. scan_stats – считаем строки каждого типа;
2. выделяем массивы ровно нужного размера;
3. второй проход – разбираем числа, разрешаем индексы углов;
4. flatten – одна вершина на каждый угол грани, без дедупликации.

Поддерживается подмножество Wavefront OBJ: v / vt / vn / f и комментарии.
"""

from typing import List, Sequence

from objviewer.mesh.errors import ObjParseError, UnsupportedFaceError
from objviewer.mesh.indices import resolve_index
from objviewer.mesh.lexer import LineReader, Text, decode_text
from objviewer.mesh.model import (
    CornerIndices, FlattenedModel, RawAttributeArrays, flatten,
)
from objviewer.mesh.parsers import FaceCorner, parse_face, parse_vec2, parse_vec3
from objviewer.mesh.stats import ObjLineType, classify_line, scan_stats
from objviewer.utils.logger import logger
from objviewer.utils.profiler import Profiler

FACE_POLICIES = ("reject", "fan")


def _triangulate(face: List[FaceCorner], policy: str, lineno: int) -> Sequence[FaceCorner]:
    """Углы треугольников грани в порядке отрисовки."""
    if len(face) == 3:
        return face
    if policy == "fan" and len(face) > 3:
        tris = []
        for i in range(1, len(face) - 1):
            tris.extend((face[0], face[i], face[i + 1]))
        return tris
    raise UnsupportedFaceError(
        f"face has {len(face)} corners, only triangles are supported"
        + (" (policy 'fan' needs at least 3)" if policy == "fan" else ""),
        lineno)


class _SecondPass:
    """Состояние второго прохода: курсоры записи в заранее выделенные массивы."""

    def __init__(self, raw: RawAttributeArrays, corners: CornerIndices):
        self.raw = raw
        self.corners = corners
        self.positions = 0
        self.texcoords = 0
        self.normals = 0
        self.slot = 0

    def add_corner(self, corner: FaceCorner, lineno: int) -> None:
        c = self.corners
        # отрицательные индексы – относительно уже прочитанных элементов
        c.positions[self.slot] = resolve_index(
            corner.position, self.positions, "position", lineno)
        if c.texcoords is not None:
            if corner.texcoord is None:
                raise ObjParseError("corner has no texcoord index, "
                                    "but the first face uses texcoords", lineno)
            c.texcoords[self.slot] = resolve_index(
                corner.texcoord, self.texcoords, "texcoord", lineno)
        if c.normals is not None:
            if corner.normal is None:
                raise ObjParseError("corner has no normal index, "
                                    "but the first face uses normals", lineno)
            c.normals[self.slot] = resolve_index(
                corner.normal, self.normals, "normal", lineno)
        self.slot += 1


def load_model(text: Text, face_policy: str = "reject") -> FlattenedModel:
    """
    Разобрать OBJ‑текст (str или bytes в UTF‑8) и вернуть FlattenedModel.

    face_policy:
        "reject" – грань не из 3 углов вызывает UnsupportedFaceError;
        "fan"    – многоугольники разбиваются веером (0, i, i+1).
    """
    if face_policy not in FACE_POLICIES:
        raise ValueError(f"Unknown face policy: {face_policy}")
    text = decode_text(text)

    with Profiler("obj scan"):
        stats = scan_stats(text)
    logger.debug(f"[ObjLoader] {stats.position_count} positions, "
                 f"{stats.texcoord_count} texcoords, {stats.normal_count} normals, "
                 f"{stats.face_count} faces")

    vertex_count = stats.vertex_count if face_policy == "reject" else stats.fan_vertex_count
    raw = RawAttributeArrays.allocate(stats)
    corners = CornerIndices.allocate(vertex_count, stats.has_texcoords, stats.has_normals)
    state = _SecondPass(raw, corners)

    with Profiler("obj parse"):
        for lineno, span in enumerate(LineReader(text), start=1):
            if span.length == 0:
                continue
            line = span.slice(text)
            kind = classify_line(line)
            if kind is ObjLineType.POSITION:
                raw.positions[state.positions] = parse_vec3(line, lineno)
                state.positions += 1
            elif kind is ObjLineType.TEXCOORD:
                raw.texcoords[state.texcoords] = parse_vec2(line, lineno)
                state.texcoords += 1
            elif kind is ObjLineType.NORMAL:
                raw.normals[state.normals] = parse_vec3(line, lineno)
                state.normals += 1
            elif kind is ObjLineType.FACE:
                face = parse_face(line, lineno)
                for corner in _triangulate(face, face_policy, lineno):
                    state.add_corner(corner, lineno)

    assert state.positions == stats.position_count
    assert state.texcoords == stats.texcoord_count
    assert state.normals == stats.normal_count
    assert state.slot == vertex_count

    model = flatten(raw, corners)
    logger.debug(f"[ObjLoader] flattened {model.vertex_count} vertices "
                 f"(texcoords={model.has_texcoords}, normals={model.has_normals})")
    return model
