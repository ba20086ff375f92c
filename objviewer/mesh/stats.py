# objviewer/mesh/stats.py
# ---------------------------------------------------------------
# Первый проход: классификация строк и подсчёт элементов.
# Числа здесь не разбираются – только первые символы строки,
# поэтому проход дешёвый. Счётчики задают точный размер массивов
# для второго прохода.
# ---------------------------------------------------------------

import enum
from dataclasses import dataclass

from objviewer.mesh.lexer import LineReader, Text, decode_text


class ObjLineType(enum.Enum):
    COMMENT = "comment"
    POSITION = "v"
    TEXCOORD = "vt"
    NORMAL = "vn"
    FACE = "f"
    UNKNOWN = "unknown"


_WHITESPACE = (" ", "\t")


def classify_line(line: str) -> ObjLineType:
    """Тип строки по первым одному‑двум символам."""
    c0 = line[:1]
    c1 = line[1:2]
    if c0 == "#":
        return ObjLineType.COMMENT
    if c0 == "v":
        if c1 in _WHITESPACE:
            return ObjLineType.POSITION
        if c1 == "t":
            return ObjLineType.TEXCOORD
        if c1 == "n":
            return ObjLineType.NORMAL
        return ObjLineType.UNKNOWN
    if c0 == "f" and c1 in _WHITESPACE:
        return ObjLineType.FACE
    return ObjLineType.UNKNOWN


@dataclass
class ObjStats:
    position_count: int = 0
    texcoord_count: int = 0
    normal_count: int = 0
    face_count: int = 0
    # сумма (углы - 2) по граням; для треугольников совпадает с face_count
    triangle_count: int = 0
    line_count: int = 0
    # формат первого угла первой грани: p, p/t, p//n, p/t/n
    has_texcoords: bool = False
    has_normals: bool = False

    @property
    def vertex_count(self) -> int:
        return self.face_count * 3

    @property
    def fan_vertex_count(self) -> int:
        return self.triangle_count * 3


def corner_layout(group: str):
    """(есть texcoord, есть нормаль) по расстановке '/' в группе угла."""
    fields = group.split("/")
    has_tex = len(fields) > 1 and fields[1] != ""
    has_norm = len(fields) > 2 and fields[2] != ""
    return has_tex, has_norm


def scan_stats(text: Text) -> ObjStats:
    """Один проход по всем строкам, без разбора чисел."""
    text = decode_text(text)

    stats = ObjStats()
    for span in LineReader(text):
        stats.line_count += 1
        if span.length == 0:
            continue
        line = span.slice(text)
        kind = classify_line(line)
        if kind is ObjLineType.POSITION:
            stats.position_count += 1
        elif kind is ObjLineType.TEXCOORD:
            stats.texcoord_count += 1
        elif kind is ObjLineType.NORMAL:
            stats.normal_count += 1
        elif kind is ObjLineType.FACE:
            groups = line.split()[1:]
            if stats.face_count == 0 and groups:
                stats.has_texcoords, stats.has_normals = corner_layout(groups[0])
            stats.face_count += 1
            stats.triangle_count += max(len(groups) - 2, 0)
    return stats
