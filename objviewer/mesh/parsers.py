# objviewer/mesh/parsers.py
"""
Разбор отдельных строк OBJ: атрибуты (v / vt / vn) и грани (f).

Функции получают уже классифицированную строку и номер строки
(для сообщений об ошибках) и ничего не знают о массивах модели.
"""

import re
from typing import List, NamedTuple, Optional, Tuple

from objviewer.mesh.errors import ObjParseError

# только ASCII: float() и int() приняли бы "1_5" и не‑латинские цифры
_FLOAT_RE = re.compile(r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf|infinity|nan)",
                       re.IGNORECASE)
_INDEX_RE = re.compile(r"[+-]?[0-9]+")


class FaceCorner(NamedTuple):
    """Ссылки одного угла грани; None – атрибут не указан."""
    position: int
    texcoord: Optional[int] = None
    normal: Optional[int] = None


def _parse_floats(line: str, count: int, lineno: Optional[int]) -> Tuple[float, ...]:
    tokens = line.split()
    keyword, values = tokens[0], tokens[1:]
    if len(values) < count:
        raise ObjParseError(
            f"'{keyword}' expects {count} components, got {len(values)}", lineno)
    # лишние компоненты (однородная w) игнорируются
    tokens = values[:count]
    for tok in tokens:
        if not _FLOAT_RE.fullmatch(tok):
            raise ObjParseError(f"malformed number '{tok}' in '{line.strip()}'", lineno)
    return tuple(float(tok) for tok in tokens)


def parse_vec3(line: str, lineno: Optional[int] = None) -> Tuple[float, float, float]:
    """Позиция или нормаль: x y z [w]."""
    return _parse_floats(line, 3, lineno)


def parse_vec2(line: str, lineno: Optional[int] = None) -> Tuple[float, float]:
    """Текстурная координата: u v [w]."""
    return _parse_floats(line, 2, lineno)


def _parse_index(field: str, lineno: Optional[int]) -> Optional[int]:
    if field == "":
        return None
    if not _INDEX_RE.fullmatch(field):
        raise ObjParseError(f"malformed index '{field}'", lineno)
    return int(field)


def parse_corner(group: str, lineno: Optional[int] = None) -> FaceCorner:
    """Одна группа угла: p, p/t, p//n или p/t/n."""
    # пустые поля между '/' значимы, поэтому split без схлопывания
    fields = group.split("/")
    if len(fields) > 3:
        raise ObjParseError(f"too many '/' fields in corner '{group}'", lineno)
    indices = [_parse_index(f, lineno) for f in fields]
    indices += [None] * (3 - len(indices))
    if indices[0] is None:
        raise ObjParseError(f"corner '{group}' has no position index", lineno)
    return FaceCorner(*indices)


def parse_face(line: str, lineno: Optional[int] = None) -> List[FaceCorner]:
    """Все углы грани в порядке записи."""
    groups = line.split()[1:]
    return [parse_corner(g, lineno) for g in groups]
