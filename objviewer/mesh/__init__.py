"""
Пакет mesh – разбор Wavefront OBJ в плоские вершинные массивы.
"""

from objviewer.mesh.errors import IndexOutOfRange, ObjParseError, UnsupportedFaceError
from objviewer.mesh.lexer import LineReader, LineSpan
from objviewer.mesh.stats import ObjLineType, ObjStats, classify_line, scan_stats
from objviewer.mesh.parsers import FaceCorner, parse_face, parse_vec2, parse_vec3
from objviewer.mesh.indices import resolve_index
from objviewer.mesh.model import CornerIndices, FlattenedModel, RawAttributeArrays, flatten
from objviewer.mesh.loader import load_model

__all__ = [
    "IndexOutOfRange", "ObjParseError", "UnsupportedFaceError",
    "LineReader", "LineSpan",
    "ObjLineType", "ObjStats", "classify_line", "scan_stats",
    "FaceCorner", "parse_face", "parse_vec2", "parse_vec3",
    "resolve_index",
    "CornerIndices", "FlattenedModel", "RawAttributeArrays", "flatten",
    "load_model",
]
