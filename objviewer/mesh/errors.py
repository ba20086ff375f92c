# objviewer/mesh/errors.py
"""
Ошибки разбора OBJ. Все они – подклассы ValueError, поэтому
вызывающий код может ловить их одним `except ValueError`.
"""

from typing import Optional


class ObjParseError(ValueError):
    """Некорректная строка OBJ; `lineno` – номер строки (с 1) или None."""

    def __init__(self, message: str, lineno: Optional[int] = None):
        self.lineno = lineno
        if lineno is not None:
            message = f"line {lineno}: {message}"
        super().__init__(message)


class IndexOutOfRange(ObjParseError, IndexError):
    """Индекс вершины/texcoord/нормали указывает за пределы массива."""


class UnsupportedFaceError(ObjParseError):
    """Грань с недопустимым числом углов для выбранной политики."""
