# objviewer/mesh/indices.py
"""
Перевод индекса из записи OBJ в смещение в массиве атрибута.

    v > 0   ->  v - 1            (нумерация с 1)
    v <= 0  ->  length + v       (отсчёт от конца массива)

`length` – количество элементов этого атрибута, определённых к моменту
разбора грани. Результат вне [0, length) – IndexOutOfRange.
"""

from typing import Optional

from objviewer.mesh.errors import IndexOutOfRange


def resolve_index(value: int, length: int, kind: str = "position",
                  lineno: Optional[int] = None) -> int:
    if value > 0:
        index = value - 1
    else:
        index = length + value
    if not 0 <= index < length:
        raise IndexOutOfRange(
            f"{kind} index {value} out of range ({length} defined)", lineno)
    return index
