# objviewer/mesh/lexer.py
"""
Построчное чтение текста без копирования.

LineReader – курсор «только вперёд» по str/bytes. Каждая строка
возвращается как LineSpan(start, length), ссылающийся на исходный буфер;
терминатор `\\n` (и `\\r` перед ним) в длину не входит.
"""

from typing import Iterator, NamedTuple, Optional, Union

from objviewer.mesh.errors import ObjParseError

Text = Union[str, bytes]


def decode_text(text: Text) -> str:
    """bytes -> str (UTF-8); битая кодировка – ObjParseError с номером строки."""
    if not isinstance(text, (bytes, bytearray)):
        return text
    try:
        return text.decode("utf-8")
    except UnicodeDecodeError as exc:
        lineno = text.count(b"\n", 0, exc.start) + 1
        raise ObjParseError(f"invalid UTF-8 byte at offset {exc.start}", lineno) from None


class LineSpan(NamedTuple):
    start: int
    length: int

    @property
    def end(self) -> int:
        return self.start + self.length

    def slice(self, text: Text) -> Text:
        return text[self.start:self.end]


class LineReader:
    """Перезапускаемый курсор по строкам; после конца всегда отдаёт None."""

    __slots__ = ("text", "pos", "_nl", "_cr")

    def __init__(self, text: Text):
        self.text = text
        self.pos = 0
        if isinstance(text, (bytes, bytearray)):
            self._nl, self._cr = b"\n", b"\r"
        else:
            self._nl, self._cr = "\n", "\r"

    def reset(self) -> None:
        self.pos = 0

    def read_line(self) -> Optional[LineSpan]:
        size = len(self.text)
        if self.pos >= size:
            return None

        start = self.pos
        nl = self.text.find(self._nl, start)
        if nl == -1:
            end = size
            self.pos = size
        else:
            end = nl
            self.pos = nl + 1

        # CRLF: '\r' – часть терминатора
        if end > start and self.text[end - 1:end] == self._cr:
            end -= 1
        return LineSpan(start, end - start)

    def __iter__(self) -> Iterator[LineSpan]:
        while True:
            span = self.read_line()
            if span is None:
                return
            yield span
