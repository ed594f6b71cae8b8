"""
PrintBuf - накопитель текста сообщения
======================================
"""

from __future__ import annotations

import io
import typing


class PrintBuf:
    """
    Growable text buffer for building failure messages piece by piece.

    The buffer is created lazily: a fresh PrintBuf holds nothing until
    init() or the first append, and text() on it returns "".

    Appends mutate in place and return self for chaining:
        PrintBuf.new("Load failed: ").sprintf("file %s", "a.txt").text()
        # "Load failed: file a.txt"

    Not thread-safe. Callers sharing one buffer across threads must
    serialize access themselves.

    A PrintBuf is always truthy; len() tells whether it holds any text.
    Copies get their own buffer.
    """

    __slots__ = ("_buf",)

    def __init__(self, preamble: str | None = None, /) -> None:
        self._buf: io.StringIO | None = None
        if preamble is not None:
            self.init(preamble)

    @staticmethod
    def new(preamble: str = "", /) -> PrintBuf:
        """Create buffer initialized with preamble."""
        return PrintBuf().init(preamble)

    def init(self, preamble: str = "", /) -> PrintBuf:
        """
        Replace content with preamble.

        Example:
            buf.init("Preamble of message:").sprintf("tail")
            buf.text()  # "Preamble of message:tail"
        """
        self._buf = io.StringIO()
        self._buf.write(preamble)
        return self

    def _ensure(self) -> io.StringIO:
        if self._buf is None:
            self._buf = io.StringIO()
        return self._buf

    def sprintf(self, format: str, /, *args: typing.Any, **kwargs: typing.Any) -> PrintBuf:
        """
        Append printf-style rendering of format.

        Positional args fill %s/%d/... conversions, keyword args fill
        %(name)s conversions. Malformed formats raise from the % operator
        and leave the buffer untouched.
        """
        if args and kwargs:
            raise TypeError("sprintf() takes positional or keyword arguments, not both")
        rendered = format % kwargs if kwargs else format % args
        self._ensure().write(rendered)
        return self

    def sprintln(self, *values: typing.Any) -> PrintBuf:
        """Append values the way print() renders them: space separated, newline terminated."""
        print(*values, file=self._ensure())
        return self

    def write(self, text: str, /) -> int:
        """Append text verbatim."""
        return self._ensure().write(text)

    def text(self) -> str:
        """Accumulated text; empty if nothing was ever written."""
        if self._buf is None:
            return ""
        return self._buf.getvalue()

    def __str__(self) -> str:
        return self.text()

    def __len__(self) -> int:
        return len(self.text())

    def __bool__(self) -> bool:
        return True

    def __copy__(self) -> PrintBuf:
        clone = PrintBuf()
        if self._buf is not None:
            clone.init(self._buf.getvalue())
        return clone

    def __deepcopy__(self, memo: dict[int, typing.Any]) -> PrintBuf:
        return self.__copy__()

    def __repr__(self) -> str:
        return f"PrintBuf({self.text()!r})"


__all__ = ("PrintBuf",)
