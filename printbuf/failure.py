"""
BufferedFailure - base class for custom failures with accumulated text.

Subclass it to get a distinct failure kind that builds its message
incrementally:

    class LoadFail(BufferedFailure):
        pass

    err = LoadFail("Preamble of message:")
    ...
    err.sprintf("tail")
    ...
    try:
        raise err
    except LoadFail as exc:
        print(exc)  # "Preamble of message:tail"

Matching on the subclass replaces inspecting the message text.
"""

from __future__ import annotations

import copy
import typing

from .buffer import PrintBuf


class BufferedFailure(Exception):
    """Exception carrying its own PrintBuf; str() is the accumulated text.

    Copies, shallow or deep, get their own PrintBuf.
    """

    def __init__(self, preamble: str | None = None, /) -> None:
        super().__init__()
        self._printbuf = PrintBuf(preamble)

    @property
    def buffer(self) -> PrintBuf:
        """The embedded accumulator."""
        return self._printbuf

    def init(self, preamble: str = "", /) -> typing.Self:
        self._printbuf.init(preamble)
        return self

    def sprintf(self, format: str, /, *args: typing.Any, **kwargs: typing.Any) -> typing.Self:
        self._printbuf.sprintf(format, *args, **kwargs)
        return self

    def sprintln(self, *values: typing.Any) -> typing.Self:
        self._printbuf.sprintln(*values)
        return self

    def write(self, text: str, /) -> int:
        return self._printbuf.write(text)

    def text(self) -> str:
        return self._printbuf.text()

    def __str__(self) -> str:
        return self.text()

    def __copy__(self) -> typing.Self:
        clone = type(self).__new__(type(self))
        clone.__dict__.update(self.__dict__)
        clone.args = self.args
        clone._printbuf = copy.copy(self._printbuf)
        return clone

    def __deepcopy__(self, memo: dict[int, typing.Any]) -> typing.Self:
        clone = type(self).__new__(type(self))
        memo[id(self)] = clone
        clone.__dict__.update(copy.deepcopy(self.__dict__, memo))
        clone.args = copy.deepcopy(self.args, memo)
        return clone

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.text()!r})"


__all__ = ("BufferedFailure",)
