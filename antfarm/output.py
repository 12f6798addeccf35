"""Formatted and plain text output.

``format_printf`` understands the conversions %c, %s, %p, %d, %i, %u,
%x, %X and %%. An unknown conversion is written out literally, percent
sign included, and a lone percent sign at the end of the format is
written as is.
"""

from __future__ import annotations

import operator
import sys
from typing import Any, Iterator, Optional, TextIO

_INT_BITS = 32
_POINTER_BITS = 64


def _signed32(value: Any) -> int:
    number = operator.index(value)
    half = 1 << (_INT_BITS - 1)
    return (number + half) % (1 << _INT_BITS) - half


def _unsigned32(value: Any) -> int:
    return operator.index(value) % (1 << _INT_BITS)


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) % 256)


def _pointer(value: Any) -> str:
    if value is None:
        return "0x0"
    address = operator.index(value) % (1 << _POINTER_BITS)
    return f"0x{address:x}"


def _string(value: Any) -> str:
    return "(null)" if value is None else str(value)


_CONVERSIONS = {
    "c": _char,
    "s": _string,
    "p": _pointer,
    "d": lambda v: str(_signed32(v)),
    "i": lambda v: str(_signed32(v)),
    "u": lambda v: str(_unsigned32(v)),
    "x": lambda v: f"{_unsigned32(v):x}",
    "X": lambda v: f"{_unsigned32(v):X}",
}


def _next_arg(args: Iterator[Any], conversion: str) -> Any:
    try:
        return next(args)
    except StopIteration:
        raise TypeError(f"not enough arguments for %{conversion}") from None


def format_printf(fmt: str, *args: Any) -> str:
    """Render ``fmt`` with ``args`` and return the resulting text."""
    if fmt is None:
        raise TypeError("format must be a string, not None")
    values = iter(args)
    pieces = []
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, None)
        if conversion is None:
            pieces.append("%")
        elif conversion == "%":
            pieces.append("%")
        elif conversion in _CONVERSIONS:
            pieces.append(_CONVERSIONS[conversion](_next_arg(values, conversion)))
        else:
            pieces.append("%" + conversion)
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: Optional[TextIO] = None) -> int:
    """Write the rendered format to ``file`` (standard output by default).

    Returns the number of characters written.
    """
    text = format_printf(fmt, *args)
    stream = sys.stdout if file is None else file
    stream.write(text)
    return len(text)


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character."""
    _target(stream).write(_char(c))


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text``; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is None:
        return
    _target(stream).write(text + "\n")


def put_nbr(n: int, stream: Optional[TextIO] = None) -> None:
    """Write the decimal representation of an integer."""
    _target(stream).write(str(operator.index(n)))