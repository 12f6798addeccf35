"""String helpers: parsing, comparison, searching, copying and trimming.

Positions are returned as indices into the given string; "not found" is
None. Functions that fill a fixed-size buffer return the resulting string
together with the length the caller would have needed.
"""

from __future__ import annotations

from itertools import islice, zip_longest
from typing import Callable, List, MutableSequence, Optional, Tuple

from antfarm.chars import is_digit

_WHITESPACE = " \n\f\v\t\r"
_OVERFLOW_LIMIT = 922337203685477587
_INT_BITS = 32


def _wrap_int(value: int) -> int:
    half = 1 << (_INT_BITS - 1)
    return (value + half) % (1 << _INT_BITS) - half


def _single_char(ch: str) -> str:
    if not isinstance(ch, str) or len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way the C library routine does.

    Leading whitespace and one sign are skipped, then digits are read until
    the first non-digit. A run of digits that grows too large yields -1 for
    a positive number and 0 for a negative one. The result is wrapped to a
    32-bit signed integer.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    value = 0
    for ch in rest:
        if not is_digit(ch):
            break
        value = value * 10 + (ord(ch) - ord("0"))
        if value >= _OVERFLOW_LIMIT:
            return -1 if sign == 1 else 0
    return _wrap_int(value * sign)


def itoa(n: int) -> str:
    """Decimal representation of an integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    return str(n)


def split(text: str, sep: str) -> List[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _single_char(sep)
    return [word for word in text.split(sep) if word]


def strchr(text: str, ch: str) -> Optional[int]:
    """Index of the first ``ch`` in ``text``; the terminator "\\0" is found at the end."""
    _single_char(ch)
    if ch == "\0":
        index = text.find(ch)
        return len(text) if index < 0 else index
    index = text.find(ch)
    return None if index < 0 else index


def strrchr(text: str, ch: str) -> Optional[int]:
    """Index of the last ``ch`` in ``text``; the terminator "\\0" is found at the end."""
    _single_char(ch)
    if ch == "\0":
        return len(text)
    index = text.rfind(ch)
    return None if index < 0 else index


def _compare(pairs) -> int:
    for a, b in pairs:
        if a != b:
            return ord(a) - ord(b)
        if a == "\0":
            return 0
    return 0


def strcmp(first: str, second: str) -> int:
    """Difference of the first differing character codes, or 0 if equal."""
    return _compare(zip_longest(first, second, fillvalue="\0"))


def strncmp(first: str, second: str, n: int) -> int:
    """Like :func:`strcmp` but looks at no more than ``n`` characters."""
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return _compare(islice(zip_longest(first, second, fillvalue="\0"), n))


def strjoin(first: str, second: str) -> str:
    """Concatenate two strings."""
    return first + second


def strlcpy(src: str, size: int) -> Tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text and the length of ``src``; a result length
    not smaller than ``size`` means the copy was truncated.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> Tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the full concatenation
    would need. When ``size`` leaves no room past ``dst``, ``dst`` is
    returned unchanged with ``len(src) + size``.
    """
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")
    if size <= len(dst):
        return dst, len(src) + size
    room = size - 1 - len(dst)
    return dst + src[:room], len(dst) + len(src)


def strncpy(src: str, length: int) -> str:
    """Exactly ``length`` characters: ``src`` truncated or padded with "\\0"."""
    if length <= 0:
        return ""
    return src[:length].ljust(length, "\0")


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of ``needle`` within the first ``length`` characters of ``haystack``.

    An empty needle is found at index 0.
    """
    if not needle:
        return 0
    if length <= 0:
        return None
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strtrim(text: str, charset: str) -> str:
    """Remove characters in ``charset`` from both ends of ``text``."""
    return text.strip(charset)


def substr(text: str, start: int, length: int) -> str:
    """Up to ``length`` characters of ``text`` beginning at ``start``.

    A start past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start:start + length]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """New string built from ``func(index, char)`` for every character."""
    return "".join(func(index, ch) for index, ch in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> MutableSequence[str]:
    """Call ``func(index, char)`` on each element of ``chars`` in place.

    A non-None return value replaces the element. Returns ``chars``.
    """
    for index, ch in enumerate(list(chars)):
        replacement = func(index, ch)
        if replacement is not None:
            chars[index] = replacement
    return chars