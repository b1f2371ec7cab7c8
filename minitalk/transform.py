"""Building new strings from existing ones: copy, slice, join, trim, split, map."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from itertools import count
from typing import Union

from minitalk.search import strlen

Text = Union[str, bytes, bytearray, memoryview]


def _text(s: Text) -> str | bytes:
    """Return the part of ``s`` before its first NUL, as str or bytes."""
    if isinstance(s, str):
        return s[:strlen(s)]
    if isinstance(s, (bytes, bytearray, memoryview)):
        data = bytes(s)
        return data[:strlen(data)]
    raise TypeError(f"expected str or a bytes-like object, got {type(s).__name__}")


def _same_kind(first: str | bytes, second: str | bytes) -> None:
    if isinstance(first, str) != isinstance(second, str):
        raise TypeError("arguments must both be text or both be bytes")


def _separator(sep: int | str | bytes, for_bytes: bool) -> str | bytes:
    if for_bytes:
        if isinstance(sep, int):
            return bytes([sep & 0xFF])
        if isinstance(sep, (bytes, bytearray)) and len(sep) == 1:
            return bytes(sep)
        raise TypeError(f"expected a single byte or an int, got {sep!r}")
    if isinstance(sep, str) and len(sep) == 1:
        return sep
    if isinstance(sep, int):
        return chr(sep)
    raise TypeError(f"expected a single character or an int, got {sep!r}")


def strdup(s: Text) -> str | bytes:
    """Return a copy of ``s`` up to its first NUL."""
    return _text(s)


def substr(s: Text, start: int, length: int) -> str | bytes:
    """Return at most ``length`` characters of ``s`` beginning at ``start``.

    A start beyond the end of ``s`` gives an empty result.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    text = _text(s)
    return text[start:start + length]


def strjoin(first: Text, second: Text) -> str | bytes:
    """Return ``first`` followed by ``second``."""
    a, b = _text(first), _text(second)
    _same_kind(a, b)
    return a + b


def strtrim(s: Text, charset: Text) -> str | bytes:
    """Remove every character found in ``charset`` from both ends of ``s``."""
    text, chars = _text(s), _text(charset)
    _same_kind(text, chars)
    return text.strip(chars)


def split(s: Text, sep: int | str | bytes) -> list[str] | list[bytes]:
    """Split ``s`` on the character ``sep``, dropping empty pieces."""
    text = _text(s)
    separator = _separator(sep, not isinstance(text, str))
    if not separator or separator[0] in (0, "\0"):
        # A NUL separator never occurs inside the text: it is one word or none.
        return [text] if text else []
    return [word for word in text.split(separator) if word]


def strmapi(s: Text, func: Callable[[int, object], object]) -> str | bytes:
    """Return a new string made of ``func(index, char)`` for every character."""
    text = _text(s)
    if isinstance(text, str):
        return "".join(func(index, ch) for index, ch in enumerate(text))
    return bytes(func(index, byte) & 0xFF for index, byte in enumerate(text))


def striteri(
    s: MutableSequence, func: Callable[[int, MutableSequence], None]
) -> MutableSequence:
    """Call ``func(index, s)`` for each position of ``s`` so it may edit ``s[index]``.

    Iteration stops at the end of ``s`` or at the first NUL, checked again
    after every call. Returns ``s``.
    """
    if isinstance(s, (str, bytes)):
        raise TypeError("striteri needs a mutable sequence such as a bytearray or list")
    for index in count():
        if index >= len(s) or s[index] in (0, "\0"):
            break
        func(index, s)
    return s